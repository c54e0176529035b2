# pricing_gateway/core/domain/models.py
from enum import Enum
from typing import Any, ClassVar, Mapping, Optional, Tuple

from pydantic import BaseModel, Field

from pricing_gateway.core.domain.exceptions import PayloadValidationError

# --- Enums ---

class PathClass(str, Enum):
    """Routing class of an inbound path. Exactly one applies per request."""
    ROOT = "root"                        # Owned by the root redirect handler
    EXCLUDED_DIRECT = "excluded_direct"  # Served as-is, never rewritten
    LOCALE_PREFIXED = "locale_prefixed"  # Subject to locale negotiation

class LocaleAction(str, Enum):
    PASS = "pass"
    REDIRECT = "redirect"
    NOT_FOUND = "not_found"

class SessionSource(str, Enum):
    COOKIE = "cookie"
    HEADER = "header"
    GENERATED = "generated"

class UpstreamOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"

class ReviewDecision(str, Enum):
    """Verdict a merchant gives on a price recommendation."""
    ACCEPT = "accept"
    REJECT = "reject"

# --- Routing ---

class RouteDecision(BaseModel):
    """
    Classification of a single request path.
    `matched_locale` is set only when the first path segment is a supported locale.
    """
    path_class: PathClass
    matched_locale: Optional[str] = None

class LocaleOutcome(BaseModel):
    """
    What the locale router does with a request.
    `location` is only set for redirects, `locale` only once negotiation ran.
    """
    action: LocaleAction
    decision: RouteDecision
    locale: Optional[str] = None
    location: Optional[str] = None

# --- Session ---

class SessionIdentity(BaseModel):
    """Opaque caller token forwarded to the upstream service."""
    value: str = Field(..., min_length=1)
    source: SessionSource

# --- Proxy ---

def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False

class ProxyPayload(BaseModel):
    """
    Validated body of an "apply a new price" action.
    Values are forwarded exactly as the client sent them.
    """
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("product_id", "new_price")

    product_id: Any = Field(..., description="Catalog entry identifier (string or number)")
    new_price: Any = Field(..., description="Target price for the catalog entry")

    @classmethod
    def from_body(cls, body: Any) -> "ProxyPayload":
        """
        Builds a payload from a decoded JSON body.

        Raises:
            PayloadValidationError: naming every required field that is
            missing, null or blank. A non-object body lacks all of them.
        """
        fields: Mapping[str, Any] = body if isinstance(body, Mapping) else {}
        missing = [name for name in cls.REQUIRED_FIELDS if _is_blank(fields.get(name))]
        if missing:
            raise PayloadValidationError(missing)
        return cls(product_id=fields["product_id"], new_price=fields["new_price"])

    def to_upstream_body(self) -> dict:
        return {
            "product_id": self.product_id,
            "new_price": self.new_price,
            "apply_to_shopify": True,
        }

class UpstreamResult(BaseModel):
    """
    Tagged result of one upstream call.
    Success carries the upstream body verbatim; failure carries a message.
    `has_body` tells an empty reply apart from a JSON `null` body.
    """
    outcome: UpstreamOutcome
    status_code: int
    body: Any = None
    has_body: bool = False
    error: Optional[str] = None

    @classmethod
    def success(cls, status_code: int, body: Any) -> "UpstreamResult":
        return cls(outcome=UpstreamOutcome.SUCCESS, status_code=status_code, body=body, has_body=True)

    @classmethod
    def no_content(cls, status_code: int) -> "UpstreamResult":
        return cls(outcome=UpstreamOutcome.SUCCESS, status_code=status_code)

    @classmethod
    def failure(cls, status_code: int, message: str) -> "UpstreamResult":
        return cls(outcome=UpstreamOutcome.FAILURE, status_code=status_code, error=message)

    @property
    def ok(self) -> bool:
        return self.outcome == UpstreamOutcome.SUCCESS
