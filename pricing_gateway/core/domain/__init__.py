# pricing_gateway/core/domain/__init__.py
from .exceptions import (
    DomainError,
    PayloadValidationError,
    UnsupportedLocaleError,
    UpstreamTransportError,
)
from .models import (
    LocaleAction,
    LocaleOutcome,
    PathClass,
    ProxyPayload,
    ReviewDecision,
    RouteDecision,
    SessionIdentity,
    SessionSource,
    UpstreamOutcome,
    UpstreamResult,
)

__all__ = [
    "DomainError",
    "PayloadValidationError",
    "UnsupportedLocaleError",
    "UpstreamTransportError",
    "LocaleAction",
    "LocaleOutcome",
    "PathClass",
    "ProxyPayload",
    "ReviewDecision",
    "RouteDecision",
    "SessionIdentity",
    "SessionSource",
    "UpstreamOutcome",
    "UpstreamResult",
]
