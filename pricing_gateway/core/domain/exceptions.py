# pricing_gateway/core/domain/exceptions.py
from typing import Sequence


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Validation Errors ---

class PayloadValidationError(DomainError):
    """Raised when a client payload lacks fields required by the upstream operation."""
    def __init__(self, missing_fields: Sequence[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(f"Missing required fields: {', '.join(self.missing_fields)}")

# --- Routing Errors ---

class UnsupportedLocaleError(DomainError):
    """Raised when a locale outside the supported set is requested."""
    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Locale '{locale}' is not supported.")

# --- Upstream Errors ---

class UpstreamTransportError(DomainError):
    """
    Raised when the upstream pricing service cannot be reached, times out,
    or answers with a success body that is not valid JSON.
    """
    def __init__(self, reason: str):
        super().__init__(f"Upstream pricing service unavailable: {reason}")
