# pricing_gateway/core/domain/session.py
import secrets
from typing import Optional

from pricing_gateway.core.domain.models import SessionIdentity, SessionSource

SESSION_TOKEN_PREFIX = "session_"


def generate_session_id() -> str:
    """Random fallback token; safe under concurrent generation."""
    return f"{SESSION_TOKEN_PREFIX}{secrets.token_urlsafe(16)}"


def derive_session_identity(
    cookie_value: Optional[str],
    header_value: Optional[str],
) -> SessionIdentity:
    """
    Resolves the caller's session token: cookie, then header, then a fresh
    token. Empty values count as absent. A generated token is only
    forwarded upstream, never persisted to the client here.
    """
    if cookie_value:
        return SessionIdentity(value=cookie_value, source=SessionSource.COOKIE)
    if header_value:
        return SessionIdentity(value=header_value, source=SessionSource.HEADER)
    return SessionIdentity(value=generate_session_id(), source=SessionSource.GENERATED)
