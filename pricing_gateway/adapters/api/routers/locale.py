# pricing_gateway/adapters/api/routers/locale.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import RedirectResponse
import structlog

from pricing_gateway.adapters.api.dependencies import get_locale_policy
from pricing_gateway.core.domain.exceptions import UnsupportedLocaleError
from pricing_gateway.core.domain.routing import LocalePolicy, classify_path, switch_locale_path
from pricing_gateway.shared.config import settings

logger = structlog.get_logger()

router = APIRouter(prefix="/api/locale", tags=["Locale"])


def _safe_path(path: str) -> str:
    # Only same-site absolute paths; "//host" would leave the site.
    if not path.startswith("/") or path.startswith("//"):
        return "/"
    return path


@router.get(
    "/switch",
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    summary="Switch the display language",
)
async def switch_locale(
    request: Request,
    locale: str = Query(..., description="Locale to switch to (e.g. 'en')"),
    path: str = Query("/", description="Path the user is currently on"),
    active: Optional[str] = Query(None, description="Locale currently displayed"),
    policy: LocalePolicy = Depends(get_locale_policy),
):
    """
    Persists the chosen locale and sends the browser to the same page in that locale.

    The active locale defaults to the path's locale segment, then the stored
    preference, then the default locale.
    """
    if not policy.is_supported(locale):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=UnsupportedLocaleError(locale).message,
        )

    current = _safe_path(path)
    active_locale = (
        active
        or classify_path(current, policy).matched_locale
        or request.cookies.get(settings.LOCALE_COOKIE_NAME)
        or policy.default_locale
    )
    target = switch_locale_path(current, active_locale, locale)
    logger.info("locale_switched", from_locale=active_locale, to_locale=locale, target=target)

    response = RedirectResponse(url=target, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    response.set_cookie(
        settings.LOCALE_COOKIE_NAME,
        locale,
        max_age=settings.LOCALE_COOKIE_MAX_AGE,
        httponly=False,
        samesite="lax",
        path="/",
    )
    return response
