# pricing_gateway/adapters/api/routers/pages.py
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from pricing_gateway.adapters.api.dependencies import get_locale_policy
from pricing_gateway.adapters.api.responses import NOT_FOUND_MESSAGE
from pricing_gateway.core.domain.exceptions import UnsupportedLocaleError
from pricing_gateway.core.domain.models import PathClass
from pricing_gateway.core.domain.routing import LocalePolicy, classify_path
from pricing_gateway.shared.config import settings

# Page shells: rendering lives in the browser bundle, these only anchor the routes.
router = APIRouter(tags=["Pages"], include_in_schema=False)


@router.get("/")
async def root_redirect():
    """The root always lands on the marketing page, whatever the locale."""
    return RedirectResponse(url=settings.ROOT_REDIRECT_PATH, status_code=status.HTTP_307_TEMPORARY_REDIRECT)


@router.get("/landing")
async def landing_page():
    return {"page": "landing", "locale": None}


@router.get("/dashboard")
async def dashboard_page():
    return {"page": "dashboard", "locale": None}


@router.get("/admin")
@router.get("/admin/{page_path:path}")
async def admin_page(page_path: str = ""):
    return {"page": f"admin/{page_path}".rstrip("/"), "locale": None}


@router.get("/{locale}")
@router.get("/{locale}/{page_path:path}")
async def localized_page(
    request: Request,
    locale: str,
    page_path: str = "",
    policy: LocalePolicy = Depends(get_locale_policy),
):
    # Direct and technical paths that reach the catch-all have no page here.
    if classify_path(request.url.path, policy).path_class != PathClass.LOCALE_PREFIXED:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    if not policy.is_supported(locale):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=UnsupportedLocaleError(locale).message,
        )
    return JSONResponse(
        content={"page": page_path.strip("/") or "home", "locale": locale},
        headers={"Content-Language": locale},
    )
