# pricing_gateway/adapters/api/middleware.py
from fastapi import status
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
import structlog

from pricing_gateway.adapters.api.responses import NOT_FOUND_MESSAGE, error_body
from pricing_gateway.core.domain import routing
from pricing_gateway.core.domain.models import LocaleAction
from pricing_gateway.shared.logging_config import bind_request_context

logger = structlog.get_logger()


class LocaleRoutingMiddleware(BaseHTTPMiddleware):
    """
    Applies the locale routing rules to every inbound request.

    Root and excluded paths go straight to the app. Locale-eligible paths
    are either passed on (with `request.state.locale` set), redirected to
    their locale-prefixed form, or answered with a not-found.
    """

    def __init__(self, app, policy: routing.LocalePolicy, preference_cookie: str = "locale"):
        super().__init__(app)
        self.policy = policy
        self.preference_cookie = preference_cookie

    async def dispatch(self, request: Request, call_next):
        outcome = routing.route_request(
            request.url.path,
            query=request.url.query,
            preferred=request.cookies.get(self.preference_cookie),
            accept_language=request.headers.get("accept-language"),
            policy=self.policy,
        )
        bind_request_context(request.method, request.url.path, outcome.locale)

        if outcome.action == LocaleAction.NOT_FOUND:
            logger.info("locale_not_found")
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=error_body(NOT_FOUND_MESSAGE),
            )

        if outcome.action == LocaleAction.REDIRECT:
            logger.debug("locale_redirect", location=outcome.location)
            return RedirectResponse(
                url=outcome.location,
                status_code=status.HTTP_307_TEMPORARY_REDIRECT,
            )

        request.state.locale = outcome.locale
        return await call_next(request)
