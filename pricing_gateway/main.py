# pricing_gateway/main.py
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from pricing_gateway import __version__
from pricing_gateway.adapters.api.middleware import LocaleRoutingMiddleware
from pricing_gateway.adapters.api.responses import (
    INTERNAL_ERROR_MESSAGE,
    describe_validation_errors,
    error_body,
)
from pricing_gateway.adapters.api.routers import (
    health_router,
    locale_router,
    pages_router,
    pricing_router,
    recommendations_router,
)
from pricing_gateway.core.domain.routing import LocalePolicy
from pricing_gateway.shared.config import AppEnv, settings
from pricing_gateway.shared.container import container
from pricing_gateway.shared.logging_config import configure_logging
from pricing_gateway.shared.telemetry import instrument_fastapi, setup_telemetry

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application Lifecycle Manager.
    Handles startup (Telemetry) and shutdown.
    """
    setup_telemetry(settings.OTEL_SERVICE_NAME)

    logger.info(
        "app_startup",
        app=settings.APP_NAME,
        env=settings.APP_ENV.value,
        upstream=settings.pricing_api_base,
    )

    yield

    logger.info("app_shutdown")


def create_app() -> FastAPI:
    """
    Factory function to create the FastAPI application.
    """
    configure_logging()

    # 1. Wire the Container into the modules using @inject
    container.wire(modules=[
        "pricing_gateway.adapters.api.dependencies",
        "pricing_gateway.adapters.api.routers.health",
    ])

    app = FastAPI(
        title="Storefront Pricing Gateway",
        version=__version__,
        description="Locale routing and upstream pricing proxy for the storefront dashboard",
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url="/redoc" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        lifespan=lifespan,
    )

    # 2. Middleware (last added runs first: CORS wraps locale routing)
    app.add_middleware(
        LocaleRoutingMiddleware,
        policy=LocalePolicy.from_settings(settings),
        preference_cookie=settings.LOCALE_COOKIE_NAME,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 3. Auto-Instrument FastAPI for Tracing
    instrument_fastapi(app)

    # 4. Global Exception Handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Renders every HTTP error as `{"error": <message>}`.
        """
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Invalid query or path parameters: 400 in the same `{"error"}` shape.
        """
        message = describe_validation_errors(exc.errors())
        logger.warning("request_validation_failed", error=message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(message),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions so no stack trace reaches the client.
        """
        logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(INTERNAL_ERROR_MESSAGE),
        )

    # 5. Mount Routes (page shells last: they hold the catch-all locale pattern)
    app.include_router(health_router)
    app.include_router(pricing_router)
    app.include_router(recommendations_router)
    app.include_router(locale_router)
    app.include_router(pages_router)

    return app


# Entry point for Uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pricing_gateway.main:app",
        host="0.0.0.0",
        port=3000,
        reload=settings.DEBUG,
    )
