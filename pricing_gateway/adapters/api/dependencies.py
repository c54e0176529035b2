# pricing_gateway/adapters/api/dependencies.py
from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Request

from pricing_gateway.core.domain.models import SessionIdentity
from pricing_gateway.core.domain.routing import LocalePolicy
from pricing_gateway.core.domain.session import derive_session_identity
from pricing_gateway.core.use_cases.apply_price import ApplyPrice
from pricing_gateway.core.use_cases.review_recommendation import ReviewRecommendation
from pricing_gateway.shared.config import settings
from pricing_gateway.shared.container import Container
from pricing_gateway.shared.logging_config import bind_session_context


# -----------------------------------------------------------------------------
# Request-scoped identity
# -----------------------------------------------------------------------------
async def get_session_identity(request: Request) -> SessionIdentity:
    """
    Derives the caller's session identity once per request.

    FastAPI caches dependencies per request, so every upstream call made
    while handling this request sees the same value. Runs on the event
    loop so the bound log context reaches the endpoint.
    """
    identity = derive_session_identity(
        request.cookies.get(settings.SESSION_COOKIE_NAME),
        request.headers.get(settings.SESSION_HEADER_NAME),
    )
    bind_session_context(identity.source.value)
    return identity


def get_locale_policy() -> LocalePolicy:
    return LocalePolicy.from_settings(settings)


# -----------------------------------------------------------------------------
# Use case injection
# -----------------------------------------------------------------------------
@inject
def get_apply_price_use_case(
    use_case: ApplyPrice = Depends(Provide[Container.apply_price_use_case]),
) -> ApplyPrice:
    """Dependency to inject the ApplyPrice interactor (container-managed)."""
    return use_case


@inject
def get_review_recommendation_use_case(
    use_case: ReviewRecommendation = Depends(Provide[Container.review_recommendation_use_case]),
) -> ReviewRecommendation:
    """Dependency to inject the ReviewRecommendation interactor (container-managed)."""
    return use_case
