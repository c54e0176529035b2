# pricing_gateway/shared/container.py
from dependency_injector import containers, providers

from pricing_gateway.adapters.pricing_client import HttpPricingService
from pricing_gateway.core.use_cases.apply_price import ApplyPrice
from pricing_gateway.core.use_cases.review_recommendation import ReviewRecommendation
from pricing_gateway.shared.config import settings


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Assembly instructions for the gateway. Tests override `pricing_service`
    to keep the upstream out of the loop.
    """

    # 1. Gateways (Infrastructure Adapters)

    # Stateless HTTP adapter, one per process; each call opens its own client.
    pricing_service = providers.Singleton(
        HttpPricingService,
        base_url=settings.pricing_api_base,
        timeout=settings.PRICING_API_TIMEOUT,
        health_path=settings.PRICING_API_HEALTH_PATH,
        session_header=settings.PRICING_API_SESSION_HEADER,
    )

    # 2. Use Cases (new instance per request)

    apply_price_use_case = providers.Factory(
        ApplyPrice,
        pricing_service=pricing_service,
    )

    review_recommendation_use_case = providers.Factory(
        ReviewRecommendation,
        pricing_service=pricing_service,
    )


# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
