# tests\conftest.py
import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from pricing_gateway.core.domain.models import SessionIdentity, SessionSource, UpstreamResult
from pricing_gateway.core.ports.pricing_service import IPricingService
from pricing_gateway.main import create_app
from pricing_gateway.shared.container import container


@pytest.fixture(scope="function")
def mock_pricing_service():
    """Returns a mock implementation of the upstream Pricing Service."""
    service = MagicMock(spec=IPricingService)
    # Async methods must be mocked with AsyncMock
    service.apply_price = AsyncMock(return_value=UpstreamResult.success(200, {"status": "ok"}))
    service.review_recommendation = AsyncMock(return_value=UpstreamResult.success(200, {"status": "accepted"}))
    service.health_check = AsyncMock(return_value=True)
    return service


@pytest.fixture(scope="function")
def overridden_container(mock_pricing_service):
    """
    Points the global DI container at the mocked upstream.
    The override is removed after each test.
    """
    container.pricing_service.override(mock_pricing_service)
    yield container
    container.pricing_service.reset_override()


@pytest.fixture
def client(overridden_container):
    """FastAPI TestClient wired to the mocked upstream."""
    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture
def cookie_session():
    return SessionIdentity(value="cookie-session", source=SessionSource.COOKIE)
