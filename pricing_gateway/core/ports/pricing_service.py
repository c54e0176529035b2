# pricing_gateway/core/ports/pricing_service.py
from typing import Optional, Protocol, Union

from pricing_gateway.core.domain.models import ProxyPayload, ReviewDecision, UpstreamResult


class IPricingService(Protocol):
    """
    Port for the upstream pricing/recommendation service.
    Implementations:
    - HttpPricingService (httpx against the service's REST API)
    """

    async def apply_price(self, payload: ProxyPayload, session_id: str) -> UpstreamResult:
        """
        Applies a new price to a catalog entry, permanently.

        Args:
            payload: The validated product id and target price.
            session_id: Caller identity forwarded as-is.

        Returns:
            An UpstreamResult, success or failure, carrying the upstream status.

        Raises:
            UpstreamTransportError: If the service is unreachable, times out
            or answers a success with an unparseable body.
        """
        ...

    async def review_recommendation(
        self,
        recommendation_id: Union[int, str],
        decision: ReviewDecision,
        session_id: str,
        reason: Optional[str] = None,
    ) -> UpstreamResult:
        """Marks a recommendation as accepted or rejected (with an optional reason)."""
        ...

    async def health_check(self) -> bool:
        """Returns True if the upstream service is responsive."""
        ...
