# pricing_gateway/core/use_cases/review_recommendation.py
from typing import Optional, Union

import structlog

from pricing_gateway.core.domain.models import ReviewDecision, SessionIdentity, UpstreamResult
from pricing_gateway.core.ports.pricing_service import IPricingService
from pricing_gateway.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class ReviewRecommendation:
    """
    Use Case: Records the merchant's verdict (accept / reject) on a price recommendation.
    """

    def __init__(self, pricing_service: IPricingService):
        self.pricing_service = pricing_service

    async def execute(
        self,
        recommendation_id: Union[int, str],
        decision: ReviewDecision,
        session: SessionIdentity,
        reason: Optional[str] = None,
    ) -> UpstreamResult:
        with tracer.start_as_current_span("use_case.review_recommendation") as span:
            span.set_attribute("app.recommendation_id", str(recommendation_id))
            span.set_attribute("app.decision", decision.value)

            logger.info(
                "recommendation_review_forwarding",
                recommendation_id=recommendation_id,
                decision=decision.value,
                session_source=session.source.value,
            )
            # A reason only makes sense for rejections.
            if decision != ReviewDecision.REJECT:
                reason = None

            result = await self.pricing_service.review_recommendation(
                recommendation_id, decision, session.value, reason=reason
            )
            span.set_attribute("app.upstream_status", result.status_code)
            if not result.ok:
                logger.warning(
                    "recommendation_review_rejected_upstream",
                    recommendation_id=recommendation_id,
                    status=result.status_code,
                    error=result.error,
                )
            return result
