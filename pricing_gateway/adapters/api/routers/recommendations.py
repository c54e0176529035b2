# pricing_gateway/adapters/api/routers/recommendations.py
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field
import structlog

from pricing_gateway.adapters.api.dependencies import (
    get_review_recommendation_use_case,
    get_session_identity,
)
from pricing_gateway.adapters.api.responses import INTERNAL_ERROR_MESSAGE, relay_upstream_result
from pricing_gateway.core.domain.models import ReviewDecision, SessionIdentity
from pricing_gateway.core.use_cases.review_recommendation import ReviewRecommendation

logger = structlog.get_logger()

router = APIRouter(prefix="/api/recommendations", tags=["Recommendations"])


class RejectRequest(BaseModel):
    reason: Optional[str] = Field(None, description="Free-text reason shown to the pricing team")


async def _read_reject_reason(request: Request) -> Optional[str]:
    """
    An empty body means "no reason". Anything else must be a JSON object
    whose `reason` is a string or null; violations raise.
    """
    if not await request.body():
        return None
    data: Any = await request.json()
    return RejectRequest.model_validate(data).reason


async def _review(
    request: Request,
    use_case: ReviewRecommendation,
    recommendation_id: str,
    decision: ReviewDecision,
    session: SessionIdentity,
):
    try:
        reason = await _read_reject_reason(request) if decision == ReviewDecision.REJECT else None
        result = await use_case.execute(recommendation_id, decision, session, reason=reason)
    except Exception:
        # Malformed body, transport failure, unparseable upstream body.
        logger.exception(
            "recommendation_review_failed",
            recommendation_id=recommendation_id,
            decision=decision.value,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_MESSAGE,
        )
    return relay_upstream_result(result)


@router.post("/{recommendation_id}/accept", summary="Accept a price recommendation")
async def accept_recommendation(
    request: Request,
    recommendation_id: str,
    session: SessionIdentity = Depends(get_session_identity),
    use_case: ReviewRecommendation = Depends(get_review_recommendation_use_case),
):
    return await _review(request, use_case, recommendation_id, ReviewDecision.ACCEPT, session)


@router.post(
    "/{recommendation_id}/reject",
    summary="Reject a price recommendation",
    openapi_extra={
        "requestBody": {
            "required": False,
            "content": {"application/json": {"schema": RejectRequest.model_json_schema()}},
        }
    },
)
async def reject_recommendation(
    request: Request,
    recommendation_id: str,
    session: SessionIdentity = Depends(get_session_identity),
    use_case: ReviewRecommendation = Depends(get_review_recommendation_use_case),
):
    """
    Optional body: `{"reason": "..."}`. A malformed body is answered with
    `500 {"error": "Internal server error"}`, like every other action.
    """
    return await _review(request, use_case, recommendation_id, ReviewDecision.REJECT, session)
