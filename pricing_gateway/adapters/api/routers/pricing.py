# pricing_gateway/adapters/api/routers/pricing.py
from fastapi import APIRouter, Depends, HTTPException, Request, status
import structlog

from pricing_gateway.adapters.api.dependencies import get_apply_price_use_case, get_session_identity
from pricing_gateway.adapters.api.responses import INTERNAL_ERROR_MESSAGE, relay_upstream_result
from pricing_gateway.core.domain.exceptions import PayloadValidationError
from pricing_gateway.core.domain.models import SessionIdentity
from pricing_gateway.core.use_cases.apply_price import ApplyPrice

logger = structlog.get_logger()

router = APIRouter(prefix="/api/pricing", tags=["Pricing"])


@router.post(
    "/apply",
    status_code=status.HTTP_200_OK,
    summary="Apply a new price to a catalog entry",
)
async def apply_price(
    request: Request,
    session: SessionIdentity = Depends(get_session_identity),
    use_case: ApplyPrice = Depends(get_apply_price_use_case),
):
    """
    Forwards a price change to the upstream pricing service.

    **Body:**
    * `product_id`: catalog entry identifier.
    * `new_price`: target price.

    **Returns:**
    * The upstream body verbatim on success.
    * `400 {"error"}` when a required field is missing (nothing is forwarded).
    * The upstream status with `{"error"}` when the upstream refuses.
    * `500 {"error": "Internal server error"}` on any other failure.
    """
    try:
        body = await request.json()
        result = await use_case.execute(body, session)

    except PayloadValidationError as e:
        logger.warning("apply_price_invalid_payload", missing=e.missing_fields)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    except Exception:
        # Malformed body, transport failure, unparseable upstream body.
        logger.exception("apply_price_failed", session_source=session.source.value)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_MESSAGE,
        )

    return relay_upstream_result(result)
