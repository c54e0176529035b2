# pricing_gateway/core/use_cases/apply_price.py
from typing import Any

import structlog

from pricing_gateway.core.domain.models import ProxyPayload, SessionIdentity, UpstreamResult
from pricing_gateway.core.ports.pricing_service import IPricingService
from pricing_gateway.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class ApplyPrice:
    """
    Use Case: Applies a new price to a catalog entry through the upstream service.

    Responsibilities:
    1. Validates the client body (rejects before any upstream call).
    2. Forwards the payload once, with the caller's session identity.
    3. Hands back the upstream result untouched for the HTTP layer to relay.

    Transport failures propagate; they are logged by the caller.
    """

    def __init__(self, pricing_service: IPricingService):
        self.pricing_service = pricing_service

    async def execute(self, body: Any, session: SessionIdentity) -> UpstreamResult:
        """
        Args:
            body: The decoded JSON request body.
            session: Identity derived once for this request.

        Raises:
            PayloadValidationError: If a required field is missing.
            UpstreamTransportError: If the upstream could not be used.
        """
        with tracer.start_as_current_span("use_case.apply_price") as span:
            payload = ProxyPayload.from_body(body)

            span.set_attribute("app.product_id", str(payload.product_id))
            span.set_attribute("app.session_source", session.source.value)
            logger.info(
                "apply_price_forwarding",
                product_id=payload.product_id,
                session_source=session.source.value,
            )

            result = await self.pricing_service.apply_price(payload, session.value)

            span.set_attribute("app.upstream_status", result.status_code)
            if result.ok:
                logger.info("apply_price_applied", product_id=payload.product_id, status=result.status_code)
            else:
                logger.warning(
                    "apply_price_rejected_upstream",
                    product_id=payload.product_id,
                    status=result.status_code,
                    error=result.error,
                )
            return result
