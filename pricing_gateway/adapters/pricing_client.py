# pricing_gateway/adapters/pricing_client.py
from typing import Any, Optional, Union
from urllib.parse import quote

import httpx
import structlog

from pricing_gateway.core.domain.exceptions import UpstreamTransportError
from pricing_gateway.core.domain.models import ProxyPayload, ReviewDecision, UpstreamResult
from pricing_gateway.shared.telemetry import get_tracer, mark_span_failed

logger = structlog.get_logger()
tracer = get_tracer(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error"


def extract_error_message(data: Any) -> Optional[str]:
    """
    Pulls a human readable message out of an upstream error body.

    Handles `{"detail": "..."}` and FastAPI validation bodies
    (`{"detail": [{"msg": "..."}, ...]}`). Returns None when there is no detail.
    """
    if not isinstance(data, dict):
        return None
    detail = data.get("detail")
    if not detail:
        return None
    if isinstance(detail, str):
        return detail
    if isinstance(detail, list):
        messages = [
            str(item.get("msg")) if isinstance(item, dict) and item.get("msg") else str(item)
            for item in detail
        ]
        return "; ".join(messages)
    return str(detail)


class HttpPricingService:
    """
    Driven Adapter: talks to the upstream pricing/recommendation service over HTTP.

    Each call is a single best-effort request bounded by `timeout`; there
    is no retry. Error bodies are translated into `UpstreamResult.failure`
    keeping the upstream status; transport problems raise
    `UpstreamTransportError`.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float,
        health_path: str = "/health",
        session_header: str = "X-Session-ID",
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.health_path = health_path
        self.session_header = session_header

    async def apply_price(self, payload: ProxyPayload, session_id: str) -> UpstreamResult:
        product = quote(str(payload.product_id), safe="")
        return await self._send(
            "POST",
            f"/recommendations/apply/{product}",
            session_id,
            body=payload.to_upstream_body(),
            fallback_message="Failed to apply price",
        )

    async def review_recommendation(
        self,
        recommendation_id: Union[int, str],
        decision: ReviewDecision,
        session_id: str,
        reason: Optional[str] = None,
    ) -> UpstreamResult:
        recommendation = quote(str(recommendation_id), safe="")
        body = {"reason": reason} if decision == ReviewDecision.REJECT else None
        return await self._send(
            "PATCH",
            f"/recommendations/{recommendation}/{decision.value}",
            session_id,
            body=body,
            fallback_message=f"Failed to {decision.value} recommendation",
        )

    async def health_check(self) -> bool:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(f"{self.base_url}{self.health_path}")
        except httpx.HTTPError as e:
            logger.warning("upstream_health_check_failed", error=str(e))
            return False
        return response.is_success

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _send(
        self,
        method: str,
        path: str,
        session_id: str,
        *,
        body: Optional[dict],
        fallback_message: str,
    ) -> UpstreamResult:
        url = f"{self.base_url}{path}"
        headers = {
            "Content-Type": "application/json",
            self.session_header: session_id,
        }

        # The span records the httpx error, not its UpstreamTransportError wrapper.
        with tracer.start_as_current_span(
            "upstream.request", record_exception=False, set_status_on_exception=False
        ) as span:
            span.set_attribute("http.method", method)
            span.set_attribute("http.url", url)

            try:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.request(method, url, json=body, headers=headers)
            except httpx.TimeoutException as e:
                mark_span_failed(span, e, "timeout")
                raise UpstreamTransportError(f"timed out after {self.timeout}s") from e
            except httpx.HTTPError as e:
                mark_span_failed(span, e, "transport")
                raise UpstreamTransportError(str(e) or type(e).__name__) from e

            span.set_attribute("http.status_code", response.status_code)
            return self._to_result(response, fallback_message)

    @staticmethod
    def _to_result(response: httpx.Response, fallback_message: str) -> UpstreamResult:
        if response.is_success:
            if not response.content:
                return UpstreamResult.no_content(response.status_code)
            try:
                return UpstreamResult.success(response.status_code, response.json())
            except ValueError as e:
                raise UpstreamTransportError("success response is not valid JSON") from e

        try:
            data = response.json()
        except ValueError:
            return UpstreamResult.failure(response.status_code, UNKNOWN_ERROR_MESSAGE)

        message = extract_error_message(data) or fallback_message
        return UpstreamResult.failure(response.status_code, message)
