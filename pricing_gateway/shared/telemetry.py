# pricing_gateway/shared/telemetry.py
"""
Tracing for the gateway.

Spans come from two places: FastAPI auto-instrumentation for inbound
requests (probes excluded) and manual spans around use cases and each
upstream call. Export is off unless an OTLP endpoint is configured.
"""

from typing import Optional

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Status, StatusCode
import structlog

from pricing_gateway import __version__
from pricing_gateway.shared.config import settings

logger = structlog.get_logger()

_provider: Optional[TracerProvider] = None


def setup_telemetry(app_name: str = settings.OTEL_SERVICE_NAME) -> Optional[TracerProvider]:
    """
    Installs the global tracer provider once per process.
    Repeated calls (one per app instance) reuse the first provider.
    """
    global _provider

    if not settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.info("telemetry_disabled", reason="no OTEL_EXPORTER_OTLP_ENDPOINT configured")
        return None
    if _provider is not None:
        return _provider

    logger.info("telemetry_init", service=app_name, endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT)

    resource = Resource.create(attributes={
        "service.name": app_name,
        "service.version": __version__,
        "deployment.environment": settings.APP_ENV.value,
        "pricing.upstream": settings.pricing_api_base,
    })

    provider = TracerProvider(resource=resource)
    provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{settings.OTEL_EXPORTER_OTLP_ENDPOINT}/v1/traces"))
    )
    if settings.DEBUG:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _provider = provider
    return provider


def instrument_fastapi(app):
    """Traces inbound requests, leaving out the health probes."""
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        FastAPIInstrumentor.instrument_app(app, excluded_urls=settings.OTEL_EXCLUDED_URLS)


def mark_span_failed(span, exc: BaseException, reason: str) -> None:
    """Flags an upstream span as failed so transport errors stand out in traces."""
    span.record_exception(exc)
    span.set_status(Status(StatusCode.ERROR, reason))


def get_tracer(name: str):
    return trace.get_tracer(name)
