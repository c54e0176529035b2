# pricing_gateway/shared/logging_config.py
import logging
import sys
from typing import Optional

import structlog
from opentelemetry import trace

from pricing_gateway.shared.config import settings

# One INFO line per upstream call from the HTTP client stack.
_QUIET_LOGGERS = ("httpx", "httpcore")


def add_open_telemetry_spans(_, __, event_dict):
    """
    Processor to inject the current TraceID and SpanID into the log entry.
    This links a gateway log line to the trace of the request that produced it.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def add_service_context(_, __, event_dict):
    """Stamps every entry with the emitting service and its environment."""
    event_dict.setdefault("service", settings.APP_NAME)
    event_dict.setdefault("env", settings.APP_ENV.value)
    return event_dict


# -----------------------------------------------------------------------------
# Request-scoped context
# -----------------------------------------------------------------------------
def bind_request_context(method: str, path: str, locale: Optional[str] = None) -> None:
    """
    Starts a fresh log context for one inbound request.
    Everything logged while handling it carries method, path and locale.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(method=method, path=path)
    if locale:
        structlog.contextvars.bind_contextvars(locale=locale)


def bind_session_context(session_source: str) -> None:
    # Only the source: the token itself is a credential.
    structlog.contextvars.bind_contextvars(session_source=session_source)


def configure_logging():
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs (Production) or colored text logs (Development).
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        add_service_context,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    if not settings.DEBUG:
        for name in _QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
