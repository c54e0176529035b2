# pricing_gateway/adapters/api/responses.py
from fastapi import Response
from fastapi.responses import JSONResponse

from pricing_gateway.core.domain.models import UpstreamResult

INTERNAL_ERROR_MESSAGE = "Internal server error"
NOT_FOUND_MESSAGE = "Not found"


def error_body(message: str) -> dict:
    return {"error": message}


def relay_upstream_result(result: UpstreamResult) -> Response:
    """
    Translates an upstream result into the client response.

    Success bodies go out verbatim, failures as `{"error": ...}`; both keep
    the upstream status code.
    """
    if not result.ok:
        return JSONResponse(status_code=result.status_code, content=error_body(result.error))
    if not result.has_body:
        return Response(status_code=result.status_code)
    return JSONResponse(status_code=result.status_code, content=result.body)


def describe_validation_errors(errors) -> str:
    """Flattens FastAPI request validation errors into one line, e.g. `query.locale: Field required`."""
    parts = []
    for err in errors:
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"
