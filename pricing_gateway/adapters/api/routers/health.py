# pricing_gateway/adapters/api/routers/health.py
from typing import Dict

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status
import structlog

from pricing_gateway.core.ports.pricing_service import IPricingService
from pricing_gateway.shared.config import settings
from pricing_gateway.shared.container import Container

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    K8s Liveness Probe.
    Returns 200 OK if the gateway process is serving.
    """
    return {"status": "ok", "service": settings.APP_NAME}


@router.get("/ready", status_code=status.HTTP_200_OK)
@inject
async def readiness_probe(
    response: Response,
    pricing_service: IPricingService = Depends(Provide[Container.pricing_service]),
) -> Dict[str, str]:
    """
    K8s Readiness Probe.
    Returns 503 Service Unavailable while the upstream pricing service is down.
    """
    health_status = {"upstream": "down"}

    try:
        if await pricing_service.health_check():
            health_status["upstream"] = "up"
    except Exception as e:
        logger.error("health_check_failed", component="upstream", error=str(e))

    if health_status["upstream"] != "up":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status
