"""
Health and metrics endpoints.
No authentication required.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from nft_registry.dependencies import RegistryServices
from nft_registry.services.metrics import get_metrics_collector

router = APIRouter()


@router.get("/health")
async def health_check(services: RegistryServices):
    """
    Service health check endpoint.

    Returns:
        {"status": "ok", ...} when every registry is initialized
        {"status": "degraded", "issues": [...]} otherwise
    """
    issues = [
        f"Registry '{key}' has no controller"
        for key, service in services.items()
        if not service.is_active
    ]

    registries = {
        key: {
            "name": service.name(),
            "initialized": service.is_active,
            "records": len(service.registry),
        }
        for key, service in services.items()
    }

    if issues:
        return {
            "status": "degraded",
            "issues": issues,
            "registries": registries,
        }

    return {
        "status": "ok",
        "registries": registries,
    }


@router.get("/metrics")
async def metrics(services: RegistryServices):
    """
    Request and registry metrics as JSON.
    """
    metrics_data = get_metrics_collector().get_metrics()
    metrics_data["registries"] = {
        key: len(service.registry) for key, service in services.items()
    }
    return metrics_data


@router.get("/metrics/prometheus", response_class=PlainTextResponse)
async def metrics_prometheus(services: RegistryServices):
    """
    Prometheus text exposition format endpoint.
    Compatible with Prometheus scraping.
    """
    return PlainTextResponse(
        content=get_metrics_collector().to_prometheus(services),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
