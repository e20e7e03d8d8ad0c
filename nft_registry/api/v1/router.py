"""
API v1 Router - Aggregates all v1 endpoints.
Base Path: /api/v1
"""

from fastapi import APIRouter

from nft_registry.api.v1 import health, registry

api_router = APIRouter()

# Health first so /health and /metrics are not captured by /{registry}
api_router.include_router(health.router, tags=["health"])
api_router.include_router(registry.router, tags=["registry"])
