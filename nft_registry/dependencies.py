"""
FastAPI dependency injection functions.
Provides common dependencies used across endpoints.
"""

from typing import Annotated

from fastapi import Depends, Request

from nft_registry.auth.dependencies import Caller
from nft_registry.config import Settings, get_settings
from nft_registry.core.exceptions import NonExistentItem
from nft_registry.services.factory import get_registry_services
from nft_registry.services.registry_service import RegistryService

# Type aliases for cleaner endpoint signatures
RegistryServices = Annotated[dict[str, RegistryService], Depends(get_registry_services)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def get_registry_service(registry: str, services: RegistryServices) -> RegistryService:
    """
    Resolve the {registry} path segment to its service.

    Raises:
        NonExistentItem: If no registry is hosted under that name
    """
    service = services.get(registry)
    if service is None:
        raise NonExistentItem(registry, message=f"Unknown registry '{registry}'")
    return service


Service = Annotated[RegistryService, Depends(get_registry_service)]


def get_controller(request: Request, service: Service, caller: Caller) -> str:
    """
    Resolve the caller and require that it controls the registry.

    Dependencies resolve before the request body is validated, so a caller
    without authority gets 401/403 and never sees body decoding errors.

    Raises:
        NotAuthorized: If the caller is not the current controller
    """
    service.require_controller(caller, f"{request.method} {request.url.path}")
    return caller


Controller = Annotated[str, Depends(get_controller)]
