"""
Registry service factory.
Builds one service per configured registry.
"""

from functools import lru_cache

from nft_registry.config import get_settings
from nft_registry.services.registry_service import RegistryService

settings = get_settings()


@lru_cache
def get_registry_services() -> dict[str, RegistryService]:
    """
    Get the hosted registry services, keyed by URL name.

    Uses LRU cache so every request sees the same process-wide instances.
    Services start uninitialized; the application lifespan initializes them.
    """
    return {key: RegistryService(name) for key, name in settings.REGISTRIES.items()}
