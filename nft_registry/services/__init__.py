"""
Business logic services for the NFT Registry API.
Services handle core operations separate from API endpoints.
"""

from nft_registry.services.factory import get_registry_services
from nft_registry.services.registry import Registry, SnapshotEntry
from nft_registry.services.registry_service import RegistryService
from nft_registry.services.validator import validate_canister

__all__ = [
    "Registry",
    "RegistryService",
    "SnapshotEntry",
    "get_registry_services",
    "validate_canister",
]
