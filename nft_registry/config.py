"""
Configuration management for the NFT Registry API.
Uses pydantic-settings for environment-based configuration.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "NFT Registry"
    DEBUG: bool = False

    # Hosted registries: URL key -> display name returned by the name query
    REGISTRIES: dict[str, str] = Field(
        default_factory=lambda: {
            "nft": "NFT Registry Canister",
            "tokens": "Token Registry Canister",
        }
    )

    # Identifier of the initializing caller; becomes the controller of every registry
    CONTROLLER_ID: str = "dev-controller"

    # Development Mode - caller identity taken from the X-Caller-Id header
    DEV_MODE: bool = True
    DEV_CALLER_ID: str = "dev-controller"

    # JWT Authentication
    JWKS_URL: str = "http://localhost:8080/.well-known/jwks.json"
    JWT_ISSUER: str = "https://auth.example.org"
    JWT_AUDIENCE: str = "nft-registry"

    # JWKS Cache TTL in seconds
    JWKS_CACHE_TTL: int = 3600  # 1 hour

    # Snapshot persistence across restarts
    PERSIST_SNAPSHOTS: bool = True
    SNAPSHOT_PREFIX: str = "snapshots"

    # Storage Backend Selection
    STORAGE_BACKEND: Literal["local", "s3", "azure"] = "local"

    # Local Storage Settings
    LOCAL_STORAGE_PATH: str = "./storage"

    # S3/MinIO Settings
    S3_ENDPOINT_URL: str | None = None
    S3_ACCESS_KEY: str | None = None
    S3_SECRET_KEY: str | None = None
    S3_BUCKET_NAME: str = "nft-registry"
    S3_REGION: str = "us-east-1"

    # Azure Blob Settings
    AZURE_STORAGE_CONNECTION_STRING: str | None = None
    AZURE_CONTAINER_NAME: str = "nft-registry"

    # Logging
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
