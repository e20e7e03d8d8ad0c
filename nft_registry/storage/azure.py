"""
Azure Blob Storage backend for Azure-based deployments.
"""

from azure.core.exceptions import AzureError, ResourceNotFoundError
from azure.storage.blob import BlobServiceClient, ContentSettings

from nft_registry.config import get_settings
from nft_registry.core.exceptions import StorageException
from nft_registry.storage.base import StorageBackend

settings = get_settings()


class AzureStorageBackend(StorageBackend):
    """
    Azure Blob Storage implementation.
    Configured via AZURE_* environment variables.
    """

    def __init__(
        self,
        connection_string: str | None = None,
        container_name: str | None = None,
    ):
        connection_string = connection_string or settings.AZURE_STORAGE_CONNECTION_STRING
        self.container_name = container_name or settings.AZURE_CONTAINER_NAME

        if not connection_string:
            raise StorageException(
                message="Azure connection string not configured",
                details={"required": "AZURE_STORAGE_CONNECTION_STRING"},
            )

        self.blob_service_client = BlobServiceClient.from_connection_string(connection_string)
        self._ensure_container_exists()

    def _ensure_container_exists(self):
        try:
            container_client = self.blob_service_client.get_container_client(self.container_name)
            if not container_client.exists():
                container_client.create_container()
        except AzureError as e:
            raise StorageException(
                message=f"Failed to ensure container exists: {str(e)}",
                details={"container": self.container_name},
            )

    def _get_blob_client(self, path: str):
        return self.blob_service_client.get_blob_client(
            container=self.container_name,
            blob=path,
        )

    async def upload_bytes(self, data: bytes, path: str, content_type: str) -> str:
        try:
            self._get_blob_client(path).upload_blob(
                data,
                overwrite=True,
                content_settings=ContentSettings(content_type=content_type),
            )
            return path

        except AzureError as e:
            raise StorageException(
                message=f"Failed to upload {path} to Azure: {str(e)}",
                details={"path": path, "container": self.container_name},
            )

    async def download_bytes(self, path: str) -> bytes:
        try:
            return self._get_blob_client(path).download_blob().readall()

        except ResourceNotFoundError:
            raise StorageException(
                message=f"File not found: {path}",
                details={"path": path, "container": self.container_name},
            )
        except AzureError as e:
            raise StorageException(
                message=f"Failed to download {path} from Azure: {str(e)}",
                details={"path": path, "container": self.container_name},
            )

    async def delete(self, path: str) -> bool:
        try:
            if not await self.exists(path):
                return False

            self._get_blob_client(path).delete_blob()
            return True

        except AzureError as e:
            raise StorageException(
                message=f"Failed to delete {path} from Azure: {str(e)}",
                details={"path": path, "container": self.container_name},
            )

    async def exists(self, path: str) -> bool:
        try:
            return self._get_blob_client(path).exists()
        except AzureError as e:
            raise StorageException(
                message=f"Failed to check {path}: {str(e)}",
                details={"path": path, "container": self.container_name},
            )
