"""
S3-compatible storage backend.
Supports AWS S3 and S3-compatible services like MinIO.
"""

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from nft_registry.config import get_settings
from nft_registry.core.exceptions import StorageException
from nft_registry.storage.base import StorageBackend

settings = get_settings()


class S3StorageBackend(StorageBackend):
    """
    S3-compatible object storage implementation.
    Configured via S3_* environment variables.
    """

    def __init__(
        self,
        endpoint_url: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        bucket_name: str | None = None,
        region: str | None = None,
    ):
        self.endpoint_url = endpoint_url or settings.S3_ENDPOINT_URL
        self.bucket_name = bucket_name or settings.S3_BUCKET_NAME
        self.region = region or settings.S3_REGION

        config = Config(
            signature_version="s3v4",
            retries={"max_attempts": 3, "mode": "standard"},
        )

        self.client = boto3.client(
            "s3",
            endpoint_url=self.endpoint_url,
            aws_access_key_id=access_key or settings.S3_ACCESS_KEY,
            aws_secret_access_key=secret_key or settings.S3_SECRET_KEY,
            region_name=self.region,
            config=config,
        )

        self._ensure_bucket_exists()

    def _ensure_bucket_exists(self):
        """Create bucket if it doesn't exist."""
        try:
            self.client.head_bucket(Bucket=self.bucket_name)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") != "404":
                raise StorageException(
                    message=f"Failed to access bucket: {str(e)}",
                    details={"bucket": self.bucket_name},
                )
            try:
                if self.region and self.region != "us-east-1":
                    self.client.create_bucket(
                        Bucket=self.bucket_name,
                        CreateBucketConfiguration={"LocationConstraint": self.region},
                    )
                else:
                    self.client.create_bucket(Bucket=self.bucket_name)
            except ClientError as create_error:
                raise StorageException(
                    message=f"Failed to create bucket: {str(create_error)}",
                    details={"bucket": self.bucket_name},
                )

    async def upload_bytes(self, data: bytes, path: str, content_type: str) -> str:
        try:
            self.client.put_object(
                Bucket=self.bucket_name,
                Key=path,
                Body=data,
                ContentType=content_type,
            )
            return path

        except ClientError as e:
            raise StorageException(
                message=f"Failed to upload {path} to S3: {str(e)}",
                details={"path": path, "bucket": self.bucket_name},
            )

    async def download_bytes(self, path: str) -> bytes:
        try:
            response = self.client.get_object(Bucket=self.bucket_name, Key=path)
            return response["Body"].read()

        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "NoSuchKey":
                raise StorageException(
                    message=f"File not found: {path}",
                    details={"path": path, "bucket": self.bucket_name},
                )
            raise StorageException(
                message=f"Failed to download {path} from S3: {str(e)}",
                details={"path": path, "bucket": self.bucket_name},
            )

    async def delete(self, path: str) -> bool:
        try:
            if not await self.exists(path):
                return False

            self.client.delete_object(Bucket=self.bucket_name, Key=path)
            return True

        except ClientError as e:
            raise StorageException(
                message=f"Failed to delete {path} from S3: {str(e)}",
                details={"path": path, "bucket": self.bucket_name},
            )

    async def exists(self, path: str) -> bool:
        try:
            self.client.head_object(Bucket=self.bucket_name, Key=path)
            return True
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "404":
                return False
            raise StorageException(
                message=f"Failed to check {path}: {str(e)}",
                details={"path": path, "bucket": self.bucket_name},
            )
