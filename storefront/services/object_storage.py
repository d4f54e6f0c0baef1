"""
Object storage client for product images and AR models

Backblaze B2 is reached through its S3-compatible API, so a plain boto3
S3 client covers uploads and presigned downloads.
"""

from typing import Optional, Any
import boto3
from botocore.config import Config
from botocore.exceptions import ClientError
import structlog

from storefront.core.config import Settings, get_settings

logger = structlog.get_logger(__name__)


class ObjectStorage:
    """Thin wrapper over one S3 client bound to a bucket"""

    def __init__(
        self,
        bucket_name: str,
        endpoint_url: Optional[str] = None,
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
        region_name: Optional[str] = None,
        client: Any = None,
    ):
        """
        Initialize storage with credentials and bucket name.

        Args:
            bucket_name: Bucket holding product files
            endpoint_url: S3-compatible endpoint (B2 region endpoint)
            aws_access_key_id: B2 key id
            aws_secret_access_key: B2 application key
            region_name: Region used for request signing
            client: Prebuilt S3 client, skips boto3 client creation
        """
        self.bucket_name = bucket_name
        self.s3_client = client or boto3.client(
            "s3",
            endpoint_url=endpoint_url or None,
            aws_access_key_id=aws_access_key_id or None,
            aws_secret_access_key=aws_secret_access_key or None,
            region_name=region_name or None,
            config=Config(signature_version="s3v4"),
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ObjectStorage":
        settings = settings or get_settings()
        return cls(
            bucket_name=settings.B2_BUCKET_NAME,
            endpoint_url=settings.B2_ENDPOINT_URL,
            aws_access_key_id=settings.B2_KEY_ID,
            aws_secret_access_key=settings.B2_APPLICATION_KEY,
            region_name=settings.B2_REGION,
        )

    def presign_get(self, key: str, expires_in: int = 3600) -> str:
        """
        Generate a time-limited download URL for an object.

        Args:
            key: Object key as stored on the product
            expires_in: Lifetime of the URL in seconds

        Returns:
            Presigned GET URL
        """
        return self.s3_client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket_name, "Key": key},
            ExpiresIn=expires_in,
        )

    def put_object(self, key: str, body: bytes, content_type: str) -> str:
        """Upload bytes under key and return the key"""
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except ClientError as e:
            logger.error(f"Error uploading {key} to bucket {self.bucket_name}: {e}")
            raise
        logger.info(f"File uploaded successfully: {key}")
        return key
