import logging
from typing import Any, Optional, Union

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from clippub.errors import UploadError
from clippub.models.config import Config

logger = logging.getLogger(__name__)


class UploadService:
    """Puts objects into the configured R2 bucket through its S3 API."""

    def __init__(self, config: Config, client: Optional[Any] = None):
        self.config = config
        self.client = client or self._create_client(config)

    @staticmethod
    def _create_client(config: Config):
        return boto3.client(
            "s3",
            endpoint_url=config.endpoint_url,
            region_name="auto",
            aws_access_key_id=config.access_key_id,
            aws_secret_access_key=config.secret_access_key,
        )

    def upload(self, key: str, data: Union[bytes, str], content_type: str) -> str:
        if isinstance(data, str):
            data = data.encode("utf-8")

        try:
            self.client.put_object(
                Bucket=self.config.bucket_name,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error uploading {key} to R2: {e}")
            raise UploadError(f"Upload of {key} failed: {e}", cause=e)

        public_url = self.config.public_url_for(key)
        logger.info(f"Uploaded {key} ({len(data)} bytes) to {self.config.bucket_name}")
        return public_url
