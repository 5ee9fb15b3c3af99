import logging
from abc import ABC, abstractmethod
from typing import BinaryIO, Text

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from image_resize.config import Settings
from image_resize.exceptions import StorageError

logger = logging.getLogger(__name__)


class ObjectStorage(ABC):
    """The three object operations the pipeline needs."""

    @abstractmethod
    def get(self, bucket: Text, key: Text) -> BinaryIO:
        ...

    @abstractmethod
    def put(
        self,
        bucket: Text,
        key: Text,
        body: bytes,
        content_type: Text,
        content_length: int,
    ) -> None:
        ...

    @abstractmethod
    def delete(self, bucket: Text, key: Text) -> None:
        ...

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        try:
            self.close()
        except Exception as e:
            logger.warning(f"Error closing storage client: {e}")


def _error_code(error):
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code")
    return None


class S3Storage(ObjectStorage):
    def __init__(self, client):
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings = None):
        settings = settings or Settings.from_env()
        client = boto3.client(
            "s3",
            region_name=settings.region,
            endpoint_url=settings.s3_endpoint_url,
        )
        return cls(client)

    def _fail(self, operation, bucket, key, error):
        code = _error_code(error)
        raise StorageError(
            f"S3 {operation} failed for {bucket}/{key}: {error}",
            operation=operation,
            bucket=bucket,
            key=key,
            code=code,
        ) from error

    def get(self, bucket, key):
        try:
            response = self.client.get_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            self._fail("get", bucket, key, e)
        return response["Body"]

    def put(self, bucket, key, body, content_type, content_length):
        try:
            self.client.put_object(
                Bucket=bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
                ContentLength=content_length,
                Metadata={
                    "Content-Type": content_type,
                    "Content-Length": str(content_length),
                },
            )
        except (ClientError, BotoCoreError) as e:
            self._fail("put", bucket, key, e)

    def delete(self, bucket, key):
        try:
            # DeleteObject succeeds on missing keys, check existence first
            self.client.head_object(Bucket=bucket, Key=key)
            self.client.delete_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            self._fail("delete", bucket, key, e)

    def close(self):
        self.client.close()
