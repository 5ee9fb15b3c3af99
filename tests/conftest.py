"""
Test configuration and fixtures for the image resize Lambda.

Provides S3 event payloads, a mocked Lambda context, Pillow-generated
images and an in-memory object storage with failure injection.
"""
import io
import os
from unittest.mock import Mock

import pytest
from PIL import Image

# Keep boto3 away from any real account
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("LOG_LEVEL", "INFO")

from image_resize.exceptions import StorageError  # noqa: E402
from image_resize.storage import ObjectStorage  # noqa: E402


class TrackedStream(io.BytesIO):
    def __init__(self, data, fail_on_close=False):
        super().__init__(data)
        self.fail_on_close = fail_on_close
        self.close_calls = 0

    def close(self):
        self.close_calls += 1
        super().close()
        if self.fail_on_close:
            # Only the first close fails, so garbage collection stays quiet
            self.fail_on_close = False
            raise OSError("connection reset while closing")


class InMemoryStorage(ObjectStorage):
    """Dict-backed storage recording every call it receives."""

    def __init__(self):
        self.objects = {}
        self.calls = []
        self.failures = {}
        self.streams = []
        self.fail_stream_close = False
        self.closed = False

    def add(self, bucket, key, body, content_type="application/octet-stream"):
        self.objects[(bucket, key)] = {
            "body": body,
            "content_type": content_type,
            "content_length": len(body),
        }

    def fail(self, operation, code="AccessDenied"):
        self.failures[operation] = code

    def _check(self, operation, bucket, key, must_exist=True):
        self.calls.append((operation, bucket, key))
        code = self.failures.get(operation)
        if code is None and must_exist and (bucket, key) not in self.objects:
            code = "NoSuchKey"
        if code is not None:
            raise StorageError(
                f"{operation} failed for {bucket}/{key}: {code}",
                operation=operation,
                bucket=bucket,
                key=key,
                code=code,
            )

    def get(self, bucket, key):
        self._check("get", bucket, key)
        stream = TrackedStream(
            self.objects[(bucket, key)]["body"], fail_on_close=self.fail_stream_close
        )
        self.streams.append(stream)
        return stream

    def put(self, bucket, key, body, content_type, content_length):
        self._check("put", bucket, key, must_exist=False)
        self.objects[(bucket, key)] = {
            "body": body,
            "content_type": content_type,
            "content_length": content_length,
        }

    def delete(self, bucket, key):
        self._check("delete", bucket, key)
        del self.objects[(bucket, key)]

    def close(self):
        self.closed = True


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def storage_factory(storage):
    factory = Mock(return_value=storage)
    return factory


@pytest.fixture
def s3_event():
    """Build an S3 ObjectCreated event for the given (bucket, key) pairs."""

    def build(*objects):
        return {
            "Records": [
                {
                    "eventVersion": "2.1",
                    "eventSource": "aws:s3",
                    "eventName": "ObjectCreated:Put",
                    "eventTime": "2026-01-15T10:30:00.000Z",
                    "s3": {
                        "bucket": {"name": bucket},
                        "object": {"key": key, "size": 1024},
                    },
                }
                for bucket, key in objects
            ]
        }

    return build


@pytest.fixture
def mock_lambda_context():
    context = Mock()
    context.function_name = "image-resize"
    context.aws_request_id = "test-request-id-123"
    context.get_remaining_time_in_millis.return_value = 60000
    return context


@pytest.fixture
def image_bytes():
    """Encode a solid-color image of the given size and format."""

    def build(width, height, image_format="JPEG", mode="RGB", color="red"):
        buffer = io.BytesIO()
        Image.new(mode, (width, height), color).save(buffer, format=image_format)
        return buffer.getvalue()

    return build
