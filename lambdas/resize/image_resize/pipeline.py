"""
Resize pipeline run once per S3 ObjectCreated notification.

parse key -> check type -> download -> decode -> resample -> encode
-> upload to ``<bucket>-resized`` -> delete the source.

A failed delete after a successful upload leaves both objects in place,
nothing is rolled back.
"""
import logging
from contextlib import contextmanager

from image_resize import imaging
from image_resize.config import ResizeConfig
from image_resize.events import parse_notification
from image_resize.exceptions import ImageResizeError
from image_resize.keys import split_key
from image_resize.results import DestinationDescriptor, ResizeResult
from image_resize.storage import S3Storage

logger = logging.getLogger(__name__)


@contextmanager
def opened_stream(stream):
    """Close ``stream`` on exit, logging close errors instead of raising them."""
    try:
        yield stream
    finally:
        try:
            stream.close()
        except Exception as e:
            logger.warning(f"Error closing input stream: {e}")


class ResizePipeline:
    def __init__(self, config=None, storage_factory=S3Storage.from_settings):
        self.config = config or ResizeConfig()
        self.storage_factory = storage_factory

    def run(self, event) -> ResizeResult:
        try:
            return self._run(event)
        except ImageResizeError as e:
            logger.error(e.message, extra={"kind": e.kind})
            return ResizeResult.failed(e)
        except Exception as e:
            logger.exception(str(e))
            error = ImageResizeError(f"Unexpected error: {e}")
            error.__cause__ = e
            return ResizeResult.failed(error)

    def _run(self, event) -> ResizeResult:
        notification = parse_notification(event)
        bucket, key = notification.bucket, notification.key

        parsed = split_key(key)
        if parsed is None:
            logger.info(f"Unable to infer image type for key {key}")
            return ResizeResult.skipped(f"no extension in {key}")

        if not self.config.is_allowed(parsed.extension):
            logger.info(f"{parsed.name} has unsupported image type {parsed.extension}")
            return ResizeResult.skipped(f"unsupported image type {parsed.extension}")

        with self.storage_factory() as storage:
            # Download
            with opened_stream(storage.get(bucket, key)) as stream:
                image = imaging.decode(stream)

            # Resize
            resized = imaging.resample(
                image, self.config.scale, background=self.config.background
            )
            body = imaging.encode(resized, parsed.extension)

            destination = DestinationDescriptor(
                bucket=self.config.destination_bucket(bucket),
                key=key,
                content_type=self.config.content_type(parsed.format_name),
                content_length=len(body),
            )

            # Write it to the resized bucket
            logger.info(f"Writing to: {destination.bucket}/{destination.key}")
            storage.put(
                destination.bucket,
                destination.key,
                body,
                content_type=destination.content_type,
                content_length=destination.content_length,
            )
            logger.info(
                f"Successfully resized {bucket}/{key} "
                f"and uploaded to {destination.bucket}/{destination.key} "
                f"({resized.width}x{resized.height})"
            )

            # Remove the original
            logger.info(f"Deleting from: {bucket}/{key}")
            storage.delete(bucket, key)

        return ResizeResult.ok(destination)
