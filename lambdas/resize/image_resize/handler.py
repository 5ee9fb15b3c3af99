from image_resize.config import Settings
from image_resize.log import configure_logging
from image_resize.pipeline import ResizePipeline
from image_resize.storage import S3Storage

settings = Settings.from_env()
configure_logging(settings.log_level)

pipeline = ResizePipeline(storage_factory=lambda: S3Storage.from_settings(settings))


def handler(event, context):
    result = pipeline.run(event)
    result.raise_for_status()
    return result.response
