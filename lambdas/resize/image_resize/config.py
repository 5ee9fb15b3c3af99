import os
from dataclasses import dataclass
from typing import Optional, Text, Tuple


@dataclass(frozen=True)
class ResizeConfig:
    """Processing constants handed to the pipeline."""

    scale: float = 0.5
    allowed_extensions: Tuple[Text, ...] = (".jpg", ".jpeg", ".png")
    destination_suffix: Text = "-resized"
    content_type_prefix: Text = "image/"
    background: Text = "white"

    def is_allowed(self, extension: Text) -> bool:
        return extension in self.allowed_extensions

    def destination_bucket(self, bucket: Text) -> Text:
        return f"{bucket}{self.destination_suffix}"

    def content_type(self, format_name: Text) -> Text:
        return f"{self.content_type_prefix}{format_name}"


@dataclass(frozen=True)
class Settings:
    """Deployment settings read from the Lambda environment."""

    log_level: Text = "INFO"
    region: Optional[Text] = None
    s3_endpoint_url: Optional[Text] = None

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        return cls(
            log_level=environ.get("LOG_LEVEL", "INFO").upper(),
            region=environ.get("AWS_REGION") or None,
            s3_endpoint_url=environ.get("S3_ENDPOINT_URL") or None,
        )
