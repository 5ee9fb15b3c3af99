import enum
from dataclasses import dataclass
from typing import Optional, Text

from image_resize.exceptions import ImageResizeError


@dataclass(frozen=True)
class DestinationDescriptor:
    bucket: Text
    key: Text
    content_type: Text
    content_length: int


class ResizeStatus(enum.Enum):
    SKIPPED = "skipped"
    OK = "ok"
    FAILED = "failed"


@dataclass(frozen=True)
class ResizeResult:
    """Outcome of one invocation.

    A skip is a valid outcome, not an error: the object was ignored on purpose
    and nothing was written or deleted.
    """

    status: ResizeStatus
    reason: Optional[Text] = None
    destination: Optional[DestinationDescriptor] = None
    error: Optional[ImageResizeError] = None

    @classmethod
    def skipped(cls, reason):
        return cls(ResizeStatus.SKIPPED, reason=reason)

    @classmethod
    def ok(cls, destination):
        return cls(ResizeStatus.OK, destination=destination)

    @classmethod
    def failed(cls, error):
        return cls(ResizeStatus.FAILED, error=error)

    @property
    def kind(self) -> Optional[Text]:
        return self.error.kind if self.error else None

    @property
    def response(self) -> Text:
        return "Ok" if self.status is ResizeStatus.OK else ""

    def raise_for_status(self):
        if self.status is ResizeStatus.FAILED:
            raise self.error
