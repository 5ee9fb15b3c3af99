import logging
from dataclasses import dataclass
from typing import Any, Dict, Text
from urllib.parse import unquote_plus

from image_resize.exceptions import InvalidEventError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeNotification:
    bucket: Text
    key: Text


def parse_notification(event: Dict[Text, Any]) -> ChangeNotification:
    """Read the bucket and decoded key of the first S3 record.

    Only the first record is handled, the others are ignored.
    """
    records = (event or {}).get("Records") or []
    logger.info(f"{len(records)} images uploaded event accepted")

    if not records:
        raise InvalidEventError("S3 event contains no records")

    try:
        s3 = records[0]["s3"]
        bucket = s3["bucket"]["name"]
        key = unquote_plus(s3["object"]["key"])
    except (KeyError, TypeError) as e:
        raise InvalidEventError(f"Malformed S3 event record: missing {e}") from e

    return ChangeNotification(bucket=bucket, key=key)
