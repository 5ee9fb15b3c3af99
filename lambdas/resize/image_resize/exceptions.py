class ImageResizeError(Exception):
    """Base class for every failure that should fail the invocation."""

    kind = "unexpected"

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidEventError(ImageResizeError):
    kind = "event"


class ImageDecodeError(ImageResizeError):
    kind = "decode"


class ImageDimensionError(ImageResizeError):
    kind = "dimensions"


class ImageEncodeError(ImageResizeError):
    kind = "encode"


class StorageError(ImageResizeError):
    kind = "storage"

    def __init__(self, message, operation, bucket, key, code=None):
        super().__init__(message)
        self.operation = operation
        self.bucket = bucket
        self.key = key
        self.code = code
