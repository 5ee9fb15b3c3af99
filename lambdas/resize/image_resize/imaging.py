import io
from typing import BinaryIO, Text, Tuple

from PIL import Image, UnidentifiedImageError

from image_resize.exceptions import (
    ImageDecodeError,
    ImageDimensionError,
    ImageEncodeError,
)


def decode(stream: BinaryIO) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(stream.read()))
        # Pillow is lazy, force the pixel data to catch truncated files
        image.load()
    except (
        UnidentifiedImageError,
        OSError,
        SyntaxError,
        Image.DecompressionBombError,
    ) as e:
        raise ImageDecodeError(f"Unable to decode image: {e}") from e
    return image


def target_size(width: int, height: int, scale: float) -> Tuple[int, int]:
    new_width, new_height = int(width * scale), int(height * scale)
    if new_width <= 0 or new_height <= 0:
        raise ImageDimensionError(
            f"Image of {width}x{height} is too small to scale by {scale}"
        )
    return new_width, new_height


def _to_8bit(image: Image.Image) -> Image.Image:
    # convert() clips 16-bit samples at 255, scale them down instead
    if not image.mode.startswith("I"):
        return image
    return image.convert("I").point(lambda v: v / 256).convert("L")


def resample(image: Image.Image, scale: float, background: Text = "white") -> Image.Image:
    """Scale ``image`` with bilinear filtering onto an opaque RGB canvas.

    Transparent pixels end up showing ``background``.
    """
    size = target_size(image.width, image.height, scale)

    source = _to_8bit(image).convert("RGBA")
    scaled = source.resize(size, resample=Image.Resampling.BILINEAR)

    resized = Image.new("RGB", size, background)
    resized.paste(scaled, (0, 0), mask=scaled)
    return resized


def encode(image: Image.Image, extension: Text) -> bytes:
    image_format = Image.registered_extensions().get(extension.lower())
    if image_format is None:
        raise ImageEncodeError(f"No encoder registered for {extension}")

    buffer = io.BytesIO()
    try:
        image.save(buffer, format=image_format)
    except (OSError, ValueError, KeyError) as e:
        raise ImageEncodeError(f"Unable to encode image as {image_format}: {e}") from e
    return buffer.getvalue()
