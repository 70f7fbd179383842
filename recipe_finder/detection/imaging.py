"""
Upload validation, decoding, and canvas rendering.

Validation happens on the declared MIME type and byte size only, so a bad
upload is rejected without touching the decoder.
"""
from __future__ import annotations

from io import BytesIO

from PIL import Image, UnidentifiedImageError

from ..errors import DecodeError, InputValidationError
from .config import DEFAULT_DETECTION_CONFIG, DetectionConfig

INVALID_TYPE_MESSAGE = "Please select a valid image file"
TOO_LARGE_MESSAGE = "Image size must be less than 5MB"
DECODE_FAILED_MESSAGE = "Unable to load image. Please try another file."


def validate_upload(
    content_type: str | None,
    size: int,
    config: DetectionConfig = DEFAULT_DETECTION_CONFIG,
) -> None:
    """Raise ``InputValidationError`` for a non-image type or an oversized file."""
    if not content_type or not content_type.startswith(config.mime_prefix):
        raise InputValidationError(INVALID_TYPE_MESSAGE, status_code=400)
    if size > config.max_upload_bytes:
        raise InputValidationError(TOO_LARGE_MESSAGE, status_code=413)


def decode_image(data: bytes) -> Image.Image:
    """
    Decode image bytes with Pillow.

    Raises:
        DecodeError: If the bytes are not a readable image.
    """
    if not data:
        raise DecodeError(DECODE_FAILED_MESSAGE)
    try:
        img = Image.open(BytesIO(data))
        # verify() leaves the image unusable, so reopen afterwards
        img.verify()
        img = Image.open(BytesIO(data))
        img.load()
        return img
    except Image.DecompressionBombError as e:
        raise DecodeError(DECODE_FAILED_MESSAGE) from e
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
        raise DecodeError(DECODE_FAILED_MESSAGE) from e


def render_canvas(
    image: Image.Image,
    config: DetectionConfig = DEFAULT_DETECTION_CONFIG,
) -> Image.Image:
    """Draw ``image`` stretched onto a square RGBA canvas of ``canvas_size`` pixels."""
    size = (config.canvas_size, config.canvas_size)
    try:
        rgba = image.convert("RGBA")
        return rgba.resize(size, Image.Resampling.BILINEAR)
    except (OSError, ValueError) as e:
        raise DecodeError(DECODE_FAILED_MESSAGE) from e
