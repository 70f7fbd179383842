"""
Color histogram extraction.

Samples every ``pixel_stride``-th pixel of an RGBA buffer, skips transparent
pixels, and assigns each remaining pixel to exactly one coarse color bucket.
Rules are evaluated top to bottom and the first match wins, so their order
matters (orange shadows yellow, for instance).
"""
from __future__ import annotations

import logging
from typing import Any, Callable

import numpy as np
from PIL import Image

from .config import DEFAULT_DETECTION_CONFIG, DetectionConfig

logger = logging.getLogger(__name__)

ColorHistogram = dict[str, int]

# (bucket, predicate over r, g, b). Predicates work on ints and numpy arrays alike.
COLOR_RULES: list[tuple[str, Callable[[Any, Any, Any], Any]]] = [
    ("red", lambda r, g, b: (r > 200) & (g < 100) & (b < 100)),
    ("orange", lambda r, g, b: (r > 200) & (g > 150) & (b < 100)),
    ("yellow", lambda r, g, b: (r > 200) & (g > 200) & (b < 100)),
    ("green", lambda r, g, b: (r < 100) & (g > 150) & (b < 100)),
    ("blue", lambda r, g, b: (r < 100) & (g < 100) & (b > 150)),
    ("purple", lambda r, g, b: (r > 150) & (g < 150) & (b > 150)),
    ("brown", lambda r, g, b: (r > 180) & (g > 150) & (b < 150)),
    ("white", lambda r, g, b: (r > 200) & (g > 200) & (b > 200)),
    ("dark", lambda r, g, b: (r < 100) & (g < 100) & (b < 100)),
]
FALLBACK_BUCKET = "other"
COLOR_BUCKETS: tuple[str, ...] = tuple(name for name, _ in COLOR_RULES) + (FALLBACK_BUCKET,)


def empty_histogram() -> ColorHistogram:
    return {bucket: 0 for bucket in COLOR_BUCKETS}


def classify_pixel(r: int, g: int, b: int) -> str:
    """Return the bucket for a single pixel."""
    for bucket, rule in COLOR_RULES:
        if rule(r, g, b):
            return bucket
    return FALLBACK_BUCKET


def histogram_from_rgba(
    buffer: bytes | np.ndarray,
    config: DetectionConfig = DEFAULT_DETECTION_CONFIG,
) -> ColorHistogram:
    """
    Build a histogram from a raw RGBA pixel buffer.

    ``buffer`` may be flat RGBA bytes or an array whose last axis has length 4.
    An unreadable buffer yields the all-zero histogram.
    """
    try:
        if isinstance(buffer, (bytes, bytearray, memoryview)):
            pixels = np.frombuffer(buffer, dtype=np.uint8)
        else:
            pixels = np.asarray(buffer, dtype=np.int64)
            if pixels.size and (pixels.min() < 0 or pixels.max() > 255):
                raise ValueError("channel values must be within 0-255")
        pixels = pixels.reshape(-1, 4)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Unreadable pixel buffer, returning empty histogram", exc_info=True)
        return empty_histogram()

    sampled = pixels[:: config.pixel_stride].astype(np.int16)
    sampled = sampled[sampled[:, 3] >= config.alpha_threshold]
    r, g, b = sampled[:, 0], sampled[:, 1], sampled[:, 2]

    conditions = [rule(r, g, b) for _, rule in COLOR_RULES]
    choices = np.arange(len(COLOR_RULES))
    labels = np.select(conditions, choices, default=len(COLOR_RULES))
    counts = np.bincount(labels, minlength=len(COLOR_BUCKETS))

    return {bucket: int(counts[i]) for i, bucket in enumerate(COLOR_BUCKETS)}


def extract_histogram(
    canvas: Image.Image | None,
    config: DetectionConfig = DEFAULT_DETECTION_CONFIG,
) -> ColorHistogram:
    """Histogram of a rendered canvas. Never raises; failures give an empty histogram."""
    if canvas is None:
        return empty_histogram()
    try:
        rgba = canvas if canvas.mode == "RGBA" else canvas.convert("RGBA")
        buffer = rgba.tobytes()
    except (OSError, ValueError):
        logger.warning("Could not read canvas pixels, returning empty histogram", exc_info=True)
        return empty_histogram()
    return histogram_from_rgba(buffer, config)
