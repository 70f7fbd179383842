from __future__ import annotations

import logging
from collections.abc import Collection

from ..catalog.data_store import get_all_ingredients
from ..errors import DecodeError
from .config import DEFAULT_DETECTION_CONFIG, DetectionConfig
from .histogram import empty_histogram, extract_histogram
from .imaging import decode_image, render_canvas, validate_upload
from .models import DetectionOutcome, DetectionResult
from .patterns import match_ingredients

logger = logging.getLogger(__name__)

NO_INGREDIENTS_MESSAGE = "No common ingredients detected. Try uploading a clearer food image."


def detection_summary(ingredients: list[str]) -> str:
    count = len(ingredients)
    plural = "s" if count > 1 else ""
    return (
        f"Image uploaded successfully! Detected {count} ingredient{plural}: "
        f"{', '.join(ingredients)}"
    )


def detect_ingredients(
    data: bytes,
    content_type: str | None,
    selected: Collection[str] = (),
    catalog_ingredients: Collection[str] | None = None,
    config: DetectionConfig = DEFAULT_DETECTION_CONFIG,
) -> DetectionResult:
    """
    Run the photo pipeline: validate, decode, render, histogram, match.

    Invalid uploads raise ``InputValidationError`` before anything is decoded.
    Decode failures are reported as ``DetectionOutcome.failed``. Ingredients
    already in ``selected`` are not reported again.
    """
    validate_upload(content_type, len(data), config)

    try:
        canvas = render_canvas(decode_image(data), config)
    except DecodeError as e:
        logger.warning("Image decode failed: %s", e, exc_info=True)
        return DetectionResult(
            outcome=DetectionOutcome.failed,
            message=str(e),
            histogram=empty_histogram(),
        )

    histogram = extract_histogram(canvas, config)
    names = catalog_ingredients if catalog_ingredients is not None else get_all_ingredients()
    detected = [name for name in match_ingredients(histogram, names) if name not in selected]

    if not detected:
        return DetectionResult(
            outcome=DetectionOutcome.none_detected,
            message=NO_INGREDIENTS_MESSAGE,
            histogram=histogram,
        )

    return DetectionResult(
        outcome=DetectionOutcome.detected,
        ingredients=detected,
        message=detection_summary(detected),
        histogram=histogram,
    )
