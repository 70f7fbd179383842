from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DetectionConfig:
    canvas_size: int = 200
    pixel_stride: int = 10
    alpha_threshold: int = 128
    max_upload_bytes: int = 5 * 1024 * 1024
    mime_prefix: str = "image/"


DEFAULT_DETECTION_CONFIG = DetectionConfig()
