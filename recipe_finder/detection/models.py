from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..recommendations.models import RecommendationResponse


class DetectionOutcome(str, Enum):
    detected = "detected"
    none_detected = "none_detected"
    failed = "failed"


class DetectionResult(BaseModel):
    outcome: DetectionOutcome
    ingredients: list[str] = Field(default_factory=list)
    message: str
    histogram: dict[str, int] = Field(default_factory=dict)


class DetectionResponse(BaseModel):
    detection: DetectionResult
    results: RecommendationResponse
