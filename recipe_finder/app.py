from __future__ import annotations

import logging

from fastapi import FastAPI, File, Form, HTTPException, Query, UploadFile

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_event
from .catalog.data_store import (
    get_all_ingredients,
    get_recipe,
    get_recipes,
    get_substitutions,
    suggest_ingredients,
)
from .catalog.models import DIETARY_OPTIONS, Difficulty, Recipe
from .detection.config import DEFAULT_DETECTION_CONFIG
from .detection.models import DetectionOutcome, DetectionResponse
from .detection.service import detect_ingredients
from .errors import InputValidationError
from .recommendations.cache import get_cache_stats
from .recommendations.models import (
    MAX_COOK_TIME,
    MIN_COOK_TIME,
    RankingMode,
    RecommendationRequest,
    RecommendationResponse,
)
from .recommendations.retrieval import get_recommendations

logger = logging.getLogger(__name__)

app = FastAPI(title="Recipe Finder API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "dietary_options": DIETARY_OPTIONS,
        "difficulty_levels": [d.value for d in Difficulty],
        "cook_time": {"min": MIN_COOK_TIME, "max": MAX_COOK_TIME},
        "ingredients": get_all_ingredients(),
    }


# ── Catalog endpoints ────────────────────────────────────────────────────


@app.get("/recipes", response_model=list[Recipe])
def list_recipes() -> list[Recipe]:
    return list(get_recipes())


@app.get("/recipes/{recipe_id}", response_model=Recipe)
def recipe_detail(recipe_id: str) -> Recipe:
    recipe = get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@app.get("/recipes/{recipe_id}/substitutions/{ingredient}")
def recipe_substitutions(recipe_id: str, ingredient: str) -> dict:
    recipe = get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return {"ingredient": ingredient, "substitutions": list(get_substitutions(recipe, ingredient))}


@app.get("/ingredients")
def ingredients(q: str = "", exclude: list[str] = Query(default=[])) -> dict:
    return {"suggestions": suggest_ingredients(q, exclude)}


# ── Matching endpoints ───────────────────────────────────────────────────


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(body: RecommendationRequest) -> RecommendationResponse:
    return get_recommendations(body)


@app.post("/analyze-ingredients", response_model=DetectionResponse)
async def analyze_ingredients(
    file: UploadFile = File(...),
    selected: list[str] = Form(default=[]),
) -> DetectionResponse:
    limit = DEFAULT_DETECTION_CONFIG.max_upload_bytes
    # Read one byte past the limit so oversized files are caught without buffering them whole
    data = await file.read(limit + 1)

    try:
        result = detect_ingredients(data, file.content_type, selected=selected)
    except InputValidationError as e:
        logger.info("Rejected upload %r: %s", file.filename, e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)

    record_event("detection", {
        "outcome": result.outcome.value,
        "ingredients": result.ingredients,
    })

    detected = result.ingredients if result.outcome == DetectionOutcome.detected else []
    ranking = get_recommendations(
        RecommendationRequest(ingredients=detected, mode=RankingMode.exclusive)
    )
    return DetectionResponse(detection=result, results=ranking)


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
