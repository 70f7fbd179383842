from __future__ import annotations

import time

from ..analytics.store import record_event
from .cache import cache_get, cache_set
from .models import RecommendationRequest, RecommendationResponse
from .ranking import rank_recipes


def _record_search(
    request: RecommendationRequest,
    response: RecommendationResponse,
    start_time: float,
    cache_hit: bool,
) -> None:
    elapsed_ms = round((time.time() - start_time) * 1000, 3)
    record_event("search", {
        "mode": request.mode.value,
        "ingredients": request.ingredients,
        "dietary": request.dietary,
        "difficulty": [d.value for d in request.difficulty],
        "cook_time": request.cook_time.model_dump(),
        "total_candidates": response.total_candidates,
        "results_returned": len(response.matches),
        "response_time_ms": elapsed_ms,
        "cache_hit": cache_hit,
    })


def get_recommendations(request: RecommendationRequest) -> RecommendationResponse:
    start_time = time.time()

    # --- Cache check ---
    cached = cache_get(request)
    if cached is not None:
        _record_search(request, cached, start_time, cache_hit=True)
        return cached

    # --- Ranking ---
    matches = rank_recipes(request)
    total_candidates = len(matches)
    if request.limit is not None:
        matches = matches[: request.limit]

    response = RecommendationResponse(
        matches=tuple(matches),
        total_candidates=total_candidates,
        mode=request.mode,
    )

    cache_set(request, response)
    _record_search(request, response, start_time, cache_hit=False)
    return response
