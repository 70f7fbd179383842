from __future__ import annotations

from collections import Counter
from typing import Any

from ..recommendations.models import MAX_COOK_TIME, MIN_COOK_TIME


def _top(counter: Counter[str], n: int = 10) -> list[dict[str, Any]]:
    return [{"name": name, "count": count} for name, count in counter.most_common(n)]


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "search"]
    detections = [e for e in events if e["type"] == "detection"]
    total = len(searches)

    # Average response time
    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 3) if times else 0.0

    mode_counter: Counter[str] = Counter(s.get("mode", "inclusive") for s in searches)

    ingredient_counter: Counter[str] = Counter()
    dietary_counter: Counter[str] = Counter()
    for s in searches:
        ingredient_counter.update(s.get("ingredients", []) or [])
        dietary_counter.update(s.get("dietary", []) or [])

    # Filter usage rates
    filter_counts = {"ingredients": 0, "dietary": 0, "difficulty": 0, "cook_time": 0}
    for s in searches:
        if s.get("ingredients"):
            filter_counts["ingredients"] += 1
        if s.get("dietary"):
            filter_counts["dietary"] += 1
        if s.get("difficulty"):
            filter_counts["difficulty"] += 1
        cook_time = s.get("cook_time") or {}
        if (cook_time.get("min", MIN_COOK_TIME), cook_time.get("max", MAX_COOK_TIME)) != (
            MIN_COOK_TIME,
            MAX_COOK_TIME,
        ):
            filter_counts["cook_time"] += 1
    filter_usage = {
        k: round(v / total * 100, 1) if total else 0.0
        for k, v in filter_counts.items()
    }

    cache_hits = sum(1 for s in searches if s.get("cache_hit"))

    outcome_counter: Counter[str] = Counter(d.get("outcome", "unknown") for d in detections)
    detected_counter: Counter[str] = Counter()
    for d in detections:
        detected_counter.update(d.get("ingredients", []) or [])

    return {
        "total_searches": total,
        "searches_by_mode": dict(mode_counter),
        "avg_response_time_ms": avg_time,
        "top_ingredients": _top(ingredient_counter),
        "dietary_usage": dict(dietary_counter),
        "filter_usage": filter_usage,
        "cache_stats": {
            "hits": cache_hits,
            "misses": total - cache_hits,
            "hit_rate": round(cache_hits / total * 100, 1) if total else 0.0,
        },
        "detections": {
            "total": len(detections),
            "outcomes": dict(outcome_counter),
            "top_detected_ingredients": _top(detected_counter),
        },
    }
