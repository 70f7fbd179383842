from __future__ import annotations

import hashlib
import json
import time

from .models import RecommendationRequest, RecommendationResponse

RESPONSE_TTL_SECONDS = 300
MAX_ENTRIES = 256

# Insertion-ordered, so the first key is always the oldest entry
_responses: dict[str, tuple[float, RecommendationResponse]] = {}
_hits: int = 0
_misses: int = 0


def request_key(request: RecommendationRequest) -> str:
    """Stable digest of a ranking request; equal requests share a key."""
    payload = json.dumps(request.model_dump(mode="json"), sort_keys=True)
    return hashlib.sha256(payload.encode()).hexdigest()[:16]


def _purge_expired(now: float) -> None:
    expired = [k for k, (stored_at, _) in _responses.items() if now - stored_at >= RESPONSE_TTL_SECONDS]
    for key in expired:
        del _responses[key]


def cache_get(request: RecommendationRequest) -> RecommendationResponse | None:
    global _hits, _misses
    key = request_key(request)
    entry = _responses.get(key)
    if entry is not None:
        stored_at, response = entry
        if time.time() - stored_at < RESPONSE_TTL_SECONDS:
            _hits += 1
            return response
        del _responses[key]
    _misses += 1
    return None


def cache_set(request: RecommendationRequest, response: RecommendationResponse) -> None:
    now = time.time()
    _purge_expired(now)
    key = request_key(request)
    _responses.pop(key, None)
    _responses[key] = (now, response)
    while len(_responses) > MAX_ENTRIES:
        del _responses[next(iter(_responses))]


def get_cache_stats() -> dict:
    lookups = _hits + _misses
    return {
        "size": len(_responses),
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / lookups * 100, 1) if lookups else 0.0,
        "ttl_seconds": RESPONSE_TTL_SECONDS,
        "max_entries": MAX_ENTRIES,
    }


def clear_cache() -> None:
    global _hits, _misses
    _responses.clear()
    _hits = 0
    _misses = 0
