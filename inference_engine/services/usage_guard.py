"""
inference_engine/services/usage_guard.py
========================================
Cache-backed guards around the language model pathway.

Contains:
    - PredictionCache: Reuses LLM predictions for identical requests.
    - TokenBudget: Service-wide daily ceiling on consumed model tokens.

Both live in Django's default cache, so they are shared by every
worker that shares the cache backend.
"""

from __future__ import annotations

import datetime
import hashlib
import json
import logging
from typing import Optional

from django.core.cache import cache

from .conf import get_setting
from .exceptions import ModelResponseError
from .schemas import PredictionInput, PredictionResult

logger: logging.Logger = logging.getLogger(__name__)

_PREDICTION_KEY_PREFIX: str = "symptomdx:llm-predictions"
_TOKEN_KEY_PREFIX: str = "symptomdx:llm-tokens"
_DAY_SECONDS: int = 24 * 60 * 60


# ─────────────────────────────────────────────────────────────────────
# Prediction cache
# ─────────────────────────────────────────────────────────────────────


class PredictionCache:
    """Store language model predictions keyed by the normalized request.

    Symptoms are lower-cased, stripped and sorted, so the same complaint
    entered in a different order or casing hits the same entry.  Notes
    are deliberately part of the key since they reach the prompt.
    """

    def __init__(self, ttl_seconds: Optional[int] = None) -> None:
        self.ttl_seconds: int = (
            ttl_seconds if ttl_seconds is not None else get_setting("AI_CACHE_TTL_SECONDS")
        )

    @property
    def enabled(self) -> bool:
        return self.ttl_seconds > 0

    @staticmethod
    def key_for(prediction_input: PredictionInput) -> str:
        normalized: dict = {
            "symptoms": sorted(prediction_input.normalized_symptoms),
            "age": prediction_input.age,
            "gender": prediction_input.gender,
            "duration": prediction_input.duration.strip().lower(),
            "severity": prediction_input.severity,
            "notes": (prediction_input.additional_notes or "").strip(),
        }
        digest: str = hashlib.sha256(
            json.dumps(normalized, sort_keys=True).encode("utf-8")
        ).hexdigest()
        return f"{_PREDICTION_KEY_PREFIX}:{digest}"

    def get(self, prediction_input: PredictionInput) -> Optional[list[PredictionResult]]:
        if not self.enabled:
            return None
        cached: Optional[list[PredictionResult]] = cache.get(self.key_for(prediction_input))
        if cached is not None:
            logger.debug("serving llm predictions from cache")
        return cached

    def set(self, prediction_input: PredictionInput, predictions: list[PredictionResult]) -> None:
        if not self.enabled:
            return
        cache.set(self.key_for(prediction_input), list(predictions), self.ttl_seconds)
        logger.debug("llm predictions cached for %ss", self.ttl_seconds)


# ─────────────────────────────────────────────────────────────────────
# Token budget
# ─────────────────────────────────────────────────────────────────────


class TokenBudget:
    """Daily token ceiling for calls to the hosted model.

    Usage is counted per calendar day (UTC).  A limit of ``0`` disables
    the budget.
    """

    def __init__(self, daily_limit: Optional[int] = None) -> None:
        self.daily_limit: int = (
            daily_limit if daily_limit is not None else get_setting("AI_DAILY_TOKEN_LIMIT")
        )

    @staticmethod
    def _key(day: Optional[datetime.date] = None) -> str:
        day = day or datetime.datetime.now(datetime.timezone.utc).date()
        return f"{_TOKEN_KEY_PREFIX}:{day.isoformat()}"

    def used(self) -> int:
        return cache.get(self._key(), 0)

    def check(self, estimated_tokens: int) -> None:
        """Refuse a call that would push today's usage over the limit.

        Raises:
            ModelResponseError: If the budget is exhausted.
        """
        if not self.daily_limit:
            return
        used: int = self.used()
        if used + estimated_tokens > self.daily_limit:
            logger.warning(
                "daily token budget exhausted: %d used of %d", used, self.daily_limit
            )
            raise ModelResponseError(
                message="Daily language model token limit exceeded.",
                details={"used": used, "daily_limit": self.daily_limit},
            )

    def record(self, tokens: int) -> None:
        if not self.daily_limit or tokens <= 0:
            return
        key: str = self._key()
        # add() is a no-op when the key exists, so the first call of the day seeds it
        cache.add(key, 0, _DAY_SECONDS)
        try:
            cache.incr(key, tokens)
        except ValueError:
            # expired between add() and incr()
            cache.set(key, tokens, _DAY_SECONDS)
