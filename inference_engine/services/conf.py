"""
inference_engine/services/conf.py
=================================
Access to the ``SYMPTOMDX`` settings dict with built-in defaults.
"""

from __future__ import annotations

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    "OPENAI_API_KEY": "",
    "OPENAI_MODEL": "gpt-3.5-turbo",
    "OPENAI_TIMEOUT_SECONDS": 30.0,
    "OPENAI_TEMPERATURE": 0.3,
    "OPENAI_MAX_TOKENS": 2000,
    "AI_CACHE_TTL_SECONDS": 24 * 60 * 60,
    "AI_DAILY_TOKEN_LIMIT": 50000,
}


def get_setting(name: str) -> Any:
    """Return ``settings.SYMPTOMDX[name]``, falling back to :data:`DEFAULTS`."""
    configured: dict = getattr(settings, "SYMPTOMDX", {}) or {}
    if name in configured:
        return configured[name]
    return DEFAULTS[name]
