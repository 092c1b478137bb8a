"""
api/throttling.py
=================
Request throttles for the SymptomDx REST API.
"""

from __future__ import annotations

from rest_framework.throttling import UserRateThrottle

from .serializers import PREDICTION_METHOD_AI


class AIDiagnosisRateThrottle(UserRateThrottle):
    """Limit language model diagnoses per user (or per client IP).

    Rule-based requests are never counted.  The rate comes from
    ``REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"]["ai_diagnosis"]``.
    """

    scope = "ai_diagnosis"

    def allow_request(self, request, view) -> bool:
        data = request.data
        if not hasattr(data, "get") or data.get("prediction_method") != PREDICTION_METHOD_AI:
            return True
        return super().allow_request(request, view)
