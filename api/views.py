"""
api/views.py
============
DRF views for the SymptomDx REST API.

Contains:
    - DiseaseListAPIView: ListAPIView with severity & commonness filtering.
    - DiagnosisAPIView: POST endpoint running the selected strategy.
    - CompareAPIView: POST endpoint running both strategies side by side.
    - ExplanationAPIView: GET endpoint for formatted prediction reports.
    - AIStatusAPIView / AITestConnectionAPIView: language model provider checks.
"""

from __future__ import annotations

import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from inference_engine.services.base_strategy import PredictionStrategy
from inference_engine.services.conf import get_setting
from inference_engine.services.diagnosis_service import DiagnosisService
from inference_engine.services.exceptions import (
    InferenceEngineError,
    PredictionUnavailableError,
)
from inference_engine.services.llm_backed import LLMBackedStrategy
from inference_engine.services.llm_client import ChatCompletionClient
from inference_engine.services.rule_based import RuleBasedStrategy
from knowledge_base.models import DiseaseModel

from .serializers import (
    PREDICTION_METHOD_AI,
    CompareRequestSerializer,
    DiseaseSerializer,
    PredictionRequestSerializer,
)
from .throttling import AIDiagnosisRateThrottle

logger: logging.Logger = logging.getLogger(__name__)


def build_strategy(prediction_method: str) -> PredictionStrategy:
    """Map the request's ``prediction_method`` onto a strategy instance."""
    if prediction_method == PREDICTION_METHOD_AI:
        return LLMBackedStrategy()
    return RuleBasedStrategy()


def _error_response(exc: InferenceEngineError, status_code: int) -> Response:
    return Response(
        {"error": exc.message, "details": exc.details},
        status=status_code,
    )


def _unexpected_error_response() -> Response:
    return Response(
        {"error": "An unexpected error occurred."},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# ─────────────────────────────────────────────────────────────────────
# Disease listing
# ─────────────────────────────────────────────────────────────────────


class DiseaseListAPIView(generics.ListAPIView):
    """List catalog diseases with optional filtering.

    **Filters** (query params):
        - ``severity_level``: exact match (e.g. ``?severity_level=severe``)
        - ``is_common``: boolean (e.g. ``?is_common=true``)
        - ``search``: partial match on ``name`` and ``icd_code``
        - ``ordering``: sort by name, prevalence or severity
          (e.g. ``?ordering=-prevalence``)
    """

    queryset = DiseaseModel.objects.all()
    serializer_class = DiseaseSerializer
    filter_backends = [
        DjangoFilterBackend,
        filters.SearchFilter,
        filters.OrderingFilter,
    ]
    filterset_fields = ["severity_level", "is_common"]
    search_fields = ["name", "icd_code"]
    ordering_fields = ["name", "prevalence", "severity_level"]
    ordering = ["name"]


# ─────────────────────────────────────────────────────────────────────
# Diagnosis endpoints
# ─────────────────────────────────────────────────────────────────────


class DiagnosisAPIView(APIView):
    """Run a diagnosis with the rule-based or the LLM-backed scorer.

    **POST** ``/api/v1/diagnose/``

    Request body::

        {
            "patient_id": "PT-001",
            "symptoms": ["fever", "cough"],
            "age": 34,
            "gender": "female",
            "duration": "3 days",
            "severity": "moderate",
            "prediction_method": "ml"
        }

    Returns the ranked predictions, triage flags and ``case_id``.
    Language model requests are rate limited per client (HTTP 429).
    """

    throttle_classes = [AIDiagnosisRateThrottle]

    def post(self, request):
        serializer = PredictionRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        patient_id: str = serializer.validated_data["patient_id"]
        prediction_method: str = serializer.validated_data["prediction_method"]

        try:
            service = DiagnosisService(strategy=build_strategy(prediction_method))
            result: dict = service.diagnose(
                serializer.to_prediction_input(),
                patient_id=patient_id,
            )
            return Response(result, status=status.HTTP_200_OK)
        except PredictionUnavailableError as exc:
            logger.error("prediction unavailable: %s", exc.message)
            return _error_response(exc, status.HTTP_503_SERVICE_UNAVAILABLE)
        except InferenceEngineError as exc:
            logger.warning("diagnosis failed: %s", exc.message)
            return _error_response(exc, status.HTTP_400_BAD_REQUEST)
        except Exception:
            logger.exception("unexpected error during api diagnosis")
            return _unexpected_error_response()


class CompareAPIView(APIView):
    """Run both scorers on the same input without persisting anything.

    **POST** ``/api/v1/compare/``

    Accepts the diagnosis body without ``patient_id`` and
    ``prediction_method``.
    """

    def post(self, request):
        serializer = CompareRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            service = DiagnosisService(strategy=RuleBasedStrategy())
            result: dict = service.compare(serializer.to_prediction_input())
            return Response(result, status=status.HTTP_200_OK)
        except InferenceEngineError as exc:
            logger.warning("comparison failed: %s", exc.message)
            return _error_response(exc, status.HTTP_400_BAD_REQUEST)
        except Exception:
            logger.exception("unexpected error during strategy comparison")
            return _unexpected_error_response()


# ─────────────────────────────────────────────────────────────────────
# Explanation endpoint
# ─────────────────────────────────────────────────────────────────────


class ExplanationAPIView(APIView):
    """Retrieve the formatted prediction report for a case.

    **GET** ``/api/v1/explanation/<case_id>/``

    Returns a JSON object with the human-readable explanation string.
    """

    def get(self, request, case_id: int):
        try:
            service = DiagnosisService(strategy=RuleBasedStrategy())
            explanation: str = service.get_explanation(case_id=case_id)
            return Response(
                {"case_id": case_id, "explanation": explanation},
                status=status.HTTP_200_OK,
            )
        except InferenceEngineError as exc:
            logger.warning("explanation retrieval failed: %s", exc.message)
            return _error_response(exc, status.HTTP_404_NOT_FOUND)
        except Exception:
            logger.exception("unexpected error retrieving explanation")
            return _unexpected_error_response()


# ─────────────────────────────────────────────────────────────────────
# Language model provider
# ─────────────────────────────────────────────────────────────────────


class AIStatusAPIView(APIView):
    """Report how the language model provider is configured.

    **GET** ``/api/v1/ai/status/``

    Never contacts the provider and never echoes the API key.
    """

    def get(self, request):
        return Response(
            {
                "configured": bool(get_setting("OPENAI_API_KEY")),
                "model": get_setting("OPENAI_MODEL"),
                "timeout_seconds": get_setting("OPENAI_TIMEOUT_SECONDS"),
                "fallback_enabled": True,
            },
            status=status.HTTP_200_OK,
        )


class AITestConnectionAPIView(APIView):
    """Check the language model provider with a tiny completion.

    **GET** ``/api/v1/ai/test-connection/``

    Always answers 200; ``success`` tells whether the call worked.
    """

    def get(self, request):
        result: dict = ChatCompletionClient().test_connection()
        if not result["success"]:
            logger.warning("ai connection test failed: %s", result["message"])
        return Response(result, status=status.HTTP_200_OK)
