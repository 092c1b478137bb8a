"""
tests/test_api.py
=================
REST endpoints exercised through DRF's ``APIClient``.
"""

from __future__ import annotations

from unittest import mock

import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from api.throttling import AIDiagnosisRateThrottle
from inference_engine.services.llm_backed import LLMBackedStrategy
from inference_engine.services.static_catalog import STATIC_CATALOG

from .conftest import InMemoryRepository, ScriptedChatClient

pytestmark = pytest.mark.django_db


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def no_api_key(settings):
    settings.SYMPTOMDX = {**settings.SYMPTOMDX, "OPENAI_API_KEY": ""}


def diagnosis_body(**overrides) -> dict:
    body = {
        "patient_id": "PT-100",
        "symptoms": ["fever", "cough"],
        "age": 34,
        "gender": "female",
        "duration": "3 days",
        "severity": "moderate",
    }
    body.update(overrides)
    return body


# ─────────────────────────────────────────────────────────────────────
# Diseases
# ─────────────────────────────────────────────────────────────────────


def test_disease_list(api_client, seeded_catalog):
    response = api_client.get(reverse("api:disease-list"))

    assert response.status_code == 200
    assert response.data["count"] == 50
    names = [d["name"] for d in response.data["results"]]
    assert names == sorted(names)
    assert set(response.data["results"][0]) >= {
        "icd_code",
        "severity_level",
        "severity_display",
        "prevalence",
    }


def test_disease_list_filters(api_client, seeded_catalog):
    severe = api_client.get(reverse("api:disease-list"), {"severity_level": "severe"})
    searched = api_client.get(reverse("api:disease-list"), {"search": "J18"})
    by_prevalence = api_client.get(reverse("api:disease-list"), {"ordering": "-prevalence"})

    assert {d["severity_level"] for d in severe.data["results"]} == {"severe"}
    assert [d["name"] for d in searched.data["results"]] == ["Pneumonia"]
    prevalences = [float(d["prevalence"]) for d in by_prevalence.data["results"]]
    assert prevalences == sorted(prevalences, reverse=True)


def test_disease_list_filters_common(api_client, seeded_catalog):
    response = api_client.get(reverse("api:disease-list"), {"is_common": "true"})

    assert response.data["count"] > 0
    assert all(d["is_common"] for d in response.data["results"])


# ─────────────────────────────────────────────────────────────────────
# Diagnose
# ─────────────────────────────────────────────────────────────────────


def test_diagnose_with_rule_based_scorer(api_client, seeded_catalog):
    response = api_client.post(reverse("api:diagnose"), diagnosis_body(), format="json")

    assert response.status_code == 200
    assert response.data["strategy"] == "RULE_BASED"
    assert response.data["model_version"] == "ml-mock-v1.0"
    assert 3 <= len(response.data["predictions"]) <= 5
    assert response.data["case_id"]


def test_diagnose_with_llm_scorer(api_client, seeded_catalog):
    scripted = ScriptedChatClient(
        reply={
            "predictions": [{"diseaseName": "Influenza (Flu)", "confidence": 0.82}],
            "aiExplanation": "Fever with cough in season.",
        }
    )
    with mock.patch("api.views.LLMBackedStrategy", lambda: LLMBackedStrategy(client=scripted)):
        response = api_client.post(
            reverse("api:diagnose"),
            diagnosis_body(prediction_method="ai", severity="severe"),
            format="json",
        )

    assert response.status_code == 200
    assert response.data["strategy"] == "LLM_BACKED"
    assert response.data["stage"] == "PRIMARY"
    assert response.data["model_version"] == "gpt-3.5-turbo-ai-v1.0"
    assert response.data["urgency_level"] == "high"
    assert response.data["predictions"][0]["ai_explanation"] == "Fever with cough in season."


def test_diagnose_returns_503_when_predictions_unavailable(api_client):
    failing = LLMBackedStrategy(
        client=ScriptedChatClient(reply="{}"),
        repository=InMemoryRepository([], failures=2),
    )
    with mock.patch("api.views.LLMBackedStrategy", lambda: failing):
        response = api_client.post(
            reverse("api:diagnose"),
            diagnosis_body(prediction_method="ai"),
            format="json",
        )

    assert response.status_code == 503
    assert response.data["error"] == "Unable to generate predictions."


@pytest.mark.parametrize(
    "overrides",
    [
        {"symptoms": []},
        {"age": 121},
        {"age": -1},
        {"gender": "unknown"},
        {"severity": "critical"},
        {"prediction_method": "quantum"},
        {"patient_id": ""},
    ],
)
def test_diagnose_validation_errors(api_client, overrides):
    response = api_client.post(reverse("api:diagnose"), diagnosis_body(**overrides), format="json")

    assert response.status_code == 400


def test_repeated_ai_diagnosis_is_served_from_cache(api_client, seeded_catalog):
    scripted = ScriptedChatClient(reply={"predictions": [{"diseaseName": "Influenza (Flu)", "confidence": 0.82}]})
    with mock.patch("api.views.LLMBackedStrategy", lambda: LLMBackedStrategy(client=scripted)):
        first = api_client.post(reverse("api:diagnose"), diagnosis_body(prediction_method="ai"), format="json")
        second = api_client.post(
            reverse("api:diagnose"),
            diagnosis_body(prediction_method="ai", symptoms=["Cough", "Fever"]),
            format="json",
        )

    assert len(scripted.calls) == 1
    assert first.data["cached"] is False
    assert second.data["cached"] is True
    assert second.data["case_id"] != first.data["case_id"]


# ─────────────────────────────────────────────────────────────────────
# Rate limiting
# ─────────────────────────────────────────────────────────────────────


@pytest.fixture
def two_ai_diagnoses_per_hour():
    with mock.patch.object(AIDiagnosisRateThrottle, "THROTTLE_RATES", {"ai_diagnosis": "2/hour"}):
        yield


def test_ai_diagnoses_are_rate_limited(api_client, seeded_catalog, two_ai_diagnoses_per_hour):
    scripted = ScriptedChatClient(reply={"predictions": [{"diseaseName": "Influenza (Flu)", "confidence": 0.82}]})
    with mock.patch("api.views.LLMBackedStrategy", lambda: LLMBackedStrategy(client=scripted)):
        statuses = [
            api_client.post(
                reverse("api:diagnose"),
                diagnosis_body(prediction_method="ai"),
                format="json",
            ).status_code
            for _ in range(3)
        ]
        rule_based = api_client.post(reverse("api:diagnose"), diagnosis_body(), format="json")

    assert statuses == [200, 200, 429]
    assert rule_based.status_code == 200


def test_rate_limited_response_carries_retry_after(api_client, seeded_catalog, two_ai_diagnoses_per_hour):
    scripted = ScriptedChatClient(reply={"predictions": []})
    with mock.patch("api.views.LLMBackedStrategy", lambda: LLMBackedStrategy(client=scripted)):
        for _ in range(2):
            api_client.post(reverse("api:diagnose"), diagnosis_body(prediction_method="ai"), format="json")
        response = api_client.post(
            reverse("api:diagnose"),
            diagnosis_body(prediction_method="ai"),
            format="json",
        )

    assert response.status_code == 429
    assert response.has_header("Retry-After")


def test_rule_based_diagnoses_are_not_rate_limited(api_client, seeded_catalog, two_ai_diagnoses_per_hour):
    statuses = {
        api_client.post(reverse("api:diagnose"), diagnosis_body(), format="json").status_code
        for _ in range(4)
    }

    assert statuses == {200}


# ─────────────────────────────────────────────────────────────────────
# Compare
# ─────────────────────────────────────────────────────────────────────


def test_compare_without_api_key_uses_fallback(api_client, no_api_key):
    body = diagnosis_body()
    del body["patient_id"]
    with mock.patch(
        "inference_engine.services.diagnosis_service.DiseaseCatalogRepository",
        lambda: InMemoryRepository(list(STATIC_CATALOG)),
    ):
        response = api_client.post(reverse("api:compare"), body, format="json")

    assert response.status_code == 200
    assert response.data["llm_stage"] == "FALLBACK"
    assert [p["confidence"] for p in response.data["llm_backed"]] == [0.6, 0.5, 0.4]
    assert 3 <= len(response.data["rule_based"]) <= 5
    assert "Common Cold" in response.data["agreement"]


def test_compare_validation_error(api_client):
    response = api_client.post(reverse("api:compare"), {"symptoms": ["fever"]}, format="json")

    assert response.status_code == 400


# ─────────────────────────────────────────────────────────────────────
# Explanation
# ─────────────────────────────────────────────────────────────────────


def test_explanation_for_stored_case(api_client, seeded_catalog):
    case_id = api_client.post(reverse("api:diagnose"), diagnosis_body(), format="json").data["case_id"]

    response = api_client.get(reverse("api:explanation", kwargs={"case_id": case_id}))

    assert response.status_code == 200
    assert response.data["case_id"] == case_id
    assert "=== rule-based prediction report ===" in response.data["explanation"]


def test_explanation_for_llm_case_uses_llm_report(api_client, seeded_catalog):
    scripted = ScriptedChatClient(reply={"predictions": [{"diseaseName": "Influenza (Flu)", "confidence": 0.82}]})
    with mock.patch("api.views.LLMBackedStrategy", lambda: LLMBackedStrategy(client=scripted)):
        case_id = api_client.post(
            reverse("api:diagnose"),
            diagnosis_body(prediction_method="ai"),
            format="json",
        ).data["case_id"]

    response = api_client.get(reverse("api:explanation", kwargs={"case_id": case_id}))

    text = response.data["explanation"]
    assert response.status_code == 200
    assert "strategy: LLM-Backed Scorer (Primary)" in text
    assert "=== llm-backed prediction report ===" in text
    assert "rule-based" not in text


def test_explanation_for_unknown_case(api_client):
    response = api_client.get(reverse("api:explanation", kwargs={"case_id": 424242}))

    assert response.status_code == 404


# ─────────────────────────────────────────────────────────────────────
# Language model provider
# ─────────────────────────────────────────────────────────────────────


def test_ai_status_never_echoes_key(api_client, settings):
    settings.SYMPTOMDX = {**settings.SYMPTOMDX, "OPENAI_API_KEY": "sk-secret"}

    response = api_client.get(reverse("api:ai-status"))

    assert response.status_code == 200
    assert response.data["configured"] is True
    assert response.data["model"] == settings.SYMPTOMDX["OPENAI_MODEL"]
    assert "sk-secret" not in str(response.data)


def test_ai_test_connection_without_key(api_client, no_api_key):
    response = api_client.get(reverse("api:ai-test-connection"))

    assert response.status_code == 200
    assert response.data["success"] is False
