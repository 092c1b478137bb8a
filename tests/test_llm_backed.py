"""
tests/test_llm_backed.py
========================
Stage machine of the LLM-backed scorer and the chat-completion client.
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest import mock

import pytest
from openai import OpenAIError

from explanations.models import InferenceTraceModel
from inference_engine.services.exceptions import ModelResponseError, PredictionUnavailableError
from inference_engine.services.llm_backed import FALLBACK_EXPLANATION, LLMBackedStrategy
from inference_engine.services.llm_client import ChatCompletionClient
from inference_engine.services.schemas import PredictionInput, Stage
from inference_engine.services.static_catalog import STATIC_CATALOG
from inference_engine.services.usage_guard import TokenBudget
from patient_cases.models import PatientCaseModel

from .conftest import InMemoryRepository, ScriptedChatClient


def strategy_with(reply=None, error=None, repository=None) -> LLMBackedStrategy:
    return LLMBackedStrategy(
        client=ScriptedChatClient(reply=reply, error=error),
        repository=repository or InMemoryRepository(list(STATIC_CATALOG)),
    )


# ─────────────────────────────────────────────────────────────────────
# PRIMARY
# ─────────────────────────────────────────────────────────────────────


def test_primary_resolves_clamps_and_sorts(headache_input):
    strategy = strategy_with(
        reply={
            "predictions": [
                {"diseaseName": "Migraine", "confidence": 0.7, "reasoning": ["Unilateral headache"]},
                {"diseaseName": "Brain Fever", "confidence": 0.9},
                {"diseaseName": "Common Cold", "confidence": 1.4},
                {"diseaseName": "Influenza (Flu)", "reasoning": "Seasonal pattern"},
            ],
            "aiExplanation": "Headache dominates the presentation.",
        }
    )

    outcome = strategy.run(headache_input)

    assert outcome.stage is Stage.PRIMARY
    assert outcome.error is None
    assert [p.disease_name for p in outcome.predictions] == [
        "Common Cold",
        "Migraine",
        "Influenza (Flu)",
    ]
    cold, migraine, flu = outcome.predictions
    assert cold.confidence == 0.95
    assert cold.confidence_interval_high == pytest.approx(1.0)
    assert migraine.reasoning == ["Unilateral headache"]
    assert flu.confidence == 0.5
    assert flu.reasoning == ["Seasonal pattern"]
    assert flu.risk_factors == ["Based on symptoms"]
    assert flu.recommendations == ["Consult healthcare provider"]
    assert {p.ai_explanation for p in outcome.predictions} == {
        "Headache dominates the presentation."
    }
    assert strategy.model_version(outcome.stage) == "gpt-3.5-turbo-ai-v1.0"


def test_low_confidence_is_raised_to_floor(headache_input):
    strategy = strategy_with(reply={"predictions": [{"diseaseName": "Migraine", "confidence": 0.01}]})

    predictions = strategy.predict(headache_input)

    assert predictions[0].confidence == 0.1
    assert predictions[0].confidence_interval_low == pytest.approx(0.0)
    assert predictions[0].ai_explanation == (
        "AI-powered analysis based on symptom patterns and medical knowledge"
    )


def test_empty_prediction_array_is_a_primary_result(headache_input):
    outcome = strategy_with(reply={"predictions": []}).run(headache_input)

    assert outcome.stage is Stage.PRIMARY
    assert outcome.predictions == []


def test_prompt_carries_patient_and_catalog(headache_input):
    strategy = strategy_with(reply={"predictions": []})

    strategy.run(headache_input)

    system, user = strategy.client.calls[0]
    assert system["role"] == "system"
    assert "- Age: 30 years" in user["content"]
    assert "- Symptoms: Headache" in user["content"]
    assert "- Additional Notes: None" in user["content"]
    assert "- Common Cold (J00): A viral infection of the upper respiratory tract." in user["content"]


def test_explicitly_empty_lists_are_kept(headache_input):
    strategy = strategy_with(
        reply={
            "predictions": [
                {
                    "diseaseName": "Migraine",
                    "confidence": 0.7,
                    "reasoning": [],
                    "riskFactors": [],
                    "recommendations": None,
                }
            ]
        }
    )

    (migraine,) = strategy.predict(headache_input)

    assert migraine.reasoning == []
    assert migraine.risk_factors == []
    assert migraine.recommendations == ["Consult healthcare provider"]


def test_primary_model_version_fits_the_stored_column():
    client = ScriptedChatClient(reply={"predictions": []})
    client.model = "ft:gpt-4o-mini-2024-07-18:" + "acme-clinical-research" * 6
    strategy = LLMBackedStrategy(client=client, repository=InMemoryRepository(list(STATIC_CATALOG)))

    version = strategy.model_version(Stage.PRIMARY)

    assert len(version) == PatientCaseModel._meta.get_field("model_version").max_length
    assert len(version) <= InferenceTraceModel._meta.get_field("model_version").max_length
    assert version.startswith("ft:gpt-4o-mini")
    assert version.endswith("-ai-v1.0")


# ─────────────────────────────────────────────────────────────────────
# FALLBACK
# ─────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "reply",
    [
        {"aiExplanation": "no predictions key"},
        {"predictions": "Migraine"},
        {"predictions": [{"confidence": 0.4}]},
        "this is not json",
        "",
    ],
)
def test_unusable_reply_enters_fallback(headache_input, reply):
    strategy = strategy_with(reply=reply)

    predictions = strategy.predict(headache_input)
    outcome = strategy.run(headache_input)

    assert outcome.stage is Stage.FALLBACK
    assert outcome.error
    assert [p.disease_name for p in predictions] == [
        "Common Cold",
        "Influenza (Flu)",
        "Pneumonia",
    ]
    assert [p.confidence for p in predictions] == [0.6, 0.5, 0.4]
    assert all(p.ai_explanation == FALLBACK_EXPLANATION for p in predictions)
    assert predictions[0].reasoning == ["Symptoms match common patterns for Common Cold"]
    assert strategy.model_version(outcome.stage) == "ai-fallback-v1.0"


def test_network_error_enters_fallback(headache_input):
    strategy = strategy_with(
        error=ModelResponseError(message="The language model request failed.")
    )

    outcome = strategy.run(headache_input)

    assert outcome.stage is Stage.FALLBACK
    assert outcome.error == "The language model request failed."
    assert len(outcome.predictions) == 3


def test_fallback_without_common_symptom_is_empty():
    strategy = strategy_with(reply="not json")
    prediction_input = PredictionInput(
        symptoms=["rash"], age=22, gender="other", duration="1 week", severity="mild"
    )

    outcome = strategy.run(prediction_input)

    assert outcome.stage is Stage.FALLBACK
    assert outcome.predictions == []


def test_fallback_keyword_matches_within_symptom_text():
    strategy = strategy_with(reply="not json")
    prediction_input = PredictionInput(
        symptoms=["Low-grade fever at night"], age=22, gender="other", duration="1 week", severity="mild"
    )

    assert len(strategy.predict(prediction_input)) == 3


def test_primary_catalog_failure_enters_fallback(headache_input):
    repository = InMemoryRepository(list(STATIC_CATALOG), failures=1)
    strategy = strategy_with(reply={"predictions": []}, repository=repository)

    outcome = strategy.run(headache_input)

    assert outcome.stage is Stage.FALLBACK
    assert strategy.client.calls == []
    assert len(outcome.predictions) == 3


# ─────────────────────────────────────────────────────────────────────
# FAILED
# ─────────────────────────────────────────────────────────────────────


def test_fallback_catalog_failure_fails(headache_input):
    repository = InMemoryRepository(list(STATIC_CATALOG), failures=2)
    strategy = strategy_with(reply={"predictions": []}, repository=repository)

    outcome = strategy.run(headache_input)

    assert outcome.stage is Stage.FAILED
    assert outcome.predictions == []
    assert not outcome.succeeded
    assert strategy.model_version(outcome.stage) == ""


def test_predict_raises_when_failed(headache_input):
    repository = InMemoryRepository(list(STATIC_CATALOG), failures=2)
    strategy = strategy_with(reply={"predictions": []}, repository=repository)

    with pytest.raises(PredictionUnavailableError):
        strategy.predict(headache_input)


# ─────────────────────────────────────────────────────────────────────
# Chat-completion client
# ─────────────────────────────────────────────────────────────────────


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_client_returns_first_choice():
    client = ChatCompletionClient(api_key="sk-test", model="gpt-test", timeout=5)
    with mock.patch("inference_engine.services.llm_client.OpenAI") as openai_cls:
        openai_cls.return_value.chat.completions.create.return_value = _completion('{"predictions": []}')

        reply = client.complete([{"role": "user", "content": "hi"}])

    assert reply == '{"predictions": []}'
    openai_cls.assert_called_once_with(api_key="sk-test", timeout=5, max_retries=0)
    kwargs = openai_cls.return_value.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "gpt-test"
    assert kwargs["temperature"] == 0.3
    assert kwargs["max_tokens"] == 2000


def test_client_wraps_sdk_errors():
    client = ChatCompletionClient(api_key="sk-test")
    with mock.patch("inference_engine.services.llm_client.OpenAI") as openai_cls:
        openai_cls.return_value.chat.completions.create.side_effect = OpenAIError("timed out")

        with pytest.raises(ModelResponseError) as excinfo:
            client.complete([{"role": "user", "content": "hi"}])

    assert excinfo.value.details["original_error"] == "timed out"


def test_client_rejects_empty_reply():
    client = ChatCompletionClient(api_key="sk-test")
    with mock.patch("inference_engine.services.llm_client.OpenAI") as openai_cls:
        openai_cls.return_value.chat.completions.create.return_value = _completion(None)

        with pytest.raises(ModelResponseError):
            client.complete([{"role": "user", "content": "hi"}])


def test_connection_check_without_key_reports_failure():
    result = ChatCompletionClient(api_key="").test_connection()

    assert result == {
        "success": False,
        "message": "connection failed: OPENAI_API_KEY is not configured.",
    }


def test_connection_check_success():
    client = ChatCompletionClient(api_key="sk-test")
    with mock.patch("inference_engine.services.llm_client.OpenAI") as openai_cls:
        openai_cls.return_value.chat.completions.create.return_value = _completion("Yes")

        result = client.test_connection()

    assert result == {"success": True, "message": "connection successful"}
    kwargs = openai_cls.return_value.chat.completions.create.call_args.kwargs
    assert kwargs["max_tokens"] == 10


def _completion_with_usage(content, total_tokens):
    completion = _completion(content)
    completion.usage = SimpleNamespace(total_tokens=total_tokens)
    return completion


def test_client_records_token_usage():
    budget = TokenBudget(daily_limit=50000)
    client = ChatCompletionClient(api_key="sk-test", budget=budget)
    with mock.patch("inference_engine.services.llm_client.OpenAI") as openai_cls:
        openai_cls.return_value.chat.completions.create.return_value = _completion_with_usage("{}", 1234)

        client.complete([{"role": "user", "content": "hi"}])
        client.complete([{"role": "user", "content": "hi"}])

    assert budget.used() == 2468


def test_client_refuses_calls_over_the_daily_budget():
    budget = TokenBudget(daily_limit=3000)
    budget.record(1500)
    client = ChatCompletionClient(api_key="sk-test", budget=budget)
    with mock.patch("inference_engine.services.llm_client.OpenAI") as openai_cls:
        with pytest.raises(ModelResponseError) as excinfo:
            client.complete([{"role": "user", "content": "hi"}])

    openai_cls.return_value.chat.completions.create.assert_not_called()
    assert excinfo.value.message == "Daily language model token limit exceeded."
    assert excinfo.value.details == {"used": 1500, "daily_limit": 3000}


def test_zero_daily_limit_disables_the_budget():
    budget = TokenBudget(daily_limit=0)
    budget.record(10**9)

    budget.check(10**9)

    assert budget.used() == 0


def test_exhausted_budget_sends_the_strategy_to_fallback(headache_input):
    budget = TokenBudget(daily_limit=2000)
    budget.record(2000)
    strategy = LLMBackedStrategy(
        client=ChatCompletionClient(api_key="sk-test", budget=budget),
        repository=InMemoryRepository(list(STATIC_CATALOG)),
    )
    with mock.patch("inference_engine.services.llm_client.OpenAI"):
        outcome = strategy.run(headache_input)

    assert outcome.stage is Stage.FALLBACK
    assert outcome.error == "Daily language model token limit exceeded."
