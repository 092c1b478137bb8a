"""
inference_engine/services/llm_backed.py
=======================================
**LLM-backed** prediction strategy with an explicit stage machine.

Stages:
    PRIMARY:
        1. Fetch the catalog and render it as a bulleted context block.
        2. Send the templated prompt to the hosted chat model.
        3. Parse the reply as JSON and validate the ``predictions`` array.
        4. Resolve every ``diseaseName`` against the catalog by exact
           name; unknown names are dropped with a warning.
        5. Clamp confidences to ``[0.1, 0.95]``, attach the shared
           explanation and sort.
    FALLBACK:
        Entered on any PRIMARY failure.  Re-fetches the catalog and, if
        any reported symptom contains one of five common keywords, takes
        the first three catalog entries at 0.6 / 0.5 / 0.4 confidence.
    FAILED:
        Entered only when the FALLBACK catalog fetch fails.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Optional

from .base_strategy import PredictionStrategy
from .catalog_repository import DiseaseCatalogRepository
from .exceptions import (
    CatalogUnavailableError,
    ModelResponseError,
    PredictionUnavailableError,
)
from .llm_client import ChatCompletionClient
from .prompts import build_messages
from .response_serializers import ModelResponseSerializer
from .schemas import (
    Disease,
    PredictionInput,
    PredictionOutcome,
    PredictionResult,
    Stage,
    clamp,
    sort_by_confidence,
)

logger: logging.Logger = logging.getLogger(__name__)

MIN_CONFIDENCE: float = 0.1
MAX_CONFIDENCE: float = 0.95
DEFAULT_CONFIDENCE: float = 0.5

DEFAULT_EXPLANATION: str = (
    "AI-powered analysis based on symptom patterns and medical knowledge"
)
DEFAULT_REASONING: str = "AI analysis"
DEFAULT_RISK_FACTOR: str = "Based on symptoms"
DEFAULT_RECOMMENDATION: str = "Consult healthcare provider"

FALLBACK_KEYWORDS: tuple[str, ...] = ("fever", "headache", "cough", "fatigue", "nausea")
FALLBACK_LIMIT: int = 3
FALLBACK_TOP_CONFIDENCE: float = 0.6
FALLBACK_CONFIDENCE_STEP: float = 0.1
FALLBACK_EXPLANATION: str = "Fallback analysis due to AI service unavailability"

# width of the stored model_version columns
MODEL_VERSION_MAX_LENGTH: int = 100
PRIMARY_VERSION_SUFFIX: str = "-ai-v1.0"


class LLMBackedStrategy(PredictionStrategy):
    """Ask a hosted language model for a differential diagnosis.

    The chat client and repository are injected so tests can substitute
    fakes.  No retries: one failed attempt moves straight to FALLBACK.
    """

    strategy_label: str = "LLM_BACKED"

    def __init__(
        self,
        client: Optional[ChatCompletionClient] = None,
        repository: Optional[DiseaseCatalogRepository] = None,
    ) -> None:
        self.client: ChatCompletionClient = client or ChatCompletionClient()
        self.repository: DiseaseCatalogRepository = repository or DiseaseCatalogRepository()

    def model_version(self, stage: Stage) -> str:
        if stage is Stage.PRIMARY:
            model: str = self.client.model[: MODEL_VERSION_MAX_LENGTH - len(PRIMARY_VERSION_SUFFIX)]
            return f"{model}{PRIMARY_VERSION_SUFFIX}"
        if stage is Stage.FALLBACK:
            return "ai-fallback-v1.0"
        return ""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def predict(self, prediction_input: PredictionInput) -> list[PredictionResult]:
        """Return the predictions of whichever stage succeeded.

        Raises:
            PredictionUnavailableError: If the machine ends in FAILED.
        """
        outcome: PredictionOutcome = self.run(prediction_input)
        if outcome.stage is Stage.FAILED:
            raise PredictionUnavailableError(
                message="Unable to generate predictions.",
                details={"original_error": outcome.error},
            )
        return outcome.predictions

    def run(self, prediction_input: PredictionInput) -> PredictionOutcome:
        """Drive PRIMARY → FALLBACK → FAILED and report where it stopped."""
        start: float = time.perf_counter()

        try:
            predictions: list[PredictionResult] = self.predict_primary(prediction_input)
        except (ModelResponseError, CatalogUnavailableError) as exc:
            primary_error: str = exc.message
            logger.warning("llm prediction failed, entering fallback: %s", primary_error)
        else:
            logger.info(
                "llm prediction complete: %d predictions in %dms",
                len(predictions),
                int((time.perf_counter() - start) * 1000),
            )
            return PredictionOutcome(stage=Stage.PRIMARY, predictions=predictions)

        try:
            predictions = self.predict_fallback(prediction_input)
        except CatalogUnavailableError as exc:
            logger.error("fallback prediction failed: %s", exc.message)
            return PredictionOutcome(
                stage=Stage.FAILED,
                error=f"{primary_error}; {exc.message}",
            )

        logger.info("fallback prediction complete: %d predictions", len(predictions))
        return PredictionOutcome(
            stage=Stage.FALLBACK,
            predictions=predictions,
            error=primary_error,
        )

    # ------------------------------------------------------------------
    # PRIMARY
    # ------------------------------------------------------------------
    def predict_primary(self, prediction_input: PredictionInput) -> list[PredictionResult]:
        """Run the model path.

        Raises:
            ModelResponseError: On any call or response problem.
            CatalogUnavailableError: If the catalog cannot be read.
        """
        diseases: list[Disease] = self.repository.get_all_diseases()
        reply: str = self.client.complete(build_messages(prediction_input, diseases))
        payload: dict = self.parse_reply(reply)

        catalog: dict[str, Disease] = self.repository.name_index(diseases)
        explanation: str = payload.get("aiExplanation") or DEFAULT_EXPLANATION

        predictions: list[PredictionResult] = []
        for entry in payload["predictions"]:
            disease: Optional[Disease] = catalog.get(entry["diseaseName"])
            if disease is None:
                logger.warning("disease not found in catalog: %r", entry["diseaseName"])
                continue

            raw_confidence: Optional[float] = entry.get("confidence")
            confidence: float = clamp(
                DEFAULT_CONFIDENCE if raw_confidence is None else raw_confidence,
                MIN_CONFIDENCE,
                MAX_CONFIDENCE,
            )
            predictions.append(
                PredictionResult.build(
                    disease=disease,
                    confidence=confidence,
                    reasoning=_listed(entry, "reasoning", DEFAULT_REASONING),
                    risk_factors=_listed(entry, "riskFactors", DEFAULT_RISK_FACTOR),
                    recommendations=_listed(entry, "recommendations", DEFAULT_RECOMMENDATION),
                    ai_explanation=explanation,
                )
            )

        return sort_by_confidence(predictions)

    @staticmethod
    def parse_reply(reply: str) -> dict:
        """Decode and validate the model's JSON reply.

        Raises:
            ModelResponseError: If the reply is not JSON or lacks a valid
                ``predictions`` array.
        """
        try:
            data = json.loads(reply)
        except json.JSONDecodeError as exc:
            raise ModelResponseError(
                message="Invalid response format from AI.",
                details={"original_error": str(exc)},
            ) from exc

        serializer = ModelResponseSerializer(data=data)
        if not serializer.is_valid():
            raise ModelResponseError(
                message="Invalid response structure from AI.",
                details={"errors": serializer.errors},
            )
        return serializer.validated_data

    # ------------------------------------------------------------------
    # FALLBACK
    # ------------------------------------------------------------------
    def predict_fallback(self, prediction_input: PredictionInput) -> list[PredictionResult]:
        """Reduced heuristic used when the model path fails.

        Raises:
            CatalogUnavailableError: If the catalog cannot be read.
        """
        diseases: list[Disease] = self.repository.get_all_diseases()

        has_common_symptom: bool = any(
            keyword in symptom
            for symptom in prediction_input.normalized_symptoms
            for keyword in FALLBACK_KEYWORDS
        )
        if not has_common_symptom:
            return []

        predictions: list[PredictionResult] = []
        for index, disease in enumerate(diseases[:FALLBACK_LIMIT]):
            confidence: float = round(
                FALLBACK_TOP_CONFIDENCE - index * FALLBACK_CONFIDENCE_STEP, 2
            )
            predictions.append(
                PredictionResult.build(
                    disease=disease,
                    confidence=confidence,
                    reasoning=[f"Symptoms match common patterns for {disease.name}"],
                    risk_factors=["Based on reported symptoms"],
                    recommendations=[
                        "Consult healthcare provider for proper diagnosis",
                        "Monitor symptoms and seek medical attention if they worsen",
                    ],
                    ai_explanation=FALLBACK_EXPLANATION,
                )
            )
        return predictions


def _listed(entry: dict, key: str, default: str) -> list[str]:
    # an explicitly empty list from the model is kept as-is
    value: Optional[list[str]] = entry.get(key)
    return [default] if value is None else value
