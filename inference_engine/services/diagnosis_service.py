"""
inference_engine/services/diagnosis_service.py
==============================================
Orchestration service that ties together the prediction strategies,
the disease catalog repository, and the persistence layer.

Uses the **Strategy** pattern: callers inject or swap the
prediction algorithm at runtime via :meth:`set_strategy`.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from django.db import connection, transaction

from explanations.models import InferenceTraceModel
from patient_cases.models import PatientCaseModel

from .base_strategy import PredictionStrategy
from .catalog_repository import DiseaseCatalogRepository
from .exceptions import (
    CatalogUnavailableError,
    InferenceEngineError,
    PredictionUnavailableError,
)
from .llm_backed import LLMBackedStrategy
from .rule_based import COMMON_COLD, RuleBasedStrategy
from .schemas import (
    Disease,
    PredictionInput,
    PredictionOutcome,
    PredictionResult,
    Severity,
    Stage,
)
from .usage_guard import PredictionCache

logger: logging.Logger = logging.getLogger(__name__)

# stored when a strategy legitimately returns nothing
SAFETY_NET_CONFIDENCE: float = 0.3


class DiagnosisService:
    """High-level diagnostic orchestrator.

    Typical usage::

        from inference_engine.services import (
            DiagnosisService,
            PredictionInput,
            RuleBasedStrategy,
        )

        svc = DiagnosisService(strategy=RuleBasedStrategy())
        result = svc.diagnose(
            PredictionInput(
                symptoms=["headache"], age=30, gender="female",
                duration="2 days", severity="mild",
            ),
            patient_id="PT-001",
        )
    """

    def __init__(
        self,
        strategy: PredictionStrategy,
        repository: Optional[DiseaseCatalogRepository] = None,
        prediction_cache: Optional[PredictionCache] = None,
    ) -> None:
        """Initialise with a prediction strategy (dependency injection).

        Args:
            strategy: Concrete :class:`PredictionStrategy` implementation.
            repository: Catalog repository used for the empty-result
                safety net.
            prediction_cache: Reuse store for language model predictions.
        """
        self._strategy: PredictionStrategy = strategy
        self._repository: DiseaseCatalogRepository = repository or DiseaseCatalogRepository()
        self._prediction_cache: PredictionCache = prediction_cache or PredictionCache()

    @property
    def strategy(self) -> PredictionStrategy:
        return self._strategy

    def set_strategy(self, strategy: PredictionStrategy) -> None:
        """Replace the active prediction strategy at runtime.

        Args:
            strategy: New :class:`PredictionStrategy` to use for
                subsequent :meth:`diagnose` calls.
        """
        logger.info(
            "switching prediction strategy to %s",
            strategy.__class__.__name__,
        )
        self._strategy = strategy

    # ------------------------------------------------------------------
    # Diagnose
    # ------------------------------------------------------------------
    def diagnose(self, prediction_input: PredictionInput, patient_id: str) -> dict:
        """Run a full diagnosis session: predict → safety net → persist.

        Args:
            prediction_input: The validated request.
            patient_id: Opaque patient / session identifier.

        Returns:
            Dict with the ranked predictions, triage flags, the stage the
            strategy finished in and a ``case_id`` key referencing the
            persisted :class:`PatientCaseModel`.

        Raises:
            PredictionUnavailableError: If the strategy could not produce
                any result at all.
            InferenceEngineError: On unexpected errors.
        """
        logger.info(
            "starting diagnosis for patient %s with %d symptoms using %s",
            patient_id,
            len(prediction_input.symptoms),
            self._strategy.__class__.__name__,
        )
        start: float = time.perf_counter()

        try:
            outcome, cached = self._run_strategy(prediction_input)
            if outcome.stage is Stage.FAILED:
                raise PredictionUnavailableError(
                    message="Unable to generate predictions.",
                    details={"original_error": outcome.error},
                )

            predictions: list[PredictionResult] = outcome.predictions
            if not predictions:
                predictions = self._safety_net_predictions()

            elapsed_ms: int = int((time.perf_counter() - start) * 1000)
            triage: dict = self.triage(prediction_input)
            model_version: str = self._strategy.model_version(outcome.stage)

            case: PatientCaseModel = self._persist_result(
                prediction_input=prediction_input,
                patient_id=patient_id,
                predictions=predictions,
                outcome=outcome,
                model_version=model_version,
                triage=triage,
                elapsed_ms=elapsed_ms,
            )

            logger.info(
                "diagnosis complete for patient %s - case id %s (%s)",
                patient_id,
                case.id,
                outcome.stage.value,
            )
            return {
                "case_id": case.id,
                "patient_id": patient_id,
                "strategy": self._strategy.strategy_label,
                "stage": outcome.stage.value,
                "model_version": model_version,
                "predictions": [p.to_dict() for p in predictions],
                "fallback_reason": outcome.error,
                "execution_time_ms": elapsed_ms,
                "cached": cached,
                **triage,
            }

        except InferenceEngineError:
            raise
        except Exception as exc:
            logger.exception("unexpected error during diagnosis")
            raise InferenceEngineError(
                message="An unexpected error occurred during diagnosis.",
                details={"original_error": str(exc)},
            ) from exc

    def _run_strategy(self, prediction_input: PredictionInput) -> tuple[PredictionOutcome, bool]:
        """Run the active strategy, reusing cached language model predictions.

        Only PRIMARY results of the LLM pathway are cached; fallback output
        is retried on the next request.
        """
        if self._strategy.strategy_label != LLMBackedStrategy.strategy_label:
            return self._strategy.run(prediction_input), False

        cached: Optional[list[PredictionResult]] = self._prediction_cache.get(prediction_input)
        if cached is not None:
            logger.info("reusing cached llm predictions")
            return PredictionOutcome(stage=Stage.PRIMARY, predictions=cached), True

        outcome: PredictionOutcome = self._strategy.run(prediction_input)
        if outcome.stage is Stage.PRIMARY and outcome.predictions:
            self._prediction_cache.set(prediction_input, outcome.predictions)
        return outcome, False

    @staticmethod
    def triage(prediction_input: PredictionInput) -> dict:
        """Session flags derived from the reported severity."""
        severe: bool = prediction_input.severity == Severity.SEVERE.value
        return {
            "urgency_level": (
                PatientCaseModel.UrgencyLevel.HIGH if severe else PatientCaseModel.UrgencyLevel.MEDIUM
            ).value,
            "is_emergency": severe,
            "requires_doctor_review": severe,
        }

    def _safety_net_predictions(self) -> list[PredictionResult]:
        """A single low-confidence Common Cold prediction, if that disease exists."""
        logger.warning("no predictions generated, storing safety-net prediction")
        try:
            disease: Optional[Disease] = self._repository.get_by_name(COMMON_COLD)
        except CatalogUnavailableError:
            logger.warning("catalog unavailable, storing no predictions")
            return []
        if disease is None:
            return []

        return [
            PredictionResult.build(
                disease=disease,
                confidence=SAFETY_NET_CONFIDENCE,
                reasoning=[
                    "Unable to match symptoms to specific conditions",
                    "General symptoms suggest common viral infection",
                ],
                risk_factors=["Symptom presentation"],
                recommendations=[
                    "Monitor symptoms",
                    "Consult healthcare provider if symptoms worsen",
                    "Rest and stay hydrated",
                ],
            )
        ]

    @transaction.atomic
    def _persist_result(
        self,
        prediction_input: PredictionInput,
        patient_id: str,
        predictions: list[PredictionResult],
        outcome: PredictionOutcome,
        model_version: str,
        triage: dict,
        elapsed_ms: int,
    ) -> PatientCaseModel:
        """Save the session and its trace.

        Creates a :class:`PatientCaseModel` and a linked
        :class:`InferenceTraceModel`.
        """
        case: PatientCaseModel = PatientCaseModel.objects.create(
            patient_identifier=patient_id,
            symptoms=list(prediction_input.symptoms),
            age=prediction_input.age,
            gender=prediction_input.gender,
            duration=prediction_input.duration,
            severity=prediction_input.severity,
            additional_notes=prediction_input.additional_notes or "",
            predictions=[p.to_dict() for p in predictions],
            model_version=model_version,
            **triage,
        )

        InferenceTraceModel.objects.create(
            patient_case=case,
            strategy_used=self._strategy.strategy_label,
            stage=outcome.stage.value,
            model_version=model_version,
            confidence_scores_calculated={p.disease_name: p.confidence for p in predictions},
            error_message=outcome.error or "",
            execution_time_ms=elapsed_ms,
        )

        logger.info("persisted case %s with inference trace", case.id)
        return case

    # ------------------------------------------------------------------
    # Compare
    # ------------------------------------------------------------------
    def compare(
        self,
        prediction_input: PredictionInput,
        rule_strategy: Optional[PredictionStrategy] = None,
        llm_strategy: Optional[PredictionStrategy] = None,
    ) -> dict:
        """Run both scorers concurrently for the same input.

        Nothing is persisted.  A FAILED LLM run is reported in the
        result instead of raised, since the rule-based list still stands.

        Returns:
            Dict with both prediction lists, the LLM stage and the names
            of the diseases both pathways predicted.
        """
        rule_strategy = rule_strategy or RuleBasedStrategy(repository=self._repository)
        llm_strategy = llm_strategy or LLMBackedStrategy(repository=self._repository)

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="predict") as pool:
            rule_future = pool.submit(_run_in_thread, rule_strategy, prediction_input)
            llm_future = pool.submit(_run_in_thread, llm_strategy, prediction_input)
            rule_outcome: PredictionOutcome = rule_future.result()
            llm_outcome: PredictionOutcome = llm_future.result()

        rule_names: set[str] = {p.disease_name for p in rule_outcome.predictions}
        llm_names: set[str] = {p.disease_name for p in llm_outcome.predictions}

        return {
            "rule_based": [p.to_dict() for p in rule_outcome.predictions],
            "llm_backed": [p.to_dict() for p in llm_outcome.predictions],
            "llm_stage": llm_outcome.stage.value,
            "llm_error": llm_outcome.error,
            "agreement": sorted(rule_names & llm_names),
        }

    # ------------------------------------------------------------------
    # Explanation
    # ------------------------------------------------------------------
    def get_explanation(self, case_id: int) -> str:
        """Retrieve and format the explanation for a completed case.

        Loads the latest :class:`InferenceTraceModel` linked to the
        case, formats the stored predictions through the strategy that
        produced them, and prepends case metadata.

        Args:
            case_id: Primary key of the :class:`PatientCaseModel`.

        Returns:
            Human-readable explanation string.

        Raises:
            InferenceEngineError: If the case or trace cannot be found.
        """
        try:
            case: PatientCaseModel = PatientCaseModel.objects.get(pk=case_id)
        except PatientCaseModel.DoesNotExist as exc:
            raise InferenceEngineError(
                message=f"patient case with id {case_id} not found.",
                details={"case_id": case_id},
            ) from exc

        trace: InferenceTraceModel | None = (
            case.inference_logs.order_by("-execution_timestamp").first()
        )

        if trace is None:
            raise InferenceEngineError(
                message=f"no inference trace found for case {case_id}.",
                details={"case_id": case_id},
            )

        header: str = (
            f"patient: {case.patient_identifier}\n"
            f"session: {case.session_date:%Y-%m-%d %H:%M}\n"
            f"strategy: {trace.get_strategy_used_display()} ({trace.get_stage_display()})\n"
            f"model version: {trace.model_version or 'N/A'}\n"
            f"urgency: {case.get_urgency_level_display()}\n"
        )

        body: str = self._reporting_strategy(trace.strategy_used).explain_result(case.predictions)

        return f"{header}\n{body}"

    def _reporting_strategy(self, strategy_used: str) -> PredictionStrategy:
        """The strategy whose report format matches a stored trace."""
        if strategy_used == self._strategy.strategy_label:
            return self._strategy
        if strategy_used == LLMBackedStrategy.strategy_label:
            return LLMBackedStrategy(repository=self._repository)
        return RuleBasedStrategy(repository=self._repository)


def _run_in_thread(strategy: PredictionStrategy, prediction_input: PredictionInput) -> PredictionOutcome:
    try:
        return strategy.run(prediction_input)
    finally:
        # worker threads get their own connection
        connection.close()
