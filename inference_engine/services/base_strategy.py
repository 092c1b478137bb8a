"""
inference_engine/services/base_strategy.py
==========================================
Abstract base class defining the contract every prediction strategy
must fulfil.  Follows the **Strategy** design pattern so the
:class:`DiagnosisService` can swap algorithms at runtime.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .schemas import PredictionInput, PredictionOutcome, PredictionResult, Stage


class PredictionStrategy(ABC):
    """Abstract prediction strategy interface.

    Subclasses implement a concrete scorer (rule table, hosted language
    model) while the :class:`DiagnosisService` interacts only with this
    interface.  Strategies hold no per-request state; one instance may
    serve concurrent requests.
    """

    #: label stored on traces, one of ``InferenceTraceModel.Strategy``
    strategy_label: str = ""

    @abstractmethod
    def predict(self, prediction_input: PredictionInput) -> list[PredictionResult]:
        """Score the input against the disease catalog.

        Args:
            prediction_input: The diagnosis request.

        Returns:
            Predictions sorted by descending confidence.  An empty list
            is a valid outcome.
        """
        ...

    def run(self, prediction_input: PredictionInput) -> PredictionOutcome:
        """Score the input and report the stage the strategy finished in.

        Single-stage strategies always finish in ``PRIMARY``.
        """
        return PredictionOutcome(stage=Stage.PRIMARY, predictions=self.predict(prediction_input))

    @abstractmethod
    def model_version(self, stage: Stage) -> str:
        """Version label recorded with predictions produced in ``stage``."""
        ...

    def explain_result(self, predictions: list[dict]) -> str:
        """Produce a human-readable report of stored predictions.

        Args:
            predictions: Prediction dicts as rendered by
                :meth:`PredictionResult.to_dict`.

        Returns:
            A formatted multi-line explanation string.
        """
        lines: list[str] = [
            f"=== {self.strategy_label.lower().replace('_', '-')} prediction report ===",
            f"predictions: {len(predictions)}",
            "",
            "--- ranked diseases ---",
        ]

        for idx, prediction in enumerate(predictions, start=1):
            confidence_pct: float = prediction["confidence"] * 100
            low_pct: float = prediction.get("confidence_interval_low", 0) * 100
            high_pct: float = prediction.get("confidence_interval_high", 0) * 100
            lines.append(
                f"{idx}. {prediction['disease_name']} "
                f"(confidence: {confidence_pct:.1f}%, "
                f"interval: {low_pct:.1f}%-{high_pct:.1f}%)"
            )
            for reason in prediction.get("reasoning", []):
                lines.append(f"   - reasoning: {reason}")
            for factor in prediction.get("risk_factors", []):
                lines.append(f"   - risk factor: {factor}")
            for advice in prediction.get("recommendations", []):
                lines.append(f"   - recommendation: {advice}")

        explanation = next(
            (p["ai_explanation"] for p in predictions if p.get("ai_explanation")),
            None,
        )
        if explanation:
            lines.extend(["", "--- ai explanation ---", explanation])

        return "\n".join(lines)
