"""
explanations/models.py
======================
Models for logging prediction runs.

Contains:
    - InferenceTraceModel: Audit record of a single prediction run,
      including the strategy used, the stage it finished in, the model
      version, per-disease confidences and execution time.
"""

from __future__ import annotations

from django.db import models

from patient_cases.models import PatientCaseModel


class InferenceTraceModel(models.Model):
    """Execution log for a single prediction run.

    Attributes:
        patient_case: The case this trace belongs to.
        execution_timestamp: Auto-set timestamp of the run.
        strategy_used: Prediction strategy applied.
        stage: Stage the strategy finished in (primary / fallback).
        model_version: Version label reported by the strategy.
        confidence_scores_calculated: JSON dict of disease-name-to-score.
        error_message: Failure that pushed the run into fallback, if any.
        execution_time_ms: Wall-clock execution time in milliseconds.
    """

    class Strategy(models.TextChoices):
        """Allowed prediction strategies."""

        RULE_BASED = "RULE_BASED", "Rule-Based Scorer"
        LLM_BACKED = "LLM_BACKED", "LLM-Backed Scorer"

    class Stage(models.TextChoices):
        PRIMARY = "PRIMARY", "Primary"
        FALLBACK = "FALLBACK", "Fallback"
        FAILED = "FAILED", "Failed"

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------
    patient_case: models.ForeignKey = models.ForeignKey(
        PatientCaseModel,
        on_delete=models.CASCADE,
        related_name="inference_logs",
        help_text="The patient case this trace belongs to.",
    )
    execution_timestamp = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when the prediction run was executed.",
    )
    strategy_used: str = models.CharField(
        max_length=20,
        choices=Strategy.choices,
        help_text="Prediction strategy that was applied.",
    )
    stage: str = models.CharField(
        max_length=10,
        choices=Stage.choices,
        default=Stage.PRIMARY,
    )
    model_version: str = models.CharField(
        max_length=100,
        blank=True,
        default="",
    )
    confidence_scores_calculated = models.JSONField(
        default=dict,
        help_text=(
            "JSON dict mapping disease names to confidence scores, "
            'e.g. {"Migraine": 0.62, "Common Cold": 0.41}.'
        ),
    )
    error_message: str = models.TextField(
        blank=True,
        default="",
    )
    execution_time_ms: int = models.PositiveIntegerField(
        help_text="Prediction execution time in milliseconds.",
    )

    # ------------------------------------------------------------------
    # Meta
    # ------------------------------------------------------------------
    class Meta:
        ordering: list[str] = ["-execution_timestamp"]
        verbose_name: str = "Inference Trace"
        verbose_name_plural: str = "Inference Traces"

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return (
            f"Trace for {self.patient_case.patient_identifier} "
            f"- {self.get_strategy_used_display()} / {self.get_stage_display()} "
            f"({self.execution_time_ms}ms)"
        )
