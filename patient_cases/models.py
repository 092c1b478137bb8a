"""
patient_cases/models.py
=======================
Models for storing diagnosis sessions and their predictions.

Contains:
    - PatientCaseModel: A single diagnosis session for a patient,
      capturing the submitted prediction input, the triage flags derived
      from it, and the ranked predictions that were produced.
"""

from __future__ import annotations

from django.db import models


class PatientCaseModel(models.Model):
    """Records a single diagnosis session.

    The prediction strategies never write here; the
    :class:`~inference_engine.services.DiagnosisService` persists a case
    once a strategy has returned.

    Attributes:
        patient_identifier: Opaque identifier for the patient / session.
        session_date: Timestamp auto-set when the case is created.
        symptoms: JSON list of the symptom labels as submitted.
        age: Patient age in years.
        gender: One of ``Gender``.
        duration: Free-text symptom duration (e.g. "2 days").
        severity: Reported severity, one of ``Severity``.
        additional_notes: Optional free-text notes from the patient.
        urgency_level: Triage urgency derived from the severity.
        is_emergency: ``True`` when the reported severity is severe.
        requires_doctor_review: ``True`` when a doctor must review the
            predictions before the case is closed.
        predictions: Ranked list of prediction dicts, e.g.
            ``[{"disease_id": 1, "disease_name": "Migraine",
            "confidence": 0.62, ...}]``.
        model_version: Label of the strategy / stage that produced the
            predictions (e.g. ``"ml-mock-v1.0"``).
        final_diagnosis_notes: Optional free-text notes added by the
            clinician after reviewing the predictions.
    """

    class Gender(models.TextChoices):
        MALE = "male", "Male"
        FEMALE = "female", "Female"
        OTHER = "other", "Other"

    class Severity(models.TextChoices):
        MILD = "mild", "Mild"
        MODERATE = "moderate", "Moderate"
        SEVERE = "severe", "Severe"

    class UrgencyLevel(models.TextChoices):
        LOW = "low", "Low"
        MEDIUM = "medium", "Medium"
        HIGH = "high", "High"
        EMERGENCY = "emergency", "Emergency"

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------
    patient_identifier: str = models.CharField(
        max_length=100,
        help_text="Opaque patient or session identifier.",
    )
    session_date = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when this diagnosis session was created.",
    )
    symptoms = models.JSONField(
        default=list,
        help_text='JSON list of reported symptom labels, e.g. ["headache"].',
    )
    age: int = models.PositiveSmallIntegerField(
        help_text="Patient age in years.",
    )
    gender: str = models.CharField(
        max_length=10,
        choices=Gender.choices,
    )
    duration: str = models.CharField(
        max_length=100,
        blank=True,
        default="",
        help_text='Free-text duration, e.g. "2 days" or "1 week".',
    )
    severity: str = models.CharField(
        max_length=10,
        choices=Severity.choices,
    )
    additional_notes: str = models.TextField(
        blank=True,
        default="",
    )
    urgency_level: str = models.CharField(
        max_length=10,
        choices=UrgencyLevel.choices,
        default=UrgencyLevel.MEDIUM,
    )
    is_emergency: bool = models.BooleanField(default=False)
    requires_doctor_review: bool = models.BooleanField(default=False)
    predictions = models.JSONField(
        default=list,
        help_text="Ranked predictions with confidence, reasoning and advice.",
    )
    model_version: str = models.CharField(
        max_length=100,
        blank=True,
        default="",
        help_text="Strategy / stage label that produced the predictions.",
    )
    final_diagnosis_notes: str = models.TextField(
        blank=True,
        default="",
        help_text="Optional clinician notes after reviewing the predictions.",
    )

    # ------------------------------------------------------------------
    # Meta
    # ------------------------------------------------------------------
    class Meta:
        ordering: list[str] = ["-session_date"]
        verbose_name: str = "Patient Case"
        verbose_name_plural: str = "Patient Cases"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def top_prediction(self) -> dict | None:
        """Highest-confidence stored prediction, or ``None``."""
        return self.predictions[0] if self.predictions else None

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        formatted_date: str = (
            self.session_date.strftime("%Y-%m-%d %H:%M") if self.session_date else "N/A"
        )
        return f"Case {self.patient_identifier} - {formatted_date}"
