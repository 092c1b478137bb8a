"""
api/serializers.py
==================
DRF serializers for the SymptomDx REST API.

Contains:
    - DiseaseSerializer: Read-only representation of catalog diseases.
    - PredictionRequestSerializer: Input validation for the /diagnose endpoint.
    - CompareRequestSerializer: Input validation for the /compare endpoint.
"""

from __future__ import annotations

from rest_framework import serializers

from inference_engine.services.schemas import Gender, PredictionInput, Severity
from knowledge_base.models import DiseaseModel

PREDICTION_METHOD_ML: str = "ml"
PREDICTION_METHOD_AI: str = "ai"


# ─────────────────────────────────────────────────────────────────────
# Read-only serializers
# ─────────────────────────────────────────────────────────────────────


class DiseaseSerializer(serializers.ModelSerializer):
    """Serializer for :class:`DiseaseModel`.

    Includes the human-readable severity tier display value.
    """

    severity_display = serializers.CharField(
        source="get_severity_level_display",
        read_only=True,
    )

    class Meta:
        model = DiseaseModel
        fields = [
            "id",
            "name",
            "description",
            "icd_code",
            "severity_level",
            "severity_display",
            "is_common",
            "prevalence",
            "treatment_info",
            "prevention_info",
        ]
        read_only_fields = fields


# ─────────────────────────────────────────────────────────────────────
# Input serializers
# ─────────────────────────────────────────────────────────────────────


class CompareRequestSerializer(serializers.Serializer):
    """Input validation for a prediction request.

    Validates the patient information the scorers consume and converts
    it into a :class:`PredictionInput` via :meth:`to_prediction_input`.
    """

    symptoms = serializers.ListField(
        child=serializers.CharField(max_length=200, trim_whitespace=True),
        min_length=1,
        help_text="Free-text symptom labels, e.g. ['fever', 'cough'].",
    )
    age = serializers.IntegerField(min_value=0, max_value=120)
    gender = serializers.ChoiceField(choices=[g.value for g in Gender])
    duration = serializers.CharField(
        max_length=100,
        help_text="Free-text duration, e.g. '3 days'.",
    )
    severity = serializers.ChoiceField(choices=[s.value for s in Severity])
    additional_notes = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
    )

    def to_prediction_input(self) -> PredictionInput:
        data: dict = self.validated_data
        return PredictionInput(
            symptoms=tuple(data["symptoms"]),
            age=data["age"],
            gender=data["gender"],
            duration=data["duration"],
            severity=data["severity"],
            additional_notes=data.get("additional_notes") or None,
        )


class PredictionRequestSerializer(CompareRequestSerializer):
    """Input validation for the diagnosis endpoint.

    Adds the patient identifier and the scorer selection to the shared
    patient fields.
    """

    patient_id = serializers.CharField(
        max_length=100,
        help_text="Opaque patient or session identifier.",
    )
    prediction_method = serializers.ChoiceField(
        choices=[PREDICTION_METHOD_ML, PREDICTION_METHOD_AI],
        default=PREDICTION_METHOD_ML,
        help_text="'ml' for the rule-based scorer, 'ai' for the language model.",
    )
