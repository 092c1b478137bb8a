"""
inference_engine/services/schemas.py
====================================
Value objects exchanged between the prediction strategies and their
callers.

Contains:
    - Gender, Severity, SeverityLevel, Stage: Allowed enum values.
    - Disease: Read-only snapshot of a catalog row.
    - PredictionInput: One diagnosis request.
    - PredictionResult: One ranked prediction.
    - PredictionOutcome: Result of the LLM pathway's stage machine.
"""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from .exceptions import InvalidPredictionInputError

# half-width of the symmetric confidence band
CONFIDENCE_INTERVAL_WIDTH: float = 0.1


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Severity(str, enum.Enum):
    """Severity reported by the patient."""

    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class SeverityLevel(str, enum.Enum):
    """Severity tier of a catalog disease."""

    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    CRITICAL = "critical"


class Stage(str, enum.Enum):
    """Stages of the LLM pathway."""

    PRIMARY = "PRIMARY"
    FALLBACK = "FALLBACK"
    FAILED = "FAILED"


@dataclass(frozen=True)
class Disease:
    """Read-only snapshot of a :class:`~knowledge_base.models.DiseaseModel` row."""

    id: Any
    name: str
    description: Optional[str] = None
    icd_code: Optional[str] = None
    severity_level: str = SeverityLevel.MODERATE.value
    is_common: bool = False
    prevalence: float = 0.1
    treatment_info: Optional[str] = None
    prevention_info: Optional[str] = None

    @classmethod
    def from_model(cls, model: Any) -> "Disease":
        return cls(
            id=model.pk,
            name=model.name,
            description=model.description or None,
            icd_code=model.icd_code or None,
            severity_level=model.severity_level,
            is_common=model.is_common,
            prevalence=float(model.prevalence) if model.prevalence is not None else 0.1,
            treatment_info=model.treatment_info or None,
            prevention_info=model.prevention_info or None,
        )


@dataclass(frozen=True)
class PredictionInput:
    """A single diagnosis request.

    Attributes:
        symptoms: Free-text symptom labels in the order reported.
        age: Patient age in years (non-negative).
        gender: One of :class:`Gender`.
        duration: Free-text duration, loosely interpreted.
        severity: One of :class:`Severity`.
        additional_notes: Optional free-text notes.
    """

    symptoms: tuple[str, ...]
    age: int
    gender: str
    duration: str
    severity: str
    additional_notes: Optional[str] = None

    def __post_init__(self) -> None:
        # freeze list input so the value stays immutable while scoring
        object.__setattr__(self, "symptoms", tuple(self.symptoms))
        object.__setattr__(self, "gender", _enum_value(Gender, self.gender, "gender"))
        object.__setattr__(self, "severity", _enum_value(Severity, self.severity, "severity"))

        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise InvalidPredictionInputError("age", "must be an integer")
        if self.age < 0:
            raise InvalidPredictionInputError("age", "must not be negative")
        if any(not isinstance(s, str) for s in self.symptoms):
            raise InvalidPredictionInputError("symptoms", "every symptom must be a string")

    @property
    def normalized_symptoms(self) -> list[str]:
        """Symptoms lower-cased and stripped, in input order."""
        return [s.strip().lower() for s in self.symptoms]

    def to_dict(self) -> dict:
        return {
            "symptoms": list(self.symptoms),
            "age": self.age,
            "gender": self.gender,
            "duration": self.duration,
            "severity": self.severity,
            "additional_notes": self.additional_notes,
        }


@dataclass(frozen=True)
class PredictionResult:
    """One ranked prediction.

    ``ai_explanation`` is only set by the LLM pathway.
    """

    disease_id: Any
    disease_name: str
    confidence: float
    confidence_interval_low: float
    confidence_interval_high: float
    reasoning: list[str] = field(default_factory=list)
    risk_factors: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    ai_explanation: Optional[str] = None

    @classmethod
    def build(
        cls,
        disease: Disease,
        confidence: float,
        reasoning: list[str],
        risk_factors: list[str],
        recommendations: list[str],
        ai_explanation: Optional[str] = None,
    ) -> "PredictionResult":
        """Create a result with the symmetric interval derived from ``confidence``."""
        low, high = confidence_interval(confidence)
        return cls(
            disease_id=disease.id,
            disease_name=disease.name,
            confidence=confidence,
            confidence_interval_low=low,
            confidence_interval_high=high,
            reasoning=list(reasoning),
            risk_factors=list(risk_factors),
            recommendations=list(recommendations),
            ai_explanation=ai_explanation,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PredictionOutcome:
    """What the LLM pathway produced and in which stage it finished."""

    stage: Stage
    predictions: list[PredictionResult] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.stage is not Stage.FAILED


# ─────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def confidence_interval(confidence: float) -> tuple[float, float]:
    """Return the ``±0.1`` band around ``confidence`` clamped to ``[0, 1]``."""
    return (
        clamp(confidence - CONFIDENCE_INTERVAL_WIDTH, 0.0, 1.0),
        clamp(confidence + CONFIDENCE_INTERVAL_WIDTH, 0.0, 1.0),
    )


def sort_by_confidence(predictions: list[PredictionResult]) -> list[PredictionResult]:
    return sorted(predictions, key=lambda p: p.confidence, reverse=True)


def _enum_value(enum_cls: type[enum.Enum], value: Any, field_name: str) -> str:
    try:
        return enum_cls(value).value
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidPredictionInputError(
            field_name, f"{value!r} is not one of: {allowed}"
        ) from exc
