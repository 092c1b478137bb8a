"""
inference_engine/services/rule_based.py
=======================================
Deterministic-table **rule-based** prediction strategy.

Algorithm:
    1. Look every reported symptom up (lower-cased, exact key) in the
       static symptom-to-disease table and collect the candidate
       diseases, deduplicated in first-seen order.
    2. With no match at all, fall back to Common Cold and Influenza.
    3. Rank candidates by their tabulated prevalence (default 0.1).
    4. Keep the top ``3 + randint(0, 2)`` candidates.
    5. Score each: random base in ``[0.3, 0.7)`` plus symptom-count,
       severity and age adjustments, clamped to ``[0.1, 0.95]``.
    6. Attach reasoning, risk factors and recommendations, then sort by
       confidence descending.

Candidates that are missing from the live catalog are skipped.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Optional

from .base_strategy import PredictionStrategy
from .catalog_repository import DiseaseCatalogRepository
from .schemas import (
    Disease,
    PredictionInput,
    PredictionResult,
    Severity,
    Stage,
    clamp,
    sort_by_confidence,
)

logger: logging.Logger = logging.getLogger(__name__)

COMMON_COLD: str = "Common Cold"
INFLUENZA: str = "Influenza (Flu)"
PNEUMONIA: str = "Pneumonia"
HYPERTENSION: str = "Hypertension"
DIABETES_TYPE_2: str = "Diabetes Type 2"
ANXIETY_DISORDER: str = "Anxiety Disorder"

SYMPTOM_DISEASE_MAP: dict[str, tuple[str, ...]] = {
    # respiratory
    "fever": (COMMON_COLD, INFLUENZA, PNEUMONIA),
    "cough": (COMMON_COLD, INFLUENZA, PNEUMONIA, "Bronchitis"),
    "shortness of breath": (PNEUMONIA, "Asthma", ANXIETY_DISORDER),
    "chest pain": (PNEUMONIA, HYPERTENSION, ANXIETY_DISORDER, "Coronary Artery Disease"),
    "sore throat": (COMMON_COLD, INFLUENZA),
    "runny nose": (COMMON_COLD, INFLUENZA),
    "wheezing": ("Asthma", "Bronchitis"),
    "chills": (INFLUENZA, PNEUMONIA),
    # gastrointestinal
    "nausea": ("Gastroenteritis", "Migraine", INFLUENZA),
    "vomiting": ("Gastroenteritis", "Migraine"),
    "diarrhea": ("Gastroenteritis", "Irritable Bowel Syndrome (IBS)"),
    "abdominal pain": ("Gastroenteritis", "Irritable Bowel Syndrome (IBS)", "Peptic Ulcer Disease"),
    "heartburn": ("Gastroesophageal Reflux Disease (GERD)", "Peptic Ulcer Disease"),
    # neurological
    "headache": ("Migraine", INFLUENZA, COMMON_COLD),
    "dizziness": (HYPERTENSION, ANXIETY_DISORDER, "Migraine"),
    "blurred vision": (DIABETES_TYPE_2, HYPERTENSION, "Migraine"),
    # musculoskeletal
    "muscle aches": (INFLUENZA, COMMON_COLD, "Fibromyalgia"),
    "joint pain": ("Osteoarthritis", "Rheumatoid Arthritis", "Gout"),
    # dermatological
    "rash": ("Eczema (Atopic Dermatitis)", "Urticaria (Hives)"),
    # endocrine / genitourinary
    "frequent urination": (DIABETES_TYPE_2, "Urinary Tract Infection (UTI)"),
    "excessive thirst": (DIABETES_TYPE_2,),
    "fatigue": (INFLUENZA, DIABETES_TYPE_2, "Anemia", "Depression"),
    # psychiatric / cardiovascular
    "anxiety": (ANXIETY_DISORDER, "Depression"),
    "insomnia": (ANXIETY_DISORDER, "Depression", "Insomnia"),
    "rapid heartbeat": (ANXIETY_DISORDER, HYPERTENSION, "Atrial Fibrillation"),
}

DISEASE_PREVALENCE: dict[str, float] = {
    COMMON_COLD: 0.15,
    INFLUENZA: 0.08,
    PNEUMONIA: 0.03,
    "Bronchitis": 0.05,
    "Asthma": 0.08,
    HYPERTENSION: 0.25,
    "Coronary Artery Disease": 0.07,
    "Atrial Fibrillation": 0.03,
    DIABETES_TYPE_2: 0.09,
    "Gastroenteritis": 0.06,
    "Irritable Bowel Syndrome (IBS)": 0.1,
    "Gastroesophageal Reflux Disease (GERD)": 0.2,
    "Peptic Ulcer Disease": 0.01,
    "Migraine": 0.12,
    "Osteoarthritis": 0.15,
    "Rheumatoid Arthritis": 0.01,
    "Fibromyalgia": 0.02,
    "Gout": 0.02,
    "Eczema (Atopic Dermatitis)": 0.1,
    "Urticaria (Hives)": 0.15,
    "Urinary Tract Infection (UTI)": 0.12,
    ANXIETY_DISORDER: 0.18,
    "Depression": 0.15,
    "Insomnia": 0.2,
    "Anemia": 0.15,
}

DEFAULT_CANDIDATES: tuple[str, ...] = (COMMON_COLD, INFLUENZA)
DEFAULT_PREVALENCE: float = 0.1

MIN_PREDICTIONS: int = 3
MAX_EXTRA_PREDICTIONS: int = 2

BASE_CONFIDENCE_LOW: float = 0.3
BASE_CONFIDENCE_SPAN: float = 0.4
SYMPTOM_BONUS_PER_SYMPTOM: float = 0.05
SYMPTOM_BONUS_CAP: float = 0.2
SEVERITY_ADJUSTMENT: float = 0.1
HYPERTENSION_AGE_BONUS: float = 0.15
DIABETES_AGE_BONUS: float = 0.10
MIN_CONFIDENCE: float = 0.1
MAX_CONFIDENCE: float = 0.95

DISEASE_RECOMMENDATIONS: dict[str, tuple[str, ...]] = {
    PNEUMONIA: (
        "Seek immediate medical attention if breathing difficulties worsen",
        "Rest and stay hydrated",
    ),
    COMMON_COLD: (
        "Get plenty of rest and stay hydrated",
        "Use over-the-counter medications for symptom relief",
        "Consider flu vaccination for future prevention",
    ),
    INFLUENZA: (
        "Get plenty of rest and stay hydrated",
        "Use over-the-counter medications for symptom relief",
        "Consider flu vaccination for future prevention",
    ),
    "Migraine": (
        "Rest in a dark, quiet room",
        "Consider keeping a headache diary to identify triggers",
    ),
    "Gastroenteritis": (
        "Stay hydrated with clear fluids",
        "Avoid solid foods until symptoms improve",
        "Practice good hand hygiene to prevent spread",
    ),
    HYPERTENSION: (
        "Schedule regular health checkups",
        "Maintain a healthy lifestyle with diet and exercise",
    ),
    DIABETES_TYPE_2: (
        "Schedule regular health checkups",
        "Maintain a healthy lifestyle with diet and exercise",
    ),
    ANXIETY_DISORDER: (
        "Consider speaking with a mental health professional",
        "Practice stress management techniques",
    ),
}

DISCLAIMERS: tuple[str, ...] = (
    "This analysis is for informational purposes only",
    "Always consult with a healthcare provider for proper diagnosis and treatment",
)


class RuleBasedStrategy(PredictionStrategy):
    """Keyword-table scorer with heuristic confidence adjustment.

    The random source is injected so tests can pin the selection size
    and the base confidence.
    """

    strategy_label: str = "RULE_BASED"

    def __init__(
        self,
        repository: Optional[DiseaseCatalogRepository] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.repository: DiseaseCatalogRepository = repository or DiseaseCatalogRepository()
        self.rng: random.Random = rng or random.Random()

    def model_version(self, stage: Stage) -> str:
        return "ml-mock-v1.0"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def predict(self, prediction_input: PredictionInput) -> list[PredictionResult]:
        """Score the input against the keyword table.

        Never raises for catalog problems: the repository falls back to
        the static catalog.
        """
        start: float = time.perf_counter()

        catalog: dict[str, Disease] = self.repository.name_index(
            self.repository.get_catalog()
        )
        candidates: list[str] = self.collect_candidates(prediction_input)
        ranked: list[str] = self.rank_candidates(candidates)

        count: int = min(
            MIN_PREDICTIONS + self.rng.randint(0, MAX_EXTRA_PREDICTIONS),
            len(ranked),
        )

        predictions: list[PredictionResult] = []
        for disease_name in ranked[:count]:
            disease: Optional[Disease] = catalog.get(disease_name)
            if disease is None:
                logger.warning("candidate %r missing from catalog, skipped", disease_name)
                continue

            confidence: float = self.score(prediction_input, disease)
            predictions.append(
                PredictionResult.build(
                    disease=disease,
                    confidence=confidence,
                    reasoning=self.generate_reasoning(prediction_input, disease),
                    risk_factors=self.generate_risk_factors(prediction_input, disease),
                    recommendations=self.generate_recommendations(disease, confidence),
                )
            )

        elapsed_ms: int = int((time.perf_counter() - start) * 1000)
        logger.info(
            "rule-based scoring complete: %d candidates, %d predictions in %dms",
            len(candidates),
            len(predictions),
            elapsed_ms,
        )
        return sort_by_confidence(predictions)

    # ------------------------------------------------------------------
    # Candidate selection
    # ------------------------------------------------------------------
    @staticmethod
    def collect_candidates(prediction_input: PredictionInput) -> list[str]:
        """Deduplicated candidate names in first-seen order."""
        candidates: dict[str, None] = {}
        for symptom in prediction_input.normalized_symptoms:
            for disease_name in SYMPTOM_DISEASE_MAP.get(symptom, ()):
                candidates.setdefault(disease_name, None)

        if not candidates:
            logger.info("no keyword matched, using default candidates")
            return list(DEFAULT_CANDIDATES)
        return list(candidates)

    @staticmethod
    def rank_candidates(candidates: list[str]) -> list[str]:
        """Order candidates by tabulated prevalence, highest first (stable)."""
        return sorted(
            candidates,
            key=lambda name: DISEASE_PREVALENCE.get(name, DEFAULT_PREVALENCE),
            reverse=True,
        )

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------
    def score(self, prediction_input: PredictionInput, disease: Disease) -> float:
        confidence: float = BASE_CONFIDENCE_LOW + self.rng.random() * BASE_CONFIDENCE_SPAN
        confidence += min(
            len(prediction_input.symptoms) * SYMPTOM_BONUS_PER_SYMPTOM,
            SYMPTOM_BONUS_CAP,
        )

        if prediction_input.severity == Severity.SEVERE.value:
            confidence += SEVERITY_ADJUSTMENT
        elif prediction_input.severity == Severity.MILD.value:
            confidence -= SEVERITY_ADJUSTMENT

        if disease.name == HYPERTENSION and prediction_input.age > 40:
            confidence += HYPERTENSION_AGE_BONUS
        if disease.name == DIABETES_TYPE_2 and prediction_input.age > 35:
            confidence += DIABETES_AGE_BONUS

        return clamp(confidence, MIN_CONFIDENCE, MAX_CONFIDENCE)

    # ------------------------------------------------------------------
    # Text generation
    # ------------------------------------------------------------------
    @staticmethod
    def generate_reasoning(prediction_input: PredictionInput, disease: Disease) -> list[str]:
        reasoning: list[str] = []

        matching: list[str] = [
            symptom
            for symptom in prediction_input.symptoms
            if disease.name in SYMPTOM_DISEASE_MAP.get(symptom.strip().lower(), ())
        ]
        if matching:
            reasoning.append(
                f"Symptoms like {', '.join(matching)} are commonly associated with {disease.name}"
            )

        if disease.name == HYPERTENSION and prediction_input.age > 40:
            reasoning.append(f"Age is a significant risk factor for {HYPERTENSION}")
        if disease.name == DIABETES_TYPE_2 and prediction_input.age > 35:
            reasoning.append(f"Age increases the likelihood of {DIABETES_TYPE_2}")

        if prediction_input.severity == disease.severity_level:
            reasoning.append(
                f"{prediction_input.severity.capitalize()} symptoms align with "
                f"the typical presentation of {disease.name}"
            )

        if disease.name == COMMON_COLD and "day" in prediction_input.duration.lower():
            reasoning.append("Short duration is typical for viral upper respiratory infections")

        if not reasoning:
            reasoning.append(
                "Based on the combination of symptoms and patient demographics, "
                f"{disease.name} is a possible diagnosis"
            )
        return reasoning

    @staticmethod
    def generate_risk_factors(prediction_input: PredictionInput, disease: Disease) -> list[str]:
        risk_factors: list[str] = []
        symptoms: list[str] = prediction_input.normalized_symptoms

        if prediction_input.age > 65:
            risk_factors.append("Advanced age")
        if prediction_input.age > 40 and disease.name in (HYPERTENSION, DIABETES_TYPE_2):
            risk_factors.append(f"Age-related risk for {disease.name}")

        if prediction_input.gender == "female" and disease.name == ANXIETY_DISORDER:
            risk_factors.append("Female gender (higher prevalence)")

        if disease.name == PNEUMONIA:
            if "chest pain" in symptoms:
                risk_factors.append("Respiratory symptoms (chest pain) consistent with Pneumonia")
            if "shortness of breath" in symptoms:
                risk_factors.append("Breathing difficulties")

        if prediction_input.severity == Severity.SEVERE.value:
            risk_factors.append("Severe symptom presentation")

        if not risk_factors:
            risk_factors.extend(["Symptom presentation", "Patient demographics"])
        return risk_factors

    @staticmethod
    def generate_recommendations(disease: Disease, confidence: float) -> list[str]:
        recommendations: list[str] = []

        if confidence > 0.7:
            recommendations.append("Consider immediate consultation with a healthcare provider")
        elif confidence > 0.5:
            recommendations.append("Consult with your doctor for evaluation")
        else:
            recommendations.append(
                "Monitor symptoms and consult a healthcare provider if they worsen"
            )

        recommendations.extend(DISEASE_RECOMMENDATIONS.get(disease.name, ()))
        recommendations.extend(DISCLAIMERS)
        return recommendations
