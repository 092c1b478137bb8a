"""
inference_engine/services/__init__.py
=====================================
Service layer for the SymptomDx prediction engine.

Exports:
    - PredictionStrategy: Abstract base class for prediction strategies.
    - RuleBasedStrategy: Keyword-table scorer.
    - LLMBackedStrategy: Hosted language model scorer with fallback.
    - DiagnosisService: Orchestration service with strategy pattern.
    - DiseaseCatalogRepository: Read access to the disease catalog.
    - ChatCompletionClient: Chat-completion API wrapper.
    - PredictionCache, TokenBudget: Cache-backed guards for the LLM pathway.
    - PredictionInput, PredictionResult, PredictionOutcome, Disease, Stage:
      Value objects.
    - InferenceEngineError and subclasses: Custom exceptions.
"""

from .base_strategy import PredictionStrategy
from .catalog_repository import DiseaseCatalogRepository
from .diagnosis_service import DiagnosisService
from .exceptions import (
    CatalogUnavailableError,
    InferenceEngineError,
    InvalidPredictionInputError,
    ModelResponseError,
    PredictionUnavailableError,
)
from .llm_backed import LLMBackedStrategy
from .llm_client import ChatCompletionClient
from .rule_based import RuleBasedStrategy
from .schemas import (
    Disease,
    PredictionInput,
    PredictionOutcome,
    PredictionResult,
    Stage,
)
from .usage_guard import PredictionCache, TokenBudget

__all__: list[str] = [
    "PredictionStrategy",
    "RuleBasedStrategy",
    "LLMBackedStrategy",
    "DiagnosisService",
    "DiseaseCatalogRepository",
    "ChatCompletionClient",
    "PredictionCache",
    "TokenBudget",
    "Disease",
    "PredictionInput",
    "PredictionOutcome",
    "PredictionResult",
    "Stage",
    "InferenceEngineError",
    "InvalidPredictionInputError",
    "CatalogUnavailableError",
    "ModelResponseError",
    "PredictionUnavailableError",
]
