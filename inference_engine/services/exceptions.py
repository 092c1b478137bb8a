"""
inference_engine/services/exceptions.py
=======================================
Custom exception hierarchy for the prediction engine.

Exception Tree::

    InferenceEngineError (base)
    ├── InvalidPredictionInputError
    ├── CatalogUnavailableError
    ├── ModelResponseError
    └── PredictionUnavailableError
"""

from __future__ import annotations


class InferenceEngineError(Exception):
    """Base exception for all prediction engine errors.

    All domain-specific exceptions raised within the service layer
    inherit from this class so callers can catch them uniformly.

    Attributes:
        message: Human-readable error description.
        details: Optional dict with structured error context.
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message: str = message
        self.details: dict = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


class InvalidPredictionInputError(InferenceEngineError):
    """Raised when a prediction input fails validation.

    Attributes:
        field: Name of the offending field.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field: str = field
        super().__init__(
            message=f"Invalid prediction input for {field!r}: {reason}",
            details={"field": field, "reason": reason},
        )


class CatalogUnavailableError(InferenceEngineError):
    """Raised when the disease catalog cannot be read from the store."""

    def __init__(self, original_error: Exception | str) -> None:
        super().__init__(
            message="The disease catalog could not be loaded.",
            details={"original_error": str(original_error)},
        )


class ModelResponseError(InferenceEngineError):
    """Raised for every failure of the hosted language model call.

    Network failures, non-success statuses, empty replies and replies
    that do not hold a usable ``predictions`` array are all reported
    through this one class.
    """


class PredictionUnavailableError(InferenceEngineError):
    """Raised when neither the primary nor the fallback path produced predictions."""
