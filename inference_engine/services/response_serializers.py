"""
inference_engine/services/response_serializers.py
=================================================
DRF serializers validating the JSON document returned by the language
model.

Contains:
    - StringListField: Accepts a list of strings or a bare string.
    - ModelPredictionSerializer: One entry of the ``predictions`` array.
    - ModelResponseSerializer: The whole reply.
"""

from __future__ import annotations

from rest_framework import serializers


class StringListField(serializers.Field):
    """List-of-strings field that wraps a bare string into a one-element list.

    A blank string becomes an empty list.  With ``allow_null`` an explicit
    ``null`` is passed through as ``None``, which the caller treats like
    an absent key.
    """

    default_error_messages = {
        "invalid": "Expected a string or a list of strings.",
    }

    def to_internal_value(self, data) -> list[str]:
        if data is None:
            return []
        if isinstance(data, str):
            return [data] if data.strip() else []
        if isinstance(data, list):
            return [str(item) for item in data if item is not None and str(item).strip()]
        self.fail("invalid")

    def to_representation(self, value) -> list[str]:
        return list(value)


class ModelPredictionSerializer(serializers.Serializer):
    """One predicted disease as emitted by the model (camelCase keys)."""

    diseaseName = serializers.CharField()
    confidence = serializers.FloatField(required=False, allow_null=True)
    reasoning = StringListField(required=False, allow_null=True)
    riskFactors = StringListField(required=False, allow_null=True)
    recommendations = StringListField(required=False, allow_null=True)


class ModelResponseSerializer(serializers.Serializer):
    """Top-level reply: a ``predictions`` array plus an overall explanation."""

    predictions = ModelPredictionSerializer(many=True, allow_empty=True)
    aiExplanation = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
    )
