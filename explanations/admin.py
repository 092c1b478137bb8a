"""
explanations/admin.py
=====================
Django admin configuration for prediction trace models.
"""

from django.contrib import admin

from .models import InferenceTraceModel


@admin.register(InferenceTraceModel)
class InferenceTraceModelAdmin(admin.ModelAdmin):
    """Admin view for :class:`InferenceTraceModel`."""

    list_display: list[str] = [
        "patient_case",
        "strategy_used",
        "stage",
        "model_version",
        "execution_timestamp",
        "execution_time_ms",
    ]
    list_filter: list[str] = ["strategy_used", "stage", "execution_timestamp"]
    search_fields: list[str] = [
        "patient_case__patient_identifier",
        "model_version",
    ]
    readonly_fields: list[str] = ["execution_timestamp", "error_message"]
    list_per_page: int = 25
