"""
patient_cases/admin.py
======================
Django admin configuration for diagnosis session models.
"""

from django.contrib import admin

from .models import PatientCaseModel


@admin.register(PatientCaseModel)
class PatientCaseModelAdmin(admin.ModelAdmin):
    """Admin view for :class:`PatientCaseModel`."""

    list_display: list[str] = [
        "patient_identifier",
        "session_date",
        "severity",
        "urgency_level",
        "requires_doctor_review",
        "model_version",
    ]
    list_filter: list[str] = [
        "session_date",
        "severity",
        "urgency_level",
        "is_emergency",
        "requires_doctor_review",
    ]
    search_fields: list[str] = ["patient_identifier", "final_diagnosis_notes"]
    readonly_fields: list[str] = ["session_date", "predictions", "model_version"]
    list_per_page: int = 25
