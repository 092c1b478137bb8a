"""
patient_cases/apps.py
=====================
Django app configuration for the diagnosis session module.
"""

from django.apps import AppConfig


class PatientCasesConfig(AppConfig):
    """Configuration for the ``patient_cases`` application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "patient_cases"
    verbose_name = "Patient Cases"
