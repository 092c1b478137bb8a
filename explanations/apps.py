"""
explanations/apps.py
====================
Django app configuration for the inference trace module.
"""

from django.apps import AppConfig


class ExplanationsConfig(AppConfig):
    """Configuration for the ``explanations`` application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "explanations"
    verbose_name = "Inference Traces"
