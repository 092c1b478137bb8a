"""
api/urls.py
===========
URL configuration for the SymptomDx REST API.

All endpoints are prefixed with ``/api/v1/`` by the project-level router.
"""

from django.urls import path

from . import views

app_name = "api"

urlpatterns = [
    path(
        "diseases/",
        views.DiseaseListAPIView.as_view(),
        name="disease-list",
    ),
    path(
        "diagnose/",
        views.DiagnosisAPIView.as_view(),
        name="diagnose",
    ),
    path(
        "compare/",
        views.CompareAPIView.as_view(),
        name="compare",
    ),
    path(
        "explanation/<int:case_id>/",
        views.ExplanationAPIView.as_view(),
        name="explanation",
    ),
    path(
        "ai/status/",
        views.AIStatusAPIView.as_view(),
        name="ai-status",
    ),
    path(
        "ai/test-connection/",
        views.AITestConnectionAPIView.as_view(),
        name="ai-test-connection",
    ),
]
