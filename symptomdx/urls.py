"""
URL configuration for the symptomdx project.

Routes:
    /api/v1/    → REST API (api app)
    /admin/     → Django Admin
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    # Django Admin (disease catalog administration)
    path("admin/", admin.site.urls),
    # REST API (DRF)
    path("api/v1/", include("api.urls", namespace="api")),
]
