"""
tests/test_catalog_repository.py
================================
Database-backed catalog access and its static fallback.
"""

from __future__ import annotations

import io
from unittest import mock

import pytest
from django.core.management import call_command
from django.db import DatabaseError

from inference_engine.services.catalog_repository import DiseaseCatalogRepository
from inference_engine.services.exceptions import CatalogUnavailableError
from inference_engine.services.static_catalog import STATIC_CATALOG
from knowledge_base.models import DiseaseModel

pytestmark = pytest.mark.django_db


def test_get_all_diseases_returns_snapshots_ordered_by_name(seeded_catalog):
    diseases = DiseaseCatalogRepository().get_all_diseases()

    assert len(diseases) == 50
    assert [d.name for d in diseases] == sorted(d.name for d in diseases)
    cold = next(d for d in diseases if d.name == "Common Cold")
    assert cold.icd_code == "J00"
    assert cold.prevalence == pytest.approx(0.15)
    assert cold.severity_level == "mild"


def test_get_all_diseases_reports_database_errors():
    with mock.patch.object(DiseaseModel.objects, "all", side_effect=DatabaseError("no such table")):
        with pytest.raises(CatalogUnavailableError) as excinfo:
            DiseaseCatalogRepository().get_all_diseases()

    assert excinfo.value.details["original_error"] == "no such table"


def test_get_catalog_serves_static_catalog_on_database_error():
    with mock.patch.object(DiseaseModel.objects, "all", side_effect=DatabaseError("locked")):
        diseases = DiseaseCatalogRepository().get_catalog()

    assert diseases == list(STATIC_CATALOG)


def test_get_catalog_serves_static_catalog_when_table_is_empty():
    assert DiseaseCatalogRepository().get_catalog() == list(STATIC_CATALOG)


def test_get_catalog_prefers_database_rows(seeded_catalog):
    diseases = DiseaseCatalogRepository().get_catalog()

    assert len(diseases) == 50
    assert all(isinstance(d.id, int) for d in diseases)


def test_get_by_name(seeded_catalog):
    repository = DiseaseCatalogRepository()

    assert repository.get_by_name("Pneumonia").icd_code == "J18"
    assert repository.get_by_name("Dragon Pox") is None


def test_get_by_name_reports_database_errors():
    with mock.patch.object(DiseaseModel.objects, "get", side_effect=DatabaseError("locked")):
        with pytest.raises(CatalogUnavailableError):
            DiseaseCatalogRepository().get_by_name("Pneumonia")


def test_static_catalog_shape():
    assert len(STATIC_CATALOG) == 8
    assert len({d.id for d in STATIC_CATALOG}) == 8
    assert DiseaseCatalogRepository.name_index(list(STATIC_CATALOG))["Gastroenteritis"].icd_code == "K59.1"


def test_seed_data_command_is_idempotent():
    call_command("seed_data", stdout=io.StringIO())
    call_command("seed_data", "--only-missing", stdout=io.StringIO())

    assert DiseaseModel.objects.count() == 50
    assert DiseaseModel.objects.get(name="Hypertension").severity_level == "moderate"
