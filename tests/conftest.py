"""
tests/conftest.py
=================
Shared fixtures: in-memory catalog repositories, a controllable random
source, a scripted chat client and a seeded database catalog.
"""

from __future__ import annotations

import json
import random
from decimal import Decimal
from typing import Optional

import pytest
from django.core.cache import cache

from inference_engine.services.catalog_repository import DiseaseCatalogRepository
from inference_engine.services.exceptions import CatalogUnavailableError, ModelResponseError
from inference_engine.services.schemas import Disease, PredictionInput
from inference_engine.services.static_catalog import STATIC_CATALOG
from knowledge_base.catalog_data import DISEASE_CATALOG
from knowledge_base.models import DiseaseModel


class StubRandom(random.Random):
    """Random source pinned to a fixed base draw and selection bonus."""

    def __init__(self, base: float = 0.5, extra: int = 0) -> None:
        super().__init__(0)
        self.base = base
        self.extra = extra

    def random(self) -> float:
        return self.base

    def randint(self, a: int, b: int) -> int:
        return self.extra


class InMemoryRepository(DiseaseCatalogRepository):
    """Catalog repository backed by a list; ``failures`` read errors come first."""

    def __init__(self, diseases: list[Disease], failures: int = 0) -> None:
        self.diseases = list(diseases)
        self.failures = failures
        self.reads = 0

    def get_all_diseases(self) -> list[Disease]:
        self.reads += 1
        if self.failures:
            self.failures -= 1
            raise CatalogUnavailableError("database is locked")
        return list(self.diseases)

    def get_by_name(self, name: str) -> Optional[Disease]:
        return self.name_index(self.get_all_diseases()).get(name)


class ScriptedChatClient:
    """Stand-in for :class:`ChatCompletionClient` returning a canned reply."""

    model = "gpt-3.5-turbo"

    def __init__(self, reply: str | dict | None = None, error: Exception | None = None) -> None:
        self.reply = json.dumps(reply) if isinstance(reply, dict) else reply
        self.error = error
        self.calls: list[list[dict]] = []

    def complete(self, messages, max_tokens=None) -> str:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        if not self.reply:
            raise ModelResponseError(message="The language model returned an empty reply.")
        return self.reply

    def test_connection(self) -> dict:
        if self.error is not None:
            return {"success": False, "message": f"connection failed: {self.error}"}
        return {"success": True, "message": "connection successful"}


def full_catalog() -> list[Disease]:
    return [
        Disease(
            id=index,
            name=entry["name"],
            description=entry["description"],
            icd_code=entry["icd_code"],
            severity_level=entry["severity_level"],
            is_common=entry["is_common"],
            prevalence=float(entry["prevalence"]),
        )
        for index, entry in enumerate(sorted(DISEASE_CATALOG, key=lambda e: e["name"]), start=1)
    ]


@pytest.fixture(autouse=True)
def clear_cache():
    """Throttle counters, token usage and cached predictions start empty."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def static_repository() -> InMemoryRepository:
    return InMemoryRepository(list(STATIC_CATALOG))


@pytest.fixture
def full_repository() -> InMemoryRepository:
    return InMemoryRepository(full_catalog())


@pytest.fixture
def stub_rng() -> StubRandom:
    return StubRandom()


@pytest.fixture
def headache_input() -> PredictionInput:
    return PredictionInput(
        symptoms=["Headache"],
        age=30,
        gender="female",
        duration="2 days",
        severity="mild",
    )


@pytest.fixture
def seeded_catalog(db) -> list[DiseaseModel]:
    """Persist the full disease catalog."""
    return [
        DiseaseModel.objects.create(
            name=entry["name"],
            description=entry["description"],
            icd_code=entry["icd_code"],
            severity_level=entry["severity_level"],
            is_common=entry["is_common"],
            prevalence=Decimal(entry["prevalence"]),
            treatment_info=entry["treatment_info"],
            prevention_info=entry["prevention_info"],
        )
        for entry in DISEASE_CATALOG
    ]
