"""
inference_engine/services/catalog_repository.py
===============================================
Repository layer providing read access to the disease catalog.

All database interaction for diseases is centralised here so strategy
classes never build querysets themselves.  Nothing is cached: every
call re-reads the table, so catalog edits are visible to the next
prediction.
"""

from __future__ import annotations

import logging
from typing import Optional

from django.db import DatabaseError

from knowledge_base.models import DiseaseModel

from .exceptions import CatalogUnavailableError
from .schemas import Disease
from .static_catalog import STATIC_CATALOG

logger: logging.Logger = logging.getLogger(__name__)


class DiseaseCatalogRepository:
    """Read-only access to the disease catalog.

    :meth:`get_all_diseases` reports store failures to the caller;
    :meth:`get_catalog` absorbs them by serving the embedded static
    catalog instead.
    """

    def get_all_diseases(self) -> list[Disease]:
        """Fetch every catalog row.

        Returns:
            List of :class:`Disease` snapshots in the model's default
            ordering (by name).

        Raises:
            CatalogUnavailableError: If the database cannot be read.
        """
        try:
            rows: list[Disease] = [
                Disease.from_model(model) for model in DiseaseModel.objects.all()
            ]
        except DatabaseError as exc:
            logger.exception("failed to fetch diseases from database")
            raise CatalogUnavailableError(exc) from exc

        logger.debug("fetched %d diseases from database", len(rows))
        return rows

    def get_catalog(self) -> list[Disease]:
        """Fetch the catalog, serving the static catalog when the store fails.

        An empty table is treated like an unreachable one so that a
        fresh deployment still produces predictions.

        Returns:
            List of :class:`Disease` snapshots, never empty.
        """
        try:
            rows: list[Disease] = self.get_all_diseases()
        except CatalogUnavailableError:
            logger.warning(
                "serving %d diseases from the static catalog", len(STATIC_CATALOG)
            )
            return list(STATIC_CATALOG)

        if not rows:
            logger.warning("disease table is empty, serving the static catalog")
            return list(STATIC_CATALOG)
        return rows

    @staticmethod
    def name_index(diseases: list[Disease]) -> dict[str, Disease]:
        """Map exact disease names to their catalog entries."""
        return {disease.name: disease for disease in diseases}

    def get_by_name(self, name: str) -> Optional[Disease]:
        """Return a single disease by exact name, or ``None``.

        Args:
            name: Exact catalog name (e.g. ``"Common Cold"``).

        Returns:
            The :class:`Disease`, or ``None`` if not found.

        Raises:
            CatalogUnavailableError: If the database cannot be read.
        """
        try:
            model: DiseaseModel = DiseaseModel.objects.get(name=name)
        except DiseaseModel.DoesNotExist:
            logger.warning("disease %r not found in catalog", name)
            return None
        except DatabaseError as exc:
            logger.exception("failed to look up disease %r", name)
            raise CatalogUnavailableError(exc) from exc
        return Disease.from_model(model)
