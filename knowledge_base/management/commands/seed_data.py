"""
knowledge_base/management/commands/seed_data.py
================================================
Management command to seed the disease catalog.

Usage:
    python manage.py seed_data
    python manage.py seed_data --only-missing
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from knowledge_base.catalog_data import DISEASE_CATALOG
from knowledge_base.models import DiseaseModel


class Command(BaseCommand):
    help = "Seed the disease catalog with the reference diseases and ICD-10 codes."

    def add_arguments(self, parser):
        parser.add_argument(
            "--only-missing",
            action="store_true",
            help="Insert diseases that do not exist yet and leave existing rows untouched.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.MIGRATE_HEADING("\n=== Seeding Disease Catalog ===\n"))

        only_missing: bool = options["only_missing"]
        existing: set[str] = set(DiseaseModel.objects.values_list("name", flat=True))
        created_count = 0
        updated_count = 0

        for data in DISEASE_CATALOG:
            if only_missing and data["name"] in existing:
                continue

            defaults = {key: value for key, value in data.items() if key != "name"}
            defaults["prevalence"] = Decimal(defaults["prevalence"])

            disease, created = DiseaseModel.objects.update_or_create(
                name=data["name"],
                defaults=defaults,
            )
            if created:
                created_count += 1
            else:
                updated_count += 1
            status = "CREATED" if created else "UPDATED"
            self.stdout.write(f"  [{status}] Disease: {disease}")

        # ------------------------------------------------------------------
        # Summary
        # ------------------------------------------------------------------
        self.stdout.write(
            self.style.SUCCESS(
                f"\nSeeding complete: {created_count} created, "
                f"{updated_count} updated, "
                f"{DiseaseModel.objects.count()} diseases in catalog.\n"
            )
        )
