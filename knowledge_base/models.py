"""
knowledge_base/models.py
========================
Core domain model for the disease catalog.

Contains:
    - DiseaseModel: A catalog entry the prediction strategies may name,
      with classification code, severity tier, prevalence estimate and
      treatment / prevention text.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class DiseaseModel(models.Model):
    """A disease / condition that the system can predict.

    Rows are maintained through the admin or the ``seed_data`` command;
    the prediction strategies only ever read them.

    Attributes:
        name: Unique human-readable disease name (e.g. "Influenza (Flu)").
        description: Optional clinical description.
        icd_code: Optional ICD-10 classification code.
        severity_level: Severity tier drawn from ``SeverityLevel``.
        is_common: Whether the condition is common in the population.
        prevalence: Prevalence estimate in ``[0.0, 1.0]``.
        treatment_info: Optional treatment guidance.
        prevention_info: Optional prevention guidance.
    """

    class SeverityLevel(models.TextChoices):
        """Allowed severity tiers."""

        MILD = "mild", "Mild"
        MODERATE = "moderate", "Moderate"
        SEVERE = "severe", "Severe"
        CRITICAL = "critical", "Critical"

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------
    name: str = models.CharField(
        max_length=256,
        unique=True,
        help_text="Unique disease name.",
    )
    description: str = models.TextField(
        blank=True,
        default="",
        help_text="Clinical description of the disease.",
    )
    icd_code: str = models.CharField(
        max_length=20,
        blank=True,
        default="",
        help_text="ICD-10 classification code.",
    )
    severity_level: str = models.CharField(
        max_length=10,
        choices=SeverityLevel.choices,
        default=SeverityLevel.MODERATE,
        help_text="Severity tier of the condition.",
    )
    is_common: bool = models.BooleanField(
        default=False,
        help_text="Whether the condition is common.",
    )
    prevalence = models.DecimalField(
        max_digits=5,
        decimal_places=4,
        default=Decimal("0.1000"),
        validators=[
            MinValueValidator(0),
            MaxValueValidator(1),
        ],
        help_text="Prevalence estimate between 0.0 and 1.0.",
    )
    treatment_info: str = models.TextField(
        blank=True,
        default="",
        help_text="Recommended treatments and interventions.",
    )
    prevention_info: str = models.TextField(
        blank=True,
        default="",
        help_text="Prevention guidance.",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    # ------------------------------------------------------------------
    # Meta
    # ------------------------------------------------------------------
    class Meta:
        ordering: list[str] = ["name"]
        verbose_name: str = "Disease"
        verbose_name_plural: str = "Diseases"

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"{self.name} ({self.icd_code or 'N/A'}, {self.get_severity_level_display()})"
