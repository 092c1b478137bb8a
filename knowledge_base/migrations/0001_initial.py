from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="DiseaseModel",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(help_text="Unique disease name.", max_length=256, unique=True)),
                ("description", models.TextField(blank=True, default="", help_text="Clinical description of the disease.")),
                ("icd_code", models.CharField(blank=True, default="", help_text="ICD-10 classification code.", max_length=20)),
                (
                    "severity_level",
                    models.CharField(
                        choices=[("mild", "Mild"), ("moderate", "Moderate"), ("severe", "Severe"), ("critical", "Critical")],
                        default="moderate",
                        help_text="Severity tier of the condition.",
                        max_length=10,
                    ),
                ),
                ("is_common", models.BooleanField(default=False, help_text="Whether the condition is common.")),
                (
                    "prevalence",
                    models.DecimalField(
                        decimal_places=4,
                        default=Decimal("0.1000"),
                        help_text="Prevalence estimate between 0.0 and 1.0.",
                        max_digits=5,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(1),
                        ],
                    ),
                ),
                ("treatment_info", models.TextField(blank=True, default="", help_text="Recommended treatments and interventions.")),
                ("prevention_info", models.TextField(blank=True, default="", help_text="Prevention guidance.")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Disease",
                "verbose_name_plural": "Diseases",
                "ordering": ["name"],
            },
        ),
    ]
