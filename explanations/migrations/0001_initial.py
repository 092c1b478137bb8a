import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("patient_cases", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="InferenceTraceModel",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("execution_timestamp", models.DateTimeField(auto_now_add=True, help_text="Timestamp when the prediction run was executed.")),
                (
                    "strategy_used",
                    models.CharField(
                        choices=[("RULE_BASED", "Rule-Based Scorer"), ("LLM_BACKED", "LLM-Backed Scorer")],
                        help_text="Prediction strategy that was applied.",
                        max_length=20,
                    ),
                ),
                (
                    "stage",
                    models.CharField(
                        choices=[("PRIMARY", "Primary"), ("FALLBACK", "Fallback"), ("FAILED", "Failed")],
                        default="PRIMARY",
                        max_length=10,
                    ),
                ),
                ("model_version", models.CharField(blank=True, default="", max_length=100)),
                (
                    "confidence_scores_calculated",
                    models.JSONField(
                        default=dict,
                        help_text='JSON dict mapping disease names to confidence scores, e.g. {"Migraine": 0.62, "Common Cold": 0.41}.',
                    ),
                ),
                ("error_message", models.TextField(blank=True, default="")),
                ("execution_time_ms", models.PositiveIntegerField(help_text="Prediction execution time in milliseconds.")),
                (
                    "patient_case",
                    models.ForeignKey(
                        help_text="The patient case this trace belongs to.",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="inference_logs",
                        to="patient_cases.patientcasemodel",
                    ),
                ),
            ],
            options={
                "verbose_name": "Inference Trace",
                "verbose_name_plural": "Inference Traces",
                "ordering": ["-execution_timestamp"],
            },
        ),
    ]
