from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PatientCaseModel",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("patient_identifier", models.CharField(help_text="Opaque patient or session identifier.", max_length=100)),
                ("session_date", models.DateTimeField(auto_now_add=True, help_text="Timestamp when this diagnosis session was created.")),
                ("symptoms", models.JSONField(default=list, help_text='JSON list of reported symptom labels, e.g. ["headache"].')),
                ("age", models.PositiveSmallIntegerField(help_text="Patient age in years.")),
                ("gender", models.CharField(choices=[("male", "Male"), ("female", "Female"), ("other", "Other")], max_length=10)),
                ("duration", models.CharField(blank=True, default="", help_text='Free-text duration, e.g. "2 days" or "1 week".', max_length=100)),
                ("severity", models.CharField(choices=[("mild", "Mild"), ("moderate", "Moderate"), ("severe", "Severe")], max_length=10)),
                ("additional_notes", models.TextField(blank=True, default="")),
                (
                    "urgency_level",
                    models.CharField(
                        choices=[("low", "Low"), ("medium", "Medium"), ("high", "High"), ("emergency", "Emergency")],
                        default="medium",
                        max_length=10,
                    ),
                ),
                ("is_emergency", models.BooleanField(default=False)),
                ("requires_doctor_review", models.BooleanField(default=False)),
                ("predictions", models.JSONField(default=list, help_text="Ranked predictions with confidence, reasoning and advice.")),
                ("model_version", models.CharField(blank=True, default="", help_text="Strategy / stage label that produced the predictions.", max_length=100)),
                ("final_diagnosis_notes", models.TextField(blank=True, default="", help_text="Optional clinician notes after reviewing the predictions.")),
            ],
            options={
                "verbose_name": "Patient Case",
                "verbose_name_plural": "Patient Cases",
                "ordering": ["-session_date"],
            },
        ),
    ]
