import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("doctors", "0001_initial"),
        ("patients", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="MedicalRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("visit_date", models.DateField(default=django.utils.timezone.localdate)),
                ("chief_complaint", models.TextField(blank=True, null=True)),
                ("history_of_present_illness", models.TextField(blank=True, null=True)),
                ("past_medical_history", models.TextField(blank=True, null=True)),
                ("physical_examination_findings", models.TextField(blank=True, null=True)),
                ("investigation_results", models.TextField(blank=True, null=True)),
                ("diagnosis", models.TextField()),
                ("prescription", models.TextField(blank=True, null=True)),
                ("treatment_plan", models.TextField(blank=True, null=True)),
                ("vitals", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "doctor",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="medical_records",
                        to="doctors.doctor",
                    ),
                ),
                (
                    "patient",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="medical_records",
                        to="patients.patient",
                    ),
                ),
            ],
            options={
                "ordering": ["-visit_date", "-id"],
                "indexes": [
                    models.Index(fields=["patient", "visit_date"], name="medical_med_patient_a3e61b_idx"),
                ],
            },
        ),
    ]
