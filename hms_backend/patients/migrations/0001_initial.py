import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("doctors", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Patient",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("registration_no", models.CharField(blank=True, max_length=32, unique=True)),
                ("full_name", models.CharField(max_length=200)),
                (
                    "gender",
                    models.CharField(
                        blank=True,
                        choices=[("Male", "Male"), ("Female", "Female"), ("Other", "Other")],
                        max_length=10,
                        null=True,
                    ),
                ),
                ("dob", models.DateField(blank=True, null=True)),
                ("phone_no", models.CharField(blank=True, max_length=30, null=True)),
                ("emergency_no", models.CharField(blank=True, max_length=30, null=True)),
                ("address", models.TextField(blank=True, null=True)),
                ("country", models.CharField(blank=True, max_length=100, null=True)),
                ("religion", models.CharField(blank=True, max_length=100, null=True)),
                ("passport_no", models.CharField(blank=True, max_length=50, null=True)),
                ("guardian_name", models.CharField(blank=True, max_length=200, null=True)),
                ("guardian_relation", models.CharField(blank=True, max_length=100, null=True)),
                ("guardian_address", models.TextField(blank=True, null=True)),
                ("guardian_passport_no", models.CharField(blank=True, max_length=50, null=True)),
                ("insurance_company", models.CharField(blank=True, max_length=200, null=True)),
                ("insurance_address", models.TextField(blank=True, null=True)),
                ("is_corporate", models.BooleanField(default=False)),
                ("admission_date", models.DateField(blank=True, null=True)),
                ("discharge_date", models.DateField(blank=True, null=True)),
                ("bill_no", models.CharField(blank=True, max_length=50, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "doctor_incharge_1",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="primary_patients",
                        to="doctors.doctor",
                    ),
                ),
                (
                    "doctor_incharge_2",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="secondary_patients",
                        to="doctors.doctor",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["full_name"], name="patients_pa_full_na_4b1e0c_idx"),
                    models.Index(fields=["phone_no"], name="patients_pa_phone_n_9a7d21_idx"),
                ],
            },
        ),
    ]
