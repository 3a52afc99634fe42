import django.db.models.deletion
import django.utils.timezone
from decimal import Decimal
from django.db import migrations, models


def money():
    return models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)


def percentage():
    return models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=5)


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("appointments", "0001_initial"),
        ("doctors", "0001_initial"),
        ("patients", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="BillableItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("item_name", models.CharField(max_length=200, unique=True)),
                ("rate", money()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["item_name", "id"],
            },
        ),
        migrations.CreateModel(
            name="Invoice",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("invoice_no", models.CharField(max_length=32, unique=True)),
                ("invoice_date", models.DateField(default=django.utils.timezone.localdate)),
                ("lab_name", models.CharField(blank=True, max_length=200, null=True)),
                ("collector_name", models.CharField(blank=True, max_length=200, null=True)),
                ("is_medical_claim", models.BooleanField(default=False)),
                ("payment_method", models.CharField(blank=True, max_length=50, null=True)),
                ("gross_amount", money()),
                ("service_charge", money()),
                ("collection_charge", money()),
                ("discount", money()),
                ("discount_percentage", percentage()),
                ("net_amount", money()),
                ("round_off", money()),
                ("paid_amount", money()),
                ("due_amount", money()),
                (
                    "status",
                    models.CharField(
                        choices=[("Draft", "Draft"), ("Sent", "Sent"), ("Paid", "Paid"), ("Overdue", "Overdue")],
                        default="Draft",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "appointment",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="invoices",
                        to="appointments.appointment",
                    ),
                ),
                (
                    "patient",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="invoices",
                        to="patients.patient",
                    ),
                ),
                (
                    "referred_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="referred_invoices",
                        to="doctors.doctor",
                    ),
                ),
            ],
            options={
                "ordering": ["-invoice_date", "-id"],
                "indexes": [
                    models.Index(fields=["status", "invoice_date"], name="billing_inv_status_7d3f0a_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="InvoiceItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("test_name", models.CharField(max_length=200)),
                ("quantity", models.PositiveIntegerField(default=1)),
                ("unit_price", money()),
                ("actual_rate", money()),
                ("item_discount_amount", money()),
                ("commission_percentage", percentage()),
                ("commission_amount", money()),
                (
                    "invoice",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="billing.invoice",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
