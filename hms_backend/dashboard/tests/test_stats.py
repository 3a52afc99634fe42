from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from django.test import TestCase, override_settings
from django.utils import timezone

from rest_framework.test import APIClient

from hms_backend.appointments.models import Appointment, Bed, Ward
from hms_backend.appointments.scheduling import day_bounds
from hms_backend.billing.models import Invoice
from hms_backend.core.models import Role, User
from hms_backend.dashboard.stats import dashboard_stats
from hms_backend.patients.models import Patient


@override_settings(TIME_ZONE="UTC")
class DashboardStatsTest(TestCase):
    databases = {"default"}

    def setUp(self):
        self.today = date(2024, 5, 15)
        start, _ = day_bounds(self.today)

        self.patient = Patient.objects.create(full_name="Mohan Das")
        Patient.objects.create(full_name="Rekha Das")

        Appointment.objects.create(patient=self.patient, appointment_type="OPD", appointment_time=start + timedelta(hours=9))
        Appointment.objects.create(patient=self.patient, appointment_type="OPD", appointment_time=start + timedelta(hours=11))
        Appointment.objects.create(patient=self.patient, appointment_type="OPD", appointment_time=start - timedelta(hours=3))
        Appointment.objects.create(patient=self.patient, appointment_type="IPD", appointment_time=start + timedelta(hours=10))

        ward = Ward.objects.create(name="Ward A")
        Bed.objects.create(bed_number="A1", ward=ward, is_occupied=True)
        Bed.objects.create(bed_number="A2", ward=ward)
        Bed.objects.create(bed_number="A3", ward=ward)

        Invoice.objects.create(invoice_no="I-1", invoice_date=date(2024, 5, 2), status="Paid", net_amount=Decimal("1300.00"))
        Invoice.objects.create(invoice_no="I-2", invoice_date=date(2024, 5, 14), status="Paid", net_amount=Decimal("700.00"))
        Invoice.objects.create(invoice_no="I-3", invoice_date=date(2024, 5, 10), status="Sent", net_amount=Decimal("999.00"))
        Invoice.objects.create(invoice_no="I-4", invoice_date=date(2024, 4, 30), status="Paid", net_amount=Decimal("500.00"))

    def test_stats(self):
        stats = dashboard_stats(self.today)

        self.assertEqual(stats["total_patients"], 2)
        self.assertEqual(stats["todays_opd_appointments"], 2)
        self.assertEqual(stats["available_beds"], 2)
        self.assertEqual(stats["occupied_beds"], 1)
        self.assertEqual(stats["monthly_revenue"], Decimal("2000.00"))

    def test_no_paid_invoices_gives_zero_revenue(self):
        stats = dashboard_stats(date(2023, 1, 1))

        self.assertEqual(stats["monthly_revenue"], Decimal("0.00"))

    def test_endpoint(self):
        role, _ = Role.objects.get_or_create(name="billing", defaults={"label": "Billing"})
        user = User.objects.create_user(
            username="billing_dash_test",
            email="billing_dash@example.com",
            password="DummyPass123!",
            role=role,
        )
        client = APIClient()
        client.defaults["HTTP_HOST"] = "localhost"
        client.force_authenticate(user=user)

        r = client.get("/api/dashboard/stats/")

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data["date"], timezone.localdate().isoformat())
        self.assertEqual(r.data["total_patients"], 2)
        self.assertEqual(r.data["available_beds"], 2)

    def test_endpoint_requires_authentication(self):
        client = APIClient()
        client.defaults["HTTP_HOST"] = "localhost"

        r = client.get("/api/dashboard/stats/")

        self.assertEqual(r.status_code, 401)
