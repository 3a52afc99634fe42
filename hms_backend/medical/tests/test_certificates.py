from __future__ import annotations

from datetime import date

from django.test import TestCase, override_settings

from rest_framework.test import APIClient

from hms_backend.core.models import Role, User
from hms_backend.medical.certificates import BLANK, UnknownCertificateType, certificate_context, render_certificate
from hms_backend.patients.models import Patient


@override_settings(HOSPITAL_NAME="Test Healing Home")
class CertificateRenderTest(TestCase):
    databases = {"default"}

    def setUp(self):
        self.patient = Patient.objects.create(
            full_name="Kamala Devi",
            dob=date(1950, 3, 8),
            phone_no="9000000001",
            admission_date=date(2024, 2, 1),
            discharge_date=date(2024, 2, 9),
        )
        self.no_details = Patient.objects.create(full_name="Unknown Person")

    def test_birth_certificate(self):
        html = render_certificate(self.patient, "birth", {"father_name": "Ramesh Lal"})

        self.assertIn("Test Healing Home", html)
        self.assertIn("Birth Certificate", html)
        self.assertIn("Kamala Devi", html)
        self.assertIn("March 8, 1950", html)
        self.assertIn("9000000001", html)
        self.assertIn("Ramesh Lal", html)
        self.assertIn("Authorized Signature", html)

    def test_missing_values_print_blank_lines(self):
        context = certificate_context(self.no_details, "death")

        self.assertEqual([line["value"] for line in context["lines"]], [BLANK, BLANK])
        self.assertIsNone(context["dob"])
        self.assertEqual(context["phone"], "N/A")

        html = render_certificate(self.no_details, "death")
        self.assertIn("Date of Birth:</strong> N/A", html)

    def test_discharge_prefilled_from_patient(self):
        context = certificate_context(self.patient, "discharge")

        self.assertEqual(
            context["lines"],
            [
                {"label": "Date of Admission", "value": "2024-02-01"},
                {"label": "Date of Discharge", "value": "2024-02-09"},
            ],
        )

    def test_supplied_values_override_prefill(self):
        context = certificate_context(self.patient, "discharge", {"discharge_date": date(2024, 2, 10)})

        self.assertEqual(context["lines"][1]["value"], "2024-02-10")

    def test_police_report(self):
        context = certificate_context(self.patient, "police", {"incident_date": "2024-04-01", "details": "Fall at home"})

        self.assertEqual(context["title"], "Police Report")
        self.assertEqual([line["value"] for line in context["lines"]], ["2024-04-01", "Fall at home"])

    def test_unknown_type(self):
        with self.assertRaises(UnknownCertificateType):
            render_certificate(self.patient, "marriage")


class CertificateAPITest(TestCase):
    databases = {"default"}

    def setUp(self):
        role, _ = Role.objects.get_or_create(name="receptionist", defaults={"label": "Receptionist"})
        user = User.objects.create_user(
            username="reception_cert_test",
            email="reception_cert@example.com",
            password="DummyPass123!",
            role=role,
        )
        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"
        self.client.force_authenticate(user=user)
        self.patient = Patient.objects.create(full_name="Gita Paul")

    def test_types(self):
        r = self.client.get("/api/certificates/types/")

        self.assertEqual(r.status_code, 200)
        self.assertEqual([t["code"] for t in r.data], ["birth", "death", "discharge", "police"])
        self.assertEqual(r.data[1]["fields"][1], {"key": "cause_of_death", "label": "Cause of Death"})

    def test_render_returns_html(self):
        r = self.client.post(
            f"/api/patients/{self.patient.id}/certificates/death/",
            {"date_of_death": "2024-06-01", "cause_of_death": "Cardiac arrest"},
            format="json",
        )

        self.assertEqual(r.status_code, 200)
        self.assertTrue(r["Content-Type"].startswith("text/html"))
        body = r.content.decode()
        self.assertIn("Gita Paul", body)
        self.assertIn("2024-06-01", body)
        self.assertIn("Cardiac arrest", body)

    def test_render_via_query_string(self):
        r = self.client.get(f"/api/patients/{self.patient.id}/certificates/birth/", {"father_name": "Hari Paul"})

        self.assertEqual(r.status_code, 200)
        self.assertIn("Hari Paul", r.content.decode())

    def test_unknown_type_returns_400(self):
        r = self.client.post(f"/api/patients/{self.patient.id}/certificates/marriage/", {}, format="json")

        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.data["field"], "cert_type")
