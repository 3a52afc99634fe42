from __future__ import annotations

from datetime import date

from django.test import TestCase

from rest_framework.test import APIClient

from hms_backend.core.models import Role, User
from hms_backend.doctors.models import Doctor
from hms_backend.medical.models import MedicalRecord
from hms_backend.patients.models import Patient


class MedicalRecordAPITest(TestCase):
    """Tests for /api/patients/<id>/records/ and /api/records/<id>/.

    RBAC: admin, doctor = read/write; receptionist = read-only; billing = none
    """

    databases = {"default"}

    def setUp(self):
        self.role_doctor, _ = Role.objects.get_or_create(name="doctor", defaults={"label": "Doctor"})
        self.role_receptionist, _ = Role.objects.get_or_create(name="receptionist", defaults={"label": "Receptionist"})
        self.role_billing, _ = Role.objects.get_or_create(name="billing", defaults={"label": "Billing"})
        self.doctor_user = User.objects.create_user(
            username="doctor_rec_test",
            email="doctor_rec@example.com",
            password="DummyPass123!",
            role=self.role_doctor,
        )
        self.receptionist = User.objects.create_user(
            username="reception_rec_test",
            email="reception_rec@example.com",
            password="DummyPass123!",
            role=self.role_receptionist,
        )
        self.billing = User.objects.create_user(
            username="billing_rec_test",
            email="billing_rec@example.com",
            password="DummyPass123!",
            role=self.role_billing,
        )
        self.doctor = Doctor.objects.create(name="Dr. Soma Dey")
        self.patient = Patient.objects.create(full_name="Partha Mitra")

    def _client_for(self, user: User) -> APIClient:
        client = APIClient()
        client.defaults["HTTP_HOST"] = "localhost"
        client.force_authenticate(user=user)
        return client

    def _url(self, patient=None):
        return f"/api/patients/{(patient or self.patient).id}/records/"

    def test_create_with_vitals(self):
        client = self._client_for(self.doctor_user)
        payload = {
            "doctor": self.doctor.id,
            "visit_date": "2024-05-02",
            "chief_complaint": "Fever for three days",
            "diagnosis": "Viral fever",
            "prescription": "Paracetamol 500mg",
            "vitals": {"blood_pressure": "120/80", "pulse": 88, "temperature": 38.4, "spo2": 97},
        }

        r = client.post(self._url(), payload, format="json")

        self.assertEqual(r.status_code, 201)
        self.assertEqual(r.data["patient"], self.patient.id)
        self.assertEqual(r.data["doctor_name"], "Dr. Soma Dey")
        self.assertEqual(r.data["vitals"]["blood_pressure"], "120/80")
        self.assertEqual(r.data["vitals"]["temperature"], 38.4)
        self.assertIsNone(r.data["vitals"]["weight"])

        record = MedicalRecord.objects.get(pk=r.data["id"])
        self.assertEqual(record.vitals, {"blood_pressure": "120/80", "pulse": 88, "temperature": 38.4, "spo2": 97})

    def test_diagnosis_is_required(self):
        r = self._client_for(self.doctor_user).post(self._url(), {"diagnosis": "   "}, format="json")

        self.assertEqual(r.status_code, 400)
        self.assertIn("diagnosis", r.data)
        self.assertEqual(MedicalRecord.objects.count(), 0)

    def test_bad_vitals_rejected(self):
        r = self._client_for(self.doctor_user).post(
            self._url(),
            {"diagnosis": "Check-up", "vitals": {"blood_pressure": "high", "spo2": 140}},
            format="json",
        )

        self.assertEqual(r.status_code, 400)
        self.assertIn("blood_pressure", r.data["vitals"])
        self.assertIn("spo2", r.data["vitals"])

    def test_list_newest_visit_first_without_doctor(self):
        older = MedicalRecord.objects.create(patient=self.patient, visit_date=date(2024, 1, 10), diagnosis="Cold")
        newer = MedicalRecord.objects.create(patient=self.patient, visit_date=date(2024, 3, 2), diagnosis="Sprain")
        other = Patient.objects.create(full_name="Someone Else")
        MedicalRecord.objects.create(patient=other, diagnosis="Other")

        r = self._client_for(self.receptionist).get(self._url())

        self.assertEqual(r.status_code, 200)
        self.assertEqual([rec["id"] for rec in r.data], [newer.id, older.id])
        self.assertIsNone(r.data[0]["doctor_name"])

    def test_unknown_patient_returns_404(self):
        r = self._client_for(self.doctor_user).get("/api/patients/999999/records/")

        self.assertEqual(r.status_code, 404)

    def test_update_and_delete(self):
        record = MedicalRecord.objects.create(patient=self.patient, diagnosis="Cold", vitals={"pulse": 70})
        client = self._client_for(self.doctor_user)

        r = client.patch(f"/api/records/{record.id}/", {"treatment_plan": "Rest"}, format="json")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data["treatment_plan"], "Rest")
        self.assertEqual(r.data["vitals"]["pulse"], 70)

        r = client.delete(f"/api/records/{record.id}/")
        self.assertEqual(r.status_code, 204)

    def test_receptionist_cannot_write(self):
        r = self._client_for(self.receptionist).post(self._url(), {"diagnosis": "Cold"}, format="json")

        self.assertEqual(r.status_code, 403)

    def test_billing_cannot_read(self):
        r = self._client_for(self.billing).get(self._url())

        self.assertEqual(r.status_code, 403)
