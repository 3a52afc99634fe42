from __future__ import annotations

from django.test import TestCase

from rest_framework.test import APIClient

from hms_backend.core.models import AuditLog, Role, User
from hms_backend.doctors.models import Department, Doctor


class DoctorAPITest(TestCase):
    """Tests for /api/doctors/ endpoints.

    RBAC: admin, receptionist = write; doctor, billing = read-only
    """

    databases = {"default"}

    def setUp(self):
        self.role_admin, _ = Role.objects.get_or_create(name="admin", defaults={"label": "Administrator"})
        self.role_doctor, _ = Role.objects.get_or_create(name="doctor", defaults={"label": "Doctor"})
        self.admin = User.objects.create_user(
            username="admin_doctor_test",
            email="admin_doctor@example.com",
            password="DummyPass123!",
            role=self.role_admin,
        )
        self.doctor_user = User.objects.create_user(
            username="doctor_doctor_test",
            email="doctor_doctor@example.com",
            password="DummyPass123!",
            role=self.role_doctor,
        )
        self.department = Department.objects.create(name="Cardiology")

    def _client_for(self, user: User) -> APIClient:
        client = APIClient()
        client.defaults["HTTP_HOST"] = "localhost"
        client.force_authenticate(user=user)
        return client

    def test_list_is_ordered_by_name(self):
        Doctor.objects.create(name="Dr. Zubin Mehta")
        Doctor.objects.create(name="Dr. Aparna Sen")

        r = self._client_for(self.doctor_user).get("/api/doctors/")

        self.assertEqual(r.status_code, 200)
        self.assertEqual([d["name"] for d in r.data], ["Dr. Aparna Sen", "Dr. Zubin Mehta"])

    def test_create_and_read(self):
        client = self._client_for(self.admin)
        payload = {
            "name": "Dr. Ritwik Ghatak",
            "specialization": "Cardiology",
            "qualification": "MBBS, MD",
            "experience": "12 years",
            "contact": "9876543210",
            "email": "ritwik@example.com",
            "schedule": "Mon-Fri 10:00-14:00",
            "department": self.department.id,
        }

        r = client.post("/api/doctors/", payload, format="json")
        self.assertEqual(r.status_code, 201)

        r = client.get(f"/api/doctors/{r.data['id']}/")
        for key, value in payload.items():
            self.assertEqual(r.data[key], value)
        self.assertEqual(r.data["department_name"], "Cardiology")
        self.assertEqual(r.data["initials"], "DRG")

    def test_name_is_required(self):
        r = self._client_for(self.admin).post("/api/doctors/", {"name": " "}, format="json")

        self.assertEqual(r.status_code, 400)
        self.assertIn("name", r.data)

    def test_search(self):
        Doctor.objects.create(name="Dr. Ila Basu", specialization="Neurology")
        Doctor.objects.create(name="Dr. Om Puri", specialization="Orthopedics")

        r = self._client_for(self.admin).get("/api/doctors/", {"q": "neuro"})

        self.assertEqual([d["name"] for d in r.data], ["Dr. Ila Basu"])

    def test_delete(self):
        doctor = Doctor.objects.create(name="Dr. Temp")

        r = self._client_for(self.admin).delete(f"/api/doctors/{doctor.id}/")

        self.assertEqual(r.status_code, 204)
        self.assertFalse(Doctor.objects.filter(pk=doctor.id).exists())
        entry = AuditLog.objects.get(action="doctor_deleted")
        self.assertEqual((entry.target, entry.target_id, entry.role_name), ("doctor", doctor.id, "admin"))

    def test_doctor_role_cannot_write(self):
        r = self._client_for(self.doctor_user).post("/api/doctors/", {"name": "Dr. New"}, format="json")

        self.assertEqual(r.status_code, 403)

    def test_departments(self):
        client = self._client_for(self.admin)

        r = client.post("/api/departments/", {"name": "Pediatrics"}, format="json")
        self.assertEqual(r.status_code, 201)

        r = client.get("/api/departments/")
        self.assertEqual([d["name"] for d in r.data], ["Cardiology", "Pediatrics"])
