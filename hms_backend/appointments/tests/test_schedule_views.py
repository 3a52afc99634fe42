"""Tests for the day filter on the list, today's queue and doctor schedules."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone as dt_timezone
from unittest.mock import patch

from django.test import TestCase, override_settings
from django.utils import timezone

from rest_framework.test import APIClient

from hms_backend.appointments.models import Appointment, Bed, Ward
from hms_backend.appointments.scheduling import appointments_for_day, day_bounds
from hms_backend.appointments.services.admission import book_appointment
from hms_backend.core.models import Role, User
from hms_backend.doctors.models import Doctor
from hms_backend.patients.models import Patient


@override_settings(TIME_ZONE="UTC")
class ScheduleViewsTest(TestCase):
    databases = {"default"}

    def setUp(self):
        role, _ = Role.objects.get_or_create(name="doctor", defaults={"label": "Doctor"})
        self.user = User.objects.create_user(
            username="doctor_sched_test",
            email="doctor_sched@example.com",
            password="DummyPass123!",
            role=role,
        )
        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"
        self.client.force_authenticate(user=self.user)

        self.doctor = Doctor.objects.create(name="Dr. Kabir Ali")
        self.other_doctor = Doctor.objects.create(name="Dr. Zoya Khan")
        self.patient = Patient.objects.create(full_name="Nila Bose")

    def _opd(self, when, doctor=None, **extra):
        return Appointment.objects.create(
            patient=self.patient,
            doctor=doctor or self.doctor,
            appointment_type=Appointment.TYPE_OPD,
            appointment_time=when,
            **extra,
        )

    # ========== LIST ?date ==========

    def test_list_filtered_by_day(self):
        first = self._opd(datetime(2024, 1, 1, 9, 0, tzinfo=dt_timezone.utc))
        self._opd(datetime(2024, 1, 2, 9, 0, tzinfo=dt_timezone.utc))
        self._opd(None)
        early = self._opd(datetime(2024, 1, 1, 7, 30, tzinfo=dt_timezone.utc), doctor=self.other_doctor)

        r = self.client.get("/api/appointments/", {"date": "2024-01-01"})
        self.assertEqual(r.status_code, 200)
        self.assertEqual([a["id"] for a in r.data], [early.id, first.id])

        r = self.client.get("/api/appointments/", {"date": "2024-01-01", "doctor": self.doctor.id})
        self.assertEqual([a["id"] for a in r.data], [first.id])

    def test_list_bad_date_returns_400(self):
        r = self.client.get("/api/appointments/", {"date": "01-01-2024"})

        self.assertEqual(r.status_code, 400)

    # ========== QUEUE ==========

    def test_queue_returns_first_five_of_today(self):
        start, _ = day_bounds(timezone.localdate())
        created = [self._opd(start + timedelta(hours=8 + i)) for i in range(7)]
        self._opd(start - timedelta(hours=2))

        r = self.client.get("/api/appointments/queue/")

        self.assertEqual(r.status_code, 200)
        self.assertEqual([a["id"] for a in r.data], [a.id for a in created[:5]])

    def test_queue_limit_parameter(self):
        start, _ = day_bounds(timezone.localdate())
        for i in range(3):
            self._opd(start + timedelta(hours=9 + i))

        r = self.client.get("/api/appointments/queue/", {"limit": 2})
        self.assertEqual(len(r.data), 2)

        r = self.client.get("/api/appointments/queue/", {"limit": "x"})
        self.assertEqual(r.status_code, 400)

    def test_queue_skips_cancelled(self):
        start, _ = day_bounds(timezone.localdate())
        self._opd(start + timedelta(hours=9), status=Appointment.STATUS_CANCELLED)

        r = self.client.get("/api/appointments/queue/")

        self.assertEqual(r.data, [])

    # ========== DOCTOR SCHEDULE ==========

    def test_doctor_schedule_lists_opd_day_and_current_ipd(self):
        ward = Ward.objects.create(name="ICU")
        bed = Bed.objects.create(bed_number="ICU-3", ward=ward)
        freed_bed = Bed.objects.create(bed_number="ICU-4", ward=ward)

        opd = self._opd(datetime(2024, 1, 1, 10, 0, tzinfo=dt_timezone.utc))
        self._opd(datetime(2024, 1, 2, 10, 0, tzinfo=dt_timezone.utc))
        self._opd(datetime(2024, 1, 1, 11, 0, tzinfo=dt_timezone.utc), doctor=self.other_doctor)
        admitted = book_appointment(
            data={"appointment_type": "IPD", "patient_id": self.patient.id, "doctor_id": self.doctor.id, "bed_id": bed.id},
        )
        Appointment.objects.create(
            patient=self.patient,
            doctor=self.doctor,
            bed=freed_bed,
            appointment_type=Appointment.TYPE_IPD,
            status=Appointment.STATUS_DISCHARGED,
        )

        r = self.client.get(f"/api/doctors/{self.doctor.id}/schedule/", {"date": "2024-01-01"})

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data["date"], "2024-01-01")
        self.assertEqual([a["id"] for a in r.data["opd"]], [opd.id])
        self.assertEqual([a["id"] for a in r.data["ipd"]], [admitted.id])
        self.assertEqual(r.data["ipd"][0]["bed_detail"]["bed_number"], "ICU-3")
        self.assertEqual(r.data["ipd"][0]["bed_detail"]["ward_name"], "ICU")

    def test_doctor_schedule_only_loads_the_requested_day(self):
        wanted = self._opd(datetime(2024, 1, 1, 9, 0, tzinfo=dt_timezone.utc))
        for days in (-30, -1, 1, 400):
            self._opd(datetime(2024, 1, 1, 9, 0, tzinfo=dt_timezone.utc) + timedelta(days=days))
        seen = []

        def record(appointments, day, **kwargs):
            seen.extend(a.id for a in appointments)
            return appointments_for_day(appointments, day, **kwargs)

        with patch("hms_backend.doctors.views.appointments_for_day", side_effect=record):
            r = self.client.get(f"/api/doctors/{self.doctor.id}/schedule/", {"date": "2024-01-01"})

        self.assertEqual(r.status_code, 200)
        self.assertEqual(seen, [wanted.id])

    def test_doctor_schedule_unknown_doctor_returns_404(self):
        r = self.client.get("/api/doctors/999999/schedule/")

        self.assertEqual(r.status_code, 404)
