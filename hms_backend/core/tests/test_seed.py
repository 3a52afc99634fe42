from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from hms_backend.appointments.models import Bed, Ward
from hms_backend.billing.models import BillableItem
from hms_backend.core.models import Role, User
from hms_backend.doctors.models import Doctor


class SeedCommandTest(TestCase):
    databases = {"default"}

    def test_seed_is_idempotent(self):
        call_command("seed", stdout=StringIO())
        call_command("seed", stdout=StringIO())

        self.assertEqual(
            sorted(Role.objects.values_list("name", flat=True)),
            ["admin", "billing", "doctor", "receptionist"],
        )
        self.assertEqual(User.objects.filter(email__endswith="@seed.local").count(), 4)
        self.assertEqual(Doctor.objects.count(), 4)
        self.assertEqual(Ward.objects.count(), 4)
        self.assertEqual(Bed.objects.count(), 23)
        self.assertFalse(Bed.objects.filter(is_occupied=True).exists())
        self.assertEqual(BillableItem.objects.count(), 8)

    def test_flush_keeps_other_users(self):
        User.objects.create_user(username="real_user", email="real@example.com", password="SecurePass123!")

        call_command("seed", stdout=StringIO())
        call_command("seed", "--flush", stdout=StringIO())

        self.assertTrue(User.objects.filter(username="real_user").exists())
        self.assertEqual(User.objects.filter(email__endswith="@seed.local").count(), 4)
