"""
Seed command: roles, demo users and the hospital's reference data.

Usage:
    python manage.py seed           # create whatever is missing
    python manage.py seed --flush   # rebuild reference data from scratch

Patients, invoices and medical records are never created or removed here.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from hms_backend.appointments.seeders import seed_beds
from hms_backend.billing.seeders import seed_billable_items
from hms_backend.core.seeders import seed_core
from hms_backend.doctors.seeders import seed_doctors


class Command(BaseCommand):
    help = "Seed roles, demo users, doctors, wards/beds and the billable-item catalogue"

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete seed users and reference data (doctors, wards, beds, appointments, catalogue) first.",
        )

    def handle(self, *args, **options):
        flush = options.get("flush", False)
        steps = [
            ("Core (roles, users)", seed_core),
            ("Doctors (departments, directory)", seed_doctors),
            ("Appointments (wards, beds)", seed_beds),
            ("Billing (billable items)", seed_billable_items),
        ]

        stats = {}
        with transaction.atomic():
            for index, (title, seeder) in enumerate(steps, start=1):
                self.stdout.write(f"[{index}/{len(steps)}] Seeding {title}...")
                section = seeder(flush=flush)
                stats.update(section)
                for key, value in section.items():
                    self.stdout.write(f"  {key}: {value}")

        self.stdout.write(self.style.SUCCESS("Seeding complete."))
        for key, value in sorted(stats.items()):
            self.stdout.write(f"  {key}: {value}")
