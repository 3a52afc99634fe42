from django.db import transaction

from .models import Department, Doctor

DEPARTMENTS = ["General Medicine", "Surgery", "Gynaecology", "Pediatrics", "Orthopedics"]

DOCTORS = [
    ("Dr. Anirban Ghosh", "General Medicine", "MBBS, MD", "Mon-Sat 10:00-14:00"),
    ("Dr. Sanchita Roy", "Gynaecology", "MBBS, MS (OBG)", "Mon-Fri 16:00-19:00"),
    ("Dr. Tanmoy Dutta", "Surgery", "MBBS, MS", "Tue, Thu, Sat 11:00-15:00"),
    ("Dr. Payel Sarkar", "Pediatrics", "MBBS, DCH", "Mon-Sat 09:00-12:00"),
]


def seed_doctors(flush: bool = False) -> dict:
    with transaction.atomic():
        if flush:
            Doctor.objects.all().delete()
            Department.objects.all().delete()

        departments = {
            name: Department.objects.get_or_create(name=name)[0]
            for name in DEPARTMENTS
        }
        for name, department, qualification, schedule in DOCTORS:
            Doctor.objects.get_or_create(
                name=name,
                defaults={
                    "specialization": department,
                    "qualification": qualification,
                    "schedule": schedule,
                    "department": departments[department],
                },
            )

    return {"doctors_departments": Department.objects.count(), "doctors_doctors": Doctor.objects.count()}
