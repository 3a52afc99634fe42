from django.db import transaction

from .models import Appointment, Bed, Ward

WARDS = {
    "General Ward": 10,
    "Female Ward": 6,
    "Cabin": 4,
    "ICU": 3,
}


def seed_beds(flush: bool = False) -> dict:
    """Wards with numbered beds. Flushing drops appointments too, since they hold beds."""
    with transaction.atomic():
        if flush:
            Appointment.objects.all().delete()
            Bed.objects.all().delete()
            Ward.objects.all().delete()

        for ward_name, bed_count in WARDS.items():
            ward, _created = Ward.objects.get_or_create(name=ward_name)
            prefix = "".join(word[0] for word in ward_name.split()).upper()
            for number in range(1, bed_count + 1):
                Bed.objects.get_or_create(ward=ward, bed_number=f"{prefix}-{number}")

    return {"appointments_wards": Ward.objects.count(), "appointments_beds": Bed.objects.count()}
