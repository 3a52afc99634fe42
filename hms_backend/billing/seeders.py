from decimal import Decimal

from django.db import transaction

from .models import BillableItem

BILLABLE_ITEMS = [
    ("Consultation", "500.00"),
    ("CBC", "350.00"),
    ("Blood Sugar (Fasting)", "120.00"),
    ("Lipid Profile", "800.00"),
    ("Chest X-Ray", "450.00"),
    ("ECG", "300.00"),
    ("USG Whole Abdomen", "1200.00"),
    ("Bed Charge (General, per day)", "1000.00"),
]


def seed_billable_items(flush: bool = False) -> dict:
    with transaction.atomic():
        if flush:
            BillableItem.objects.all().delete()
        for item_name, rate in BILLABLE_ITEMS:
            BillableItem.objects.get_or_create(item_name=item_name, defaults={"rate": Decimal(rate)})

    return {"billing_items": BillableItem.objects.count()}
