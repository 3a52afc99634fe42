"""Headline numbers for the front-desk dashboard."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.db.models import Sum
from django.utils import timezone

from hms_backend.appointments.models import Appointment, Bed
from hms_backend.appointments.scheduling import day_bounds
from hms_backend.billing.models import Invoice
from hms_backend.patients.models import Patient


def todays_opd_count(today: date) -> int:
    start, end = day_bounds(today)
    return Appointment.objects.filter(
        appointment_type=Appointment.TYPE_OPD,
        appointment_time__gte=start,
        appointment_time__lte=end,
    ).count()


def monthly_revenue(today: date) -> Decimal:
    """Net amount of Paid invoices dated in ``today``'s month."""
    total = Invoice.objects.filter(
        status=Invoice.STATUS_PAID,
        invoice_date__year=today.year,
        invoice_date__month=today.month,
    ).aggregate(total=Sum('net_amount'))['total']
    return total or Decimal('0.00')


def dashboard_stats(today: date | None = None) -> dict:
    today = today or timezone.localdate()
    return {
        'date': today,
        'total_patients': Patient.objects.count(),
        'todays_opd_appointments': todays_opd_count(today),
        'available_beds': Bed.objects.filter(is_occupied=False).count(),
        'occupied_beds': Bed.objects.filter(is_occupied=True).count(),
        'monthly_revenue': monthly_revenue(today),
    }
