"""
Admission service: appointment creation with bed assignment, discharge and
removal.

Rules:
- IPD needs a free bed; the request is rejected before anything is written.
- OPD never holds a bed and never touches bed state.
- The appointment row and the bed's ``is_occupied`` flag change in one
  transaction; the bed row is locked with ``select_for_update``.
- All exceptions are custom types from appointments.exceptions
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from django.db import transaction
from django.utils import timezone

from hms_backend.appointments.exceptions import (
    BedRequiredError,
    BedUnavailableError,
    InvalidAppointmentData,
)
from hms_backend.appointments.models import Appointment, Bed
from hms_backend.core.utils import log_action
from hms_backend.patients.models import Patient

if TYPE_CHECKING:
    from django.contrib.auth.models import AbstractUser

logger = logging.getLogger(__name__)

APPOINTMENT_TYPES = (Appointment.TYPE_OPD, Appointment.TYPE_IPD)


# Statuses an appointment may be booked with; the first is the default.
BOOKING_STATUSES = {
    Appointment.TYPE_OPD: (Appointment.STATUS_SCHEDULED, Appointment.STATUS_COMPLETED),
    Appointment.TYPE_IPD: (Appointment.STATUS_ADMITTED,),
}


def _initial_status(appointment_type: str) -> str:
    return BOOKING_STATUSES[appointment_type][0]


def book_appointment(*, data: dict, user: 'AbstractUser' | None = None) -> Appointment:
    """
    Create an OPD appointment or an IPD admission.

    Args:
        data: Dictionary with appointment data:
            - appointment_type: 'OPD' or 'IPD' (required)
            - patient_id: int (optional)
            - doctor_id: int (optional)
            - bed_id: int (required for IPD, forbidden for OPD)
            - appointment_time: datetime (optional)
            - status: str (optional; IPD is always Admitted, OPD Scheduled or Completed)
            - notes: str (optional)
        user: The user creating the appointment (for audit logging)

    Raises:
        InvalidAppointmentData: unknown type, status the type cannot start in,
            OPD with a bed, unknown bed
        BedRequiredError: IPD without a bed
        BedUnavailableError: the bed is already occupied
    """
    appointment_type = data.get('appointment_type')
    bed_id = data.get('bed_id')

    if appointment_type not in APPOINTMENT_TYPES:
        raise InvalidAppointmentData('appointment_type must be OPD or IPD.', field='appointment_type')
    status = data.get('status') or _initial_status(appointment_type)
    if status not in BOOKING_STATUSES[appointment_type]:
        raise InvalidAppointmentData(
            f'A new {appointment_type} appointment cannot be {status}.',
            field='status',
        )
    if appointment_type == Appointment.TYPE_IPD and not bed_id:
        raise BedRequiredError()
    if appointment_type == Appointment.TYPE_OPD and bed_id:
        raise InvalidAppointmentData('OPD appointments cannot be assigned a bed.', field='bed')

    with transaction.atomic():
        bed = None
        if appointment_type == Appointment.TYPE_IPD:
            try:
                bed = Bed.objects.select_for_update().get(pk=bed_id)
            except Bed.DoesNotExist:
                raise InvalidAppointmentData('Bed not found.', field='bed')
            if bed.is_occupied:
                raise BedUnavailableError(bed_id=bed.pk)

        appointment = Appointment.objects.create(
            patient_id=data.get('patient_id'),
            doctor_id=data.get('doctor_id'),
            bed=bed,
            appointment_type=appointment_type,
            appointment_time=data.get('appointment_time'),
            status=status,
            notes=data.get('notes') or '',
        )

        if bed is not None:
            bed.is_occupied = True
            bed.save(update_fields=['is_occupied'])

    logger.info(
        'Booked %s appointment %s (patient_id=%s, bed_id=%s)',
        appointment_type,
        appointment.pk,
        appointment.patient_id,
        appointment.bed_id,
    )
    log_action(
        user,
        'appointment_created',
        patient_id=appointment.patient_id,
        meta={'type': appointment_type, 'bed_id': appointment.bed_id},
        target='appointment',
        target_id=appointment.pk,
    )
    return appointment


def discharge_appointment(
    appointment_id: int,
    *,
    user: 'AbstractUser' | None = None,
    discharge_date: date | None = None,
) -> Appointment:
    """
    Discharge an active IPD admission: mark it Discharged, free its bed and
    stamp the patient's discharge date.

    Raises:
        InvalidAppointmentData: not an IPD appointment, or not currently admitted
    """
    discharge_date = discharge_date or timezone.localdate()

    with transaction.atomic():
        appointment = Appointment.objects.select_for_update().get(pk=appointment_id)
        if appointment.appointment_type != Appointment.TYPE_IPD:
            raise InvalidAppointmentData('Only IPD admissions can be discharged.', field='appointment_type')
        if not appointment.is_active_admission:
            raise InvalidAppointmentData(
                f'Appointment is already {appointment.status.lower()}.',
                field='status',
            )

        appointment.status = Appointment.STATUS_DISCHARGED
        appointment.save(update_fields=['status', 'updated_at'])

        if appointment.bed_id:
            Bed.objects.filter(pk=appointment.bed_id).update(is_occupied=False)
        if appointment.patient_id:
            Patient.objects.filter(pk=appointment.patient_id).update(discharge_date=discharge_date)

    logger.info('Discharged appointment %s, released bed_id=%s', appointment.pk, appointment.bed_id)
    log_action(
        user,
        'appointment_discharged',
        patient_id=appointment.patient_id,
        meta={'bed_id': appointment.bed_id},
        target='appointment',
        target_id=appointment.pk,
    )
    return appointment


def delete_appointment(appointment: Appointment, *, user: 'AbstractUser' | None = None) -> None:
    """Remove an appointment; an active admission gives its bed back."""
    appointment_id = appointment.pk
    patient_id = appointment.patient_id

    with transaction.atomic():
        if appointment.is_active_admission and appointment.bed_id:
            Bed.objects.filter(pk=appointment.bed_id).update(is_occupied=False)
        appointment.delete()

    log_action(user, 'appointment_deleted', patient_id=patient_id, target='appointment', target_id=appointment_id)
