"""
Admission-specific exceptions for the appointments app.

Raised by ``services.admission`` before (or instead of) any write and
translated to HTTP 400 responses in the views.
"""

from __future__ import annotations

from typing import Any


class AppointmentError(Exception):
    """Base exception for all appointment/bed errors."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = {'detail': str(self)}
        if self.field:
            result['field'] = self.field
        return result


class BedRequiredError(AppointmentError):
    """Raised when an IPD admission is requested without a bed."""

    def __init__(self, message: str = "A bed must be selected for an IPD admission."):
        super().__init__(message, field='bed')


class BedUnavailableError(AppointmentError):
    """
    Raised when the requested bed is already occupied.

    Attributes:
        bed_id: The ID of the occupied bed
    """

    def __init__(self, *, bed_id: int, message: str = "The selected bed is already occupied."):
        self.bed_id = bed_id
        super().__init__(message, field='bed')

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result['bed_id'] = self.bed_id
        return result


class InvalidAppointmentData(AppointmentError):
    """
    Raised when appointment data is invalid (unknown type, OPD with a bed,
    discharging something that is not an active admission).
    """
