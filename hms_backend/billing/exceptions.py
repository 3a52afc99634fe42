"""
Billing exceptions.

Raised by ``billing.services`` and translated to DRF responses in the views.
"""

from __future__ import annotations

from typing import Any


class InvoiceError(Exception):
    """Invoice could not be created or changed.

    ``field`` names the offending input for validation problems; a failure
    of the backing store carries no field and is reported as a server error.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)

    @property
    def is_validation_error(self) -> bool:
        return self.field is not None

    def to_dict(self) -> dict[str, Any]:
        result = {'detail': str(self)}
        if self.field:
            result['field'] = self.field
        return result
