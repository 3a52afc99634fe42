"""Human-readable document numbers (registration numbers, invoice numbers).

Numbers are ``<prefix><zero-padded counter>``; the counter restarts for every
new prefix, so a prefix carrying the year or month gives a yearly or monthly
series.
"""

from __future__ import annotations

import re

from django.db import models


def next_sequence_number(model: type[models.Model], field: str, prefix: str, *, padding: int = 6) -> str:
    """Return the number following the highest generated ``field`` value for ``prefix``.

    Only values of exactly ``prefix`` + ``padding`` digits count; hand-entered
    numbers such as ``REG-2024-9`` or ``REG-2024-ABC`` cannot disturb the
    series, and fixed width makes string order equal numeric order.
    """
    pattern = rf'^{re.escape(prefix)}[0-9]{{{padding}}}$'
    last = (
        model.objects.filter(**{f'{field}__regex': pattern})
        .order_by(f'-{field}')
        .values_list(field, flat=True)
        .first()
    )
    counter = int(last[len(prefix):]) if last else 0
    return f"{prefix}{counter + 1:0{padding}d}"
