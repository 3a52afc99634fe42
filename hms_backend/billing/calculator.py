"""Invoice totals.

Pure functions; nothing here touches the database.

    gross     = sum(quantity * rate)
    unrounded = gross + service_charge + collection_charge - discount
    net       = unrounded rounded half-up to a whole currency unit
    round_off = net - unrounded
    due       = net - paid

Rounding is applied once, on the aggregate, never per line. Signs are not
validated here.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Mapping, Tuple, Union

Number = Union[Decimal, int, float, str, None]
LineItem = Union[Tuple[Number, Number], Mapping[str, Any]]

CENT = Decimal('0.01')
UNIT = Decimal('1')


def D(x: Number) -> Decimal:
    """Decimal from anything numeric; ``None`` and ``''`` count as zero."""
    if isinstance(x, Decimal):
        return x
    return Decimal(str(x or 0))


def money2(x: Number) -> Decimal:
    return D(x).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class InvoiceTotals:
    gross_amount: Decimal
    unrounded_amount: Decimal
    net_amount: Decimal
    round_off: Decimal
    due_amount: Decimal

    def as_fields(self) -> dict:
        """The stored invoice columns (everything but ``unrounded_amount``)."""
        return {
            'gross_amount': self.gross_amount,
            'net_amount': self.net_amount,
            'round_off': self.round_off,
            'due_amount': self.due_amount,
        }


def _line(item: LineItem) -> tuple[Decimal, Decimal]:
    if isinstance(item, Mapping):
        rate = item.get('rate', item.get('unit_price'))
        return D(item.get('quantity')), D(rate)
    quantity, rate = item
    return D(quantity), D(rate)


def gross_amount(items: Iterable[LineItem]) -> Decimal:
    total = Decimal('0')
    for item in items:
        quantity, rate = _line(item)
        total += quantity * rate
    return total


def compute_totals(
    items: Iterable[LineItem],
    *,
    service_charge: Number = 0,
    collection_charge: Number = 0,
    discount: Number = 0,
    paid: Number = 0,
) -> InvoiceTotals:
    """Totals for ``items`` given as ``(quantity, rate)`` pairs or mappings.

    >>> t = compute_totals([(2, 500), (1, 250)], service_charge=100, discount=50, paid=1000)
    >>> (t.gross_amount, t.net_amount, t.due_amount)
    (Decimal('1250'), Decimal('1300'), Decimal('300'))
    """
    gross = gross_amount(items)
    unrounded = gross + D(service_charge) + D(collection_charge) - D(discount)
    net = unrounded.quantize(UNIT, rounding=ROUND_HALF_UP)
    return InvoiceTotals(
        gross_amount=gross,
        unrounded_amount=unrounded,
        net_amount=net,
        round_off=net - unrounded,
        due_amount=net - D(paid),
    )


def discount_from_percentage(gross: Number, percentage: Number) -> Decimal:
    """Discount amount for ``percentage`` of ``gross``, rounded to cents."""
    return money2(D(gross) * D(percentage) / Decimal('100'))
