"""
Invoice service layer.

Header and items are written in one transaction: either both exist or
neither does. Derived amounts are always recomputed here from the items.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from django.db import DatabaseError, transaction
from django.db.models import Count, QuerySet
from django.utils import timezone

from hms_backend.billing.calculator import D, compute_totals, discount_from_percentage, gross_amount
from hms_backend.billing.exceptions import InvoiceError
from hms_backend.billing.models import Invoice, InvoiceItem
from hms_backend.core.numbering import next_sequence_number
from hms_backend.core.utils import log_action

if TYPE_CHECKING:
    from django.contrib.auth.models import AbstractUser

logger = logging.getLogger(__name__)

STATUSES = tuple(value for value, _ in Invoice.STATUS_CHOICES)

ITEM_EXTRA_FIELDS = ('actual_rate', 'item_discount_amount', 'commission_percentage', 'commission_amount')


def next_invoice_number(today: date | None = None) -> str:
    """Next number in this month's ``INV-YYYYMM-NNNNNN`` series."""
    today = today or timezone.localdate()
    return next_sequence_number(Invoice, 'invoice_no', f'INV-{today:%Y%m}-')


def _validate(data: dict) -> list[dict]:
    if not data.get('patient_id'):
        raise InvoiceError('Please select a patient.', field='patient')

    items = list(data.get('items') or [])
    if not items:
        raise InvoiceError('An invoice needs at least one item.', field='items')
    if any(not (item.get('test_name') or '').strip() for item in items):
        raise InvoiceError('All invoice items must have a description.', field='items')
    return items


def create_invoice(*, data: dict, user: 'AbstractUser' | None = None) -> Invoice:
    """
    Create an invoice header with its items.

    Args:
        data: Dictionary with invoice data:
            - patient_id: int (required)
            - items: list of {test_name, quantity, unit_price, ...} (at least one)
            - service_charge, collection_charge, paid_amount: Decimal (optional)
            - discount: Decimal (optional)
            - discount_percentage: Decimal (optional; used when no discount is given)
            - appointment_id, referred_by_id, invoice_date, lab_name,
              collector_name, is_medical_claim, payment_method, status (optional)
        user: The user creating the invoice (for audit logging)

    Raises:
        InvoiceError: invalid input (with ``field``) or a failed write (without)
    """
    items = _validate(data)

    status = data.get('status') or Invoice.STATUS_DRAFT
    if status not in STATUSES:
        raise InvoiceError(f'Unknown invoice status: {status}.', field='status')

    discount_percentage = D(data.get('discount_percentage'))
    discount = D(data.get('discount'))
    if not discount and discount_percentage:
        discount = discount_from_percentage(gross_amount(items), discount_percentage)

    totals = compute_totals(
        items,
        service_charge=data.get('service_charge'),
        collection_charge=data.get('collection_charge'),
        discount=discount,
        paid=data.get('paid_amount'),
    )
    invoice_date = data.get('invoice_date') or timezone.localdate()

    try:
        with transaction.atomic():
            invoice = Invoice.objects.create(
                invoice_no=next_invoice_number(invoice_date),
                invoice_date=invoice_date,
                patient_id=data['patient_id'],
                appointment_id=data.get('appointment_id'),
                referred_by_id=data.get('referred_by_id'),
                lab_name=data.get('lab_name'),
                collector_name=data.get('collector_name'),
                is_medical_claim=bool(data.get('is_medical_claim')),
                payment_method=data.get('payment_method'),
                service_charge=D(data.get('service_charge')),
                collection_charge=D(data.get('collection_charge')),
                discount=discount,
                discount_percentage=discount_percentage,
                paid_amount=D(data.get('paid_amount')),
                status=status,
                **totals.as_fields(),
            )
            InvoiceItem.objects.bulk_create(
                [
                    InvoiceItem(
                        invoice=invoice,
                        test_name=item['test_name'].strip(),
                        quantity=item.get('quantity') or 1,
                        unit_price=D(item.get('unit_price')),
                        **{name: D(item.get(name)) for name in ITEM_EXTRA_FIELDS},
                    )
                    for item in items
                ]
            )
    except DatabaseError as exc:
        logger.exception('Invoice creation failed (patient_id=%s)', data.get('patient_id'))
        raise InvoiceError(f'Failed to create invoice: {exc}') from exc

    logger.info('Created invoice %s (net=%s, items=%d)', invoice.invoice_no, invoice.net_amount, len(items))
    log_action(
        user,
        'invoice_created',
        patient_id=invoice.patient_id,
        meta={'invoice_no': invoice.invoice_no},
        target='invoice',
        target_id=invoice.pk,
    )
    return invoice


def update_status(
    invoice: Invoice,
    status: str,
    *,
    paid_amount=None,
    user: 'AbstractUser' | None = None,
) -> Invoice:
    """Move ``invoice`` to ``status``; an optional payment recomputes the due amount."""
    if status not in STATUSES:
        raise InvoiceError(f'Unknown invoice status: {status}.', field='status')

    invoice.status = status
    update_fields = ['status']
    if paid_amount is not None:
        invoice.paid_amount = D(paid_amount)
        invoice.due_amount = invoice.net_amount - invoice.paid_amount
        update_fields += ['paid_amount', 'due_amount']
    invoice.save(update_fields=update_fields)

    logger.info('Invoice %s status -> %s', invoice.invoice_no, status)
    log_action(
        user,
        'invoice_status_updated',
        patient_id=invoice.patient_id,
        meta={'status': status},
        target='invoice',
        target_id=invoice.pk,
    )
    return invoice


def invoices_without_items() -> QuerySet:
    """Invoice headers that have no line items."""
    return Invoice.objects.annotate(item_count=Count('items')).filter(item_count=0)
