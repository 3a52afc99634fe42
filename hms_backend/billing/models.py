from decimal import Decimal

from django.db import models
from django.utils import timezone


def _money(**kwargs):
    kwargs.setdefault('default', Decimal('0.00'))
    return models.DecimalField(max_digits=12, decimal_places=2, **kwargs)


class BillableItem(models.Model):
    """Catalogue of billable tests and services with their standard rate."""

    item_name = models.CharField(max_length=200, unique=True)
    rate = _money()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['item_name', 'id']

    def __str__(self) -> str:
        return f"{self.item_name} ({self.rate})"


class Invoice(models.Model):
    """Invoice header.

    The derived amounts (gross, net, round-off, due) are written by
    ``billing.services`` from the line items and never taken from the client.
    """

    STATUS_DRAFT = 'Draft'
    STATUS_SENT = 'Sent'
    STATUS_PAID = 'Paid'
    STATUS_OVERDUE = 'Overdue'

    STATUS_CHOICES = (
        (STATUS_DRAFT, STATUS_DRAFT),
        (STATUS_SENT, STATUS_SENT),
        (STATUS_PAID, STATUS_PAID),
        (STATUS_OVERDUE, STATUS_OVERDUE),
    )

    invoice_no = models.CharField(max_length=32, unique=True)
    invoice_date = models.DateField(default=timezone.localdate)
    patient = models.ForeignKey(
        'patients.Patient',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='invoices',
    )
    appointment = models.ForeignKey(
        'appointments.Appointment',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='invoices',
    )
    referred_by = models.ForeignKey(
        'doctors.Doctor',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='referred_invoices',
    )
    lab_name = models.CharField(max_length=200, blank=True, null=True)
    collector_name = models.CharField(max_length=200, blank=True, null=True)
    is_medical_claim = models.BooleanField(default=False)
    payment_method = models.CharField(max_length=50, blank=True, null=True)

    gross_amount = _money()
    service_charge = _money()
    collection_charge = _money()
    discount = _money()
    discount_percentage = models.DecimalField(max_digits=5, decimal_places=2, default=Decimal('0.00'))
    net_amount = _money()
    round_off = _money()
    paid_amount = _money()
    due_amount = _money()

    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-invoice_date', '-id']
        indexes = [
            models.Index(fields=['status', 'invoice_date'], name='billing_inv_status_7d3f0a_idx'),
        ]

    def __str__(self) -> str:
        return self.invoice_no


class InvoiceItem(models.Model):
    invoice = models.ForeignKey(Invoice, on_delete=models.CASCADE, related_name='items')
    test_name = models.CharField(max_length=200)
    quantity = models.PositiveIntegerField(default=1)
    unit_price = _money()
    # Bookkeeping columns carried over from lab billing; not part of the totals.
    actual_rate = _money()
    item_discount_amount = _money()
    commission_percentage = models.DecimalField(max_digits=5, decimal_places=2, default=Decimal('0.00'))
    commission_amount = _money()

    class Meta:
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.test_name} x{self.quantity}"

    @property
    def line_total(self) -> Decimal:
        return self.quantity * self.unit_price
