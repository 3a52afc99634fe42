from decimal import Decimal

from rest_framework import serializers

from hms_backend.appointments.models import Appointment
from hms_backend.billing.models import BillableItem, Invoice, InvoiceItem
from hms_backend.doctors.models import Doctor
from hms_backend.patients.models import Patient

ZERO = Decimal('0')


def _money_field(**kwargs):
    kwargs.setdefault('required', False)
    kwargs.setdefault('default', ZERO)
    return serializers.DecimalField(max_digits=12, decimal_places=2, min_value=ZERO, **kwargs)


class BillableItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = BillableItem
        fields = ['id', 'item_name', 'rate', 'created_at']
        read_only_fields = ['id', 'created_at']


class InvoiceItemSerializer(serializers.ModelSerializer):
    line_total = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = InvoiceItem
        fields = [
            'id',
            'test_name',
            'quantity',
            'unit_price',
            'line_total',
            'actual_rate',
            'item_discount_amount',
            'commission_percentage',
            'commission_amount',
        ]
        read_only_fields = fields


class InvoiceItemWriteSerializer(serializers.Serializer):
    # Blank names are reported by the billing service.
    test_name = serializers.CharField(max_length=200, allow_blank=True)
    quantity = serializers.IntegerField(min_value=1, default=1)
    unit_price = _money_field(required=True, default=serializers.empty)
    actual_rate = _money_field()
    item_discount_amount = _money_field()
    commission_percentage = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=ZERO, max_value=Decimal('100'), required=False, default=ZERO
    )
    commission_amount = _money_field()


class InvoiceCreateSerializer(serializers.Serializer):
    """Input for a new invoice.

    Gross, net, round-off and due are not accepted; they are computed from
    the items.
    """

    patient = serializers.PrimaryKeyRelatedField(queryset=Patient.objects.all(), allow_null=True, required=False)
    appointment = serializers.PrimaryKeyRelatedField(
        queryset=Appointment.objects.all(), allow_null=True, required=False
    )
    referred_by = serializers.PrimaryKeyRelatedField(queryset=Doctor.objects.all(), allow_null=True, required=False)
    invoice_date = serializers.DateField(required=False)
    lab_name = serializers.CharField(max_length=200, allow_blank=True, allow_null=True, required=False)
    collector_name = serializers.CharField(max_length=200, allow_blank=True, allow_null=True, required=False)
    is_medical_claim = serializers.BooleanField(required=False, default=False)
    payment_method = serializers.CharField(max_length=50, allow_blank=True, allow_null=True, required=False)
    service_charge = _money_field()
    collection_charge = _money_field()
    discount = _money_field()
    discount_percentage = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=ZERO, max_value=Decimal('100'), required=False, default=ZERO
    )
    paid_amount = _money_field()
    status = serializers.ChoiceField(choices=Invoice.STATUS_CHOICES, required=False)
    items = InvoiceItemWriteSerializer(many=True, required=False)

    def to_service_data(self) -> dict:
        data = dict(self.validated_data)
        for name in ('patient', 'appointment', 'referred_by'):
            obj = data.pop(name, None)
            data[f'{name}_id'] = obj.pk if obj else None
        data['items'] = [dict(item) for item in data.get('items') or []]
        return data


class InvoiceSerializer(serializers.ModelSerializer):
    """Invoice header as listed."""

    patient_name = serializers.CharField(source='patient.full_name', read_only=True, default=None)
    referred_by_name = serializers.CharField(source='referred_by.name', read_only=True, default=None)

    class Meta:
        model = Invoice
        fields = [
            'id',
            'invoice_no',
            'invoice_date',
            'patient',
            'patient_name',
            'appointment',
            'referred_by',
            'referred_by_name',
            'lab_name',
            'collector_name',
            'is_medical_claim',
            'payment_method',
            'gross_amount',
            'service_charge',
            'collection_charge',
            'discount',
            'discount_percentage',
            'net_amount',
            'round_off',
            'paid_amount',
            'due_amount',
            'status',
            'created_at',
        ]
        read_only_fields = fields


class InvoiceDetailSerializer(InvoiceSerializer):
    items = InvoiceItemSerializer(many=True, read_only=True)

    class Meta(InvoiceSerializer.Meta):
        fields = InvoiceSerializer.Meta.fields + ['items']
        read_only_fields = fields


class InvoiceStatusSerializer(serializers.Serializer):
    # Unknown statuses are rejected by the billing service.
    status = serializers.CharField(max_length=10)
    paid_amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=ZERO, required=False)
