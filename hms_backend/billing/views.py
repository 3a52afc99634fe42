"""
Billing app views.

Contains:
- BillableItem views: the rate catalogue
- InvoiceListCreateView: list (``?status``, ``?patient``) and create
- InvoiceDetailView: header with items
- InvoiceStatusView: status change / payment
- InvoiceIntegrityView: invoices without items
"""

from rest_framework import generics, status
from rest_framework.response import Response

from hms_backend.billing.exceptions import InvoiceError
from hms_backend.billing.models import BillableItem, Invoice
from hms_backend.billing.permissions import BillableItemPermission, InvoiceAuditPermission, InvoicePermission
from hms_backend.billing.serializers import (
    BillableItemSerializer,
    InvoiceCreateSerializer,
    InvoiceDetailSerializer,
    InvoiceSerializer,
    InvoiceStatusSerializer,
)
from hms_backend.billing.services import create_invoice, invoices_without_items, update_status


def _error_response(exc: InvoiceError) -> Response:
    code = status.HTTP_400_BAD_REQUEST if exc.is_validation_error else status.HTTP_500_INTERNAL_SERVER_ERROR
    return Response(exc.to_dict(), status=code)


def _invoices():
    return Invoice.objects.select_related('patient', 'referred_by')


class BillableItemListCreateView(generics.ListCreateAPIView):
    permission_classes = [BillableItemPermission]
    queryset = BillableItem.objects.all()
    serializer_class = BillableItemSerializer


class BillableItemDetailView(generics.RetrieveUpdateDestroyAPIView):
    permission_classes = [BillableItemPermission]
    queryset = BillableItem.objects.all()
    serializer_class = BillableItemSerializer


class InvoiceListCreateView(generics.ListCreateAPIView):
    """List invoices, newest first, or create one with its items."""

    permission_classes = [InvoicePermission]

    def get_queryset(self):
        qs = _invoices().all()
        status_value = self.request.query_params.get('status')
        if status_value:
            qs = qs.filter(status=status_value)
        patient_id = self.request.query_params.get('patient')
        if patient_id:
            qs = qs.filter(patient_id=patient_id)
        return qs

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return InvoiceCreateSerializer
        return InvoiceSerializer

    def create(self, request, *args, **kwargs):
        write_serializer = self.get_serializer(data=request.data)
        write_serializer.is_valid(raise_exception=True)

        try:
            invoice = create_invoice(data=write_serializer.to_service_data(), user=request.user)
        except InvoiceError as exc:
            return _error_response(exc)

        invoice = _invoices().prefetch_related('items').get(pk=invoice.pk)
        read_serializer = InvoiceDetailSerializer(invoice, context={'request': request})
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class InvoiceDetailView(generics.RetrieveAPIView):
    permission_classes = [InvoicePermission]
    serializer_class = InvoiceDetailSerializer

    def get_queryset(self):
        return _invoices().prefetch_related('items')


class InvoiceStatusView(generics.GenericAPIView):
    """
    PATCH /api/invoices/<id>/status/
    Body: {"status": "Paid", "paid_amount": "1300.00"?}
    """

    permission_classes = [InvoicePermission]
    serializer_class = InvoiceStatusSerializer

    def get_queryset(self):
        return _invoices().prefetch_related('items')

    def patch(self, request, *args, **kwargs):
        invoice = self.get_object()
        ser = self.get_serializer(data=request.data)
        ser.is_valid(raise_exception=True)

        try:
            invoice = update_status(
                invoice,
                ser.validated_data['status'],
                paid_amount=ser.validated_data.get('paid_amount'),
                user=request.user,
            )
        except InvoiceError as exc:
            return _error_response(exc)

        return Response(InvoiceDetailSerializer(invoice, context={'request': request}).data, status=status.HTTP_200_OK)


class InvoiceIntegrityView(generics.GenericAPIView):
    """Invoice headers without line items (should be empty)."""

    permission_classes = [InvoiceAuditPermission]
    serializer_class = InvoiceSerializer

    def get(self, request, *args, **kwargs):
        orphans = invoices_without_items().select_related('patient', 'referred_by')
        data = self.get_serializer(orphans, many=True).data
        return Response({'count': len(data), 'invoices': data}, status=status.HTTP_200_OK)
