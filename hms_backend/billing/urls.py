from django.urls import path

from hms_backend.billing.views import (
    BillableItemDetailView,
    BillableItemListCreateView,
    InvoiceDetailView,
    InvoiceIntegrityView,
    InvoiceListCreateView,
    InvoiceStatusView,
)

app_name = 'billing'

urlpatterns = [
    path('billable-items/', BillableItemListCreateView.as_view(), name='billable_item_list'),
    path('billable-items/<int:pk>/', BillableItemDetailView.as_view(), name='billable_item_detail'),
    path('invoices/', InvoiceListCreateView.as_view(), name='invoice_list'),
    path('invoices/without-items/', InvoiceIntegrityView.as_view(), name='invoice_integrity'),
    path('invoices/<int:pk>/', InvoiceDetailView.as_view(), name='invoice_detail'),
    path('invoices/<int:pk>/status/', InvoiceStatusView.as_view(), name='invoice_status'),
]
