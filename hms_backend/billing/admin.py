from django.contrib import admin

from .models import BillableItem, Invoice, InvoiceItem


@admin.register(BillableItem)
class BillableItemAdmin(admin.ModelAdmin):
    list_display = ('item_name', 'rate')
    search_fields = ('item_name',)


class InvoiceItemInline(admin.TabularInline):
    model = InvoiceItem
    extra = 0
    fields = ('test_name', 'quantity', 'unit_price')
    readonly_fields = fields
    can_delete = False


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    list_display = ('invoice_no', 'invoice_date', 'patient', 'net_amount', 'paid_amount', 'due_amount', 'status')
    list_filter = ('status', 'is_medical_claim', 'invoice_date')
    search_fields = ('invoice_no', 'patient__full_name')
    date_hierarchy = 'invoice_date'
    inlines = [InvoiceItemInline]
    # Amounts are derived from the items.
    readonly_fields = ('invoice_no', 'gross_amount', 'net_amount', 'round_off', 'due_amount', 'created_at')
