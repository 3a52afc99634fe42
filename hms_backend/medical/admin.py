from django.contrib import admin

from .models import MedicalRecord


@admin.register(MedicalRecord)
class MedicalRecordAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'doctor', 'visit_date', 'diagnosis')
    list_filter = ('visit_date', 'doctor')
    search_fields = ('patient__full_name', 'patient__registration_no', 'diagnosis')
    date_hierarchy = 'visit_date'
    raw_id_fields = ('patient',)
