from django.contrib import admin

from hms_backend.patients.models import Patient
from hms_backend.patients.utils import age_display


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('registration_no', 'full_name', 'gender', 'age', 'phone_no', 'admission_date', 'discharge_date')
    list_filter = ('gender', 'is_corporate')
    search_fields = ('registration_no', 'full_name', 'phone_no')
    readonly_fields = ('created_at',)
    ordering = ('-created_at',)

    fieldsets = (
        (None, {'fields': ('registration_no', 'full_name', 'gender', 'dob', 'phone_no', 'emergency_no', 'address')}),
        ('Identity', {'fields': ('country', 'religion', 'passport_no')}),
        ('Guardian', {'fields': ('guardian_name', 'guardian_relation', 'guardian_address', 'guardian_passport_no')}),
        ('Insurance', {'fields': ('insurance_company', 'insurance_address', 'is_corporate')}),
        ('Admission', {'fields': ('admission_date', 'discharge_date', 'bill_no', 'doctor_incharge_1', 'doctor_incharge_2', 'created_at')}),
    )

    @admin.display(description='Age')
    def age(self, obj):
        return age_display(obj.dob)
