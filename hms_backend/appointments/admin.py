from django.contrib import admin

from .models import Appointment, Bed, Ward


@admin.register(Ward)
class WardAdmin(admin.ModelAdmin):
    list_display = ('name', 'created_at')
    search_fields = ('name',)


@admin.register(Bed)
class BedAdmin(admin.ModelAdmin):
    list_display = ('bed_number', 'ward', 'is_occupied')
    list_filter = ('ward', 'is_occupied')
    search_fields = ('bed_number',)
    # Occupancy follows admissions and discharges.
    readonly_fields = ('is_occupied',)


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'appointment_type', 'patient', 'doctor', 'bed', 'appointment_time', 'status')
    list_filter = ('appointment_type', 'status', 'doctor')
    search_fields = ('patient__full_name', 'patient__registration_no', 'doctor__name')
    date_hierarchy = 'appointment_time'
    raw_id_fields = ('patient',)
    readonly_fields = ('appointment_type', 'bed', 'created_at', 'updated_at')
