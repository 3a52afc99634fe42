from rest_framework import serializers

from hms_backend.appointments.models import Appointment, Bed, Ward
from hms_backend.doctors.models import Doctor
from hms_backend.doctors.serializers import DoctorNestedSerializer
from hms_backend.patients.models import Patient


class WardSerializer(serializers.ModelSerializer):
    bed_count = serializers.IntegerField(source='beds.count', read_only=True)

    class Meta:
        model = Ward
        fields = ['id', 'name', 'bed_count', 'created_at']
        read_only_fields = ['id', 'bed_count', 'created_at']


class BedSerializer(serializers.ModelSerializer):
    """Beds are created and renamed here; occupancy is read-only."""

    ward_name = serializers.CharField(source='ward.name', read_only=True, default=None)

    class Meta:
        model = Bed
        fields = ['id', 'bed_number', 'ward', 'ward_name', 'is_occupied', 'created_at']
        read_only_fields = ['id', 'ward_name', 'is_occupied', 'created_at']


class PatientBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Patient
        fields = ['id', 'registration_no', 'full_name']
        read_only_fields = fields


class AppointmentSerializer(serializers.ModelSerializer):
    """Read serializer: ids plus the related names the schedule screens show."""

    patient_detail = PatientBriefSerializer(source='patient', read_only=True, allow_null=True)
    doctor_detail = DoctorNestedSerializer(source='doctor', read_only=True, allow_null=True)
    bed_detail = BedSerializer(source='bed', read_only=True, allow_null=True)

    class Meta:
        model = Appointment
        fields = [
            'id',
            'patient',
            'patient_detail',
            'doctor',
            'doctor_detail',
            'bed',
            'bed_detail',
            'appointment_type',
            'appointment_time',
            'status',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class AppointmentCreateSerializer(serializers.Serializer):
    """Field-level validation only; bed rules live in ``services.admission``."""

    patient = serializers.PrimaryKeyRelatedField(queryset=Patient.objects.all(), allow_null=True, required=False)
    doctor = serializers.PrimaryKeyRelatedField(queryset=Doctor.objects.all(), allow_null=True, required=False)
    bed = serializers.IntegerField(allow_null=True, required=False)
    appointment_type = serializers.ChoiceField(choices=Appointment.TYPE_CHOICES)
    appointment_time = serializers.DateTimeField(allow_null=True, required=False)
    status = serializers.ChoiceField(choices=Appointment.STATUS_CHOICES, required=False)
    notes = serializers.CharField(allow_blank=True, allow_null=True, required=False)

    def to_service_data(self) -> dict:
        data = self.validated_data
        patient = data.get('patient')
        doctor = data.get('doctor')
        return {
            'patient_id': patient.pk if patient else None,
            'doctor_id': doctor.pk if doctor else None,
            'bed_id': data.get('bed'),
            'appointment_type': data['appointment_type'],
            'appointment_time': data.get('appointment_time'),
            'status': data.get('status'),
            'notes': data.get('notes'),
        }


class AppointmentUpdateSerializer(serializers.ModelSerializer):
    """Reschedule, reassign or change the status of an appointment.

    Type and bed are fixed at booking time; admissions leave through the
    discharge endpoint.
    """

    class Meta:
        model = Appointment
        fields = ['doctor', 'appointment_time', 'status', 'notes']

    def validate_status(self, value):
        instance = self.instance
        if instance is None or value == instance.status:
            return value
        if instance.appointment_type == Appointment.TYPE_IPD:
            raise serializers.ValidationError('Use the discharge endpoint to change an admission.')
        if value in (Appointment.STATUS_ADMITTED, Appointment.STATUS_DISCHARGED):
            raise serializers.ValidationError(f'{value} only applies to IPD admissions.')
        return value


class DischargeSerializer(serializers.Serializer):
    discharge_date = serializers.DateField(required=False)
