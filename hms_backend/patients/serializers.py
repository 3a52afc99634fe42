from rest_framework import serializers

from hms_backend.doctors.serializers import DoctorNestedSerializer
from hms_backend.patients.models import Patient
from hms_backend.patients.utils import calculate_age

SUPPLIED_FIELDS = [
    'registration_no',
    'full_name',
    'gender',
    'dob',
    'phone_no',
    'emergency_no',
    'address',
    'country',
    'religion',
    'passport_no',
    'guardian_name',
    'guardian_relation',
    'guardian_address',
    'guardian_passport_no',
    'insurance_company',
    'insurance_address',
    'is_corporate',
    'admission_date',
    'discharge_date',
    'bill_no',
    'doctor_incharge_1',
    'doctor_incharge_2',
]


class PatientReadSerializer(serializers.ModelSerializer):
    """Read-only serializer with all fields, computed age and in-charge doctors."""

    age = serializers.SerializerMethodField()
    doctor_incharge_1_detail = DoctorNestedSerializer(source='doctor_incharge_1', read_only=True, allow_null=True)
    doctor_incharge_2_detail = DoctorNestedSerializer(source='doctor_incharge_2', read_only=True, allow_null=True)

    class Meta:
        model = Patient
        fields = ['id', *SUPPLIED_FIELDS, 'age', 'doctor_incharge_1_detail', 'doctor_incharge_2_detail', 'created_at']
        read_only_fields = fields

    def get_age(self, obj):
        return calculate_age(obj.dob)


class PatientWriteSerializer(serializers.ModelSerializer):
    """Write serializer for create/update operations.

    ``registration_no`` may be left out; the next number in the yearly series
    is assigned on save.
    """

    registration_no = serializers.CharField(max_length=32, required=False, allow_blank=True)

    class Meta:
        model = Patient
        fields = SUPPLIED_FIELDS

    def validate_full_name(self, value):
        if not (value or '').strip():
            raise serializers.ValidationError("Patient's full name is required.")
        return value.strip()

    def validate_registration_no(self, value):
        value = (value or '').strip()
        if not value:
            return value
        qs = Patient.objects.filter(registration_no=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError('A patient with this registration number already exists.')
        return value

    def validate(self, attrs):
        admission = attrs.get('admission_date', getattr(self.instance, 'admission_date', None))
        discharge = attrs.get('discharge_date', getattr(self.instance, 'discharge_date', None))
        if admission and discharge and discharge < admission:
            raise serializers.ValidationError({'discharge_date': 'Discharge date cannot be before admission date.'})
        return attrs
