from rest_framework import serializers

from hms_backend.medical.models import MedicalRecord


class VitalsSerializer(serializers.Serializer):
    """Structured vitals; every key is optional."""

    blood_pressure = serializers.RegexField(
        r'^\d{2,3}/\d{2,3}$',
        max_length=7,
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={'invalid': 'Use systolic/diastolic, e.g. 120/80.'},
    )
    pulse = serializers.IntegerField(min_value=0, max_value=300, required=False, allow_null=True)
    temperature = serializers.FloatField(min_value=25, max_value=45, required=False, allow_null=True)
    respiratory_rate = serializers.IntegerField(min_value=0, max_value=100, required=False, allow_null=True)
    spo2 = serializers.IntegerField(min_value=0, max_value=100, required=False, allow_null=True)
    weight = serializers.FloatField(min_value=0, max_value=500, required=False, allow_null=True)

    def to_representation(self, instance):
        instance = instance or {}
        return {name: instance.get(name) for name in self.fields}


RECORD_FIELDS = [
    'doctor',
    'visit_date',
    'chief_complaint',
    'history_of_present_illness',
    'past_medical_history',
    'physical_examination_findings',
    'investigation_results',
    'diagnosis',
    'prescription',
    'treatment_plan',
    'vitals',
]


class MedicalRecordSerializer(serializers.ModelSerializer):
    """Read serializer; ``doctor_name`` is null when no doctor is attached."""

    doctor_name = serializers.CharField(source='doctor.name', read_only=True, default=None)
    vitals = VitalsSerializer(read_only=True)

    class Meta:
        model = MedicalRecord
        fields = ['id', 'patient', *RECORD_FIELDS, 'doctor_name', 'created_at', 'updated_at']
        read_only_fields = fields


class MedicalRecordWriteSerializer(serializers.ModelSerializer):
    vitals = VitalsSerializer(required=False)

    class Meta:
        model = MedicalRecord
        fields = RECORD_FIELDS

    def validate_diagnosis(self, value):
        if not (value or '').strip():
            raise serializers.ValidationError('Diagnosis is required.')
        return value.strip()

    def _vitals(self, validated_data):
        vitals = validated_data.pop('vitals', None)
        if vitals is None:
            return None
        return {key: value for key, value in vitals.items() if value not in (None, '')}

    def create(self, validated_data):
        vitals = self._vitals(validated_data)
        return MedicalRecord.objects.create(vitals=vitals or {}, **validated_data)

    def update(self, instance, validated_data):
        vitals = self._vitals(validated_data)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if vitals is not None:
            instance.vitals = vitals
        instance.save()
        return instance


class CertificateValuesSerializer(serializers.Serializer):
    """Form values for any certificate type; unused keys are ignored."""

    father_name = serializers.CharField(required=False, allow_blank=True)
    date_of_death = serializers.DateField(required=False, allow_null=True)
    cause_of_death = serializers.CharField(required=False, allow_blank=True)
    admission_date = serializers.DateField(required=False, allow_null=True)
    discharge_date = serializers.DateField(required=False, allow_null=True)
    incident_date = serializers.DateField(required=False, allow_null=True)
    details = serializers.CharField(required=False, allow_blank=True)
