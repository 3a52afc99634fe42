from rest_framework import serializers

from hms_backend.doctors.models import Department, Doctor


class DepartmentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Department
        fields = ['id', 'name', 'created_at']
        read_only_fields = ['id', 'created_at']


class DoctorSerializer(serializers.ModelSerializer):
    """Read/write serializer for directory entries."""

    department_name = serializers.CharField(source='department.name', read_only=True, allow_null=True, default=None)
    initials = serializers.CharField(read_only=True)

    class Meta:
        model = Doctor
        fields = [
            'id',
            'name',
            'initials',
            'specialization',
            'qualification',
            'experience',
            'contact',
            'email',
            'schedule',
            'department',
            'department_name',
            'created_at',
        ]
        read_only_fields = ['id', 'initials', 'department_name', 'created_at']

    def validate_name(self, value):
        if not (value or '').strip():
            raise serializers.ValidationError("Doctor's name is required.")
        return value.strip()


class DoctorNestedSerializer(serializers.ModelSerializer):
    """Compact doctor embedded in appointments, records and invoices."""

    class Meta:
        model = Doctor
        fields = ['id', 'name', 'specialization']
        read_only_fields = fields
