from django.db.models import Q

from rest_framework import generics, status
from rest_framework.response import Response

from hms_backend.core.utils import log_action
from hms_backend.patients.models import Patient
from hms_backend.patients.permissions import PatientDeletePermission, PatientPermission
from hms_backend.patients.serializers import PatientReadSerializer, PatientWriteSerializer


def _patients():
    return Patient.objects.select_related('doctor_incharge_1', 'doctor_incharge_2')


class PatientListCreateView(generics.ListCreateAPIView):
    """List patients (newest first, ``?q=`` searches) or admit a new one."""

    permission_classes = [PatientPermission]

    def get_queryset(self):
        qs = _patients().all()
        q = (self.request.query_params.get('q') or '').strip()
        if q:
            qs = qs.filter(
                Q(full_name__icontains=q)
                | Q(phone_no__icontains=q)
                | Q(registration_no__icontains=q)
            )
        return qs

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return PatientWriteSerializer
        return PatientReadSerializer

    def create(self, request, *args, **kwargs):
        write_serializer = self.get_serializer(data=request.data)
        write_serializer.is_valid(raise_exception=True)
        patient = write_serializer.save()
        log_action(request.user, 'patient_created', patient_id=patient.pk)

        read_serializer = PatientReadSerializer(patient, context={'request': request})
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class PatientDetailView(generics.RetrieveUpdateDestroyAPIView):
    """Retrieve, update or delete a patient."""

    permission_classes = [PatientPermission, PatientDeletePermission]

    def get_queryset(self):
        return _patients().all()

    def get_serializer_class(self):
        if self.request.method in ['PUT', 'PATCH']:
            return PatientWriteSerializer
        return PatientReadSerializer

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        patient = self.get_object()

        write_serializer = PatientWriteSerializer(
            patient,
            data=request.data,
            partial=partial,
            context={'request': request},
        )
        write_serializer.is_valid(raise_exception=True)
        updated = write_serializer.save()

        log_action(request.user, 'patient_updated', patient_id=updated.pk)
        return Response(PatientReadSerializer(updated, context={'request': request}).data, status=status.HTTP_200_OK)

    def perform_destroy(self, instance):
        patient_id = instance.pk
        instance.delete()
        log_action(self.request.user, 'patient_deleted', patient_id=patient_id)
