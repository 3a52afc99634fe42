"""
Medical app views.

Contains:
- PatientRecordListCreateView: a patient's records, newest visit first
- MedicalRecordDetailView: retrieve / update / delete one record
- CertificateTypeListView: the certificate catalogue
- PatientCertificateView: render a certificate as HTML
"""

from django.http import HttpResponse
from django.shortcuts import get_object_or_404

from rest_framework import generics, status
from rest_framework.response import Response

from hms_backend.core.utils import log_action
from hms_backend.medical.certificates import CERTIFICATE_TYPES, UnknownCertificateType, render_certificate
from hms_backend.medical.models import MedicalRecord
from hms_backend.medical.permissions import CertificatePermission, MedicalRecordPermission
from hms_backend.medical.serializers import (
    CertificateValuesSerializer,
    MedicalRecordSerializer,
    MedicalRecordWriteSerializer,
)
from hms_backend.patients.models import Patient


class PatientRecordListCreateView(generics.ListCreateAPIView):
    permission_classes = [MedicalRecordPermission]

    def get_patient(self):
        return get_object_or_404(Patient, pk=self.kwargs['pk'])

    def get_queryset(self):
        patient = self.get_patient()
        return MedicalRecord.objects.select_related('doctor').filter(patient=patient).order_by('-visit_date', '-id')

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return MedicalRecordWriteSerializer
        return MedicalRecordSerializer

    def create(self, request, *args, **kwargs):
        patient = self.get_patient()
        write_serializer = self.get_serializer(data=request.data)
        write_serializer.is_valid(raise_exception=True)
        record = write_serializer.save(patient=patient)
        log_action(request.user, 'medical_record_created', patient_id=patient.pk, target='medical_record', target_id=record.pk)

        read_serializer = MedicalRecordSerializer(record, context={'request': request})
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class MedicalRecordDetailView(generics.RetrieveUpdateDestroyAPIView):
    permission_classes = [MedicalRecordPermission]
    queryset = MedicalRecord.objects.select_related('doctor').all()

    def get_serializer_class(self):
        if self.request.method in ('PUT', 'PATCH'):
            return MedicalRecordWriteSerializer
        return MedicalRecordSerializer

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        record = self.get_object()

        write_serializer = MedicalRecordWriteSerializer(record, data=request.data, partial=partial)
        write_serializer.is_valid(raise_exception=True)
        updated = write_serializer.save()

        log_action(request.user, 'medical_record_updated', patient_id=updated.patient_id, target='medical_record', target_id=updated.pk)
        return Response(MedicalRecordSerializer(updated, context={'request': request}).data, status=status.HTTP_200_OK)

    def perform_destroy(self, instance):
        patient_id = instance.patient_id
        record_id = instance.pk
        instance.delete()
        log_action(self.request.user, 'medical_record_deleted', patient_id=patient_id, target='medical_record', target_id=record_id)


class CertificateTypeListView(generics.GenericAPIView):
    permission_classes = [CertificatePermission]

    def get(self, request, *args, **kwargs):
        return Response([ct.as_dict() for ct in CERTIFICATE_TYPES.values()], status=status.HTTP_200_OK)


class PatientCertificateView(generics.GenericAPIView):
    """
    Render a certificate for a patient as an HTML document.

    GET  /api/patients/<id>/certificates/<type>/?father_name=...
    POST /api/patients/<id>/certificates/<type>/   (form values in the body)
    """

    permission_classes = [CertificatePermission]
    serializer_class = CertificateValuesSerializer

    def get(self, request, *args, **kwargs):
        return self._render(request, request.query_params)

    def post(self, request, *args, **kwargs):
        return self._render(request, request.data)

    def _render(self, request, data):
        patient = get_object_or_404(Patient, pk=self.kwargs['pk'])
        ser = self.get_serializer(data=data)
        ser.is_valid(raise_exception=True)

        try:
            html = render_certificate(patient, self.kwargs['cert_type'], ser.validated_data)
        except UnknownCertificateType as exc:
            return Response({'detail': str(exc), 'field': 'cert_type'}, status=status.HTTP_400_BAD_REQUEST)

        log_action(request.user, 'certificate_generated', patient_id=patient.pk, meta={'type': self.kwargs['cert_type']})
        return HttpResponse(html, content_type='text/html; charset=utf-8')
