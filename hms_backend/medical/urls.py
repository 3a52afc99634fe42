from django.urls import path

from hms_backend.medical.views import (
    CertificateTypeListView,
    MedicalRecordDetailView,
    PatientCertificateView,
    PatientRecordListCreateView,
)

app_name = 'medical'

urlpatterns = [
    path('patients/<int:pk>/records/', PatientRecordListCreateView.as_view(), name='patient_records'),
    path('records/<int:pk>/', MedicalRecordDetailView.as_view(), name='record_detail'),
    path('certificates/types/', CertificateTypeListView.as_view(), name='certificate_types'),
    path(
        'patients/<int:pk>/certificates/<slug:cert_type>/',
        PatientCertificateView.as_view(),
        name='patient_certificate',
    ),
]
