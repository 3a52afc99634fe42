from django.urls import path

from hms_backend.patients.views import PatientDetailView, PatientListCreateView

app_name = 'patients'

urlpatterns = [
    path('patients/', PatientListCreateView.as_view(), name='list'),
    path('patients/<int:pk>/', PatientDetailView.as_view(), name='detail'),
]
