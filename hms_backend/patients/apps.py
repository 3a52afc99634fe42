from django.apps import AppConfig


class PatientsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hms_backend.patients'
    label = 'patients'
    verbose_name = 'Patients (Admissions)'
