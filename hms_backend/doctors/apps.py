from django.apps import AppConfig


class DoctorsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hms_backend.doctors'
    label = 'doctors'
    verbose_name = 'Doctors (Directory)'
