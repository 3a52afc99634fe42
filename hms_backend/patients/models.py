from django.db import models
from django.utils import timezone

from hms_backend.core.numbering import next_sequence_number


def next_registration_no() -> str:
    """Next number in this year's ``REG-YYYY-NNNNNN`` series."""
    return next_sequence_number(Patient, 'registration_no', f'REG-{timezone.localdate().year}-')


class Patient(models.Model):
    """An admitted (or registered) patient."""

    GENDER_MALE = 'Male'
    GENDER_FEMALE = 'Female'
    GENDER_OTHER = 'Other'
    GENDER_CHOICES = (
        (GENDER_MALE, 'Male'),
        (GENDER_FEMALE, 'Female'),
        (GENDER_OTHER, 'Other'),
    )

    registration_no = models.CharField(max_length=32, unique=True, blank=True)
    full_name = models.CharField(max_length=200)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, blank=True, null=True)
    dob = models.DateField(blank=True, null=True)
    phone_no = models.CharField(max_length=30, blank=True, null=True)
    emergency_no = models.CharField(max_length=30, blank=True, null=True)
    address = models.TextField(blank=True, null=True)
    country = models.CharField(max_length=100, blank=True, null=True)
    religion = models.CharField(max_length=100, blank=True, null=True)
    passport_no = models.CharField(max_length=50, blank=True, null=True)

    guardian_name = models.CharField(max_length=200, blank=True, null=True)
    guardian_relation = models.CharField(max_length=100, blank=True, null=True)
    guardian_address = models.TextField(blank=True, null=True)
    guardian_passport_no = models.CharField(max_length=50, blank=True, null=True)

    insurance_company = models.CharField(max_length=200, blank=True, null=True)
    insurance_address = models.TextField(blank=True, null=True)
    is_corporate = models.BooleanField(default=False)

    admission_date = models.DateField(blank=True, null=True)
    discharge_date = models.DateField(blank=True, null=True)
    bill_no = models.CharField(max_length=50, blank=True, null=True)

    doctor_incharge_1 = models.ForeignKey(
        'doctors.Doctor',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='primary_patients',
    )
    doctor_incharge_2 = models.ForeignKey(
        'doctors.Doctor',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='secondary_patients',
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['full_name'], name='patients_pa_full_na_4b1e0c_idx'),
            models.Index(fields=['phone_no'], name='patients_pa_phone_n_9a7d21_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.full_name} ({self.registration_no})"

    def save(self, *args, **kwargs):
        if not self.registration_no:
            self.registration_no = next_registration_no()
        super().save(*args, **kwargs)
