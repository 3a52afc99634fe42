from django.db import models
from django.utils import timezone


class MedicalRecord(models.Model):
    """One clinical visit note for a patient.

    ``vitals`` holds a flat object with any of: blood_pressure, pulse,
    temperature, respiratory_rate, spo2, weight.
    """

    patient = models.ForeignKey(
        'patients.Patient',
        on_delete=models.CASCADE,
        related_name='medical_records',
    )
    doctor = models.ForeignKey(
        'doctors.Doctor',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='medical_records',
    )
    visit_date = models.DateField(default=timezone.localdate)
    chief_complaint = models.TextField(blank=True, null=True)
    history_of_present_illness = models.TextField(blank=True, null=True)
    past_medical_history = models.TextField(blank=True, null=True)
    physical_examination_findings = models.TextField(blank=True, null=True)
    investigation_results = models.TextField(blank=True, null=True)
    diagnosis = models.TextField()
    prescription = models.TextField(blank=True, null=True)
    treatment_plan = models.TextField(blank=True, null=True)
    vitals = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-visit_date', '-id']
        indexes = [
            models.Index(fields=['patient', 'visit_date'], name='medical_med_patient_a3e61b_idx'),
        ]

    def __str__(self) -> str:
        return f"Record #{self.id} (patient_id={self.patient_id}, {self.visit_date})"
