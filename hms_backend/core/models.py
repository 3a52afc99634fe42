from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models


class Role(models.Model):
    """A staff role; permission classes compare against ``name``."""

    ADMIN = 'admin'
    RECEPTIONIST = 'receptionist'
    DOCTOR = 'doctor'
    BILLING = 'billing'

    CHOICES = [
        (ADMIN, 'Administrator'),
        (RECEPTIONIST, 'Receptionist'),
        (DOCTOR, 'Doctor'),
        (BILLING, 'Billing'),
    ]

    name = models.CharField(max_length=64, unique=True, db_index=True)
    label = models.CharField(max_length=128)

    class Meta:
        db_table = 'core_role'
        ordering = ['name']

    def __str__(self) -> str:
        return self.label or self.name


class User(AbstractUser):
    """Hospital staff account.

    The front end shows ``full_name`` and the role after sign-in
    (``/api/auth/me/``). Users without a role can sign in but every
    domain endpoint answers 403.
    """

    email = models.EmailField('email address', blank=True, unique=True)
    role = models.ForeignKey(
        Role,
        null=True,
        blank=True,
        on_delete=models.PROTECT,
        related_name='users',
    )

    class Meta:
        db_table = 'core_user'
        ordering = ['username']

    @property
    def role_name(self):
        return self.role.name if self.role_id else None

    @property
    def full_name(self) -> str:
        return self.get_full_name() or self.username


class AuditLog(models.Model):
    """Who did what to which record.

    ``target``/``target_id`` name the touched object (``'invoice'``, 42);
    ``patient_id`` is kept as a plain integer so a patient's history
    survives deleting the patient.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs',
    )
    role_name = models.CharField(max_length=50, blank=True, db_index=True)
    action = models.CharField(max_length=50, db_index=True)
    target = models.CharField(max_length=50, blank=True, default='')
    target_id = models.BigIntegerField(null=True, blank=True)
    patient_id = models.IntegerField(null=True, blank=True, db_index=True)
    timestamp = models.DateTimeField(auto_now_add=True, db_index=True)
    meta = models.JSONField(null=True, blank=True)

    class Meta:
        db_table = 'core_auditlog'
        ordering = ['-timestamp', '-id']
        indexes = [
            models.Index(fields=['action', 'timestamp']),
            models.Index(fields=['target', 'target_id']),
            models.Index(fields=['patient_id', 'timestamp']),
        ]

    def __str__(self) -> str:
        subject = f"{self.target}#{self.target_id}" if self.target else f"patient_id={self.patient_id}"
        return f"{self.timestamp:%Y-%m-%d %H:%M} {self.action} {subject}"
