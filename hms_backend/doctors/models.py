from django.db import models


class Department(models.Model):
    name = models.CharField(max_length=150, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name', 'id']

    def __str__(self) -> str:
        return self.name


class Doctor(models.Model):
    """A doctor in the hospital directory.

    Independent of user accounts: appointments, medical records and invoices
    (as referrer) point at directory entries, not at logins.
    """

    name = models.CharField(max_length=200)
    specialization = models.CharField(max_length=200, blank=True, null=True)
    qualification = models.CharField(max_length=200, blank=True, null=True)
    experience = models.CharField(max_length=100, blank=True, null=True)
    contact = models.CharField(max_length=50, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    # Free-text availability, e.g. "Mon-Fri 10:00-14:00".
    schedule = models.CharField(max_length=255, blank=True, null=True)
    department = models.ForeignKey(
        Department,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name='doctors',
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name', 'id']

    def __str__(self) -> str:
        return self.name

    @property
    def initials(self) -> str:
        return ''.join(part[0] for part in self.name.split() if part).upper()
