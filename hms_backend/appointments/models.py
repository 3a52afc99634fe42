from django.db import models


class Ward(models.Model):
	name = models.CharField(max_length=100, unique=True)
	created_at = models.DateTimeField(auto_now_add=True)

	class Meta:
		ordering = ['name', 'id']

	def __str__(self) -> str:
		return self.name


class Bed(models.Model):
	"""An inpatient bed.

	``is_occupied`` is only flipped by the admission and discharge services,
	together with the appointment row that holds the bed.
	"""
	bed_number = models.CharField(max_length=30)
	ward = models.ForeignKey(
		Ward,
		null=True,
		blank=True,
		on_delete=models.SET_NULL,
		related_name='beds',
	)
	is_occupied = models.BooleanField(default=False)
	created_at = models.DateTimeField(auto_now_add=True)

	class Meta:
		ordering = ['ward__name', 'bed_number', 'id']
		constraints = [
			models.UniqueConstraint(fields=['ward', 'bed_number'], name='appointments_bed_unique_number_per_ward'),
		]

	def __str__(self) -> str:
		if self.ward_id:
			return f"{self.ward.name} / {self.bed_number}"
		return self.bed_number


class Appointment(models.Model):
	"""An OPD visit or an IPD admission.

	- OPD: ``appointment_time`` is the consultation slot; never holds a bed.
	- IPD: ``appointment_time`` is the admission time; holds exactly one bed
	  until discharged.
	"""
	TYPE_OPD = 'OPD'
	TYPE_IPD = 'IPD'

	TYPE_CHOICES = (
		(TYPE_OPD, 'Outpatient (OPD)'),
		(TYPE_IPD, 'Inpatient (IPD)'),
	)

	STATUS_SCHEDULED = 'Scheduled'
	STATUS_COMPLETED = 'Completed'
	STATUS_CANCELLED = 'Cancelled'
	STATUS_ADMITTED = 'Admitted'
	STATUS_DISCHARGED = 'Discharged'

	STATUS_CHOICES = (
		(STATUS_SCHEDULED, STATUS_SCHEDULED),
		(STATUS_COMPLETED, STATUS_COMPLETED),
		(STATUS_CANCELLED, STATUS_CANCELLED),
		(STATUS_ADMITTED, STATUS_ADMITTED),
		(STATUS_DISCHARGED, STATUS_DISCHARGED),
	)

	patient = models.ForeignKey(
		'patients.Patient',
		null=True,
		blank=True,
		on_delete=models.SET_NULL,
		related_name='appointments',
	)
	doctor = models.ForeignKey(
		'doctors.Doctor',
		null=True,
		blank=True,
		on_delete=models.SET_NULL,
		related_name='appointments',
	)
	bed = models.ForeignKey(
		Bed,
		null=True,
		blank=True,
		on_delete=models.SET_NULL,
		related_name='appointments',
	)
	appointment_type = models.CharField(max_length=3, choices=TYPE_CHOICES)
	appointment_time = models.DateTimeField(blank=True, null=True)
	status = models.CharField(
		max_length=20,
		choices=STATUS_CHOICES,
		default=STATUS_SCHEDULED,
	)
	notes = models.TextField(blank=True, null=True)
	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:
		ordering = ['-appointment_time', '-id']
		indexes = [
			models.Index(fields=['appointment_time'], name='appointment_appoint_5e2b9d_idx'),
			models.Index(fields=['doctor', 'appointment_type'], name='appointment_doctor__c41a07_idx'),
		]

	def __str__(self) -> str:
		return f"{self.appointment_type} #{self.id} (patient_id={self.patient_id})"

	@property
	def is_active_admission(self) -> bool:
		return self.appointment_type == self.TYPE_IPD and self.status not in (
			self.STATUS_DISCHARGED,
			self.STATUS_CANCELLED,
		)
