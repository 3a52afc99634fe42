"""Calendar-day filtering for schedules and the patient queue."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Iterable

from django.utils import timezone
from django.utils.dateparse import parse_datetime

from .models import Appointment

DEFAULT_QUEUE_LIMIT = 5


def parse_day(value: str) -> date:
	return datetime.strptime(value, '%Y-%m-%d').date()


def _field(item: Any, name: str):
	if isinstance(item, dict):
		return item.get(name)
	return getattr(item, name, None)


def _timestamp(value) -> datetime | None:
	"""Aware datetime for ``value`` (datetime or ISO string); None if unusable."""
	if value is None or value == '':
		return None
	if isinstance(value, datetime):
		dt = value
	else:
		try:
			dt = parse_datetime(str(value))
		except ValueError:
			return None
		if dt is None:
			return None
	if timezone.is_naive(dt):
		dt = timezone.make_aware(dt, timezone.get_current_timezone())
	return dt


def day_bounds(day: date) -> tuple[datetime, datetime]:
	tz = timezone.get_current_timezone()
	return (
		timezone.make_aware(datetime.combine(day, time.min), tz),
		timezone.make_aware(datetime.combine(day, time.max), tz),
	)


def appointments_for_day(
	appointments: Iterable[Any],
	day: date | str,
	*,
	doctor_id: int | str | None = None,
	appointment_type: str | None = None,
) -> list:
	"""
	Keep the appointments whose ``appointment_time`` falls on ``day``.

	Works on model instances and on plain dicts. The calendar day is taken in
	the current (configured) time zone. Items with a missing or unparseable
	time are dropped. Result is sorted by time, earliest first.
	"""
	if isinstance(day, str):
		day = parse_day(day)
	tz = timezone.get_current_timezone()

	selected = []
	for item in appointments:
		ts = _timestamp(_field(item, 'appointment_time'))
		if ts is None:
			continue
		if timezone.localtime(ts, tz).date() != day:
			continue
		if doctor_id is not None and str(_field(item, 'doctor_id')) != str(doctor_id):
			continue
		if appointment_type and _field(item, 'appointment_type') != appointment_type:
			continue
		selected.append((ts, item))

	selected.sort(key=lambda pair: pair[0])
	return [item for _, item in selected]


def todays_queue(*, limit: int = DEFAULT_QUEUE_LIMIT, now: datetime | None = None) -> list[Appointment]:
	"""Today's appointments (any type), earliest first, at most ``limit``."""
	today = timezone.localdate(now) if now else timezone.localdate()
	start, end = day_bounds(today)
	qs = (
		Appointment.objects.select_related('patient', 'doctor', 'bed', 'bed__ward')
		.filter(appointment_time__gte=start, appointment_time__lte=end)
		.exclude(status=Appointment.STATUS_CANCELLED)
		.order_by('appointment_time', 'id')
	)
	return appointments_for_day(qs[:limit], today)
