"""
Appointments app views.

Contains:
- AppointmentListCreateView: list (``?date``, ``?doctor``, ``?type``, ``?status``) and book
- AppointmentDetailView: retrieve / update / delete
- AppointmentDischargeView: end an IPD admission and free the bed
- AppointmentQueueView: today's patient queue
- Ward / Bed views: the bed plan
"""

from django.shortcuts import get_object_or_404

from rest_framework import generics, status
from rest_framework.response import Response

from hms_backend.core.utils import log_action

from .exceptions import AppointmentError
from .models import Appointment, Bed, Ward
from .permissions import AppointmentPermission, BedPermission
from .scheduling import DEFAULT_QUEUE_LIMIT, appointments_for_day, day_bounds, parse_day, todays_queue
from .serializers import (
	AppointmentCreateSerializer,
	AppointmentSerializer,
	AppointmentUpdateSerializer,
	BedSerializer,
	DischargeSerializer,
	WardSerializer,
)
from .services.admission import book_appointment, delete_appointment, discharge_appointment

MAX_QUEUE_LIMIT = 50


def _appointments():
	return Appointment.objects.select_related('patient', 'doctor', 'bed', 'bed__ward')


class AppointmentListCreateView(generics.ListCreateAPIView):
	"""
	List and book appointments.

	POST goes through the admission service, which enforces the bed rules.
	"""
	permission_classes = [AppointmentPermission]

	def get_queryset(self):
		qs = _appointments().all()
		params = self.request.query_params

		doctor_id = params.get('doctor')
		if doctor_id:
			qs = qs.filter(doctor_id=doctor_id)
		appointment_type = params.get('type')
		if appointment_type:
			qs = qs.filter(appointment_type=appointment_type)
		status_value = params.get('status')
		if status_value:
			qs = qs.filter(status=status_value)
		patient_id = params.get('patient')
		if patient_id:
			qs = qs.filter(patient_id=patient_id)
		return qs

	def get_serializer_class(self):
		if self.request.method == 'POST':
			return AppointmentCreateSerializer
		return AppointmentSerializer

	def list(self, request, *args, **kwargs):
		date_str = request.query_params.get('date')
		if not date_str:
			return super().list(request, *args, **kwargs)

		try:
			day = parse_day(date_str)
		except ValueError:
			return Response({'detail': 'date must be in format YYYY-MM-DD.'}, status=status.HTTP_400_BAD_REQUEST)

		start, end = day_bounds(day)
		qs = self.get_queryset().filter(appointment_time__gte=start, appointment_time__lte=end)
		return Response(AppointmentSerializer(appointments_for_day(qs, day), many=True).data, status=status.HTTP_200_OK)

	def create(self, request, *args, **kwargs):
		write_serializer = self.get_serializer(data=request.data)
		write_serializer.is_valid(raise_exception=True)

		try:
			appointment = book_appointment(data=write_serializer.to_service_data(), user=request.user)
		except AppointmentError as e:
			return Response(e.to_dict(), status=status.HTTP_400_BAD_REQUEST)

		read_serializer = AppointmentSerializer(appointment, context={'request': request})
		headers = self.get_success_headers(read_serializer.data)
		return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class AppointmentDetailView(generics.RetrieveUpdateDestroyAPIView):
	permission_classes = [AppointmentPermission]

	def get_queryset(self):
		return _appointments().all()

	def get_serializer_class(self):
		if self.request.method in ('PUT', 'PATCH'):
			return AppointmentUpdateSerializer
		return AppointmentSerializer

	def update(self, request, *args, **kwargs):
		partial = kwargs.pop('partial', False)
		appointment = self.get_object()

		write_serializer = AppointmentUpdateSerializer(
			appointment,
			data=request.data,
			partial=partial,
			context={'request': request},
		)
		write_serializer.is_valid(raise_exception=True)
		updated = write_serializer.save()

		log_action(request.user, 'appointment_updated', updated.patient_id, target='appointment', target_id=updated.pk)
		read_serializer = AppointmentSerializer(updated, context={'request': request})
		return Response(read_serializer.data, status=status.HTTP_200_OK)

	def perform_destroy(self, instance):
		delete_appointment(instance, user=self.request.user)


class AppointmentDischargeView(generics.GenericAPIView):
	"""
	POST /api/appointments/<id>/discharge/
	Body (optional): {"discharge_date": "YYYY-MM-DD"}
	"""
	permission_classes = [AppointmentPermission]
	serializer_class = DischargeSerializer

	def get_queryset(self):
		return _appointments().all()

	def post(self, request, *args, **kwargs):
		appointment = self.get_object()
		ser = self.get_serializer(data=request.data)
		ser.is_valid(raise_exception=True)

		try:
			discharged = discharge_appointment(
				appointment.pk,
				user=request.user,
				discharge_date=ser.validated_data.get('discharge_date'),
			)
		except AppointmentError as e:
			return Response(e.to_dict(), status=status.HTTP_400_BAD_REQUEST)

		discharged = _appointments().get(pk=discharged.pk)
		return Response(AppointmentSerializer(discharged, context={'request': request}).data, status=status.HTTP_200_OK)


class AppointmentQueueView(generics.GenericAPIView):
	"""Today's patient queue, earliest first (``?limit=``, default 5)."""
	permission_classes = [AppointmentPermission]
	serializer_class = AppointmentSerializer

	def get(self, request, *args, **kwargs):
		limit_str = request.query_params.get('limit')
		limit = DEFAULT_QUEUE_LIMIT
		if limit_str:
			try:
				limit = int(limit_str)
			except ValueError:
				return Response({'detail': 'limit must be an integer.'}, status=status.HTTP_400_BAD_REQUEST)
			if limit < 1:
				return Response({'detail': 'limit must be >= 1.'}, status=status.HTTP_400_BAD_REQUEST)
			limit = min(limit, MAX_QUEUE_LIMIT)

		queue = todays_queue(limit=limit)
		return Response(self.get_serializer(queue, many=True).data, status=status.HTTP_200_OK)


class WardListCreateView(generics.ListCreateAPIView):
	permission_classes = [BedPermission]
	queryset = Ward.objects.all()
	serializer_class = WardSerializer


class BedListCreateView(generics.ListCreateAPIView):
	"""Beds, optionally only free ones (``?available=true``) or one ward (``?ward=``)."""
	permission_classes = [BedPermission]
	serializer_class = BedSerializer

	def get_queryset(self):
		qs = Bed.objects.select_related('ward').all()
		if self.request.query_params.get('available') in ('1', 'true', 'True'):
			qs = qs.filter(is_occupied=False)
		ward_id = self.request.query_params.get('ward')
		if ward_id:
			qs = qs.filter(ward_id=ward_id)
		return qs


class BedDetailView(generics.RetrieveUpdateAPIView):
	permission_classes = [BedPermission]
	queryset = Bed.objects.select_related('ward').all()
	serializer_class = BedSerializer


class WardBedsView(generics.ListAPIView):
	permission_classes = [BedPermission]
	serializer_class = BedSerializer

	def get_queryset(self):
		ward = get_object_or_404(Ward, pk=self.kwargs['pk'])
		return ward.beds.select_related('ward').all()
