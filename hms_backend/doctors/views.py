from django.db.models import Q
from django.utils import timezone

from rest_framework import generics, status
from rest_framework.response import Response

from hms_backend.appointments.models import Appointment
from hms_backend.appointments.scheduling import appointments_for_day, day_bounds, parse_day
from hms_backend.appointments.serializers import AppointmentSerializer
from hms_backend.core.utils import log_action
from hms_backend.doctors.models import Department, Doctor
from hms_backend.doctors.permissions import DepartmentPermission, DoctorPermission
from hms_backend.doctors.serializers import DepartmentSerializer, DoctorSerializer


class DepartmentListCreateView(generics.ListCreateAPIView):
    permission_classes = [DepartmentPermission]
    queryset = Department.objects.all()
    serializer_class = DepartmentSerializer


class DoctorListCreateView(generics.ListCreateAPIView):
    """List doctors (ordered by name, ``?q=`` searches) or add one."""

    permission_classes = [DoctorPermission]
    serializer_class = DoctorSerializer

    def get_queryset(self):
        qs = Doctor.objects.select_related('department').all()
        q = (self.request.query_params.get('q') or '').strip()
        if q:
            qs = qs.filter(Q(name__icontains=q) | Q(specialization__icontains=q))
        return qs

    def perform_create(self, serializer):
        obj = serializer.save()
        log_action(self.request.user, 'doctor_created', target='doctor', target_id=obj.pk)


class DoctorDetailView(generics.RetrieveUpdateDestroyAPIView):
    permission_classes = [DoctorPermission]
    queryset = Doctor.objects.select_related('department').all()
    serializer_class = DoctorSerializer

    def perform_update(self, serializer):
        obj = serializer.save()
        log_action(self.request.user, 'doctor_updated', target='doctor', target_id=obj.pk)

    def perform_destroy(self, instance):
        doctor_id = instance.pk
        instance.delete()
        log_action(self.request.user, 'doctor_deleted', target='doctor', target_id=doctor_id)


class DoctorScheduleView(generics.GenericAPIView):
    """A doctor's day: OPD appointments on ``?date=`` plus current IPD patients.

    GET /api/doctors/<id>/schedule/?date=YYYY-MM-DD (defaults to today)
    """

    permission_classes = [DoctorPermission]
    queryset = Doctor.objects.all()

    def get(self, request, *args, **kwargs):
        doctor = self.get_object()

        date_str = request.query_params.get('date')
        if date_str:
            try:
                day = parse_day(date_str)
            except ValueError:
                return Response(
                    {'detail': 'date must be in format YYYY-MM-DD.'},
                    status=status.HTTP_400_BAD_REQUEST,
                )
        else:
            day = timezone.localdate()

        base = Appointment.objects.select_related('patient', 'doctor', 'bed', 'bed__ward').filter(doctor=doctor)
        start, end = day_bounds(day)
        opd = appointments_for_day(
            base.filter(
                appointment_type=Appointment.TYPE_OPD,
                appointment_time__gte=start,
                appointment_time__lte=end,
            ),
            day,
            appointment_type=Appointment.TYPE_OPD,
        )
        ipd = base.filter(appointment_type=Appointment.TYPE_IPD).exclude(
            status__in=[Appointment.STATUS_DISCHARGED, Appointment.STATUS_CANCELLED],
        ).order_by('appointment_time', 'id')

        return Response(
            {
                'doctor': DoctorSerializer(doctor).data,
                'date': day.isoformat(),
                'opd': AppointmentSerializer(opd, many=True).data,
                'ipd': AppointmentSerializer(ipd, many=True).data,
            },
            status=status.HTTP_200_OK,
        )
