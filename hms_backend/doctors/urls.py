from django.urls import path

from hms_backend.doctors.views import (
    DepartmentListCreateView,
    DoctorDetailView,
    DoctorListCreateView,
    DoctorScheduleView,
)

app_name = 'doctors'

urlpatterns = [
    path('departments/', DepartmentListCreateView.as_view(), name='department_list'),
    path('doctors/', DoctorListCreateView.as_view(), name='list'),
    path('doctors/<int:pk>/', DoctorDetailView.as_view(), name='detail'),
    path('doctors/<int:pk>/schedule/', DoctorScheduleView.as_view(), name='schedule'),
]
