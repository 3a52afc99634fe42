from django.urls import path

from .views import (
    AppointmentDetailView,
    AppointmentDischargeView,
    AppointmentListCreateView,
    AppointmentQueueView,
    BedDetailView,
    BedListCreateView,
    WardBedsView,
    WardListCreateView,
)

app_name = 'appointments'

urlpatterns = [
    path('appointments/', AppointmentListCreateView.as_view(), name='list'),
    path('appointments/queue/', AppointmentQueueView.as_view(), name='queue'),
    path('appointments/<int:pk>/', AppointmentDetailView.as_view(), name='detail'),
    path('appointments/<int:pk>/discharge/', AppointmentDischargeView.as_view(), name='discharge'),
    path('wards/', WardListCreateView.as_view(), name='ward_list'),
    path('wards/<int:pk>/beds/', WardBedsView.as_view(), name='ward_beds'),
    path('beds/', BedListCreateView.as_view(), name='bed_list'),
    path('beds/<int:pk>/', BedDetailView.as_view(), name='bed_detail'),
]
