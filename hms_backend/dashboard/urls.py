from django.urls import path

from hms_backend.dashboard.views import DashboardStatsView

app_name = 'dashboard'

urlpatterns = [
    path('dashboard/stats/', DashboardStatsView.as_view(), name='stats'),
]
