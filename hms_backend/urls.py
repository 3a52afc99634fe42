"""Hospital management backend URL configuration.

API routes:
    /api/auth/          - Authentication (core)
    /api/health/        - Health check (core)
    /api/doctors/       - Doctor directory (doctors)
    /api/patients/      - Patient admissions (patients)
    /api/appointments/  - OPD/IPD appointments, wards, beds (appointments)
    /api/invoices/      - Billing (billing)
    /api/records/       - Medical records & certificates (medical)
    /api/dashboard/     - Headline statistics (dashboard)
"""

from django.contrib import admin
from django.http import HttpResponse
from django.urls import include, path


def root(request):
    """Plain-text liveness response for the site root."""
    return HttpResponse("Hospital management backend is running.")


urlpatterns = [
    path("", root, name="root"),
    path("admin/", admin.site.urls),

    path("api/", include("hms_backend.core.urls")),
    path("api/", include("hms_backend.doctors.urls")),
    path("api/", include("hms_backend.patients.urls")),
    path("api/", include("hms_backend.appointments.urls")),
    path("api/", include("hms_backend.billing.urls")),
    path("api/", include("hms_backend.medical.urls")),
    path("api/", include("hms_backend.dashboard.urls")),
]
