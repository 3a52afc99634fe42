from rest_framework import generics, status
from rest_framework.response import Response

from hms_backend.core.permissions import ALL_ROLES, RBACPermission
from hms_backend.dashboard.serializers import DashboardStatsSerializer
from hms_backend.dashboard.stats import dashboard_stats


class DashboardPermission(RBACPermission):
    read_roles = set(ALL_ROLES)
    write_roles = set()


class DashboardStatsView(generics.GenericAPIView):
    """GET /api/dashboard/stats/"""

    permission_classes = [DashboardPermission]
    serializer_class = DashboardStatsSerializer

    def get(self, request, *args, **kwargs):
        return Response(self.get_serializer(dashboard_stats()).data, status=status.HTTP_200_OK)
