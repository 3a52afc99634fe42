"""Role-based access control.

Each API view names a permission class that lists which roles may read
(GET/HEAD/OPTIONS) and which may write. A signed-in user without a role is
refused everywhere.
"""

from rest_framework.permissions import BasePermission, SAFE_METHODS

from hms_backend.core.models import Role

ALL_ROLES = frozenset(name for name, _label in Role.CHOICES)


class RBACPermission(BasePermission):
    """Allow a request when the user's role is listed for its method.

        class InvoicePermission(RBACPermission):
            read_roles = {Role.ADMIN, Role.BILLING}
            write_roles = {Role.BILLING}
    """

    read_roles: set = set()
    write_roles: set = set()

    def allowed_roles(self, request) -> set:
        if request.method in SAFE_METHODS:
            return self.read_roles
        return self.write_roles

    def has_permission(self, request, view):
        user = getattr(request, 'user', None)
        if not user or not user.is_authenticated:
            return False

        role_name = getattr(user, 'role_name', None)
        return bool(role_name) and role_name in self.allowed_roles(request)
