from hms_backend.core.permissions import RBACPermission


class PatientPermission(RBACPermission):
    """RBAC for Patient endpoints.

    - admin, receptionist: full access (read + write)
    - doctor: read + write (clinical updates)
    - billing: read-only
    """

    read_roles = {"admin", "receptionist", "doctor", "billing"}
    write_roles = {"admin", "receptionist", "doctor"}


class PatientDeletePermission(RBACPermission):
    """Only admins and receptionists may remove a patient record."""

    read_roles = {"admin", "receptionist", "doctor", "billing"}
    write_roles = {"admin", "receptionist"}

    def has_permission(self, request, view):
        if request.method != 'DELETE':
            return True
        return super().has_permission(request, view)
