from hms_backend.core.permissions import ALL_ROLES, RBACPermission


class AppointmentPermission(RBACPermission):
    """RBAC for appointments and admissions.

    - admin, receptionist, doctor: read + write
    - billing: read-only
    """

    read_roles = set(ALL_ROLES)
    write_roles = {"admin", "receptionist", "doctor"}


class BedPermission(RBACPermission):
    """Wards and beds: everyone reads, admin maintains the bed plan."""

    read_roles = set(ALL_ROLES)
    write_roles = {"admin"}
