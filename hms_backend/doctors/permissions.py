from hms_backend.core.permissions import ALL_ROLES, RBACPermission


class DoctorPermission(RBACPermission):
    """RBAC for the doctor directory.

    - everyone signed in: read
    - admin, receptionist: write
    """

    read_roles = set(ALL_ROLES)
    write_roles = {"admin", "receptionist"}


class DepartmentPermission(RBACPermission):
    """RBAC for departments: admin writes, everyone reads."""

    read_roles = set(ALL_ROLES)
    write_roles = {"admin"}
