from hms_backend.core.permissions import ALL_ROLES, RBACPermission


class InvoicePermission(RBACPermission):
    """RBAC for invoices.

    - admin, billing, receptionist: read + write
    - doctor: no access
    """

    read_roles = {"admin", "billing", "receptionist"}
    write_roles = {"admin", "billing", "receptionist"}


class InvoiceAuditPermission(RBACPermission):
    read_roles = {"admin", "billing"}
    write_roles = set()


class BillableItemPermission(RBACPermission):
    """Rate catalogue: everyone reads, admin and billing maintain it."""

    read_roles = set(ALL_ROLES)
    write_roles = {"admin", "billing"}
