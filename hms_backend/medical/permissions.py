from hms_backend.core.permissions import RBACPermission


class MedicalRecordPermission(RBACPermission):
    """RBAC for clinical notes.

    - admin, doctor: read + write
    - receptionist: read-only
    - billing: no access
    """

    read_roles = {"admin", "doctor", "receptionist"}
    write_roles = {"admin", "doctor"}


class CertificatePermission(RBACPermission):
    # Rendering a certificate is a POST with form values, not a data change.
    read_roles = {"admin", "doctor", "receptionist"}
    write_roles = {"admin", "doctor", "receptionist"}
