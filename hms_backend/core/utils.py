import logging

from .models import AuditLog

logger = logging.getLogger(__name__)


def log_action(user, action, patient_id=None, meta=None, *, target='', target_id=None):
    """Write an audit entry for ``action``; never raises.

    ``target``/``target_id`` identify the object acted on when it is not the
    patient itself, e.g. ``target='invoice', target_id=invoice.pk``.
    """
    authenticated = getattr(user, 'is_authenticated', False)
    role_name = (getattr(user, 'role_name', None) or '') if authenticated else ''

    try:
        AuditLog.objects.create(
            user=user if authenticated else None,
            role_name=role_name,
            action=action,
            target=target,
            target_id=target_id,
            patient_id=patient_id,
            meta=meta,
        )
    except Exception:
        logger.exception('Audit write failed (action=%s, target=%s#%s)', action, target, target_id)


def audit_session_event(event, identity):
    """Session listener: record sign-in/sign-out in the audit log."""
    try:
        AuditLog.objects.create(
            user_id=identity.user_id,
            role_name=identity.role or '',
            action=event,
            target='user',
            target_id=identity.user_id,
        )
    except Exception:
        logger.exception('Audit write failed (action=%s, user_id=%s)', event, identity.user_id)
