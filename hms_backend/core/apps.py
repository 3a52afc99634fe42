"""
Core App Configuration
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Users, roles, authentication and the sign-in/sign-out event hub."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hms_backend.core'
    label = 'core'
    verbose_name = 'Core (Users & Roles)'

    def ready(self):
        from hms_backend.core.session import SessionEvents
        from hms_backend.core.utils import audit_session_event

        # One hub per process; views reach it through the app registry.
        self.session_events = SessionEvents()
        self.session_events.subscribe(audit_session_event)
