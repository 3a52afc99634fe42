"""Sign-in / sign-out notifications.

The session lifecycle is an explicit object: ``CoreConfig.ready()``
builds exactly one :class:`SessionEvents`, and anything interested in
transitions subscribes to it instead of polling shared globals.

Usage::

    events = apps.get_app_config('core').session_events
    unsubscribe = events.subscribe(lambda event, identity: ...)
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

SIGNED_IN = 'signed_in'
SIGNED_OUT = 'signed_out'


@dataclass(frozen=True)
class Identity:
    """Who is signed in, and with which role."""

    user_id: int
    username: str
    full_name: str
    role: Optional[str] = None

    @classmethod
    def from_user(cls, user) -> 'Identity':
        full_name = user.get_full_name() or user.username
        role = getattr(getattr(user, 'role', None), 'name', None)
        return cls(user_id=user.pk, username=user.username, full_name=full_name, role=role)


Listener = Callable[[str, Identity], None]


class SessionEvents:
    """Fan-out of session transitions to registered listeners."""

    def __init__(self):
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it again."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def signed_in(self, identity: Identity) -> None:
        self._publish(SIGNED_IN, identity)

    def signed_out(self, identity: Identity) -> None:
        self._publish(SIGNED_OUT, identity)

    def _publish(self, event: str, identity: Identity) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(event, identity)
            except Exception:
                logger.exception('Session listener failed (event=%s, user_id=%s)', event, identity.user_id)
