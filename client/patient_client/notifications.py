"""
Notification service for user-visible success/error messages.

One instance is created at application start, passed to whatever needs to
notify, and stopped at shutdown.
"""

import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

_LOGGER = logging.getLogger(__name__)

VARIANTS = ("default", "destructive", "success", "warning")
DEFAULT_DURATION = 5.0


@dataclass
class Notification:
    id: int
    title: str
    description: str = ""
    variant: str = "default"
    duration: float = DEFAULT_DURATION
    created: float = field(default_factory=time.monotonic)

    def expired(self, now: float) -> bool:
        return now - self.created >= self.duration


class NotificationService:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._ids = itertools.count(1)
        self._active: list[Notification] = []
        self._listeners: list[Callable[[Notification], None]] = []
        self.running = False

    def start(self) -> "NotificationService":
        self.running = True
        return self

    def stop(self) -> None:
        self.running = False
        self._active.clear()
        self._listeners.clear()

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()

    @property
    def active(self) -> list[Notification]:
        """Notifications still on display; expired ones are dropped on read."""
        self.prune()
        return list(self._active)

    def subscribe(self, listener: Callable[[Notification], None]) -> None:
        self._listeners.append(listener)

    def notify(self, title: str, description: str = "", variant: str = "default",
               duration: float = DEFAULT_DURATION) -> Notification:
        if not self.running:
            raise RuntimeError("Notification service is not running")
        if variant not in VARIANTS:
            raise ValueError(f"Unknown notification variant: {variant}")
        self.prune()

        notification = Notification(
            id=next(self._ids),
            title=title,
            description=description,
            variant=variant,
            duration=duration,
            created=self._clock(),
        )
        self._active.append(notification)
        for listener in self._listeners:
            listener(notification)
        return notification

    def success(self, description: str) -> Notification:
        return self.notify("Success", description)

    def error(self, description: str) -> Notification:
        return self.notify("Error", description, variant="destructive")

    def dismiss(self, notification_id: int) -> None:
        self._active = [n for n in self._active if n.id != notification_id]

    def prune(self, now: Optional[float] = None) -> list[Notification]:
        """Drop notifications whose display time has elapsed and return them."""
        now = self._clock() if now is None else now
        expired = [n for n in self._active if n.expired(now)]
        if expired:
            self._active = [n for n in self._active if not n.expired(now)]
            _LOGGER.debug("Expired %d notifications", len(expired))
        return expired
