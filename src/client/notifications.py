"""
User-facing notifications emitted by the client API adapter

Mutations report their outcome here whether or not the caller handles the
error. Subscribers (a CLI printer, a test recorder) receive every notice.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, List

logger = logging.getLogger(__name__)

class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"

@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=datetime.utcnow)

class Notifier:
    """Keeps a history of notifications and fans them out to subscribers"""

    def __init__(self):
        self.history: List[Notification] = []
        self._subscribers: List[Callable[[Notification], None]] = []

    def subscribe(self, callback: Callable[[Notification], None]) -> Callable[[], None]:
        """Register a callback; returns a function that unsubscribes it"""
        self._subscribers.append(callback)
        return lambda: self._subscribers.remove(callback)

    def success(self, message: str) -> Notification:
        return self._emit(NotificationLevel.SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self._emit(NotificationLevel.ERROR, message)

    def _emit(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(level=level, message=message)
        self.history.append(notification)
        if level == NotificationLevel.ERROR:
            logger.warning(message)
        else:
            logger.info(message)
        for callback in list(self._subscribers):
            callback(notification)
        return notification
