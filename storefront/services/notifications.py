"""Outcome notifications forwarded by the storefront service"""

import logging
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol

from ..models.results import Severity

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Receives every user-visible outcome message"""

    def notify(self, message: str, severity: Severity) -> None:
        ...


@dataclass(frozen=True)
class Notification:
    """A recorded outcome message"""
    message: str
    severity: Severity
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class LoggingNotifier:
    """Writes notifications to the application log"""

    _LEVELS = {
        Severity.SUCCESS: logging.INFO,
        Severity.WARNING: logging.WARNING,
        Severity.ERROR: logging.WARNING,
    }

    def notify(self, message: str, severity: Severity) -> None:
        logger.log(self._LEVELS[severity], f"[{severity.value}] {message}")


class NotificationLog(LoggingNotifier):
    """Keeps the most recent notifications in memory, newest last"""

    def __init__(self, max_size: int = 50):
        self.notifications: deque[Notification] = deque(maxlen=max_size)

    def notify(self, message: str, severity: Severity) -> None:
        super().notify(message, severity)
        self.notifications.append(Notification(message=message, severity=severity))

    def recent(self, limit: int = 10) -> list[Notification]:
        """Get the latest notifications"""
        if limit <= 0:
            return []
        return list(self.notifications)[-limit:]

    def clear(self) -> None:
        self.notifications.clear()
