"""Collects the toasts raised while handling one admin action."""

from __future__ import annotations

import logging

from backend.models.notification import Notification

logger = logging.getLogger(__name__)


class Notifier:
    """
    In-order list of notifications.

    Failures are also logged at WARNING so they show up server-side even if
    no client ever displays them.
    """

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def success(self, description: str) -> None:
        self.notifications.append(Notification(title="Success", description=description))

    def error(self, description: str) -> None:
        logger.warning("admin action failed: %s", description)
        self.notifications.append(Notification(title="Error", description=description, variant="destructive"))

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None

    def drain(self) -> list[Notification]:
        """Return everything collected so far and start over."""
        drained, self.notifications = self.notifications, []
        return drained
