"""Notification exceptions."""

from __future__ import annotations


class NotificationDeliveryError(Exception):
    """The backend refused or failed to deliver a message."""
