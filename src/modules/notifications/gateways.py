"""Notification gateways.

``INotificationGateway`` is the only thing the order service knows
about customer notification.  The default implementation sends email
through Django's mail framework, so the actual transport (SMTP,
console, locmem in tests) is chosen by ``EMAIL_BACKEND``.

Gateways make a single delivery attempt; there is no built-in retry.
"""

from __future__ import annotations

import smtplib
from abc import ABC, abstractmethod

import structlog
from django.conf import settings
from django.core.mail import EmailMultiAlternatives

from modules.notifications.exceptions import NotificationDeliveryError
from modules.notifications.messages import NotificationMessage

logger = structlog.get_logger(__name__)


class INotificationGateway(ABC):
    """Delivers a rendered message to its recipients."""

    @abstractmethod
    def send(self, message: NotificationMessage) -> None:
        """Deliver *message*.

        Raises:
            NotificationDeliveryError: delivery failed.
        """


class EmailNotificationGateway(INotificationGateway):
    """Sends notifications as multipart email via ``django.core.mail``."""

    def __init__(self, from_email: str | None = None) -> None:
        self._from_email = from_email or settings.DEFAULT_FROM_EMAIL

    def send(self, message: NotificationMessage) -> None:
        email = EmailMultiAlternatives(
            subject=message.subject,
            body=message.body,
            from_email=self._from_email,
            to=list(message.to),
        )
        if message.html_body:
            email.attach_alternative(message.html_body, "text/html")

        log = logger.bind(subject=message.subject, recipient_count=len(message.to))
        try:
            sent = email.send(fail_silently=False)
        except (smtplib.SMTPException, OSError) as exc:
            log.error("notification.delivery_failed", error=str(exc))
            raise NotificationDeliveryError(str(exc)) from exc

        if not sent:
            log.error("notification.delivery_failed", error="backend sent nothing")
            raise NotificationDeliveryError("Email backend did not send the message.")

        log.info("notification.sent")
