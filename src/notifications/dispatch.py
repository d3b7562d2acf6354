"""Dispatch stage: hands rendered messages to the email channel."""

import structlog

from notifications.channel import get_email_channel
from notifications.errors import NotificationFailedError
from notifications.message import ProgressNotification

logger = structlog.get_logger(__name__)


def dispatch(message: ProgressNotification, channel=None) -> dict:
    """Send ``message`` once. No retries.

    Raises:
        NotificationFailedError: the channel reported a failure or raised.
    """
    adapter = channel or get_email_channel()
    try:
        result = adapter.send(
            to=message.to,
            subject=message.subject,
            body=message.body,
            html_body=message.html_body,
        )
    except Exception as exc:
        logger.error("Notification dispatch raised", to=message.to, error=str(exc))
        raise NotificationFailedError(reason=str(exc)) from exc

    if result.get("status") != "sent":
        reason = result.get("error", "Unknown dispatch error")
        logger.error("Notification dispatch failed", to=message.to, error=reason)
        raise NotificationFailedError(reason=reason)

    logger.info(
        "Notification sent",
        to=message.to,
        order=message.short_order_id,
        progress=message.progress,
        message_id=result.get("message_id"),
    )
    return result
