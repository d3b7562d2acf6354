"""Email channel registry.

Provides singleton access to the email adapter. The fake adapter is the
default; ``EMAIL_ADAPTER=smtp`` switches to real delivery configured from
``SMTP_*`` environment variables.
"""

import os

from notifications.channel.email_port import EmailPort

_email_channel: EmailPort | None = None


def get_email_channel() -> EmailPort:
    """Return the configured email adapter (singleton)."""
    global _email_channel
    if _email_channel is None:
        adapter = os.environ.get("EMAIL_ADAPTER", "fake")
        if adapter == "fake":
            from notifications.channel.fake_email import FakeEmailAdapter

            _email_channel = FakeEmailAdapter()
        elif adapter == "smtp":
            from notifications.channel.smtp_email import SMTPEmailAdapter
            from notifications.config import MailSettings

            _email_channel = SMTPEmailAdapter(MailSettings.from_env())
        else:
            raise ValueError(f"Unknown email adapter: {adapter}")
    return _email_channel


def set_email_channel(channel: EmailPort) -> None:
    global _email_channel
    _email_channel = channel


def reset_channels():
    """Reset the channel singleton (useful for testing)."""
    global _email_channel
    _email_channel = None
