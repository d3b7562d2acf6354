"""Mail delivery settings, read from the environment."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class MailSettings:
    host: str = "smtp.gmail.com"
    port: int = 587
    username: str | None = None
    password: str | None = None
    sender: str | None = None
    use_tls: bool = True
    timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "MailSettings":
        username = os.environ.get("SMTP_USERNAME")
        return cls(
            host=os.environ.get("SMTP_HOST", cls.host),
            port=int(os.environ.get("SMTP_PORT", cls.port)),
            username=username,
            password=os.environ.get("SMTP_PASSWORD"),
            sender=os.environ.get("SMTP_SENDER", username),
            use_tls=os.environ.get("SMTP_USE_TLS", "true").lower() not in ("0", "false", "no"),
            timeout=float(os.environ.get("SMTP_TIMEOUT", cls.timeout)),
        )
