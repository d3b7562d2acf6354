class NotificationFailedError(Exception):
    """A message could not be handed to the mail transport.

    The transport's own reason is kept on ``reason`` for logs; callers only
    ever see the generic message.
    """

    def __init__(self, message: str = "Notification failed", reason: str | None = None):
        super().__init__(message)
        self.reason = reason
        self.messages = {"notification": [message]}
