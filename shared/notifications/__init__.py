from .handlers import (
    ERROR_TITLE,
    GENERIC_ERROR,
    SUCCESS_TITLE,
    TOO_MANY_REQUESTS,
    notification,
    register_notification_handlers,
)

__all__ = [
    "ERROR_TITLE",
    "GENERIC_ERROR",
    "SUCCESS_TITLE",
    "TOO_MANY_REQUESTS",
    "notification",
    "register_notification_handlers",
]
