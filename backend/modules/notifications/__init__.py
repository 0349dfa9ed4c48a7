"""
Notifications module.

Declares the notification document shape and its indexes.
"""

from .models import NotificationData, NotificationDocument, NotificationType
from .repository import NotificationRepository

__all__ = [
    "NotificationData",
    "NotificationDocument",
    "NotificationType",
    "NotificationRepository",
]
