"""
Notification Service - user-addressed messages emitted as workflow side effects.

notify() is best-effort: a failure is logged and swallowed so it can never
undo the primary mutation that triggered it.
"""

from typing import List, Optional

from app.core.logging_config import logger
from app.db.store import DataStore
from app.models.notification import Notification


class NotificationService:

    def __init__(self, store: DataStore):
        self.store = store

    def notify(self, to_user_id: Optional[str], message: str) -> Optional[Notification]:
        """Append a notification; returns None if it could not be delivered"""
        if not to_user_id:
            logger.warning(f"[Notification] No recipient for message: {message!r}")
            return None

        try:
            notification = Notification(to_user_id=to_user_id, message=message)
            self.store.notifications.append(notification)
        except Exception as e:
            logger.log_error_with_context(e, context="notification", to_user_id=to_user_id)
            return None

        logger.debug(f"[Notification] Sent to {to_user_id}: {message}")
        return notification

    def notify_email(self, email: str, message: str) -> Optional[Notification]:
        """Resolve a user by email and notify them"""
        try:
            user = self.store.users.get_by_email(email)
        except Exception as e:
            logger.log_error_with_context(e, context="notification recipient lookup", to_email=email)
            return None

        if user is None:
            logger.warning(f"[Notification] Recipient {email} not found, message dropped")
            return None
        return self.notify(user.id, message)

    def list_for_user(self, user_id: str) -> List[Notification]:
        return self.store.notifications.list_for_user(user_id)
