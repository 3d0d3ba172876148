"""
User Service - registration, credential checks and profile preferences
"""

from typing import Optional

from app.core.config import settings
from app.core.exceptions import (
    AuthenticationError,
    DuplicateUserError,
    UnsupportedLanguageError,
    UserNotFoundError,
    ValidationError,
)
from app.core.logging_config import logger
from app.core.security import get_password_hash, verify_password
from app.db.store import DataStore
from app.models.user import User, UserRole
from app.services.notification_service import NotificationService


class UserService:

    def __init__(self, store: DataStore, notifications: Optional[NotificationService] = None):
        self.store = store
        self.notifications = notifications or NotificationService(store)

    def register(
        self,
        name: str,
        email: str,
        password: str,
        language: Optional[str] = None,
    ) -> User:
        """
        Register a citizen account. Staff accounts only come from seed data.
        """
        if not name or not email or not password:
            raise ValidationError("Missing required fields")

        language = (language or settings.DEFAULT_LANGUAGE).lower()
        if language not in settings.SUPPORTED_LANGUAGES:
            raise UnsupportedLanguageError(language, settings.SUPPORTED_LANGUAGES)

        with self.store.locked("users"):
            if self.store.users.get_by_email(email) is not None:
                logger.log_auth_event(
                    event="register", success=False, user_email=email,
                    reason="Email already registered"
                )
                raise DuplicateUserError(email)

            user = User(
                name=name,
                email=email,
                hashed_password=get_password_hash(password),
                role=UserRole.CITIZEN,
                language=language,
            )
            self.store.users.add(user)

        logger.log_auth_event(event="register", success=True, user_email=email,
                              user_role=user.role.value)
        self.notifications.notify(user.id, "Registration successful. Welcome!")
        return user

    def authenticate(self, email: str, password: str) -> User:
        user = self.store.users.get_by_email(email)
        if user is None or not verify_password(password, user.hashed_password):
            logger.log_auth_event(event="login", success=False, user_email=email,
                                  reason="Invalid credentials")
            raise AuthenticationError("Invalid credentials")

        logger.log_auth_event(event="login", success=True, user_email=email,
                              user_role=user.role.value)
        return user

    def get_user(self, user_id: str) -> User:
        user = self.store.users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def set_language(self, user_id: str, language: str) -> User:
        language = (language or "").lower()
        if language not in settings.SUPPORTED_LANGUAGES:
            raise UnsupportedLanguageError(language, settings.SUPPORTED_LANGUAGES)

        with self.store.locked("users"):
            user = self.get_user(user_id)
            user.language = language
            self.store.users.save(user)

        logger.info(f"[User] {user.email} switched language to {language}")
        return user
