from dataclasses import dataclass, field
from datetime import datetime
import enum

from app.core.types import generate_uuid, utcnow


class UserRole(str, enum.Enum):
    """User roles"""
    CITIZEN = "citizen"
    OFFICER = "officer"
    ADMIN = "admin"


# Roles allowed to review and update applications
STAFF_ROLES = frozenset({UserRole.OFFICER, UserRole.ADMIN})


@dataclass
class User:
    """User record held by the identity & role store"""
    name: str
    email: str
    hashed_password: str
    role: UserRole = UserRole.CITIZEN
    language: str = "en"
    id: str = field(default_factory=generate_uuid)
    is_seed: bool = False
    created_at: datetime = field(default_factory=utcnow)

    def __repr__(self):
        return f"<User {self.email}>"


@dataclass(frozen=True)
class CallerIdentity:
    """
    Trusted identity handed to the workflow engine by the access gateway.

    The gateway has already verified the bearer token; the engine only
    checks role membership and ownership.
    """
    id: str
    email: str
    role: UserRole
    name: str = ""

    @classmethod
    def from_user(cls, user: User) -> "CallerIdentity":
        return cls(id=user.id, email=user.email, role=user.role, name=user.name)

    @property
    def is_staff(self) -> bool:
        return self.role in STAFF_ROLES
