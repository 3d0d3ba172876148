from dataclasses import dataclass, field
from datetime import datetime

from app.core.types import generate_uuid, utcnow


@dataclass(frozen=True)
class Notification:
    """User-addressed message. Created by the workflow side-effect step only."""
    to_user_id: str
    message: str
    id: str = field(default_factory=generate_uuid)
    timestamp: datetime = field(default_factory=utcnow)
