from dataclasses import dataclass, field
from datetime import datetime

from app.core.types import generate_uuid, utcnow


@dataclass(frozen=True)
class Document:
    """Uploaded supporting document (held in memory, demo only)"""
    file_name: str
    content_type: str
    size: int
    data: bytes = field(repr=False)
    uploaded_by: str = ""
    id: str = field(default_factory=generate_uuid)
    uploaded_at: datetime = field(default_factory=utcnow)
