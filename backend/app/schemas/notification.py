from pydantic import BaseModel, ConfigDict
from typing import Dict
from datetime import datetime


class NotificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    to_user_id: str
    message: str
    timestamp: datetime


class DocumentUploadResponse(BaseModel):
    document_id: str
    file_name: str
    size: int


class ResetResponse(BaseModel):
    message: str = "Sample/demo data reset to initial state"
    removed: Dict[str, int]
