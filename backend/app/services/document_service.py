"""
Document Service - in-memory holding area for uploaded supporting documents.

Applications only keep the returned document ids; the bytes live here until
the next sample reset.
"""

from typing import Optional

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.core.logging_config import logger
from app.db.store import DataStore
from app.models.document import Document
from app.models.user import CallerIdentity
from app.services.notification_service import NotificationService


class DocumentService:

    def __init__(
        self,
        store: DataStore,
        notifications: Optional[NotificationService] = None,
        max_size: Optional[int] = None,
    ):
        self.store = store
        self.notifications = notifications or NotificationService(store)
        self.max_size = max_size or settings.MAX_UPLOAD_SIZE

    def upload(
        self,
        caller: CallerIdentity,
        file_name: Optional[str],
        content_type: Optional[str],
        data: bytes,
    ) -> Document:
        if not file_name or not data:
            raise ValidationError("No file uploaded", field="file")
        if len(data) > self.max_size:
            raise ValidationError(
                f"File too large. Maximum size is {self.max_size} bytes", field="file"
            )

        document = Document(
            file_name=file_name,
            content_type=content_type or "application/octet-stream",
            size=len(data),
            data=data,
            uploaded_by=caller.email,
        )
        self.store.documents.add(document)

        logger.info(f"[Document] {caller.email} uploaded {file_name} ({len(data)} bytes) as {document.id}")
        self.notifications.notify(caller.id, "Document uploaded successfully")
        return document

    def get(self, document_id: str) -> Optional[Document]:
        return self.store.documents.get(document_id)
