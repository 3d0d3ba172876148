from fastapi import APIRouter, Depends, File, UploadFile

from app.models.user import CallerIdentity
from app.modules.auth.dependencies import get_current_user
from app.schemas.notification import DocumentUploadResponse
from app.services.document_service import DocumentService
from app.api.v1.dependencies import get_document_service


router = APIRouter()


@router.post("/upload", response_model=DocumentUploadResponse)
async def upload_document(
    file: UploadFile = File(None),
    current_user: CallerIdentity = Depends(get_current_user),
    documents: DocumentService = Depends(get_document_service)
):
    """Upload a supporting document; the returned id goes into an application's documents"""
    data = await file.read() if file is not None else b""
    document = documents.upload(
        current_user,
        file_name=file.filename if file is not None else None,
        content_type=file.content_type if file is not None else None,
        data=data,
    )
    return DocumentUploadResponse(
        document_id=document.id,
        file_name=document.file_name,
        size=document.size,
    )
