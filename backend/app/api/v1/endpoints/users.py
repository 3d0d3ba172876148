from fastapi import APIRouter, Depends

from app.models.user import CallerIdentity
from app.modules.auth.dependencies import get_current_user
from app.schemas.auth import LanguageUpdate, LanguageResponse
from app.services.user_service import UserService
from app.api.v1.dependencies import get_user_service


router = APIRouter()


@router.post("/language", response_model=LanguageResponse)
async def switch_language(
    body: LanguageUpdate,
    current_user: CallerIdentity = Depends(get_current_user),
    users: UserService = Depends(get_user_service)
):
    """Switch the current user's preferred language (en/hi)"""
    user = users.set_language(current_user.id, body.language)
    return LanguageResponse(language=user.language)
