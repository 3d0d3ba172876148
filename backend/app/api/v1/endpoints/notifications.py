from fastapi import APIRouter, Depends
from typing import List

from app.models.user import CallerIdentity
from app.modules.auth.dependencies import get_current_user
from app.schemas.notification import NotificationResponse
from app.services.notification_service import NotificationService
from app.api.v1.dependencies import get_notification_service


router = APIRouter()


@router.get("", response_model=List[NotificationResponse])
async def list_notifications(
    current_user: CallerIdentity = Depends(get_current_user),
    notifications: NotificationService = Depends(get_notification_service)
):
    """Notifications addressed to the current user"""
    return notifications.list_for_user(current_user.id)
