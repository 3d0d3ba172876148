from fastapi import APIRouter, Depends

from app.core.logging_config import logger
from app.db.seed_data import clear_all
from app.db.store import DataStore, get_store
from app.models.user import CallerIdentity
from app.modules.auth.dependencies import require_admin
from app.schemas.notification import ResetResponse


router = APIRouter()


@router.post("/reset", response_model=ResetResponse)
async def reset_sample_data(
    current_user: CallerIdentity = Depends(require_admin),
    store: DataStore = Depends(get_store)
):
    """Reset all in-memory data to the demo state (admin only)"""
    logger.warning(f"[Sample] Data reset requested by {current_user.email}")
    removed = clear_all(store)
    return ResetResponse(removed=removed)
