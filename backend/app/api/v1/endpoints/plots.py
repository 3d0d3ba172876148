from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from app.models.user import CallerIdentity
from app.modules.auth.dependencies import get_current_user
from app.schemas.plot import PlotResponse
from app.services.plot_service import PlotService
from app.api.v1.dependencies import get_plot_service


router = APIRouter()


@router.get("", response_model=List[PlotResponse])
async def list_plots(
    owner_email: Optional[str] = Query(None, alias="ownerEmail", description="Filter by current owner email"),
    current_user: CallerIdentity = Depends(get_current_user),
    plots: PlotService = Depends(get_plot_service)
):
    """List/search land plots"""
    return plots.list_plots(owner_email=owner_email)


@router.get("/{plot_id}", response_model=PlotResponse)
async def get_plot(
    plot_id: str,
    current_user: CallerIdentity = Depends(get_current_user),
    plots: PlotService = Depends(get_plot_service)
):
    """Details of a plot"""
    return plots.get_plot(plot_id)
