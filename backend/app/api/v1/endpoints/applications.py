from fastapi import APIRouter, Depends, status
from typing import List

from app.models.user import CallerIdentity
from app.modules.auth.dependencies import get_current_user, require_citizen, require_staff
from app.schemas.application import ApplicationCreate, ApplicationResponse, StatusUpdate
from app.services.workflow_service import ApplicationWorkflowService
from app.api.v1.dependencies import get_workflow_service


router = APIRouter()


@router.get("", response_model=List[ApplicationResponse])
async def list_applications(
    current_user: CallerIdentity = Depends(get_current_user),
    workflow: ApplicationWorkflowService = Depends(get_workflow_service)
):
    """List applications: citizens get their own, officers and admins get all"""
    return workflow.list_applications(current_user)


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def submit_application(
    body: ApplicationCreate,
    current_user: CallerIdentity = Depends(require_citizen),
    workflow: ApplicationWorkflowService = Depends(get_workflow_service)
):
    """Submit a new mutation, correction or conversion application"""
    return workflow.submit_application(
        current_user,
        application_type=body.application_type,
        plot_id=body.plot_id,
        documents=body.documents,
        reason=body.reason,
    )


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: str,
    current_user: CallerIdentity = Depends(get_current_user),
    workflow: ApplicationWorkflowService = Depends(get_workflow_service)
):
    return workflow.get_application(current_user, application_id)


@router.post("/{application_id}/status", response_model=ApplicationResponse)
async def update_application_status(
    application_id: str,
    body: StatusUpdate,
    current_user: CallerIdentity = Depends(require_staff),
    workflow: ApplicationWorkflowService = Depends(get_workflow_service)
):
    """Officer/admin updates application status"""
    return workflow.update_status(
        current_user,
        application_id,
        status=body.status,
        remarks=body.remarks,
    )
