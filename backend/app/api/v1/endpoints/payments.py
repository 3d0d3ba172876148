"""
Payments (demo logic)
=====================
Initiating a payment completes it immediately; there is no gateway
round-trip and no intermediate pending payment.
"""

from fastapi import APIRouter, Depends

from app.models.user import CallerIdentity
from app.modules.auth.dependencies import require_citizen
from app.schemas.application import PaymentRequest, PaymentResponse
from app.services.workflow_service import ApplicationWorkflowService
from app.api.v1.dependencies import get_workflow_service


router = APIRouter()


@router.post("/initiate", response_model=PaymentResponse)
async def initiate_payment(
    request: PaymentRequest,
    current_user: CallerIdentity = Depends(require_citizen),
    workflow: ApplicationWorkflowService = Depends(get_workflow_service)
):
    """Pay the fee for one of the caller's applications"""
    payment = workflow.complete_payment(
        current_user,
        application_id=request.application_id,
        amount=request.amount,
    )

    return PaymentResponse(
        payment_id=payment.id,
        application_id=payment.application_id,
        amount=payment.amount,
        status=payment.status.value,
        paid_at=payment.timestamp,
    )
