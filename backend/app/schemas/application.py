from pydantic import BaseModel, ConfigDict
from typing import Any, List, Optional
from datetime import datetime

from app.models.application import ApplicationType, PaymentStatus


class ApplicationCreate(BaseModel):
    """
    Submission payload. Fields are optional here so that missing values
    reach the workflow engine and fail with its own "Missing fields" error.
    """
    application_type: Optional[str] = None
    plot_id: Optional[str] = None
    documents: Optional[List[str]] = None
    reason: Optional[str] = None


class StatusUpdate(BaseModel):
    status: Optional[str] = None
    remarks: Optional[str] = None


class HistoryEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    actor_role: str
    timestamp: datetime
    status: str
    remarks: Optional[str] = None


class ApplicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    application_type: ApplicationType
    applicant_name: str
    applicant_email: str
    plot_id: str
    application_status: str
    payment_status: PaymentStatus
    officer_assigned: Optional[str] = None
    documents: List[str]
    reason: Optional[str] = None
    submitted_at: datetime
    history: List[HistoryEntryResponse]


class PaymentRequest(BaseModel):
    application_id: Optional[str] = None
    # Left untyped so non-numeric input is rejected by the workflow engine
    amount: Any = None


class PaymentResponse(BaseModel):
    payment_id: str
    application_id: str
    amount: float
    status: str
    paid_at: datetime
