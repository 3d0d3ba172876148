from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple
import enum

from app.core.types import generate_uuid, utcnow


class ApplicationType(str, enum.Enum):
    """Kinds of land-record change a citizen can request"""
    MUTATION = "mutation"
    CORRECTION = "correction"
    CONVERSION = "conversion"


class ApplicationStatus(str, enum.Enum):
    """
    Well-known review states.

    application_status itself is a plain string: under the open status
    policy officers may set any value, these are the ones the strict
    policy knows about.
    """
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"


class PaymentStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass(frozen=True)
class HistoryEntry:
    """One status change recorded against an application"""
    actor_role: str
    status: str
    remarks: Optional[str] = None
    timestamp: datetime = field(default_factory=utcnow)


@dataclass
class Application:
    """
    A citizen-submitted request against a land plot.

    application_type, applicant_email, plot_id and documents never change
    after creation; history is append-only (use record_transition).
    """
    application_type: ApplicationType
    applicant_email: str
    plot_id: str
    documents: Tuple[str, ...]
    applicant_name: str = ""
    reason: Optional[str] = None
    application_status: str = ApplicationStatus.SUBMITTED.value
    payment_status: PaymentStatus = PaymentStatus.PENDING
    officer_assigned: Optional[str] = None
    id: str = field(default_factory=generate_uuid)
    submitted_at: datetime = field(default_factory=utcnow)
    history: List[HistoryEntry] = field(default_factory=list)

    def record_transition(self, entry: HistoryEntry) -> None:
        self.application_status = entry.status
        self.history.append(entry)

    def __repr__(self):
        return f"<Application {self.id} {self.application_type.value} {self.application_status}>"
