from dataclasses import dataclass, field
from datetime import datetime
import enum

from app.core.types import generate_uuid, utcnow


class PaymentRecordStatus(str, enum.Enum):
    """Ledger status of a payment record"""
    COMPLETED = "completed"


@dataclass(frozen=True)
class Payment:
    """
    Payment ledger entry.

    Initiation and completion happen in one step, so every record is
    written already completed.
    """
    application_id: str
    amount: float
    paid_by: str
    status: PaymentRecordStatus = PaymentRecordStatus.COMPLETED
    id: str = field(default_factory=generate_uuid)
    timestamp: datetime = field(default_factory=utcnow)
