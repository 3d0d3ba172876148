# Re-export all models for convenient imports
from app.models.user import User, UserRole, CallerIdentity, STAFF_ROLES
from app.models.plot import Plot, PlotType
from app.models.application import (
    Application,
    ApplicationType,
    ApplicationStatus,
    PaymentStatus,
    HistoryEntry,
)
from app.models.notification import Notification
from app.models.payment import Payment, PaymentRecordStatus
from app.models.document import Document

__all__ = [
    # User
    "User",
    "UserRole",
    "CallerIdentity",
    "STAFF_ROLES",
    # Plot
    "Plot",
    "PlotType",
    # Application
    "Application",
    "ApplicationType",
    "ApplicationStatus",
    "PaymentStatus",
    "HistoryEntry",
    # Side effects
    "Notification",
    "Payment",
    "PaymentRecordStatus",
    "Document",
]
