from app.services.notification_service import NotificationService
from app.services.workflow_service import ApplicationWorkflowService
from app.services.status_policy import (
    StatusPolicy,
    OpenStatusPolicy,
    StrictStatusPolicy,
    get_status_policy,
)
from app.services.user_service import UserService
from app.services.plot_service import PlotService
from app.services.document_service import DocumentService

__all__ = [
    # Workflow core
    "ApplicationWorkflowService",
    "NotificationService",
    "StatusPolicy",
    "OpenStatusPolicy",
    "StrictStatusPolicy",
    "get_status_policy",
    # Supporting services
    "UserService",
    "PlotService",
    "DocumentService",
]
