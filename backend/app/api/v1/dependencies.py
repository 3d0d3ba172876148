"""Service providers for the v1 endpoints, all bound to the app's DataStore"""
from fastapi import Depends

from app.core.config import settings
from app.db.store import DataStore, get_store
from app.services.document_service import DocumentService
from app.services.notification_service import NotificationService
from app.services.plot_service import PlotService
from app.services.status_policy import get_status_policy
from app.services.user_service import UserService
from app.services.workflow_service import ApplicationWorkflowService


def get_notification_service(store: DataStore = Depends(get_store)) -> NotificationService:
    return NotificationService(store)


def get_workflow_service(
    store: DataStore = Depends(get_store),
    notifications: NotificationService = Depends(get_notification_service),
) -> ApplicationWorkflowService:
    return ApplicationWorkflowService(
        store,
        notifications=notifications,
        status_policy=get_status_policy(settings.STATUS_POLICY),
    )


def get_user_service(
    store: DataStore = Depends(get_store),
    notifications: NotificationService = Depends(get_notification_service),
) -> UserService:
    return UserService(store, notifications=notifications)


def get_plot_service(store: DataStore = Depends(get_store)) -> PlotService:
    return PlotService(store)


def get_document_service(
    store: DataStore = Depends(get_store),
    notifications: NotificationService = Depends(get_notification_service),
) -> DocumentService:
    return DocumentService(store, notifications=notifications)
