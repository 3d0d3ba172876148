"""
Application Workflow Service - lifecycle rules for land-record applications

Handles:
- Submission (validation against the plot registry, ownership check)
- Payment completion (one atomic step, single payment per application)
- Officer/admin status transitions with history
- Role-filtered queries

Every operation checks all preconditions before writing anything. The
primary mutation commits under the relevant collection locks; notifications
are sent afterwards and never roll it back.
"""

import math
from typing import Iterable, List, Optional, Union

from app.core.exceptions import (
    AuthorizationError,
    ValidationError,
    ApplicationNotFoundError,
    AlreadyPaidError,
)
from app.core.logging_config import logger, set_application_id
from app.db.store import DataStore
from app.models.application import (
    Application,
    ApplicationType,
    HistoryEntry,
    PaymentStatus,
)
from app.models.payment import Payment
from app.models.user import CallerIdentity, UserRole, STAFF_ROLES
from app.services.notification_service import NotificationService
from app.services.status_policy import StatusPolicy, OpenStatusPolicy


SUBMITTED_MESSAGE = "Application submitted successfully. Please complete payment."
PAYMENT_MESSAGE = "Payment successful for application: {application_id}"
STATUS_MESSAGE = "Application status updated to: {status}"


def _require_role(caller: CallerIdentity, allowed: Iterable[UserRole]) -> None:
    if caller.role not in allowed:
        raise AuthorizationError("Access denied")


class ApplicationWorkflowService:
    """Owns Application entities and every transition applied to them"""

    def __init__(
        self,
        store: DataStore,
        notifications: Optional[NotificationService] = None,
        status_policy: Optional[StatusPolicy] = None,
    ):
        self.store = store
        self.notifications = notifications or NotificationService(store)
        self.status_policy = status_policy or OpenStatusPolicy()

    # ==================== SUBMISSION ====================

    def submit_application(
        self,
        caller: CallerIdentity,
        application_type: Union[str, ApplicationType, None],
        plot_id: Optional[str],
        documents: Optional[Iterable[str]],
        reason: Optional[str] = None,
    ) -> Application:
        """
        Create an application for a plot the caller owns.

        Checks, first failure wins:
            1. type, plot id and documents present -> ValidationError
            2. type is mutation/correction/conversion -> ValidationError
            3. plot exists and is owned by the caller -> AuthorizationError
        """
        _require_role(caller, {UserRole.CITIZEN})

        document_refs = tuple(
            str(doc).strip() for doc in (documents or []) if doc is not None and str(doc).strip()
        )
        type_value = application_type.value if isinstance(application_type, ApplicationType) else application_type
        if not type_value or not plot_id or not document_refs:
            raise ValidationError("Missing fields")

        try:
            app_type = ApplicationType(type_value)
        except ValueError:
            raise ValidationError("Unsupported application type", field="application_type")

        with self.store.locked("plots", "applications"):
            plot = self.store.plots.get(plot_id)
            if plot is None or not plot.is_owned_by(caller.email):
                logger.warning(
                    f"[Workflow] Rejected submission by {caller.email} for plot {plot_id}: not owner"
                )
                raise AuthorizationError("Plot does not belong to you")

            application = Application(
                application_type=app_type,
                applicant_email=caller.email,
                applicant_name=caller.name,
                plot_id=plot_id,
                documents=document_refs,
                reason=reason or None,
            )
            self.store.applications.add(application)

        set_application_id(application.id)
        logger.log_workflow_event(
            "submitted", application.id, actor_role=caller.role.value,
            application_type=app_type.value, plot_id=plot_id,
        )

        self.notifications.notify(caller.id, SUBMITTED_MESSAGE)
        return application

    # ==================== PAYMENT ====================

    def complete_payment(
        self,
        caller: CallerIdentity,
        application_id: Optional[str],
        amount: Union[int, float, None],
    ) -> Payment:
        """
        Record a completed payment for the caller's own application.

        Initiation and completion are one step: on success exactly one
        Payment exists for the application and payment_status is completed.
        """
        _require_role(caller, {UserRole.CITIZEN})

        if not application_id:
            raise ValidationError("Missing or invalid payment details", field="application_id")
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise ValidationError("Missing or invalid payment details", field="amount")
        try:
            amount = float(amount)
        except OverflowError:
            raise ValidationError("Payment amount is out of range", field="amount")
        if not math.isfinite(amount) or amount <= 0:
            raise ValidationError("Payment amount must be positive", field="amount")

        with self.store.locked("applications", "payments"):
            application = self.store.applications.get(application_id)
            if application is None or application.applicant_email != caller.email:
                raise ApplicationNotFoundError(application_id)
            if application.payment_status != PaymentStatus.PENDING:
                raise AlreadyPaidError(application_id)

            payment = Payment(
                application_id=application.id,
                amount=amount,
                paid_by=caller.email,
            )
            self.store.payments.add(payment)
            application.payment_status = PaymentStatus.COMPLETED
            self.store.applications.save(application)

        set_application_id(application.id)
        logger.log_workflow_event(
            "payment_completed", application.id, actor_role=caller.role.value,
            payment_id=payment.id, amount=amount,
        )

        self.notifications.notify(
            caller.id, PAYMENT_MESSAGE.format(application_id=application.id)
        )
        return payment

    # ==================== REVIEW ====================

    def update_status(
        self,
        caller: CallerIdentity,
        application_id: str,
        status: str,
        remarks: Optional[str] = None,
    ) -> Application:
        """
        Set a new review status. Any officer or admin may update any
        application; the active status policy decides which values are
        accepted.
        """
        _require_role(caller, STAFF_ROLES)

        with self.store.locked("applications"):
            application = self.store.applications.get(application_id)
            if application is None:
                raise ApplicationNotFoundError(application_id)

            new_status = self.status_policy.validate(application.application_status, status)
            previous = application.application_status

            application.record_transition(HistoryEntry(
                actor_role=caller.role.value,
                status=new_status,
                remarks=remarks,
            ))
            self.store.applications.save(application)

        set_application_id(application.id)
        logger.log_workflow_event(
            "status_updated", application.id, actor_role=caller.role.value,
            from_status=previous, to_status=new_status,
        )

        self.notifications.notify_email(
            application.applicant_email, STATUS_MESSAGE.format(status=new_status)
        )
        return application

    # ==================== QUERIES ====================

    def list_applications(self, caller: CallerIdentity) -> List[Application]:
        """Citizens see their own applications; officers and admins see all"""
        if caller.is_staff:
            return self.store.applications.list()
        return self.store.applications.list(applicant_email=caller.email)

    def get_application(self, caller: CallerIdentity, application_id: str) -> Application:
        application = self.store.applications.get(application_id)
        if application is None:
            raise ApplicationNotFoundError(application_id)
        if not caller.is_staff and application.applicant_email != caller.email:
            raise ApplicationNotFoundError(application_id)
        return application

    def payments_for(self, application_id: str) -> List[Payment]:
        return self.store.payments.list_for_application(application_id)
