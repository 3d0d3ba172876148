"""
Unit Tests for the application workflow engine
Tests for: submission, payment gating, status updates, role-filtered queries
"""
import pytest
from unittest.mock import patch

from app.core.exceptions import (
    AuthorizationError,
    ValidationError,
    ConflictError,
    AlreadyPaidError,
    ApplicationNotFoundError,
    InvalidTransitionError,
)
from app.models.application import ApplicationType, PaymentStatus
from app.models.payment import PaymentRecordStatus
from app.services.status_policy import StrictStatusPolicy
from app.services.workflow_service import (
    ApplicationWorkflowService,
    SUBMITTED_MESSAGE,
    PAYMENT_MESSAGE,
    STATUS_MESSAGE,
)


@pytest.fixture
def submitted(workflow, citizen_caller):
    return workflow.submit_application(
        citizen_caller, "mutation", "PLOT123", ["sale_deed.pdf"], reason="Inheritance"
    )


class TestSubmitApplication:
    """Test application submission"""

    def test_submit_sets_initial_state(self, workflow, citizen_caller, store):
        """A new application starts submitted with payment pending"""
        application = workflow.submit_application(
            citizen_caller, "mutation", "PLOT123", ["sale_deed.pdf"]
        )

        assert application.application_status == "submitted"
        assert application.payment_status == PaymentStatus.PENDING
        assert application.application_type == ApplicationType.MUTATION
        assert application.applicant_email == citizen_caller.email
        assert application.history == []
        assert store.applications.get(application.id) is application

    def test_submit_emits_exactly_one_notification(self, workflow, citizen_caller, store):
        workflow.submit_application(citizen_caller, "correction", "PLOT123", ["a.pdf"])

        messages = [n.message for n in store.notifications.list_for_user(citizen_caller.id)]
        assert messages == [SUBMITTED_MESSAGE]

    def test_submit_accepts_enum_type(self, workflow, citizen_caller):
        application = workflow.submit_application(
            citizen_caller, ApplicationType.CONVERSION, "PLOT123", ["a.pdf"]
        )

        assert application.application_type == ApplicationType.CONVERSION

    @pytest.mark.parametrize("application_type,plot_id,documents", [
        (None, "PLOT123", ["a.pdf"]),
        ("mutation", None, ["a.pdf"]),
        ("mutation", "PLOT123", []),
        ("mutation", "PLOT123", None),
        ("mutation", "PLOT123", ["  "]),
    ])
    def test_submit_missing_fields(self, workflow, citizen_caller, store,
                                   application_type, plot_id, documents):
        with pytest.raises(ValidationError) as exc_info:
            workflow.submit_application(citizen_caller, application_type, plot_id, documents)

        assert exc_info.value.message == "Missing fields"
        assert store.applications.count() == 0

    def test_submit_unsupported_type(self, workflow, citizen_caller, store):
        with pytest.raises(ValidationError):
            workflow.submit_application(citizen_caller, "partition", "PLOT123", ["a.pdf"])

        assert store.applications.count() == 0

    def test_missing_fields_checked_before_ownership(self, workflow, other_citizen_caller):
        """Validation failures win over authorization failures"""
        with pytest.raises(ValidationError):
            workflow.submit_application(other_citizen_caller, "mutation", "PLOT123", [])

    def test_submit_foreign_plot(self, workflow, other_citizen_caller, store):
        """Citizen B cannot apply against citizen A's plot"""
        with pytest.raises(AuthorizationError) as exc_info:
            workflow.submit_application(other_citizen_caller, "mutation", "PLOT123", ["a.pdf"])

        assert exc_info.value.message == "Plot does not belong to you"
        assert store.applications.count() == 0
        assert store.notifications.list_for_user(other_citizen_caller.id) == []

    def test_submit_unknown_plot(self, workflow, citizen_caller):
        with pytest.raises(AuthorizationError):
            workflow.submit_application(citizen_caller, "mutation", "PLOT999", ["a.pdf"])

    def test_staff_cannot_submit(self, workflow, officer_caller, admin_caller):
        for caller in (officer_caller, admin_caller):
            with pytest.raises(AuthorizationError):
                workflow.submit_application(caller, "mutation", "PLOT123", ["a.pdf"])

    def test_notification_failure_keeps_application(self, workflow, citizen_caller, store):
        """A failing notification store never undoes the submission"""
        with patch.object(store.notifications, "append", side_effect=RuntimeError("down")):
            application = workflow.submit_application(
                citizen_caller, "mutation", "PLOT123", ["a.pdf"]
            )

        assert store.applications.get(application.id) is application
        assert store.notifications.count() == 0


class TestCompletePayment:
    """Test payment gating"""

    def test_payment_completes(self, workflow, citizen_caller, submitted, store):
        payment = workflow.complete_payment(citizen_caller, submitted.id, 500)

        assert payment.amount == 500
        assert payment.status == PaymentRecordStatus.COMPLETED
        assert payment.paid_by == citizen_caller.email
        assert submitted.payment_status == PaymentStatus.COMPLETED
        assert store.payments.list_for_application(submitted.id) == [payment]

        messages = [n.message for n in store.notifications.list_for_user(citizen_caller.id)]
        assert messages[-1] == PAYMENT_MESSAGE.format(application_id=submitted.id)

    def test_second_payment_conflicts(self, workflow, citizen_caller, submitted, store):
        workflow.complete_payment(citizen_caller, submitted.id, 500)

        with pytest.raises(ConflictError) as exc_info:
            workflow.complete_payment(citizen_caller, submitted.id, 500)

        assert isinstance(exc_info.value, AlreadyPaidError)
        assert exc_info.value.message == "Already paid"
        assert len(store.payments.list_for_application(submitted.id)) == 1

    @pytest.mark.parametrize("amount", [
        0, -1, -0.5, None, "500", True, float("nan"), float("inf"), 10 ** 400, -(10 ** 400),
    ])
    def test_invalid_amount(self, workflow, citizen_caller, submitted, store, amount):
        with pytest.raises(ValidationError):
            workflow.complete_payment(citizen_caller, submitted.id, amount)

        assert submitted.payment_status == PaymentStatus.PENDING
        assert store.payments.count() == 0

    def test_missing_application_id(self, workflow, citizen_caller):
        with pytest.raises(ValidationError):
            workflow.complete_payment(citizen_caller, None, 500)

    def test_unknown_application(self, workflow, citizen_caller):
        with pytest.raises(ApplicationNotFoundError):
            workflow.complete_payment(citizen_caller, "missing", 500)

    def test_foreign_application(self, workflow, other_citizen_caller, submitted, store):
        with pytest.raises(ApplicationNotFoundError):
            workflow.complete_payment(other_citizen_caller, submitted.id, 500)

        assert submitted.payment_status == PaymentStatus.PENDING
        assert store.payments.count() == 0

    def test_staff_cannot_pay(self, workflow, officer_caller, submitted):
        with pytest.raises(AuthorizationError):
            workflow.complete_payment(officer_caller, submitted.id, 500)


class TestUpdateStatus:
    """Test officer/admin review"""

    def test_update_appends_history(self, workflow, officer_caller, submitted):
        updated = workflow.update_status(officer_caller, submitted.id, "approved", "verified")

        assert updated.application_status == "approved"
        assert len(updated.history) == 1
        entry = updated.history[0]
        assert entry.actor_role == "officer"
        assert entry.status == "approved"
        assert entry.remarks == "verified"

    def test_history_grows_by_one_per_update(self, workflow, officer_caller, admin_caller, submitted):
        workflow.update_status(officer_caller, submitted.id, "under_review")
        workflow.update_status(admin_caller, submitted.id, "rejected", "boundary dispute")
        workflow.update_status(officer_caller, submitted.id, "rejected")

        assert [h.status for h in submitted.history] == ["under_review", "rejected", "rejected"]
        assert [h.actor_role for h in submitted.history] == ["officer", "admin", "officer"]

    def test_update_notifies_applicant(self, workflow, officer_caller, citizen_caller, submitted, store):
        workflow.update_status(officer_caller, submitted.id, "under_review")

        messages = [n.message for n in store.notifications.list_for_user(citizen_caller.id)]
        assert messages[-1] == STATUS_MESSAGE.format(status="under_review")
        assert store.notifications.list_for_user(officer_caller.id) == []

    def test_update_does_not_require_payment(self, workflow, officer_caller, submitted):
        updated = workflow.update_status(officer_caller, submitted.id, "approved")

        assert updated.payment_status == PaymentStatus.PENDING

    def test_citizen_cannot_update(self, workflow, citizen_caller, submitted):
        with pytest.raises(AuthorizationError):
            workflow.update_status(citizen_caller, submitted.id, "approved")

        assert submitted.history == []

    def test_blank_status_rejected(self, workflow, officer_caller, submitted):
        with pytest.raises(ValidationError):
            workflow.update_status(officer_caller, submitted.id, "   ")

        assert submitted.application_status == "submitted"

    def test_unknown_application(self, workflow, officer_caller):
        with pytest.raises(ApplicationNotFoundError):
            workflow.update_status(officer_caller, "missing", "approved")

    def test_applicant_missing_skips_notification(self, workflow, officer_caller, submitted, store):
        """If the applicant account is gone the status change still lands"""
        store.users.clear()
        before = store.notifications.count()

        updated = workflow.update_status(officer_caller, submitted.id, "approved")

        assert updated.application_status == "approved"
        assert len(updated.history) == 1
        assert store.notifications.count() == before

    def test_strict_policy_enforces_transitions(self, store, notifications, officer_caller, submitted):
        strict = ApplicationWorkflowService(store, notifications, status_policy=StrictStatusPolicy())

        with pytest.raises(InvalidTransitionError):
            strict.update_status(officer_caller, submitted.id, "approved")

        strict.update_status(officer_caller, submitted.id, "under_review")
        strict.update_status(officer_caller, submitted.id, "approved")

        with pytest.raises(InvalidTransitionError):
            strict.update_status(officer_caller, submitted.id, "rejected")

        assert [h.status for h in submitted.history] == ["under_review", "approved"]


class TestQueries:
    """Test role-filtered listing"""

    def test_citizen_sees_only_own(self, workflow, citizen_caller, other_citizen_caller, submitted):
        assert workflow.list_applications(citizen_caller) == [submitted]
        assert workflow.list_applications(other_citizen_caller) == []

    def test_staff_sees_all(self, workflow, citizen_caller, officer_caller, admin_caller, submitted):
        second = workflow.submit_application(citizen_caller, "correction", "PLOT123", ["b.pdf"])

        for caller in (officer_caller, admin_caller):
            listed = workflow.list_applications(caller)
            assert {a.id for a in listed} == {submitted.id, second.id}

    def test_get_application_for_other_citizen(self, workflow, other_citizen_caller, submitted):
        with pytest.raises(ApplicationNotFoundError):
            workflow.get_application(other_citizen_caller, submitted.id)

    def test_payments_for(self, workflow, citizen_caller, submitted):
        assert workflow.payments_for(submitted.id) == []
        payment = workflow.complete_payment(citizen_caller, submitted.id, 250.5)

        assert workflow.payments_for(submitted.id) == [payment]
