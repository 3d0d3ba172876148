"""
Status policies for application review transitions.

Two policies:

- OpenStatusPolicy: any non-empty status string may follow any other,
  including repeats and regressions. This is the demo's behaviour and the
  default (STATUS_POLICY=open).
- StrictStatusPolicy: only the transitions in REVIEW_TRANSITIONS are
  allowed; approved and rejected are terminal.

    submitted ──→ under_review ──→ approved | rejected
        ↑              │
        └──────────────┘
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Set

from app.core.exceptions import InvalidTransitionError, ValidationError
from app.models.application import ApplicationStatus


REVIEW_TRANSITIONS: Dict[str, Set[str]] = {
    ApplicationStatus.SUBMITTED.value: {ApplicationStatus.UNDER_REVIEW.value},
    ApplicationStatus.UNDER_REVIEW.value: {
        ApplicationStatus.APPROVED.value,
        ApplicationStatus.REJECTED.value,
        ApplicationStatus.SUBMITTED.value,
    },
    ApplicationStatus.APPROVED.value: set(),
    ApplicationStatus.REJECTED.value: set(),
}


class StatusPolicy(ABC):
    name: str = ""

    @abstractmethod
    def allowed_from(self, current: str) -> List[str]:
        """Statuses reachable from current; empty list means unrestricted"""
        pass

    def validate(self, current: str, new_status: str) -> str:
        """Return the normalised new status or raise"""
        if not isinstance(new_status, str) or not new_status.strip():
            raise ValidationError("Status is required", field="status")
        return new_status.strip()


class OpenStatusPolicy(StatusPolicy):
    name = "open"

    def allowed_from(self, current: str) -> List[str]:
        return []


class StrictStatusPolicy(StatusPolicy):
    name = "strict"

    def __init__(self, transitions: Dict[str, Set[str]] = None):
        self.transitions = transitions or REVIEW_TRANSITIONS

    def allowed_from(self, current: str) -> List[str]:
        return sorted(self.transitions.get(current, set()))

    def validate(self, current: str, new_status: str) -> str:
        new_status = super().validate(current, new_status)
        if new_status not in self.transitions:
            raise ValidationError(f"Unknown status '{new_status}'", field="status")

        allowed = self.allowed_from(current)
        if new_status not in allowed:
            raise InvalidTransitionError(current, new_status, allowed)
        return new_status


def get_status_policy(name: str) -> StatusPolicy:
    policies = {
        OpenStatusPolicy.name: OpenStatusPolicy,
        StrictStatusPolicy.name: StrictStatusPolicy,
    }
    if name not in policies:
        raise ValueError(f"Unknown status policy '{name}'")
    return policies[name]()
