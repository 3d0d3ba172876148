"""
DataStore - explicitly constructed container for every entity collection.

Created once at startup (see app.main.lifespan), attached to app.state and
handed to the services; there are no module-level collections. reset()
takes every collection lock before clearing so it never interleaves with an
in-flight operation.
"""

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator

from starlette.requests import Request

from app.core.logging_config import logger
from app.db.repositories import (
    Repository,
    UserRepository,
    PlotRepository,
    ApplicationRepository,
    NotificationRepository,
    PaymentRepository,
    DocumentRepository,
    InMemoryUserRepository,
    InMemoryPlotRepository,
    InMemoryApplicationRepository,
    InMemoryNotificationRepository,
    InMemoryPaymentRepository,
    InMemoryDocumentRepository,
)


@dataclass
class DataStore:
    users: UserRepository = field(default_factory=InMemoryUserRepository)
    plots: PlotRepository = field(default_factory=InMemoryPlotRepository)
    applications: ApplicationRepository = field(default_factory=InMemoryApplicationRepository)
    notifications: NotificationRepository = field(default_factory=InMemoryNotificationRepository)
    payments: PaymentRepository = field(default_factory=InMemoryPaymentRepository)
    documents: DocumentRepository = field(default_factory=InMemoryDocumentRepository)

    def _collections(self) -> Dict[str, Repository]:
        # Fixed order: every multi-lock acquisition goes through here
        return {
            "users": self.users,
            "plots": self.plots,
            "applications": self.applications,
            "payments": self.payments,
            "notifications": self.notifications,
            "documents": self.documents,
        }

    @contextmanager
    def locked(self, *names: str) -> Iterator[None]:
        """Hold the locks of the named collections, acquired in a fixed order"""
        collections = self._collections()
        unknown = set(names) - set(collections)
        if unknown:
            raise KeyError(f"Unknown collections: {sorted(unknown)}")

        with ExitStack() as stack:
            for name, repo in collections.items():
                if name in names:
                    stack.enter_context(repo.lock)
            yield

    def counts(self) -> Dict[str, int]:
        return {name: repo.count() for name, repo in self._collections().items()}

    def reset(self) -> Dict[str, int]:
        """
        Clear applications, notifications, payments, documents and every
        non-seed user and plot. Returns the number of records removed per
        collection.
        """
        with self.locked(*self._collections().keys()):
            removed = {
                "users": self.users.clear(keep_seed=True),
                "plots": self.plots.clear(keep_seed=True),
                "applications": self.applications.clear(),
                "payments": self.payments.clear(),
                "notifications": self.notifications.clear(),
                "documents": self.documents.clear(),
            }

        logger.info(f"[DataStore] Reset to seed state, removed: {removed}")
        return removed


def get_store(request: Request) -> DataStore:
    """FastAPI dependency returning the store attached to the running app"""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("DataStore not initialised - the app lifespan attaches it at startup")
    return store
