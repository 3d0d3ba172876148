"""
Repository contracts and in-memory implementations.

The workflow engine depends on the abstract classes only; the in-memory
versions are what the demo runs on. A persistent backend implements the
same contracts and is handed to DataStore instead.

Every repository carries its own re-entrant lock. Callers that need several
collections to change together (payment + application) hold all of the
relevant locks for the duration of the write.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
import threading

from app.models.user import User
from app.models.plot import Plot
from app.models.application import Application
from app.models.notification import Notification
from app.models.payment import Payment
from app.models.document import Document


class Repository(ABC):
    """Base class for all repositories: one lock per collection"""

    def __init__(self):
        self.lock = threading.RLock()

    @abstractmethod
    def clear(self, keep_seed: bool = False) -> int:
        """Remove records; returns the number removed"""
        pass

    @abstractmethod
    def count(self) -> int:
        pass


# ==================== Contracts ====================

class UserRepository(Repository):

    @abstractmethod
    def add(self, user: User) -> User:
        pass

    @abstractmethod
    def get(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    def save(self, user: User) -> User:
        pass

    @abstractmethod
    def list(self) -> List[User]:
        pass


class PlotRepository(Repository):

    @abstractmethod
    def add(self, plot: Plot) -> Plot:
        pass

    @abstractmethod
    def get(self, plot_id: str) -> Optional[Plot]:
        pass

    @abstractmethod
    def list(self, owner_email: Optional[str] = None) -> List[Plot]:
        pass


class ApplicationRepository(Repository):

    @abstractmethod
    def add(self, application: Application) -> Application:
        pass

    @abstractmethod
    def get(self, application_id: str) -> Optional[Application]:
        pass

    @abstractmethod
    def save(self, application: Application) -> Application:
        pass

    @abstractmethod
    def list(self, applicant_email: Optional[str] = None) -> List[Application]:
        pass


class NotificationRepository(Repository):

    @abstractmethod
    def append(self, notification: Notification) -> Notification:
        pass

    @abstractmethod
    def list_for_user(self, user_id: str) -> List[Notification]:
        pass


class PaymentRepository(Repository):

    @abstractmethod
    def add(self, payment: Payment) -> Payment:
        pass

    @abstractmethod
    def list_for_application(self, application_id: str) -> List[Payment]:
        pass


class DocumentRepository(Repository):

    @abstractmethod
    def add(self, document: Document) -> Document:
        pass

    @abstractmethod
    def get(self, document_id: str) -> Optional[Document]:
        pass


# ==================== In-memory implementations ====================

class InMemoryUserRepository(UserRepository):

    def __init__(self):
        super().__init__()
        self._users: Dict[str, User] = {}

    def add(self, user: User) -> User:
        with self.lock:
            if self.get_by_email(user.email) is not None:
                raise ValueError(f"User with email '{user.email}' already exists")
            self._users[user.id] = user
            return user

    def get(self, user_id: str) -> Optional[User]:
        with self.lock:
            return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        with self.lock:
            for user in self._users.values():
                if user.email == email:
                    return user
            return None

    def save(self, user: User) -> User:
        with self.lock:
            self._users[user.id] = user
            return user

    def list(self) -> List[User]:
        with self.lock:
            return list(self._users.values())

    def clear(self, keep_seed: bool = False) -> int:
        with self.lock:
            before = len(self._users)
            if keep_seed:
                self._users = {uid: u for uid, u in self._users.items() if u.is_seed}
            else:
                self._users = {}
            return before - len(self._users)

    def count(self) -> int:
        with self.lock:
            return len(self._users)


class InMemoryPlotRepository(PlotRepository):

    def __init__(self):
        super().__init__()
        self._plots: Dict[str, Plot] = {}

    def add(self, plot: Plot) -> Plot:
        with self.lock:
            if plot.plot_id in self._plots:
                raise ValueError(f"Plot '{plot.plot_id}' already exists")
            self._plots[plot.plot_id] = plot
            return plot

    def get(self, plot_id: str) -> Optional[Plot]:
        with self.lock:
            return self._plots.get(plot_id)

    def list(self, owner_email: Optional[str] = None) -> List[Plot]:
        with self.lock:
            plots = list(self._plots.values())
        if owner_email:
            plots = [p for p in plots if p.current_owner_email == owner_email]
        return plots

    def clear(self, keep_seed: bool = False) -> int:
        with self.lock:
            before = len(self._plots)
            if keep_seed:
                self._plots = {pid: p for pid, p in self._plots.items() if p.is_seed}
            else:
                self._plots = {}
            return before - len(self._plots)

    def count(self) -> int:
        with self.lock:
            return len(self._plots)


class InMemoryApplicationRepository(ApplicationRepository):
    """Insertion-ordered application store"""

    def __init__(self):
        super().__init__()
        self._applications: Dict[str, Application] = {}

    def add(self, application: Application) -> Application:
        with self.lock:
            self._applications[application.id] = application
            return application

    def get(self, application_id: str) -> Optional[Application]:
        with self.lock:
            return self._applications.get(application_id)

    def save(self, application: Application) -> Application:
        with self.lock:
            if application.id not in self._applications:
                raise KeyError(application.id)
            self._applications[application.id] = application
            return application

    def list(self, applicant_email: Optional[str] = None) -> List[Application]:
        with self.lock:
            applications = list(self._applications.values())
        if applicant_email is not None:
            applications = [a for a in applications if a.applicant_email == applicant_email]
        return applications

    def clear(self, keep_seed: bool = False) -> int:
        with self.lock:
            removed = len(self._applications)
            self._applications = {}
            return removed

    def count(self) -> int:
        with self.lock:
            return len(self._applications)


class InMemoryNotificationRepository(NotificationRepository):
    """Append-only notification log"""

    def __init__(self):
        super().__init__()
        self._notifications: List[Notification] = []

    def append(self, notification: Notification) -> Notification:
        with self.lock:
            self._notifications.append(notification)
            return notification

    def list_for_user(self, user_id: str) -> List[Notification]:
        with self.lock:
            return [n for n in self._notifications if n.to_user_id == user_id]

    def clear(self, keep_seed: bool = False) -> int:
        with self.lock:
            removed = len(self._notifications)
            self._notifications = []
            return removed

    def count(self) -> int:
        with self.lock:
            return len(self._notifications)


class InMemoryPaymentRepository(PaymentRepository):

    def __init__(self):
        super().__init__()
        self._payments: List[Payment] = []

    def add(self, payment: Payment) -> Payment:
        with self.lock:
            self._payments.append(payment)
            return payment

    def list_for_application(self, application_id: str) -> List[Payment]:
        with self.lock:
            return [p for p in self._payments if p.application_id == application_id]

    def clear(self, keep_seed: bool = False) -> int:
        with self.lock:
            removed = len(self._payments)
            self._payments = []
            return removed

    def count(self) -> int:
        with self.lock:
            return len(self._payments)


class InMemoryDocumentRepository(DocumentRepository):

    def __init__(self):
        super().__init__()
        self._documents: Dict[str, Document] = {}

    def add(self, document: Document) -> Document:
        with self.lock:
            self._documents[document.id] = document
            return document

    def get(self, document_id: str) -> Optional[Document]:
        with self.lock:
            return self._documents.get(document_id)

    def clear(self, keep_seed: bool = False) -> int:
        with self.lock:
            removed = len(self._documents)
            self._documents = {}
            return removed

    def count(self) -> int:
        with self.lock:
            return len(self._documents)
