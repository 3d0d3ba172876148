# API endpoints
from . import auth, users, plots, applications, payments, documents, notifications, sample

__all__ = ["auth", "users", "plots", "applications", "payments", "documents", "notifications", "sample"]
