# Pydantic schemas
from app.schemas.auth import (
    UserRegister,
    UserLogin,
    TokenData,
    UserResponse,
    LoginResponse,
    LanguageUpdate,
    LanguageResponse,
)
from app.schemas.application import (
    ApplicationCreate,
    StatusUpdate,
    HistoryEntryResponse,
    ApplicationResponse,
    PaymentRequest,
    PaymentResponse,
)
from app.schemas.plot import GeoPointResponse, PlotResponse
from app.schemas.notification import (
    NotificationResponse,
    DocumentUploadResponse,
    ResetResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "TokenData",
    "UserResponse",
    "LoginResponse",
    "LanguageUpdate",
    "LanguageResponse",
    "ApplicationCreate",
    "StatusUpdate",
    "HistoryEntryResponse",
    "ApplicationResponse",
    "PaymentRequest",
    "PaymentResponse",
    "GeoPointResponse",
    "PlotResponse",
    "NotificationResponse",
    "DocumentUploadResponse",
    "ResetResponse",
]
