from pydantic import BaseModel, EmailStr, Field, ConfigDict
from typing import Optional
from datetime import datetime

from app.models.user import UserRole


class UserRegister(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)
    language: Optional[str] = None


class UserLogin(BaseModel):
    email: str
    password: str


class TokenData(BaseModel):
    user_id: str
    email: str
    role: UserRole


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    role: UserRole
    language: str
    created_at: datetime


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: UserRole
    language: str
    name: str


class LanguageUpdate(BaseModel):
    language: str


class LanguageResponse(BaseModel):
    message: str = "Language updated"
    language: str
