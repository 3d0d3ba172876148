from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import List, Any
import json


def parse_cors_origins(v: Any) -> List[str]:
    """Parse CORS origins from string or list"""
    if isinstance(v, list):
        return v
    if isinstance(v, str):
        # Try JSON parsing first
        if v.startswith('['):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                pass
        # Fall back to comma-separated
        return [origin.strip() for origin in v.split(',') if origin.strip()]
    return []


def parse_languages(v: Any) -> List[str]:
    """Parse supported language codes from string or list"""
    if isinstance(v, list):
        return v
    if isinstance(v, str):
        return [lang.strip().lower() for lang in v.split(',') if lang.strip()]
    return []


class Settings(BaseSettings):
    """Application settings - all configurable via environment variables"""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==========================================
    # Application
    # ==========================================
    APP_NAME: str = "Land Records Management System"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    API_VERSION: str = "v1"

    # Server Configuration
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 3001

    # ==========================================
    # Authentication
    # ==========================================
    JWT_SECRET_KEY: str = "CHANGE_ME"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 720  # 12 hours
    BCRYPT_ROUNDS: int = 12  # 4 for dev (fast), 12 for prod (secure)

    # ==========================================
    # CORS (stored as comma-separated string, parsed to list)
    # ==========================================
    CORS_ORIGINS_STR: str = "*"

    @property
    def CORS_ORIGINS(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return parse_cors_origins(self.CORS_ORIGINS_STR)

    # ==========================================
    # Rate Limiting
    # ==========================================
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_PER_MINUTE: int = 60
    LOGIN_RATE_LIMIT: str = "5/minute"
    REGISTER_RATE_LIMIT: str = "3/minute"

    # ==========================================
    # File Upload
    # ==========================================
    MAX_UPLOAD_SIZE: int = 10485760  # 10MB

    # ==========================================
    # Logging
    # ==========================================
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""

    # ==========================================
    # Workflow
    # ==========================================
    # "open": any status string is accepted (demo behaviour)
    # "strict": submitted -> under_review -> approved | rejected
    STATUS_POLICY: str = "open"

    SUPPORTED_LANGUAGES_STR: str = "en,hi"
    DEFAULT_LANGUAGE: str = "en"

    @property
    def SUPPORTED_LANGUAGES(self) -> List[str]:
        return parse_languages(self.SUPPORTED_LANGUAGES_STR)

    # ==========================================
    # Demo seed accounts
    # ==========================================
    DEMO_CITIZEN_EMAIL: str = "citizen@example.com"
    DEMO_CITIZEN_PASSWORD: str = "citizenpass"
    DEMO_OFFICER_EMAIL: str = "officer@gov.in"
    DEMO_OFFICER_PASSWORD: str = "officerpass"
    DEMO_ADMIN_EMAIL: str = "admin@gov.in"
    DEMO_ADMIN_PASSWORD: str = "adminpass"

    @field_validator("STATUS_POLICY")
    @classmethod
    def validate_status_policy(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("open", "strict"):
            raise ValueError("STATUS_POLICY must be 'open' or 'strict'")
        return v


settings = Settings()
