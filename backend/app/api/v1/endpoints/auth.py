from fastapi import APIRouter, Depends, Request, status

from app.core.config import settings
from app.core.logging_config import set_user_id
from app.core.rate_limiter import limiter
from app.core.security import create_access_token
from app.models.user import CallerIdentity
from app.modules.auth.dependencies import get_current_user
from app.schemas.auth import UserRegister, UserLogin, LoginResponse, UserResponse
from app.services.user_service import UserService
from app.api.v1.dependencies import get_user_service


router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.REGISTER_RATE_LIMIT)
async def register(
    request: Request,
    user_data: UserRegister,
    users: UserService = Depends(get_user_service)
):
    """Register a new citizen account"""
    return users.register(
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
        language=user_data.language,
    )


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    credentials: UserLogin,
    users: UserService = Depends(get_user_service)
):
    """Exchange email and password for a bearer token"""
    user = users.authenticate(credentials.email, credentials.password)
    set_user_id(user.id)

    token_data = {
        "sub": user.id,
        "email": user.email,
        "role": user.role.value
    }

    return LoginResponse(
        access_token=create_access_token(token_data),
        role=user.role,
        language=user.language,
        name=user.name,
    )


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: CallerIdentity = Depends(get_current_user),
    users: UserService = Depends(get_user_service)
):
    """Get current user profile"""
    return users.get_user(current_user.id)
