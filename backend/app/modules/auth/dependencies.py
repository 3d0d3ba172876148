from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Callable, Optional

from app.core.logging_config import set_user_id
from app.core.security import decode_token
from app.db.store import DataStore, get_store
from app.models.user import CallerIdentity, UserRole

security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: DataStore = Depends(get_store)
) -> CallerIdentity:
    """Resolve the bearer token to a trusted caller identity"""

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_token(credentials.credentials)

    if payload.get("type") != "access":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type"
        )

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload"
        )

    # Tokens outlive a sample reset; the account must still exist
    user = store.users.get(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found"
        )

    request.state.user_id = user.id
    set_user_id(user.id)
    return CallerIdentity.from_user(user)


def require_roles(*roles: UserRole) -> Callable:
    """
    Dependency factory restricting an endpoint to the given roles.

    Usage:
        @router.post("/{application_id}/status")
        async def update_status(
            caller: CallerIdentity = Depends(require_roles(UserRole.OFFICER, UserRole.ADMIN))
        ):
            ...
    """
    allowed = frozenset(roles)

    async def role_checker(
        current_user: CallerIdentity = Depends(get_current_user)
    ) -> CallerIdentity:
        if current_user.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied"
            )
        return current_user

    return role_checker


require_citizen = require_roles(UserRole.CITIZEN)
require_staff = require_roles(UserRole.OFFICER, UserRole.ADMIN)
require_admin = require_roles(UserRole.ADMIN)
