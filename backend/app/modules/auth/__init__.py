# Authentication module

from app.modules.auth.dependencies import (
    get_current_user,
    require_roles,
    require_citizen,
    require_staff,
    require_admin,
)

__all__ = [
    "get_current_user",
    "require_roles",
    "require_citizen",
    "require_staff",
    "require_admin",
]
