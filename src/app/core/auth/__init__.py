"""Authentication context: token handling and session resolution."""

from app.core.auth.backend import create_access_token, decode_token
from app.core.auth.dependencies import (
    CurrentPrincipal,
    CurrentUser,
    get_current_user,
    get_principal,
)
from app.core.auth.middleware import RequestIdMiddleware, TenantContextMiddleware
from app.core.auth.schemas import Principal, TokenData


__all__ = [
    # Dependencies
    "CurrentPrincipal",
    "CurrentUser",
    # Schemas
    "Principal",
    # Middleware
    "RequestIdMiddleware",
    "TenantContextMiddleware",
    "TokenData",
    # Token utilities
    "create_access_token",
    "decode_token",
    "get_current_user",
    "get_principal",
]
