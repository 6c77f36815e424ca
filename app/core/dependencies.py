"""
Core dependencies for identifying the caller
"""

from fastapi import Depends, Header, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.exceptions import UnauthorizedError, ValidationError
from app.database.supabase_client import get_supabase
from app.modules.auth.service import AuthService
from supabase import Client
from typing import Dict, Optional

security = HTTPBearer(auto_error=False)


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_current_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> str:
    """Extract the bearer token from the Authorization header"""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Missing bearer token", message="Sign in to use this endpoint")
    return credentials.credentials


def get_current_user(
    token: str = Depends(get_current_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> Dict:
    """Current user info resolved from the bearer token"""
    return auth_service.get_current_user(token)


def get_current_user_id(user: Dict = Depends(get_current_user)) -> str:
    return user["id"]


def require_user_id(user_id: Optional[str] = None) -> str:
    """`user_id` query parameter that owner-scoped endpoints filter on"""
    if not user_id:
        raise ValidationError("Missing user_id", message="user_id is required")
    return user_id


def require_guest_id(x_guest_id: Optional[str] = Header(None)) -> str:
    if not x_guest_id:
        raise ValidationError("Missing guest id", message="X-Guest-Id header is required")
    return x_guest_id
