"""
Security Helpers
================

Password hashing for user accounts and the bearer-token guard for the
admin API surface.
"""
import hmac
import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from werkzeug.security import check_password_hash, generate_password_hash

from garden_site.core.config import get_settings

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    """Hash a plain-text password for storage."""
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    """Check a plain-text password against a stored hash."""
    return check_password_hash(password_hash, password)


def is_password_hash(value: str) -> bool:
    """True when the value already looks like a werkzeug hash."""
    return value.startswith(("pbkdf2:", "scrypt:"))


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> None:
    """
    Guard for /api/admin routes.

    When ADMIN_API_TOKEN is not configured the admin surface is open and
    this dependency lets every request through.
    """
    expected = get_settings().admin_api_token
    if not expected:
        return

    if credentials is None or not hmac.compare_digest(credentials.credentials, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
