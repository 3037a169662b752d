"""
Common Dependencies
===================

Shared dependencies used across the application.

The session identity is resolved once per request by ``get_current_user``
and handed to each handler explicitly through the ``CurrentUser``
parameter.
"""

import logging
from typing import Annotated, Optional
import uuid

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifehub.config import settings
from lifehub.core.errors import AuthenticationError, ErrorCodes
from lifehub.core.security import decode_token
from lifehub.db.session import get_db
from lifehub.models.user import User

logger = logging.getLogger(__name__)

# Database session dependency
DBSession = Annotated[AsyncSession, Depends(get_db)]

# Security scheme for bearer session tokens
security = HTTPBearer(auto_error=False)

# Development user ID (consistent UUID for local testing)
DEV_USER_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")
DEV_USER_EMAIL = "dev@lifehub.local"


async def get_or_create_dev_user(db: AsyncSession) -> User:
    """
    Get or create the development user.
    Only used when DEV_AUTH_DISABLED is True.
    """
    user = await db.get(User, DEV_USER_ID)

    if user is None:
        user = User(
            id=DEV_USER_ID,
            email=DEV_USER_EMAIL,
            name="Development User",
        )
        db.add(user)
        await db.flush()
        logger.info("Created development user %s", DEV_USER_ID)

    return user


async def _resolve_user_from_token(
    credentials: HTTPAuthorizationCredentials,
    db: AsyncSession,
) -> Optional[User]:
    """Decode the bearer token and load the user it names."""
    payload = decode_token(credentials.credentials)
    if payload is None or payload.get("type") != "access":
        return None

    user_id_str = payload.get("sub")
    if user_id_str is None:
        return None

    try:
        user_id = uuid.UUID(user_id_str)
    except ValueError:
        return None

    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_current_user(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    db: DBSession,
) -> User:
    """
    Get current authenticated user.

    Raises 401 if not authenticated or the token is invalid.
    In development with DEV_AUTH_DISABLED=True, returns the dev user.
    """
    if settings.auth_disabled:
        user = await get_or_create_dev_user(db)
    elif credentials is None:
        raise AuthenticationError(
            code=ErrorCodes.AUTH_NOT_AUTHENTICATED,
            message="Not authenticated",
        )
    else:
        user = await _resolve_user_from_token(credentials, db)
        if user is None:
            raise AuthenticationError(
                code=ErrorCodes.AUTH_INVALID_TOKEN,
                message="Invalid or expired session",
            )

    # Picked up by the transaction middleware
    request.state.user_id = str(user.id)
    return user


# Type alias for authenticated user dependency
CurrentUser = Annotated[User, Depends(get_current_user)]
