### Description ###
# Altare Planner - Wedding Planning API
# - Token Authentication Middleware -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Token Authentication

Bearer JWT authentication for the three kinds of callers:
- admin:  username/password from config.yaml
- user:   registered planner account (the "current actor")
- vendor: session issued after a successful vendor access login,
          bound to a single vendor profile
"""

from datetime import datetime, timedelta

import jwt
from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from altare.config import get_api_settings
from altare.database import get_db
from altare.models import User

TOKEN_TYPE_ADMIN = "admin"
TOKEN_TYPE_USER = "user"
TOKEN_TYPE_VENDOR = "vendor"

# Bearer token for JWT authentication
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(subject: str, token_type: str, expires_delta: timedelta) -> str:
    """
    Sign a JWT for a caller.

    Args:
        subject: admin username, user id or vendor id
        token_type: admin, user or vendor
        expires_delta: Token lifetime
    """
    settings = get_api_settings()
    token_data = {
        "sub": subject,
        "exp": datetime.utcnow() + expires_delta,
        "type": token_type,
    }
    return jwt.encode(token_data, settings.secret_key, algorithm=settings.jwt_algorithm)


def _decode_token(token: str, token_type: str) -> dict | None:
    """Verify a JWT and return the payload if it is valid and of the expected type"""
    settings = get_api_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None

    if payload.get("type") != token_type or not payload.get("sub"):
        return None
    return payload


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


class ActorInfo:
    """Container for the authenticated caller"""

    def __init__(self, actor_id: str, actor_type: str, name: str | None = None):
        self.actor_id = actor_id
        self.actor_type = actor_type
        self.name = name

    def __repr__(self):
        return f"<ActorInfo(actor_id='{self.actor_id}', actor_type='{self.actor_type}')>"


async def get_optional_user(
    bearer: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
    db: Session = Depends(get_db),
) -> ActorInfo | None:
    """
    Resolve the planner behind a user token, or None.

    Used to fill the persistence client's current actor.
    """
    if not bearer or not bearer.credentials:
        return None

    payload = _decode_token(bearer.credentials, TOKEN_TYPE_USER)
    if not payload:
        return None

    user = db.query(User).filter(User.id == payload["sub"], User.is_active).first()
    if not user:
        return None

    return ActorInfo(actor_id=user.id, actor_type=TOKEN_TYPE_USER, name=user.display_name or user.email)


async def get_current_user(
    actor: ActorInfo | None = Depends(get_optional_user),
) -> ActorInfo:
    """
    Require a signed-in planner.

    Raises:
        HTTPException: 401 without a valid user token
    """
    if actor is None:
        raise _unauthorized("Please log in to continue")
    return actor


async def require_admin(
    bearer: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> ActorInfo:
    """
    Require an admin token.

    Usage:
        @router.get("/vendors")
        async def list_vendors(admin: ActorInfo = Depends(require_admin)):
            ...
    """
    if not bearer or not bearer.credentials:
        raise _unauthorized("Bearer token is required")

    payload = _decode_token(bearer.credentials, TOKEN_TYPE_ADMIN)
    if not payload:
        raise _unauthorized("Invalid or expired admin token")

    return ActorInfo(actor_id=payload["sub"], actor_type=TOKEN_TYPE_ADMIN, name=payload["sub"])


async def get_vendor_session(
    bearer: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> ActorInfo:
    """
    Require a vendor session token.

    Raises:
        HTTPException: 401 without a valid vendor token
    """
    if not bearer or not bearer.credentials:
        raise _unauthorized("Vendor session is required")

    payload = _decode_token(bearer.credentials, TOKEN_TYPE_VENDOR)
    if not payload:
        raise _unauthorized("Invalid or expired vendor session")

    return ActorInfo(actor_id=payload["sub"], actor_type=TOKEN_TYPE_VENDOR)


async def require_vendor_owner(
    vendor_id: str,
    session: ActorInfo = Depends(get_vendor_session),
) -> ActorInfo:
    """
    Require a vendor session for the vendor_id in the path.

    A session only unlocks the profile it was issued for.
    """
    if session.actor_id != vendor_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="This session does not grant access to that vendor profile",
        )
    return session
