### Description ###
# Altare Planner - Wedding Planning API
# - Planner Auth Router -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Planner Authentication Endpoints

- POST /auth/register: create a planner account
- POST /auth/login: exchange email/password for a user token
- GET /auth/me: the signed-in planner

Register and login are rate limited per client.
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from altare.config import get_api_settings
from altare.database import get_db
from altare.middleware.auth import TOKEN_TYPE_USER, ActorInfo, create_access_token, get_current_user
from altare.middleware.rate_limit import AUTH_RATE_LIMIT, limiter
from altare.models import User
from altare.schemas.auth import LoginResponse, UserLogin, UserRegister, UserResponse
from altare.schemas.responses import APIResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=APIResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Create a planner account",
)
@limiter.limit(AUTH_RATE_LIMIT)
async def register(
    request: Request,
    data: UserRegister,
    db: Session = Depends(get_db),
) -> APIResponse[UserResponse]:
    """Create a planner account"""
    email = data.email.strip().lower()
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An account with this email already exists",
        )

    user = User.create(email=email, password=data.password, display_name=data.display_name)
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Registered planner {user.id}")
    return APIResponse(success=True, data=UserResponse.model_validate(user), message="Account created")


@router.post(
    "/login",
    response_model=APIResponse[LoginResponse],
    summary="Login",
    description="Authenticate with email/password to get a JWT token",
)
@limiter.limit(AUTH_RATE_LIMIT)
async def login(
    request: Request,
    data: UserLogin,
    db: Session = Depends(get_db),
) -> APIResponse[LoginResponse]:
    """Authenticate a planner and return a user token"""
    settings = get_api_settings()

    user = db.query(User).filter(User.email == data.email.strip().lower()).first()
    if not user or not user.is_active or not user.verify_password(data.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    expires_delta = timedelta(hours=settings.user_token_hours)
    token = create_access_token(user.id, TOKEN_TYPE_USER, expires_delta)

    return APIResponse(
        success=True,
        data=LoginResponse(token=token, expires_in=int(expires_delta.total_seconds())),
        message="Login successful",
    )


@router.get(
    "/me",
    response_model=APIResponse[UserResponse],
    summary="Current planner",
)
async def get_me(
    actor: ActorInfo = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> APIResponse[UserResponse]:
    """Return the signed-in planner"""
    user = db.query(User).filter(User.id == actor.actor_id).first()
    return APIResponse(success=True, data=UserResponse.model_validate(user))
