### Description ###
# Altare Planner - Wedding Planning API
# - Auth Schemas -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Auth Schemas

Pydantic models for planner accounts, admin login and token responses.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    """Create a planner account"""
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=8, max_length=128)
    display_name: str | None = Field(None, max_length=100)


class UserLogin(BaseModel):
    """Planner login"""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """Planner account (without the password hash)"""
    id: str
    email: str
    display_name: str | None = None
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class AdminLoginRequest(BaseModel):
    """Admin login with the username/password from config.yaml"""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Login response with JWT token"""
    token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
    is_default_password: bool = False
