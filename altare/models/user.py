### Description ###
# Altare Planner - Wedding Planning API
# - User Model -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
User Model

A planner account. The user id is the "current actor" that owns
seating tables, chairs and user-defined table templates.
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, String

from altare.config import hash_password, verify_password_hash
from altare.database import Base


class User(Base):
    """Planner account - password stored as a bcrypt hash"""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), nullable=False, unique=True)
    display_name = Column(String(100), nullable=True)
    password_hash = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<User(id='{self.id}', email='{self.email}')>"

    @classmethod
    def create(cls, email: str, password: str, display_name: str | None = None) -> "User":
        """Build a new user with the password hashed (not yet added to a session)"""
        return cls(
            email=email.strip().lower(),
            display_name=display_name,
            password_hash=hash_password(password),
        )

    def verify_password(self, password: str) -> bool:
        """Check a plaintext password against this user's hash"""
        return verify_password_hash(password, self.password_hash)
