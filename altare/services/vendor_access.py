### Description ###
# Altare Planner - Wedding Planning API
# - Vendor Access Service -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Vendor Access Service

Issues and verifies temporary vendor credentials:
- Access token: 12 characters, used as the login URL path segment
- Password: 12 characters, returned once, stored only as a SHA-256 hex digest
- Expiration: 7 days after issue

Both values come from an alphabet without look-alike characters
(no 0/O or 1/I) so they can be typed from a printed note.

Known weaknesses kept on purpose (see DESIGN.md):
- The digest is unsalted SHA-256, not a password KDF
- A credential can be used any number of times until it expires
"""

import hashlib
import hmac
import logging
import secrets
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from altare.services.errors import AccessDeniedError, ValidationError
from altare.services.persistence import PersistenceClient
from altare.services.query_schemas import OrderBy, eq, gt

logger = logging.getLogger(__name__)

ACCESS_ALPHABET = "23456789ABCDEFGHJKLMNPQRSTUVWXYZ"
ACCESS_CODE_LENGTH = 12
ACCESS_TTL = timedelta(days=7)

STATUS_ACTIVE = "active"
STATUS_EXPIRED = "expired"


def generate_access_code(length: int = ACCESS_CODE_LENGTH) -> str:
    """
    Generate a random code from the unambiguous alphabet.

    Example: 7KQ2M9XRTD4H
    """
    return "".join(secrets.choice(ACCESS_ALPHABET) for _ in range(length))


def hash_access_password(plaintext: str) -> str:
    """SHA-256 of the UTF-8 password, as 64 lowercase hex characters"""
    return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()


def verify_access_password(plaintext: str, hashed: str) -> bool:
    """Compare a plaintext password against a stored digest"""
    return hmac.compare_digest(hash_access_password(plaintext), hashed)


def credential_status(expires_at: datetime, now: datetime | None = None) -> str:
    """'active' while now < expires_at, 'expired' from then on"""
    return STATUS_ACTIVE if (now or datetime.utcnow()) < expires_at else STATUS_EXPIRED


class IssuedAccess:
    """Result of issuing vendor access. The password is never stored or shown again."""

    def __init__(self, vendor_id: str, access_token: str, password: str, expires_at: datetime):
        self.vendor_id = vendor_id
        self.access_token = access_token
        self.password = password
        self.expires_at = expires_at

    def __repr__(self):
        # Keep the password out of logs and tracebacks
        return f"<IssuedAccess(vendor_id='{self.vendor_id}', access_token='{self.access_token}')>"

    def login_link(self, base_url: str) -> str:
        """Vendor login URL with the access token as the last path segment"""
        return f"{base_url.rstrip('/')}/{self.access_token}"


class VendorAccessService:
    """
    Issue and verify vendor temporary access credentials.

    Args:
        persistence: Persistence client for the 'vendor_access' collection
        now: Clock returning naive UTC datetimes (default: datetime.utcnow)
        ttl: Credential lifetime (default: 7 days)
    """

    def __init__(
        self,
        persistence: PersistenceClient,
        now: Callable[[], datetime] | None = None,
        ttl: timedelta = ACCESS_TTL,
    ):
        self.persistence = persistence
        self.now = now or datetime.utcnow
        self.ttl = ttl

    async def issue_access(self, vendor_id: str) -> IssuedAccess:
        """
        Create a new credential for a vendor.

        The vendor id is not checked against the vendors collection here.

        Args:
            vendor_id: Vendor profile the credential unlocks

        Returns:
            IssuedAccess with the plaintext token and password

        Raises:
            ValidationError: Empty vendor id
            PersistenceError: The credential could not be stored
        """
        if not vendor_id:
            raise ValidationError("Vendor ID is required", field="vendor_id")

        password = generate_access_code()
        access_token = generate_access_code()
        expires_at = self.now() + self.ttl

        self.persistence.insert(
            "vendor_access",
            {
                "vendor_id": vendor_id,
                "access_token": access_token,
                "password_hash": hash_access_password(password),
                "expires_at": expires_at,
            },
        )

        logger.info(f"Issued vendor access for {vendor_id} (token {access_token[:4]}..., expires {expires_at:%Y-%m-%d %H:%M})")
        return IssuedAccess(
            vendor_id=vendor_id,
            access_token=access_token,
            password=password,
            expires_at=expires_at,
        )

    async def verify_access(self, access_token: str, password: str) -> str:
        """
        Check a (token, password) pair.

        The credential is not consumed; it stays valid until it expires.

        Returns:
            The vendor id the credential unlocks

        Raises:
            AccessDeniedError: Unknown token, expired credential or wrong password
            PersistenceError: The lookup failed
        """
        if not access_token or not password:
            raise AccessDeniedError()

        rows = self.persistence.select(
            "vendor_access",
            [eq("access_token", access_token), gt("expires_at", self.now())],
        )

        if len(rows) != 1:
            logger.info(f"Vendor access denied for token {access_token[:4]}...")
            raise AccessDeniedError()

        credential = rows[0]
        if not verify_access_password(password, credential["password_hash"]):
            logger.info(f"Vendor access denied for token {access_token[:4]}...")
            raise AccessDeniedError()

        return credential["vendor_id"]

    async def list_access(self, vendor_id: str) -> list[dict[str, Any]]:
        """
        List a vendor's credentials, newest first, with their current status.

        Password hashes are left out.
        """
        now = self.now()
        rows = self.persistence.select(
            "vendor_access",
            {"vendor_id": vendor_id},
            order_by=[OrderBy(column="created_at", direction="DESC")],
        )
        return [
            {
                "id": row["id"],
                "vendor_id": row["vendor_id"],
                "access_token": row["access_token"],
                "expires_at": row["expires_at"],
                "created_at": row["created_at"],
                "status": credential_status(row["expires_at"], now),
            }
            for row in rows
        ]
