### Description ###
# Altare Planner - Wedding Planning API
# - Vendor Access Model -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Vendor Access Model

Temporary credential that lets a vendor edit their own directory profile:
- Access token (plaintext, used as the login URL path segment)
- Password hash (SHA-256 hex of the generated password - shown only once)
- Expiration (credentials are never revoked, they simply expire)
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String

from altare.database import Base


class VendorAccess(Base):
    """
    Vendor access credential.

    Active while now < expires_at, expired afterwards. Expired rows are
    kept; lookups exclude them.
    """

    __tablename__ = "vendor_access"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vendor_id = Column(String(36), ForeignKey("vendors.id", ondelete="CASCADE"), nullable=False)
    access_token = Column(String(32), nullable=False, unique=True)
    password_hash = Column(String(64), nullable=False)  # sha256 hex
    expires_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_vendor_access_token_expires", "access_token", "expires_at"),
        Index("ix_vendor_access_vendor", "vendor_id"),
    )

    def __repr__(self):
        return f"<VendorAccess(id={self.id}, vendor_id='{self.vendor_id}', expires_at={self.expires_at})>"

    def is_active(self, now: datetime | None = None) -> bool:
        """True until expires_at passes"""
        return (now or datetime.utcnow()) < self.expires_at
