### Description ###
# Altare Planner - Wedding Planning API
# - Vendor Schemas -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Vendor Schemas

Pydantic models for vendor profiles, temporary access credentials and the
vendor login session.

Profile sub-records (pricing, availability, team, ...) are typed here and
validated on the way in, even though they are stored as JSON columns.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

# ========================================
# Profile Sub-records
# ========================================

class ContactInfo(BaseModel):
    """How couples reach the vendor"""
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    website: str | None = Field(None, max_length=500)
    contact_name: str | None = Field(None, max_length=100)


class SocialMedia(BaseModel):
    """Social profile links"""
    instagram: str | None = Field(None, max_length=255)
    facebook: str | None = Field(None, max_length=255)
    twitter: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=500)


class PriceRange(BaseModel):
    """Typical price range"""
    min: float = Field(0, ge=0)
    max: float = Field(0, ge=0)
    currency: str = Field("USD", min_length=3, max_length=3)

    @model_validator(mode="after")
    def check_order(self) -> "PriceRange":
        if self.max and self.max < self.min:
            raise ValueError("price_range.max must be greater than or equal to price_range.min")
        return self


class PricingPackage(BaseModel):
    """A named package with a fixed price"""
    name: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., ge=0)
    description: str | None = Field(None, max_length=1000)
    included_services: list[str] = Field(default_factory=list)


class PricingDetails(BaseModel):
    """Pricing tier, range and packages"""
    tier: Literal["unset", "budget", "moderate", "premium", "luxury"] = "unset"
    price_range: PriceRange = Field(default_factory=PriceRange)
    packages: list[PricingPackage] = Field(default_factory=list)


class Availability(BaseModel):
    """Booking lead time and seasons"""
    lead_time_days: int = Field(0, ge=0, le=1095)
    peak_season: list[str] = Field(default_factory=list)
    off_peak_season: list[str] = Field(default_factory=list)


class TeamInfo(BaseModel):
    """Team size and roles"""
    team_size: int = Field(1, ge=1, le=1000)
    lead_contact: str | None = Field(None, max_length=100)
    roles: list[str] = Field(default_factory=list)


# ========================================
# Vendor Profile Schemas
# ========================================

class VendorCreate(BaseModel):
    """Create a vendor profile (admin)"""
    name: str = Field(..., min_length=1, max_length=200)
    category: str | None = Field(None, max_length=100)
    description: str | None = Field(None, max_length=5000)
    location: str | None = Field(None, max_length=200)
    contact_info: ContactInfo = Field(default_factory=ContactInfo)


class VendorUpdate(BaseModel):
    """Fields a vendor may edit on their own profile"""
    name: str | None = Field(None, min_length=1, max_length=200)
    category: str | None = Field(None, max_length=100)
    description: str | None = Field(None, max_length=5000)
    location: str | None = Field(None, max_length=200)
    contact_info: ContactInfo | None = None
    social_media: SocialMedia | None = None
    pricing_details: PricingDetails | None = None
    availability: Availability | None = None
    team_info: TeamInfo | None = None


class VendorResponse(BaseModel):
    """Vendor profile"""
    id: str
    name: str
    slug: str
    category: str | None = None
    description: str | None = None
    location: str | None = None
    is_hidden: bool
    contact_info: ContactInfo = Field(default_factory=ContactInfo)
    social_media: SocialMedia = Field(default_factory=SocialMedia)
    pricing_details: PricingDetails = Field(default_factory=PricingDetails)
    availability: Availability = Field(default_factory=Availability)
    team_info: TeamInfo = Field(default_factory=TeamInfo)
    created_at: datetime
    updated_at: datetime | None = None
    active_access_count: int | None = None

    class Config:
        from_attributes = True


# ========================================
# Vendor Access Schemas
# ========================================

class VendorAccessCreatedResponse(BaseModel):
    """
    Response when issuing vendor access.

    IMPORTANT: The 'password' field is only shown this once - it cannot be
    retrieved later. Send it to the vendor out of band.
    """
    vendor_id: str
    access_token: str
    password: str = Field(..., description="Vendor password (shown only once)")
    login_link: str
    expires_at: datetime
    message: str = "Vendor access created. Share the link and password with the vendor - the password cannot be retrieved later."


class VendorAccessResponse(BaseModel):
    """Issued credential (without the password hash)"""
    id: int
    vendor_id: str
    access_token: str
    status: Literal["active", "expired"]
    expires_at: datetime
    created_at: datetime


class VendorLoginRequest(BaseModel):
    """Vendor login with a temporary credential"""
    access_token: str = Field(..., min_length=1, max_length=32)
    password: str = Field(..., min_length=1, max_length=128)


class VendorSessionResponse(BaseModel):
    """Vendor session token, bound to one vendor profile"""
    vendor_id: str
    token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
