### Description ###
# Altare Planner - Wedding Planning API
# - Vendor Portal Router -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Vendor Portal Endpoints

- POST /vendor/login: temporary access token + password -> vendor session
- GET/PATCH /vendor/profile/{vendor_id}: the vendor's own profile

A vendor session only unlocks the profile it was issued for.
"""

import logging
from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from altare.config import get_api_settings
from altare.database import get_db
from altare.dependencies import get_vendor_access_service
from altare.middleware.auth import TOKEN_TYPE_VENDOR, ActorInfo, create_access_token, require_vendor_owner
from altare.models import Vendor
from altare.schemas.responses import APIResponse
from altare.schemas.vendor import VendorLoginRequest, VendorResponse, VendorSessionResponse, VendorUpdate
from altare.services import VendorAccessService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    response_model=APIResponse[VendorSessionResponse],
    summary="Vendor login",
    description="Exchange a temporary access token and password for a vendor session",
)
async def vendor_login(
    data: VendorLoginRequest,
    service: VendorAccessService = Depends(get_vendor_access_service),
) -> APIResponse[VendorSessionResponse]:
    """
    Verify vendor access and start a session.

    Any failure returns the same 401 response.
    """
    vendor_id = await service.verify_access(data.access_token, data.password)

    settings = get_api_settings()
    expires_delta = timedelta(hours=settings.vendor_session_hours)
    token = create_access_token(vendor_id, TOKEN_TYPE_VENDOR, expires_delta)

    logger.info(f"Vendor session started for {vendor_id}")
    return APIResponse(
        success=True,
        data=VendorSessionResponse(
            vendor_id=vendor_id,
            token=token,
            expires_in=int(expires_delta.total_seconds()),
        ),
        message="Login successful",
    )


def _get_vendor_or_404(db: Session, vendor_id: str) -> Vendor:
    vendor = db.query(Vendor).filter(Vendor.id == vendor_id).first()
    if not vendor:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Vendor {vendor_id} not found",
        )
    return vendor


@router.get(
    "/profile/{vendor_id}",
    response_model=APIResponse[VendorResponse],
    summary="Get vendor profile",
)
async def get_vendor_profile(
    vendor_id: str,
    session: ActorInfo = Depends(require_vendor_owner),
    db: Session = Depends(get_db),
) -> APIResponse[VendorResponse]:
    """Vendor's own profile"""
    vendor = _get_vendor_or_404(db, vendor_id)
    return APIResponse(success=True, data=VendorResponse.model_validate(vendor))


@router.patch(
    "/profile/{vendor_id}",
    response_model=APIResponse[VendorResponse],
    summary="Update vendor profile",
    description="Update profile fields and sub-records (each sub-record is replaced as a whole)",
)
async def update_vendor_profile(
    vendor_id: str,
    data: VendorUpdate,
    session: ActorInfo = Depends(require_vendor_owner),
    db: Session = Depends(get_db),
) -> APIResponse[VendorResponse]:
    """Update the vendor's own profile"""
    vendor = _get_vendor_or_404(db, vendor_id)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        # Sub-records and name cannot be cleared
        if value is None and field not in ("category", "description", "location"):
            continue
        setattr(vendor, field, value)
    vendor.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(vendor)

    logger.info(f"Vendor {vendor_id} updated fields: {', '.join(sorted(update_data)) or 'none'}")
    return APIResponse(success=True, data=VendorResponse.model_validate(vendor), message="Profile updated successfully")
