### Description ###
# Altare Planner - Wedding Planning API
# - Admin Router -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Admin Endpoints

- Admin login (username/password from config.yaml)
- Vendor profiles: create, list
- Vendor temporary access: issue, list

Note: Everything except /login requires an admin token.
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from altare.config import get_admin_settings, get_api_settings
from altare.database import get_db
from altare.dependencies import get_persistence, get_vendor_access_service
from altare.middleware.auth import TOKEN_TYPE_ADMIN, ActorInfo, create_access_token, require_admin
from altare.models import Vendor
from altare.models.vendor import generate_slug
from altare.schemas.auth import AdminLoginRequest, LoginResponse
from altare.schemas.responses import APIResponse, ListResponse
from altare.schemas.vendor import (
    VendorAccessCreatedResponse,
    VendorAccessResponse,
    VendorCreate,
    VendorResponse,
)
from altare.services import PersistenceClient, VendorAccessService

logger = logging.getLogger(__name__)

router = APIRouter()


# ========================================
# Admin Login
# ========================================

@router.post(
    "/login",
    response_model=APIResponse[LoginResponse],
    summary="Admin login",
    description="Authenticate with the admin username/password to get a JWT token",
)
async def admin_login(data: AdminLoginRequest) -> APIResponse[LoginResponse]:
    """Authenticate admin user and return JWT token"""
    settings = get_api_settings()
    admin = get_admin_settings()

    if data.username != admin.username or not admin.verify_password(data.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )

    is_default = admin.is_default_password
    expires_delta = timedelta(hours=settings.admin_token_hours)
    token = create_access_token(admin.username, TOKEN_TYPE_ADMIN, expires_delta)

    return APIResponse(
        success=True,
        data=LoginResponse(
            token=token,
            expires_in=int(expires_delta.total_seconds()),
            is_default_password=is_default,
        ),
        message="Login successful" + (" - please change default password!" if is_default else ""),
    )


# ========================================
# Vendor Endpoints
# ========================================

def _unique_slug(db: Session, name: str) -> str:
    """Slug for a vendor name, suffixed with -2, -3, ... when taken"""
    base = generate_slug(name) or "vendor"
    slug = base
    suffix = 2
    while db.query(Vendor).filter(Vendor.slug == slug).first():
        slug = f"{base}-{suffix}"
        suffix += 1
    return slug


@router.post(
    "/vendors",
    response_model=APIResponse[VendorResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create vendor",
    description="Create a vendor profile",
)
async def create_vendor(
    data: VendorCreate,
    admin: ActorInfo = Depends(require_admin),
    db: Session = Depends(get_db),
) -> APIResponse[VendorResponse]:
    """Create a vendor profile"""
    vendor = Vendor(
        name=data.name.strip(),
        slug=_unique_slug(db, data.name),
        category=data.category,
        description=data.description,
        location=data.location,
        contact_info=data.contact_info.model_dump(),
    )
    db.add(vendor)
    db.commit()
    db.refresh(vendor)

    logger.info(f"Vendor {vendor.id} '{vendor.name}' created by {admin.actor_id}")

    response = VendorResponse.model_validate(vendor)
    response.active_access_count = 0
    return APIResponse(success=True, data=response, message="Vendor created successfully")


@router.get(
    "/vendors",
    response_model=ListResponse[VendorResponse],
    summary="List vendors",
    description="List vendor profiles with their number of active access credentials",
)
async def list_vendors(
    include_hidden: bool = Query(True, description="Include hidden vendors"),
    admin: ActorInfo = Depends(require_admin),
    db: Session = Depends(get_db),
    persistence: PersistenceClient = Depends(get_persistence),
) -> ListResponse[VendorResponse]:
    """List vendors"""
    query = db.query(Vendor)
    if not include_hidden:
        query = query.filter(Vendor.is_hidden.is_(False))
    vendors = query.order_by(Vendor.name).all()

    responses = []
    for vendor in vendors:
        response = VendorResponse.model_validate(vendor)
        response.active_access_count = persistence.invoke(
            "active_vendor_access_count", {"vendor_id": vendor.id}
        )
        responses.append(response)

    return ListResponse(success=True, data=responses, count=len(responses))


# ========================================
# Vendor Access Endpoints
# ========================================

def _get_vendor_or_404(db: Session, vendor_id: str) -> Vendor:
    vendor = db.query(Vendor).filter(Vendor.id == vendor_id).first()
    if not vendor:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Vendor {vendor_id} not found",
        )
    return vendor


@router.post(
    "/vendors/{vendor_id}/access",
    response_model=APIResponse[VendorAccessCreatedResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Issue vendor access",
    description="Create a temporary login for a vendor. The password will only be shown once!",
)
async def issue_vendor_access(
    vendor_id: str,
    admin: ActorInfo = Depends(require_admin),
    db: Session = Depends(get_db),
    service: VendorAccessService = Depends(get_vendor_access_service),
) -> APIResponse[VendorAccessCreatedResponse]:
    """
    Issue temporary vendor access.

    **IMPORTANT**: The returned `password` is the only time it will be shown.
    Send the login link and password to the vendor - they cannot be retrieved later!
    """
    _get_vendor_or_404(db, vendor_id)

    issued = await service.issue_access(vendor_id)
    settings = get_api_settings()

    return APIResponse(
        success=True,
        data=VendorAccessCreatedResponse(
            vendor_id=issued.vendor_id,
            access_token=issued.access_token,
            password=issued.password,  # Only shown once!
            login_link=issued.login_link(settings.vendor_login_url),
            expires_at=issued.expires_at,
        ),
        message="Vendor access created",
    )


@router.get(
    "/vendors/{vendor_id}/access",
    response_model=ListResponse[VendorAccessResponse],
    summary="List vendor access",
    description="List a vendor's temporary credentials, newest first",
)
async def list_vendor_access(
    vendor_id: str,
    admin: ActorInfo = Depends(require_admin),
    db: Session = Depends(get_db),
    service: VendorAccessService = Depends(get_vendor_access_service),
) -> ListResponse[VendorAccessResponse]:
    """List a vendor's credentials with their status"""
    _get_vendor_or_404(db, vendor_id)

    rows = await service.list_access(vendor_id)
    data = [VendorAccessResponse.model_validate(row) for row in rows]
    return ListResponse(success=True, data=data, count=len(data))
