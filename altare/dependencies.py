### Description ###
# Altare Planner - Wedding Planning API
# - FastAPI Dependencies -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
FastAPI Dependencies

Provides dependency injection for:
- PersistenceClient bound to the request's Session and current actor
- VendorAccessService and TableLayoutService built on that client
"""

from datetime import timedelta

from fastapi import Depends
from sqlalchemy.orm import Session

from altare.config import get_api_settings
from altare.database import get_db
from altare.middleware.auth import ActorInfo, get_optional_user
from altare.services import PersistenceClient, TableLayoutService, VendorAccessService


def get_persistence(
    db: Session = Depends(get_db),
    actor: ActorInfo | None = Depends(get_optional_user),
) -> PersistenceClient:
    """Persistence client for this request; current_actor() is the signed-in planner"""
    return PersistenceClient(db, actor_id=actor.actor_id if actor else None)


def get_vendor_access_service(
    persistence: PersistenceClient = Depends(get_persistence),
) -> VendorAccessService:
    """Vendor access service with the configured credential lifetime"""
    settings = get_api_settings()
    return VendorAccessService(persistence, ttl=timedelta(days=settings.vendor_access_ttl_days))


def get_table_layout_service(
    persistence: PersistenceClient = Depends(get_persistence),
) -> TableLayoutService:
    """Table layout service for this request"""
    return TableLayoutService(persistence)
