### Description ###
# Altare Planner - Wedding Planning API
# - Vendor Model -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Vendor Model

A vendor directory profile. Structured sub-records (contact info, pricing,
availability, team) are stored as JSON columns and validated at the API
boundary by the schemas in altare.schemas.vendor.
"""

import re
import uuid
from datetime import datetime

from sqlalchemy import JSON, Boolean, Column, DateTime, String, Text

from altare.database import Base


def generate_slug(name: str) -> str:
    """Lowercase, dash separated slug ("Purslane Catering" -> "purslane-catering")"""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


class Vendor(Base):
    """Vendor directory profile"""

    __tablename__ = "vendors"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(200), nullable=False)
    slug = Column(String(220), nullable=False, unique=True)
    category = Column(String(100), nullable=True)  # e.g., "Catering", "Florist"
    description = Column(Text, nullable=True)
    location = Column(String(200), nullable=True)
    is_hidden = Column(Boolean, default=False, nullable=False)

    # Structured sub-records
    contact_info = Column(JSON, default=dict, nullable=False)
    social_media = Column(JSON, default=dict, nullable=False)
    pricing_details = Column(JSON, default=dict, nullable=False)
    availability = Column(JSON, default=dict, nullable=False)
    team_info = Column(JSON, default=dict, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Vendor(id='{self.id}', name='{self.name}')>"
