### Description ###
# Altare Planner - Wedding Planning API
# - API Models Package -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
API Models Package

Contains SQLAlchemy models for the application database:
- User: Planner account that owns seating tables
- Vendor: Directory profile a vendor can edit with temporary access
- VendorAccess: Temporary (token, password) credential for a vendor
- TableTemplate / SeatingTable / TableChair: Seating chart layout
"""

from altare.models.user import User
from altare.models.vendor import Vendor
from altare.models.vendor_access import VendorAccess
from altare.models.seating import SeatingTable, TableChair, TableTemplate

__all__ = [
    "SeatingTable",
    "TableChair",
    "TableTemplate",
    "User",
    "Vendor",
    "VendorAccess",
]
