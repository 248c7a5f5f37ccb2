### Description ###
# Altare Planner - Wedding Planning API
# - API Services Package -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
API Services Package

Contains business logic services:
- persistence: Collection-oriented data access (select/insert/update/delete/invoke)
- vendor_access: Vendor temporary credential issuance and verification
- table_layout: Seating table sizing and chair placement
"""

from altare.services.persistence import PersistenceClient
from altare.services.table_layout import TableLayoutService
from altare.services.vendor_access import VendorAccessService

__all__ = ["PersistenceClient", "TableLayoutService", "VendorAccessService"]
