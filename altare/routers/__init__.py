### Description ###
# Altare Planner - Wedding Planning API
# - API Routers Package -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
API Routers Package

Contains endpoint routers for different resources:
- auth: Planner registration and login
- admin: Admin login, vendors and vendor access
- vendors: Vendor login and profile
- seating: Table templates, tables and chairs
"""

from .admin import router as admin_router
from .auth import router as auth_router
from .seating import router as seating_router
from .vendors import router as vendors_router

__all__ = ["admin_router", "auth_router", "seating_router", "vendors_router"]
