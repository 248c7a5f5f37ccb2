### Description ###
# Altare Planner - Wedding Planning API
# - API Package -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Altare Planner API Package

This package contains the FastAPI application behind the wedding planner:
vendor temporary access credentials, vendor self-service profiles and the
seating chart table layout generator.
"""

__version__ = "1.0.0"
