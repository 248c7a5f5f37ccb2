"""
Test fixtures and factories for Altare Planner tests.
"""

from tests.fixtures.data import SAMPLE_TEMPLATES, SAMPLE_VENDOR_PROFILE
from tests.fixtures.factories import (
    create_expired_vendor_access,
    create_template,
    create_user,
    create_vendor,
    create_vendor_access,
)

__all__ = [
    "SAMPLE_TEMPLATES",
    "SAMPLE_VENDOR_PROFILE",
    "create_expired_vendor_access",
    "create_template",
    "create_user",
    "create_vendor",
    "create_vendor_access",
]
