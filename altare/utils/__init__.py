"""
Utility module for Altare Planner API
"""

from .custom_logger import setup_logger

__all__ = [
    "setup_logger",
]
