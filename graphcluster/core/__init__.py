"""
Core module - Configuration and result schemas.
"""
from .config import Settings, get_settings
from .schemas import ClusteringSummary

__all__ = [
    "Settings",
    "get_settings",
    "ClusteringSummary",
]
