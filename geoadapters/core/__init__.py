"""
Core module providing shared configuration and utilities.

This module consolidates common functionality used across the codebase:
- Configuration management (settings, environment variables)
- Utility functions (IP classification, geo calculations)

Usage:
    from geoadapters.core import settings
    from geoadapters.core.utils import is_ip_address, haversine_distance
"""

from geoadapters.core.config import settings, Settings

__all__ = [
    "settings",
    "Settings",
]
