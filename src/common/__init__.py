# Common utilities and shared modules
"""
Shared components used by the content generator:
- Project configuration
- Logging configuration
"""

from .config import settings, get_api_key, PROJECT_ROOT
from .logging import setup_logging

__all__ = [
    "settings",
    "get_api_key",
    "PROJECT_ROOT",
    "setup_logging",
]
