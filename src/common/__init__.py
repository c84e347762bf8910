# Common utilities and shared modules
"""
Shared components used by the taxonomy lookups and the augmenters:
- Data models (Pydantic schemas)
- Logging configuration
- Linker configuration
"""

from .config import DEFAULT_SETTINGS, FIXTURES_DIR, PROJECT_ROOT, LinkerSettings
from .logging import setup_logging

__all__ = [
    "DEFAULT_SETTINGS",
    "FIXTURES_DIR",
    "PROJECT_ROOT",
    "LinkerSettings",
    "setup_logging",
]
