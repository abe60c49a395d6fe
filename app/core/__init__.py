"""
Core application package: settings and logging

Database dependencies live in app.core.database, which needs the settings to be importable first.
"""

from .config import settings, Settings
from .logging_config import configure_logging

__all__ = ['settings', 'Settings', 'configure_logging']
