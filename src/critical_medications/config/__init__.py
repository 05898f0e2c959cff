# ============================================================================
# src/critical_medications/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .base_config import registry_settings, RegistrySettings
from .logging_config import LOG_LEVELS, logging_settings, LoggingSettings
