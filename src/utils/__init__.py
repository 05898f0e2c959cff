# ============================================================================
# src/utils/__init__.py
# ============================================================================
"""
Utility modules for the critical medication registry.
"""

from .exceptions import (
    CriticalMedicationError,
    LoadError,
    WriteError,
    ConfigurationError,
)

from .logging import (
    setup_logging,
    JsonFormatter,
    log_performance,
)

from .file_utils import (
    read_json,
    write_json_atomic,
)

__all__ = [
    # Exceptions
    'CriticalMedicationError',
    'LoadError',
    'WriteError',
    'ConfigurationError',
    # Logging
    'setup_logging',
    'JsonFormatter',
    'log_performance',
    # File Utils
    'read_json',
    'write_json_atomic',
]
