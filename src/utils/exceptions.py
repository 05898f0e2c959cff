# ============================================================================
# src/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the critical medication registry.
"""

from pathlib import Path
from typing import Optional, Union


class CriticalMedicationError(Exception):
    """Base exception for all critical medication registry errors."""
    pass


class LoadError(CriticalMedicationError):
    """Drug alias dataset is missing or malformed."""
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class WriteError(CriticalMedicationError):
    """Registry artifact could not be written."""
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ConfigurationError(CriticalMedicationError):
    """Invalid configuration or command-line input."""
    pass
