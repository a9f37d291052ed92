"""
Custom exception hierarchy for the pattern showcase.
"""
from typing import Any, Dict, Optional


class PatternShowcaseError(Exception):
    """Base exception for all pattern showcase errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


# Configuration Exceptions
class ConfigurationError(PatternShowcaseError):
    """Raised when the demonstration configuration is invalid."""
    pass


# Settings Exceptions
class SettingsError(PatternShowcaseError):
    """Base exception for settings store errors."""
    pass


class SettingNotFoundError(SettingsError, KeyError):
    """Raised when a requested setting key was never stored or loaded."""
    pass


class SettingsIOError(SettingsError, OSError):
    """Raised when a settings file cannot be opened for reading or writing."""
    pass


class SettingsValidationError(SettingsError, ValueError):
    """Raised when a key or value cannot be represented in a settings file."""
    pass
