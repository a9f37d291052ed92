"""
Utility modules for the pattern showcase.
"""
from .logging_config import get_logger, LoggerFactory, StructuredFormatter
from .exceptions import (
    PatternShowcaseError,
    ConfigurationError,
    SettingsError,
    SettingNotFoundError,
    SettingsIOError,
    SettingsValidationError
)
from .error_handlers import ErrorContext

__all__ = [
    'get_logger',
    'LoggerFactory',
    'StructuredFormatter',
    'PatternShowcaseError',
    'ConfigurationError',
    'SettingsError',
    'SettingNotFoundError',
    'SettingsIOError',
    'SettingsValidationError',
    'ErrorContext',
]
