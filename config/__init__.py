"""
Configuration and settings storage for the pattern showcase.
"""
from .settings_store import SettingsStore
from .demo_config import DemoConfig

__all__ = [
    'SettingsStore',
    'DemoConfig',
]
