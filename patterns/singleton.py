"""
Singleton pattern for single-instance classes.
"""
from typing import Any, Dict
import threading
from config.settings_store import SettingsStore
from utils.logging_config import get_logger

logger = get_logger(__name__)


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass.

    The first call to a class constructs its instance; every later call, from
    any thread, returns that same object. Instances are never discarded.
    """
    _instances: Dict[type, Any] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        """Create or return existing instance."""
        if cls not in cls._instances:
            with cls._lock:
                # Double-checked locking
                if cls not in cls._instances:
                    instance = super().__call__(*args, **kwargs)
                    cls._instances[cls] = instance
                    logger.info(f"Created singleton instance of {cls.__name__}")

        return cls._instances[cls]


class Singleton(metaclass=SingletonMeta):
    """Base class for singleton objects."""
    pass


class ConfigurationManager(SettingsStore, Singleton):
    """Process-wide settings store."""
    pass


def get_instance() -> ConfigurationManager:
    """Return the process-wide ConfigurationManager, creating it on first use."""
    return ConfigurationManager()
