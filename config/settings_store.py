"""
Flat key/value settings store with plain-text persistence.

The file format is a stream of whitespace separated tokens read pairwise as
key and value. Files are written one ``key value`` pair per line.
"""
from pathlib import Path
from typing import Any, Dict, Iterator, Tuple, Union
from utils.logging_config import get_logger
from utils.exceptions import (
    SettingNotFoundError,
    SettingsIOError,
    SettingsValidationError
)

logger = get_logger(__name__)

PathLike = Union[str, Path]

_MISSING = object()


class SettingsStore:
    """Mapping of string setting names to string values."""

    def __init__(self):
        self._settings: Dict[str, str] = {}
        self.logger = get_logger(self.__class__.__name__)

    def set_setting(self, key: str, value: str):
        """Store a setting, replacing any previous value for the key."""
        self._check_token('key', key)
        self._check_token('value', value)
        self._settings[key] = value
        self.logger.debug(f"Set setting: {key} = {value}")

    def get_setting(self, key: str, default: Any = _MISSING) -> str:
        """
        Get a setting value.

        Args:
            key: Setting name
            default: Returned for an absent key when given explicitly

        Raises:
            SettingNotFoundError: If the key is absent and no default was given
        """
        if key in self._settings:
            return self._settings[key]
        if default is not _MISSING:
            return default
        raise SettingNotFoundError(
            f"Setting not found: {key}",
            details={'key': key, 'available_keys': sorted(self._settings)}
        )

    def has_setting(self, key: str) -> bool:
        return key in self._settings

    def load_settings_from_file(self, filepath: PathLike):
        """
        Load settings from a whitespace delimited file.

        Tokens are consumed as key/value pairs until end of input; a trailing
        key without a value is ignored. Loaded keys overwrite existing ones.

        Raises:
            SettingsIOError: If the file cannot be opened for reading
        """
        path = Path(filepath)
        try:
            with open(path, 'r') as f:
                tokens = f.read().split()
        except OSError as e:
            raise SettingsIOError(
                f"Cannot open settings file for reading: {path}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        pairs = list(zip(tokens[0::2], tokens[1::2]))
        if len(tokens) % 2:
            self.logger.warning(
                f"Ignoring unmatched trailing token {tokens[-1]!r} in {path}"
            )

        for key, value in pairs:
            self._settings[key] = value

        self.logger.info(f"Loaded {len(pairs)} settings from {path}")

    def save_settings_to_file(self, filepath: PathLike):
        """
        Write every setting as a ``key value`` line, in sorted key order.

        Raises:
            SettingsIOError: If the file cannot be opened for writing
        """
        path = Path(filepath)
        try:
            f = open(path, 'w')
        except OSError as e:
            raise SettingsIOError(
                f"Cannot open settings file for writing: {path}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        with f:
            for key, value in self:
                f.write(f"{key} {value}\n")

        self.logger.info(f"Saved {len(self)} settings to {path}")

    def as_dict(self) -> Dict[str, str]:
        """Return a copy of all settings."""
        return dict(self._settings)

    def __contains__(self, key: object) -> bool:
        return key in self._settings

    def __len__(self) -> int:
        return len(self._settings)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(sorted(self._settings.items()))

    @staticmethod
    def _check_token(kind: str, token: str):
        if not isinstance(token, str) or token.split() != [token]:
            raise SettingsValidationError(
                f"Setting {kind} must be a non-empty string without whitespace: {token!r}",
                details={kind: repr(token)}
            )
