"""Configuration for the pattern demonstrations."""
from dataclasses import dataclass, field, asdict, fields
from typing import Dict, Any, Optional, List
import yaml
from pathlib import Path
from utils.exceptions import ConfigurationError


_SCALARS = (str, int, float, bool)


def _default_products() -> List[Dict[str, Any]]:
    return [
        {'name': 'Laptop', 'price': 1200},
        {'name': 'Smartphone', 'price': 800},
    ]


@dataclass
class DemoConfig:
    """Inputs for the singleton, builder and prototype demonstrations."""
    # Singleton demonstration
    presets: Dict[str, str] = field(default_factory=lambda: {'username': 'user1'})
    settings_file: Optional[str] = None
    watched_key: str = "username"
    reader_threads: int = 2

    # Builder demonstration
    report_header: str = "Report Header"
    report_content: str = "This is the report content."
    report_footer: str = "Report Footer"

    # Prototype demonstration
    products: List[Dict[str, Any]] = field(default_factory=_default_products)
    shipping_cost: float = 50
    discount: float = 10
    payment_method: str = "Credit Card"

    # Logging
    log_level: str = "WARNING"
    log_dir: Optional[str] = None
    structured_logs: bool = False

    def __post_init__(self):
        if self.reader_threads < 1:
            raise ConfigurationError(
                f"reader_threads must be at least 1, got {self.reader_threads}",
                details={'reader_threads': self.reader_threads}
            )
        self.presets = self._normalize_presets(self.presets)
        self.watched_key = str(self.watched_key)
        if not isinstance(self.products, list):
            raise ConfigurationError(
                f"products must be a list, got {type(self.products).__name__}",
                details={'products': repr(self.products)}
            )
        for product in self.products:
            if not isinstance(product, dict) or set(product) != {'name', 'price'}:
                raise ConfigurationError(
                    "Each product needs exactly 'name' and 'price'",
                    details={'product': product}
                )

    @staticmethod
    def _normalize_presets(presets: Any) -> Dict[str, str]:
        # YAML turns `timeout: 30` into an int; settings are stored as text
        if not isinstance(presets, dict):
            raise ConfigurationError(
                f"presets must be a mapping, got {type(presets).__name__}",
                details={'presets': repr(presets)}
            )
        normalized = {}
        for key, value in presets.items():
            if not isinstance(value, _SCALARS) or not isinstance(key, _SCALARS):
                raise ConfigurationError(
                    f"Preset {key!r} must map a scalar to a scalar, got {value!r}",
                    details={'key': repr(key), 'value': repr(value)}
                )
            normalized[str(key)] = str(value)
        return normalized

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def to_yaml(self, filepath: str):
        """Save config to YAML file."""
        with open(filepath, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)

    @classmethod
    def from_dict(cls, config_dict: Optional[Dict[str, Any]]) -> 'DemoConfig':
        """Create config from dictionary, rejecting unknown keys."""
        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Demo configuration must be a mapping, got {type(config_dict).__name__}",
                details={'config': repr(config_dict)}
            )
        known = {f.name for f in fields(cls)}
        unknown = set(config_dict) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown demo configuration keys: {sorted(unknown)}",
                details={'unknown_keys': sorted(unknown)}
            )
        return cls(**config_dict)

    @classmethod
    def from_yaml(cls, filepath: str) -> 'DemoConfig':
        """Load config from YAML file."""
        path = Path(filepath)
        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {filepath}",
                details={'filepath': str(path)}
            )

        with open(path, 'r') as f:
            try:
                config_dict = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Failed to parse configuration from {filepath}: {e}",
                    details={'filepath': str(path), 'error': str(e)}
                ) from e
        return cls.from_dict(config_dict)
