import copy
import os
import yaml
from dotenv import load_dotenv
from pathlib import Path
from typing import Dict, Any, Optional


DEFAULTS: Dict[str, Any] = {
    "prover": {
        "timeout": 100,
        "strict": False,
        "max_clauses": None,
    },
    "cnf": {
        "max_variables": 20,
    },
}


class Config:
    def __init__(self, config_path: Optional[str] = None):
        load_dotenv()
        self.config_path = config_path or self._find_config_file()
        self.config = self._load_config()
        self._resolve_environment_variables()

    def _find_config_file(self) -> Optional[str]:
        """Find the default config file, if any."""
        possible_paths = [
            Path.cwd() / "configs" / "default.yaml",
            Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml",
            Path.home() / ".propatlas" / "config.yaml",
        ]

        for path in possible_paths:
            if path.exists():
                return str(path)

        return None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file on top of the built-in defaults."""
        config = copy.deepcopy(DEFAULTS)
        if self.config_path is None:
            return config
        with open(self.config_path, 'r') as f:
            loaded = yaml.safe_load(f) or {}
        return _deep_update(config, loaded)

    def _resolve_environment_variables(self):
        """Resolve environment variables in config values."""
        def resolve_value(value):
            if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
                var_default = value[2:-1].split(":", 1)
                var_name = var_default[0]
                default_value = var_default[1] if len(var_default) > 1 else ""
                # Parse as YAML so numbers and booleans keep their type.
                # An empty variable counts as unset.
                return yaml.safe_load(os.environ.get(var_name) or default_value)
            elif isinstance(value, dict):
                return {k: resolve_value(v) for k, v in value.items()}
            elif isinstance(value, list):
                return [resolve_value(v) for v in value]
            return value

        self.config = resolve_value(self.config)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-separated key."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_number(self, key: str, default: Any = None, kind: type = float) -> Any:
        """Get a numeric value, or ``default`` when it is unset.

        Raises:
            ValueError: The value cannot be converted with ``kind``.
        """
        value = self.get(key)
        if value is None or value == "":
            return default
        if isinstance(value, bool):
            raise ValueError(f"Invalid value for '{key}': {value!r}")
        try:
            return kind(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid value for '{key}': {value!r}") from e

    def __getitem__(self, key: str) -> Any:
        """Allow dictionary-style access."""
        return self.get(key)

    def update(self, updates: Dict[str, Any]):
        """Update configuration with new values."""
        self.config = _deep_update(self.config, updates)


def _deep_update(d, u):
    for k, v in u.items():
        if isinstance(v, dict):
            d[k] = _deep_update(d.get(k) or {}, v)
        else:
            d[k] = v
    return d


# Global config instance
_config = None

def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config():
    global _config
    _config = None
