"""User configuration management."""

import tomllib
from pathlib import Path
from typing import Any

from rich.markup import escape

from dupectl.utils.console import err_console


class Config:
    """User configuration manager."""

    def __init__(self):
        """Initialize config with defaults."""
        self.config_dir = Path.home() / ".config" / "dupectl"
        self.config_file = self.config_dir / "config.toml"
        self._config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load config from file or return defaults."""
        defaults = {
            "scan": {
                "algorithm": "sha256",
                "chunk_size": 128 * 1024,
            },
            "output": {
                "progress": True,
            },
        }

        if not self.config_file.exists():
            return defaults

        try:
            with open(self.config_file, "rb") as f:
                user_config = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            err_console.print(
                f"[warning]Ignoring config file {escape(str(self.config_file))}: {escape(str(e))}[/warning]"
            )
            return defaults

        return self._merge_configs(defaults, user_config)

    def _merge_configs(self, defaults: dict, user: dict) -> dict:
        """Recursively merge user config into defaults."""
        result = defaults.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a config value."""
        return self._config.get(section, {}).get(key, default)


# Global config instance
_config = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the global config instance so the next call reloads it."""
    global _config
    _config = None
