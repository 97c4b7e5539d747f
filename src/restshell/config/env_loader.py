"""Environment variable and configuration file loading."""

from pathlib import Path
from typing import Any

import yaml


def get_config_dir() -> Path:
    """Return the global ~/.restshell directory."""
    return Path.home() / ".restshell"


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    # Remove quotes if present
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def load_user_env() -> dict[str, str]:
    """Load ~/.restshell/.env."""
    return load_env_file(get_config_dir() / ".env")


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.restshell/config.yml.

    Settings may sit at the top level or under a ``restshell:`` mapping.
    """
    config_path = get_config_dir() / "config.yml"
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        return {}
    nested = data.get("restshell")
    if isinstance(nested, dict):
        merged = {k: v for k, v in data.items() if k != "restshell"}
        merged.update(nested)
        return merged
    return data
