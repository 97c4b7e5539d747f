"""Configuration getter functions."""

import os
from pathlib import Path
from typing import Any

from .env_loader import get_config_dir, load_global_config, load_user_env

ENV_PREFIX = "RESTSHELL_"

DEFAULTS: dict[str, str] = {
    "RESTSHELL_DEFAULT_MODE": "json",
    "RESTSHELL_SSL_INSECURE": "no",
    "RESTSHELL_COOKIE_JAR": "on",
    "RESTSHELL_TRANSPORT": "auto",
    "RESTSHELL_VERBOSE": "",
}

TOOL_KEYS = {
    "curl": "RESTSHELL_CURL",
    "jq": "RESTSHELL_JQ",
    "xmllint": "RESTSHELL_XMLLINT",
}


def _yaml_key(key: str) -> str:
    return key[len(ENV_PREFIX) :].lower() if key.startswith(ENV_PREFIX) else key.lower()


def get_config(key: str, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. ~/.restshell/.env
    3. ~/.restshell/config.yml (``default_mode`` for ``RESTSHELL_DEFAULT_MODE``)
    4. Default value

    Args:
        key: Configuration key
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    user_env = load_user_env()
    if user_env.get(key):
        return user_env[key]

    global_config = load_global_config()
    for candidate in (key, _yaml_key(key)):
        value = global_config.get(candidate)
        if value is not None and value != "":
            return value

    if default is not None:
        return default
    return DEFAULTS.get(key)


def _as_token(value: Any) -> str:
    if isinstance(value, bool):
        return "on" if value else "off"
    return str(value)


def get_default_mode() -> str:
    """Mode activated when a session starts (default: json)."""
    return str(get_config("RESTSHELL_DEFAULT_MODE"))


def get_ssl_insecure_setting() -> str:
    return _as_token(get_config("RESTSHELL_SSL_INSECURE"))


def get_cookie_jar_setting() -> str:
    """``on``, ``off`` or a cookie-jar file name."""
    return _as_token(get_config("RESTSHELL_COOKIE_JAR"))


def get_transport_kind() -> str:
    """``auto``, ``curl`` or ``httpx``."""
    return str(get_config("RESTSHELL_TRANSPORT")).lower()


def get_tool_binaries() -> dict[str, str]:
    """Binary overrides for the external tools that have one configured."""
    binaries = {}
    for tool, key in TOOL_KEYS.items():
        value = get_config(key)
        if value:
            binaries[tool] = str(value)
    return binaries


def is_verbose() -> bool:
    value = _as_token(get_config("RESTSHELL_VERBOSE") or "").lower()
    return value in {"1", "true", "yes", "on"}


def get_history_file() -> Path:
    """Console command history file."""
    value = get_config("RESTSHELL_HISTORY_FILE")
    if value:
        return Path(str(value)).expanduser()
    return get_config_dir() / "console_history"
