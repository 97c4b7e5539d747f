"""
Configuration management for restshell.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. User .env file (~/.restshell/.env)
3. Global config file (~/.restshell/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    get_config_dir,
    load_env_file,
    load_global_config,
    load_user_env,
)
from .getters import (
    DEFAULTS,
    TOOL_KEYS,
    get_config,
    get_cookie_jar_setting,
    get_default_mode,
    get_history_file,
    get_ssl_insecure_setting,
    get_tool_binaries,
    get_transport_kind,
    is_verbose,
)

__all__ = [
    # env_loader
    "get_config_dir",
    "load_env_file",
    "load_global_config",
    "load_user_env",
    # getters
    "DEFAULTS",
    "TOOL_KEYS",
    "get_config",
    "get_cookie_jar_setting",
    "get_default_mode",
    "get_history_file",
    "get_ssl_insecure_setting",
    "get_tool_binaries",
    "get_transport_kind",
    "is_verbose",
]
