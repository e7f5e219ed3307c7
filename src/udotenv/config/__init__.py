"""Configuration module for udotenv

Example:
    from udotenv.config import Config, EnvFileLoader

    config = Config(env_flags=["env-file"], default_env_path="local.env")
    EnvFileLoader(["local.env"], overload=True).load()
"""

from udotenv.config.env_loader import EnvFileLoader, load_env_files
from udotenv.config.settings import (
    DEFAULT_ENV_FLAGS,
    DEFAULT_ENV_PATH,
    DEFAULT_OVERLOAD_FLAGS,
    Config,
    FlagRole,
    FlagRoleTable,
    get_default_config,
)

__all__ = [
    # Settings
    "Config",
    "get_default_config",
    "DEFAULT_ENV_PATH",
    "DEFAULT_ENV_FLAGS",
    "DEFAULT_OVERLOAD_FLAGS",
    # Flag roles
    "FlagRole",
    "FlagRoleTable",
    # Loading
    "EnvFileLoader",
    "load_env_files",
]
