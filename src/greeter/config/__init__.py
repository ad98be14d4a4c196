"""Configuration management for greeter."""

from .parser import (
    GreeterConfig,
    apply_env_overrides,
    find_config_file,
    load_config,
)

__all__ = [
    "GreeterConfig",
    "load_config",
    "find_config_file",
    "apply_env_overrides",
]
