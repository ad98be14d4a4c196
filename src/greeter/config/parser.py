"""Configuration file parser for greeter."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

from ..errors import ConfigError

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python 3.10

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".greeter.toml"

ENV_DEFAULT_TIMES = "GREETER_DEFAULT_TIMES"
ENV_LOG_LEVEL = "GREETER_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ProjectConfig:
    """Project-level configuration."""

    name: Optional[str] = None


@dataclass
class GreetingConfig:
    """Defaults for the greet command."""

    default_name: str = "Ruby"
    default_times: int = 2


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class GreeterConfig:
    """Complete greeter configuration."""

    project: ProjectConfig = field(default_factory=ProjectConfig)
    greeting: GreetingConfig = field(default_factory=GreetingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Directory the config was loaded from
    project_root: Path = field(default_factory=Path.cwd)


def find_config_file(project_path: Path) -> Optional[Path]:
    """Find .greeter.toml in project root.

    Args:
        project_path: Root path of the project

    Returns:
        Path to .greeter.toml if found, None otherwise
    """
    config_file = project_path / CONFIG_FILE_NAME
    if config_file.exists():
        return config_file
    return None


def _section(data: Dict[str, Any], key: str, config_file: Path) -> Dict[str, Any]:
    """Return the table under ``key``, or an empty one if missing or not a table."""
    section = data.get(key, {})
    if isinstance(section, dict):
        return section
    logger.warning(f"Ignoring non-table {key}={section!r} in {config_file}")
    return {}


def load_config(project_path: Path, use_env: bool = True) -> GreeterConfig:
    """Load configuration from .greeter.toml or use defaults.

    Environment overrides (including a .env file in the project root) are
    applied on top unless ``use_env`` is False.

    Args:
        project_path: Root path of the project
        use_env: Whether to apply GREETER_* environment overrides

    Returns:
        GreeterConfig with loaded or default configuration

    Raises:
        ConfigError: If an environment override is malformed
    """
    config = GreeterConfig(project_root=project_path)

    config_file = find_config_file(project_path)
    if config_file:
        try:
            with open(config_file, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            # If TOML parsing fails, keep defaults
            logger.warning(f"Ignoring unreadable config {config_file}: {e}")
            data = {}

        project_data = _section(data, "project", config_file)
        if "name" in project_data:
            name = project_data["name"]
            if isinstance(name, str):
                config.project.name = name
            else:
                logger.warning(f"Ignoring project.name={name!r} in {config_file}")

        greeting_data = _section(data, "greeting", config_file)
        if greeting_data:
            default_name = greeting_data.get(
                "default_name", config.greeting.default_name
            )
            if isinstance(default_name, str):
                config.greeting.default_name = default_name
            else:
                logger.warning(
                    f"Ignoring greeting.default_name={default_name!r} in {config_file}"
                )
            default_times = greeting_data.get(
                "default_times", config.greeting.default_times
            )
            if (
                isinstance(default_times, int)
                and not isinstance(default_times, bool)
                and default_times >= 0
            ):
                config.greeting.default_times = default_times
            else:
                logger.warning(
                    f"Ignoring greeting.default_times={default_times!r} in {config_file}"
                )

        logging_data = _section(data, "logging", config_file)
        if logging_data:
            level = str(logging_data.get("level", config.logging.level)).upper()
            if level in LOG_LEVELS:
                config.logging.level = level
            else:
                logger.warning(f"Ignoring logging.level={level!r} in {config_file}")

    if use_env:
        load_dotenv(project_path / ".env")
        apply_env_overrides(config)

    return config


def apply_env_overrides(
    config: GreeterConfig, environ: Optional[Mapping[str, str]] = None
) -> GreeterConfig:
    """Apply GREETER_* environment variables on top of ``config``.

    Raises:
        ConfigError: If a variable holds an unusable value
    """
    env = os.environ if environ is None else environ

    raw_times = env.get(ENV_DEFAULT_TIMES)
    if raw_times:
        try:
            times = int(raw_times)
        except ValueError:
            raise ConfigError(ENV_DEFAULT_TIMES, raw_times, "not an integer") from None
        if times < 0:
            raise ConfigError(ENV_DEFAULT_TIMES, raw_times, "must be >= 0")
        config.greeting.default_times = times

    raw_level = env.get(ENV_LOG_LEVEL)
    if raw_level:
        level = raw_level.upper()
        if level not in LOG_LEVELS:
            raise ConfigError(
                ENV_LOG_LEVEL, raw_level, f"expected one of {', '.join(LOG_LEVELS)}"
            )
        config.logging.level = level

    return config
