"""Pytest configuration and shared fixtures."""

import logging
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from greeter import GreeterRegistry
from greeter.config.parser import ENV_DEFAULT_TIMES, ENV_LOG_LEVEL


@pytest.fixture(autouse=True)
def clean_greeter_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep GREETER_* variables from leaking between tests.

    Setting before deleting makes monkeypatch remove any value a .env file
    loads during the test.
    """
    for key in (ENV_DEFAULT_TIMES, ENV_LOG_LEVEL):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def reset_root_logging() -> Generator[logging.Logger, None, None]:
    """Drop handlers the CLI installs on the root logger and restore its level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def registry() -> GreeterRegistry:
    """A fresh registry so counts start at zero."""
    return GreeterRegistry()


@pytest.fixture
def empty_project_dir() -> Generator[Path, None, None]:
    """Create an empty temporary directory."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)
