"""Shared test fixtures for swiftfw.

Provides:
- swiftfw_home: Temporary preferences directory (SWIFTFW_HOME)
- preferences: Dict-backed preferences store
- widget_config: ProjectConfig for the "Widget" project
- cli_runner: Click CliRunner
- swiftfw_logger: swiftfw logger, restored after the test
- Answer strings for the `swiftfw new` prompts
"""

import logging

import pytest
from click.testing import CliRunner

from swiftfw.core.project import ProjectConfig

# project name, organization name, organization id, cocoapods, github user
WIDGET_ANSWERS = "Widget\nAcme\ncom.acme\ny\nalice\n"
WIDGET_NO_PODS_ANSWERS = "Widget\nAcme\ncom.acme\nn\n"


class DictPreferences:
    """In-memory stand-in for PreferenceStore."""

    def __init__(self, data=None):
        self.data = dict(data or {})
        self.writes = []

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        self.data[key] = value
        self.writes.append((key, value))


@pytest.fixture
def swiftfw_home(tmp_path, monkeypatch):
    """Point SWIFTFW_HOME at a temporary directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("SWIFTFW_HOME", str(home))
    return home


@pytest.fixture
def preferences():
    return DictPreferences()


@pytest.fixture
def widget_config():
    return ProjectConfig(
        project_name="Widget",
        organization_name="Acme",
        organization_id="com.acme",
        cocoapods=True,
        github_user="alice",
    )


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def swiftfw_logger():
    """The swiftfw logger, restored after the test."""
    logger = logging.getLogger("swiftfw")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
