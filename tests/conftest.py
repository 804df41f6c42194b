"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from fakes import RecordingReporter, ScriptedPrompter
from fsclip.core.settings import EngineSettings
from fsclip.engine.session import Session


@pytest.fixture
def prompter() -> ScriptedPrompter:
    """Prompter with no queued answers (always takes the default)."""
    return ScriptedPrompter()


@pytest.fixture
def reporter() -> RecordingReporter:
    """Reporter recording all messages."""
    return RecordingReporter()


@pytest.fixture
def settings() -> EngineSettings:
    """Default engine settings."""
    return EngineSettings()


@pytest.fixture
def session(
    prompter: ScriptedPrompter,
    reporter: RecordingReporter,
    settings: EngineSettings,
) -> Session:
    """Fresh engine session wired to the scripted prompter and reporter."""
    return Session.create(prompter, reporter, settings=settings)


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    home = tmp_path / "xdg-config"
    home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home
