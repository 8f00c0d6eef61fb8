"""Pytest configuration and shared fixtures."""

import json
import logging
from pathlib import Path

import pytest

from fmtwizard.logging_setup import LOGGER_NAME
from fmtwizard.settings import WizardSettings

# Pressing Enter at every prompt accepts every default
ALL_DEFAULTS_INPUT = "\n" * 6


@pytest.fixture
def project_dir(tmp_path):
    """Empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def settings(project_dir):
    """WizardSettings rooted at the empty project directory."""
    return WizardSettings(project_dir=project_dir)


@pytest.fixture
def configured_project(project_dir):
    """Project directory that already has both config files."""
    (project_dir / ".eslintrc.json").write_text(json.dumps({"rules": {}}), encoding="utf-8")
    (project_dir / ".prettierrc.json").write_text(json.dumps({"semi": False}), encoding="utf-8")
    return project_dir


@pytest.fixture(autouse=True)
def isolated_user_settings(tmp_path, monkeypatch):
    """Keep the real per-user settings file out of every test."""
    user_file = tmp_path / "user-config" / "config.yaml"
    monkeypatch.setattr("fmtwizard.settings.user_settings_path", lambda: user_file)
    return user_file


@pytest.fixture(autouse=True)
def reset_fmtwizard_logger():
    """Drop handlers attached by setup_logging so they never outlive a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def read_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))
