"""Shared fixtures: keep the user's config and the package logger out of tests."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import pytest

from godotexports import config as config_mod
from godotexports.logs import LOGGER_NAME

REPO_ROOT = Path(__file__).resolve().parent.parent
TESTING_GROUNDS = REPO_ROOT / "testing_grounds"


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """No global config, no Actions env, and a package logger reset after each test."""
    fake_home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr(config_mod, "_global_config_dir", lambda: fake_home / ".godot-exports")
    for var in ("GITHUB_ACTIONS", "GITHUB_OUTPUT", config_mod.PROJECT_PATH_ENV):
        monkeypatch.delenv(var, raising=False)

    logger = logging.getLogger(LOGGER_NAME)
    saved_level = logger.level
    saved_handlers = list(logger.handlers)
    logger.handlers.clear()
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


@pytest.fixture
def fixture_project(tmp_path: Path) -> Path:
    """Copy testing_grounds (a small Godot project) into tmp_path."""
    if not TESTING_GROUNDS.is_dir():
        pytest.skip("testing_grounds not found")
    dest = tmp_path / "project"
    shutil.copytree(TESTING_GROUNDS, dest)
    return dest
