"""Shared test fixtures for levelmask test suite."""

import io
import os
from unittest.mock import patch

import pytest

from levelmask.lib.log_lib import init_output
from levelmask.lib.log_lib import manager as _manager_mod


# ---------------------------------------------------------------------------
# Diagnostic output
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_output():
    """Reset the OutputManager singleton between tests."""
    old = _manager_mod._manager
    _manager_mod._manager = None
    yield
    _manager_mod._manager = old


@pytest.fixture
def buf():
    """A StringIO buffer for capturing diagnostic output."""
    return io.StringIO()


@pytest.fixture
def loud(buf):
    """Singleton OutputManager at TRACE on every channel, writing to buf."""
    return init_output(verbosity=3, channels=['trace:3'], file=buf)


# ---------------------------------------------------------------------------
# Config isolation
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.levelmask/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def no_env_level(monkeypatch):
    """Make sure LEVELMASK_LEVEL from the developer's shell never leaks in."""
    monkeypatch.delenv("LEVELMASK_LEVEL", raising=False)


@pytest.fixture
def project_dir(tmp_path):
    """An empty project directory, separate from the fake home."""
    project = tmp_path / "project"
    project.mkdir()
    return project
