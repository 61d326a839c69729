"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests that drive the CLI")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid linkres configuration dict for testing."""
    return {
        "session": {
            "link_uri": "https://bi.example.com/",
            "base_origin": None,
            "embedded": False,
            "preview": False,
        },
        "log": {
            "level": "INFO",
        },
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def linkres_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up LINKRES_HOME with a minimal config file.

    Returns:
        Path to the linkres home directory (tmp_path)
    """
    monkeypatch.setenv("LINKRES_HOME", str(tmp_path))
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(minimal_config_dict))
    return tmp_path


# =============================================================================
# Test Helpers
# =============================================================================


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    """Runner for StageResult commands."""
    return _run_cmd
