"""Test fixtures for config store tests."""
import pytest


@pytest.fixture
def kit_home(tmp_path, monkeypatch):
    """Point KITOPS_HOME at a temporary directory."""
    monkeypatch.setenv("KITOPS_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def profile_dir(kit_home):
    """Create the directory for the "work" profile."""
    path = kit_home / "profiles" / "work"
    path.mkdir(parents=True)
    return path
