"""Shared test configuration and fixtures."""

import pytest

from gh_polyrepos.config import CONFIG_FILE_NAME, ROOT_DIR_ENV_VAR, ConfigManager
from gh_polyrepos.models import Answers, GhCommand


@pytest.fixture
def config_path(tmp_path):
    """Path of an isolated config file."""
    return tmp_path / CONFIG_FILE_NAME


@pytest.fixture
def isolated_config_manager(config_path, monkeypatch):
    """Create a ConfigManager that doesn't touch real config files."""
    monkeypatch.delenv(ROOT_DIR_ENV_VAR, raising=False)
    return ConfigManager(path=config_path)


@pytest.fixture(autouse=True)
def mock_global_config_manager(isolated_config_manager, monkeypatch):
    """Automatically replace the global config_manager for all tests."""
    import gh_polyrepos.config

    monkeypatch.setattr(gh_polyrepos.config, "config_manager", isolated_config_manager)
    return isolated_config_manager


@pytest.fixture
def repo_root(tmp_path):
    """Root directory with one plain file and two repository checkouts."""
    root = tmp_path / "repos"
    root.mkdir()
    (root / "repoA").write_text("not a repository\n")
    (root / "repoB").mkdir()
    (root / "repoC").mkdir()
    return root


@pytest.fixture
def comment_answers():
    """Answers for commenting on the PR opened from feature-x."""
    return Answers(gh_command=GhCommand.COMMENT, source_branch="feature-x", body="lgtm")


@pytest.fixture
def create_answers():
    """Answers for creating a PR from feature-x into main."""
    return Answers(
        gh_command=GhCommand.CREATE,
        source_branch="feature-x",
        base="main",
        title="Bump deps",
        body="Routine update",
    )


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner
    return CliRunner()
