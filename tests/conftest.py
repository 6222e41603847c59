"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from prfect.config import PrfectConfig
from prfect.git.models import DiffSummary


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git directory to simulate a git repo
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def config():
    """Default configuration with no user overrides."""
    return PrfectConfig()


@pytest.fixture
def sample_diff_summary():
    """Sample DiffSummary for two branches."""
    return DiffSummary(
        commit_messages="- Add login form (Jane Doe, 2 days ago)\n- Fix session timeout (Jane Doe, 1 day ago)",
        file_changes="A\tsrc/login.py\nM\tsrc/session.py",
        diff_statistics=" src/login.py   | 40 ++++++++\n src/session.py |  3 +-\n 2 files changed, 42 insertions(+), 1 deletion(-)",
        code_sample="diff --git a/src/session.py b/src/session.py\n-TIMEOUT = 60\n+TIMEOUT = 3600",
    )


@pytest.fixture
def sample_llm_response():
    """Sample raw model response with a reasoning block."""
    return """<think>
The commits add a login form and fix the session timeout.
</think>

# Add login form and extend session timeout

## Summary
Adds a login form and raises the session timeout to one hour."""


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
