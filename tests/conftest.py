"""Shared pytest fixtures for the reqtrack test suite.

Provides reusable fixtures for:
- Sample requirements documents (on disk and as text)
- A temporary git repository
- A console that records output for assertions
"""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest
from rich.console import Console


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Temporary git repository named ``service-auth`` with an initial commit.

    Checked out on branch ``feature-login`` so branch detection has a known
    answer.
    """
    repo_dir = tmp_path / "service-auth"
    repo_dir.mkdir()
    subprocess.run(["git", "init"], cwd=repo_dir, check=True, capture_output=True)
    subprocess.run(
        ["git", "config", "user.email", "test@reqtrack.local"],
        cwd=repo_dir, check=True, capture_output=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "reqtrack Test"],
        cwd=repo_dir, check=True, capture_output=True,
    )
    subprocess.run(
        ["git", "config", "commit.gpgsign", "false"],
        cwd=repo_dir, check=True, capture_output=True,
    )
    readme = repo_dir / "README.md"
    readme.write_text("# Test Project\n", encoding="utf-8")
    subprocess.run(["git", "add", "."], cwd=repo_dir, check=True, capture_output=True)
    subprocess.run(
        ["git", "commit", "-m", "Initial commit"],
        cwd=repo_dir, check=True, capture_output=True,
    )
    subprocess.run(
        ["git", "checkout", "-b", "feature-login"],
        cwd=repo_dir, check=True, capture_output=True,
    )
    yield repo_dir


@pytest.fixture
def sample_requirements() -> str:
    """Path to sample-requirements.md fixture file."""
    path = Path(__file__).parent / "fixtures" / "sample-requirements.md"
    assert path.exists(), f"Sample requirements fixture not found at {path}"
    return str(path)


@pytest.fixture
def sample_requirements_text(sample_requirements: str) -> str:
    """Raw text content of sample-requirements.md."""
    return Path(sample_requirements).read_text(encoding="utf-8")


@pytest.fixture
def login_markdown() -> str:
    """The single-requirement document used in the matching examples."""
    return textwrap.dedent("""\
        ## Active Requirements

        - [ ] Fix login bug
          - repo:
            - service-auth
          - branch:
            - release-1.2
    """)


@pytest.fixture
def requirements_file(tmp_path: Path) -> Path:
    """Empty-bodied requirements file containing only the marker heading."""
    path = tmp_path / "requirements.md"
    path.write_text("# Notes\n\n## Active Requirements\n", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Output capture
# ---------------------------------------------------------------------------

@pytest.fixture
def record_console() -> Console:
    """Wide, colourless console that records everything printed to it."""
    return Console(record=True, width=200, color_system=None, highlight=False)
