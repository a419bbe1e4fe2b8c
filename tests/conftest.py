"""Shared test fixtures: sample hashes, temp git repos."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from samples import SHA1_A, SHA1_B


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def sha1_a() -> str:
    return SHA1_A


@pytest.fixture
def sha1_b() -> str:
    return SHA1_B


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository on branch ``main`` with one commit."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    _git(tmp_path, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(tmp_path, "config", "user.email", "test@test.com")
    _git(tmp_path, "config", "user.name", "Test")
    _git(tmp_path, "config", "commit.gpgsign", "false")
    _git(tmp_path, "config", "tag.gpgsign", "false")
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-m", "init")
    return tmp_path


@pytest.fixture
def tagged_git_repo(tmp_git_repo: Path) -> Path:
    """Two commits: lightweight ``v1.0.0`` on the first, annotated ``v2.0.0`` on the second."""
    _git(tmp_git_repo, "tag", "v1.0.0")
    (tmp_git_repo / "CHANGELOG.md").write_text("## 2.0.0\n")
    _git(tmp_git_repo, "add", ".")
    _git(tmp_git_repo, "commit", "-m", "feat: second")
    _git(tmp_git_repo, "tag", "-a", "v2.0.0", "-m", "Release 2.0.0")
    return tmp_git_repo


@pytest.fixture
def git():
    """Run git in a repo and return stripped stdout."""
    return _git
