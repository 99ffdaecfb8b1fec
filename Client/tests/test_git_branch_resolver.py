"""
Tests for Git branch lookup in Crowdin Sync Client
"""

import subprocess
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from exceptions import BranchResolutionError
from managers import GitBranchResolver


def fake_run(returncode=0, stdout="", stderr="", calls=None):
    def run(command, **kwargs):
        if calls is not None:
            calls.append((command, kwargs))
        return subprocess.CompletedProcess(command, returncode, stdout=stdout, stderr=stderr)
    return run


def test_current_branch(monkeypatch, tmp_path):
    """Test reading the branch name"""
    calls = []
    monkeypatch.setattr(subprocess, "run", fake_run(stdout="main\n", calls=calls))

    resolver = GitBranchResolver(str(tmp_path))

    assert resolver() == "main"
    command, kwargs = calls[0]
    assert command == ["git", "rev-parse", "--abbrev-ref", "HEAD"]
    assert kwargs["cwd"] == str(tmp_path)


def test_git_failure(monkeypatch):
    """Test non-zero git exit status"""
    monkeypatch.setattr(subprocess, "run",
                        fake_run(returncode=128, stderr="fatal: not a git repository\n"))

    with pytest.raises(BranchResolutionError) as excinfo:
        GitBranchResolver().current_branch()

    assert "not a git repository" in str(excinfo.value)


def test_detached_head(monkeypatch):
    """Test that a detached HEAD is not used as a branch name"""
    monkeypatch.setattr(subprocess, "run", fake_run(stdout="HEAD\n"))

    with pytest.raises(BranchResolutionError):
        GitBranchResolver().current_branch()


def test_empty_output(monkeypatch):
    monkeypatch.setattr(subprocess, "run", fake_run(stdout="\n"))

    with pytest.raises(BranchResolutionError):
        GitBranchResolver().current_branch()


def test_git_not_installed(monkeypatch):
    """Test missing git executable"""
    def missing(command, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr(subprocess, "run", missing)

    with pytest.raises(BranchResolutionError):
        GitBranchResolver(git_executable="git-does-not-exist").current_branch()
