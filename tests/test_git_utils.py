import shutil
import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from rubocop_checks.errors import DiffError
from rubocop_checks.git_utils import get_changed_files_between

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def git(repo_dir: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo_dir, check=True, capture_output=True)


def setup_git_repo(tmpdir: Path) -> Path:
    """Helper to set up a git repo with one commit."""
    repo_dir = tmpdir / "repo"
    repo_dir.mkdir()

    git(repo_dir, "init")
    git(repo_dir, "config", "user.email", "test@example.com")
    git(repo_dir, "config", "user.name", "Test User")

    (repo_dir / "kept.rb").write_text("puts 'hello'\n")
    (repo_dir / "doomed.rb").write_text("puts 'bye'\n")
    git(repo_dir, "add", ".")
    git(repo_dir, "commit", "--no-gpg-sign", "-m", "initial")

    return repo_dir


def test_get_changed_files_between(tmp_path):
    """Test that added and modified files are listed and deleted ones are not."""
    repo_dir = setup_git_repo(tmp_path)

    (repo_dir / "kept.rb").write_text("puts 'changed'\n")
    (repo_dir / "added.rb").write_text("puts 'new'\n")
    (repo_dir / "doomed.rb").unlink()
    git(repo_dir, "add", "-A")
    git(repo_dir, "commit", "--no-gpg-sign", "-m", "second")

    files = get_changed_files_between(repo_dir, "HEAD~1", "HEAD")

    assert sorted(files) == ["added.rb", "kept.rb"]


def test_get_changed_files_between_no_changes(tmp_path):
    """Test comparing a revision with itself."""
    repo_dir = setup_git_repo(tmp_path)

    assert get_changed_files_between(repo_dir, "HEAD", "HEAD") == []


def test_get_changed_files_between_bad_revision(tmp_path):
    """Test that an unknown revision raises DiffError with git's status."""
    repo_dir = setup_git_repo(tmp_path)

    with pytest.raises(DiffError) as exc_info:
        get_changed_files_between(repo_dir, "origin/does-not-exist", "HEAD")

    assert exc_info.value.returncode != 0
    assert exc_info.value.stderr


@patch("rubocop_checks.git_utils.subprocess.run")
def test_get_changed_files_between_killed_by_signal(mock_run, tmp_path):
    """Test that a git killed by SIGTERM reports status 143."""
    mock_run.return_value = Mock(stdout="", stderr="", returncode=-15)

    with pytest.raises(DiffError) as exc_info:
        get_changed_files_between(tmp_path, "origin/main", "HEAD")

    assert exc_info.value.returncode == 143
