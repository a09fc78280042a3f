"""Git integration utilities."""
import subprocess
from pathlib import Path

from rubocop_checks.errors import DiffError
from rubocop_checks.linter import shell_exit_status

# Added, copied, modified, renamed, type-changed. Deleted files are excluded.
CHANGED_FILES_FILTER = "ACMRT"


def get_changed_files_between(repo_path: Path, base_ref: str, head_ref: str) -> list[str]:
    """Get files changed between two revisions.

    Args:
        repo_path: Path to git repository
        base_ref: Base revision (e.g., 'origin/master')
        head_ref: Head revision (e.g., a commit SHA or 'HEAD')

    Returns:
        Changed file paths relative to repo root, in git's order

    Raises:
        DiffError: If git exits non-zero
    """
    result = subprocess.run(
        [
            "git",
            "diff",
            "--name-only",
            f"--diff-filter={CHANGED_FILES_FILTER}",
            base_ref,
            head_ref,
        ],
        cwd=repo_path,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise DiffError(shell_exit_status(result.returncode), result.stderr)

    return [f.strip() for f in result.stdout.split("\n") if f.strip()]
