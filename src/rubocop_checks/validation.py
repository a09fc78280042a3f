"""Input validation functions."""
from pathlib import Path

from rubocop_checks.config import Config


def validate_project_root(project_root: Path) -> None:
    """Validate project root directory exists.

    Args:
        project_root: Path to validate

    Raises:
        ValueError: If path does not exist or is not a directory
    """
    if not project_root.exists():
        raise ValueError(f"Project root does not exist: {project_root}")

    if not project_root.is_dir():
        raise ValueError(f"Project root is not a directory: {project_root}")


def validate_github_token(token: str | None) -> None:
    """Validate the Checks API token.

    Args:
        token: Token to validate

    Raises:
        ValueError: If token is missing or empty
    """
    if not token:
        raise ValueError("GitHub token is required. Set the GITHUB_TOKEN environment variable.")


def validate_run_context(config: Config) -> None:
    """Validate the build context a check run needs.

    Args:
        config: Loaded configuration

    Raises:
        ValueError: If repository, commit or token is missing
    """
    if not config.repository:
        raise ValueError(
            "Repository is required. Set GITHUB_REPOSITORY (owner/name)."
        )
    if not config.commit_sha:
        raise ValueError("Commit SHA is required. Set GITHUB_SHA.")
    validate_github_token(config.github_token)
