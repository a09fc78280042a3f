"""Selection of the files handed to the linter."""
from pathlib import Path

from rubocop_checks.collector import filter_files_by_list
from rubocop_checks.git_utils import get_changed_files_between
from rubocop_checks.logging_config import get_logger

logger = get_logger(__name__)


def dedupe(paths: list[str]) -> tuple[str, ...]:
    """Drop repeated paths, keeping first-seen order."""
    return tuple(dict.fromkeys(paths))


def resolve_change_set(
    changes_only: bool,
    base_ref: str,
    head_ref: str,
    project_root: Path,
    exclude: list[str],
) -> tuple[str, ...] | None:
    """Resolve which files the linter should inspect.

    Every changed file that still exists is kept; RuboCop decides which of
    them it recognizes as Ruby.

    Args:
        changes_only: Restrict linting to files changed between the refs
        base_ref: Base revision
        head_ref: Head revision
        project_root: Repository root
        exclude: Glob patterns to skip

    Returns:
        None to lint everything, otherwise the changed files

    Raises:
        DiffError: If the revision comparison fails
    """
    if not changes_only:
        logger.info("Changes-only mode disabled, linting the whole project")
        return None

    changed = get_changed_files_between(project_root, base_ref, head_ref)
    selected = dedupe(filter_files_by_list(project_root, changed, exclude))
    logger.info(
        f"{len(changed)} file(s) changed between {base_ref} and {head_ref}, "
        f"{len(selected)} selected for linting"
    )
    return selected
