"""Glob filtering of candidate files."""
from pathlib import Path, PurePath


def filter_files_by_list(root_path: Path, file_list: list[str], exclude: list[str]) -> list[str]:
    """Filter a list of changed paths down to files worth handing to the linter.

    Which of them are Ruby is left to RuboCop itself.

    Args:
        root_path: Root directory
        file_list: File paths relative to root
        exclude: Glob patterns that drop a file

    Returns:
        Relative paths, in input order, that exist and are not excluded
    """
    filtered = []

    for file_str in file_list:
        if not (root_path / file_str).is_file():
            continue
        if not is_excluded(Path(file_str), exclude):
            filtered.append(file_str)

    return filtered


def is_excluded(relative_path: Path, exclude_patterns: list[str]) -> bool:
    """Check if file is excluded by patterns.

    Supports ``**/dir/**``, ``dir/**`` and ``**/name`` forms on top of plain
    PurePath.match() globs.

    Args:
        relative_path: File path relative to root
        exclude_patterns: List of exclude patterns

    Returns:
        True if file should be excluded
    """
    path_obj = PurePath(relative_path)

    for pattern in exclude_patterns:
        if path_obj.match(pattern):
            return True

        if "**" not in pattern:
            continue

        if pattern.startswith("**/") and pattern.endswith("/**"):
            if pattern[3:-3] in path_obj.parts:
                return True
        elif pattern.endswith("/**"):
            prefix = pattern[:-3]
            for parent in [path_obj] + list(path_obj.parents):
                if parent.match(prefix) or str(parent) == prefix:
                    return True
        elif pattern.startswith("**/"):
            if path_obj.match(pattern[3:]):
                return True

    return False
