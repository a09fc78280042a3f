"""Configuration management for rubocop-checks."""
import json
import os
import re
import shlex
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_FILENAME = ".rubocop-checks.json"
DEFAULT_BASE_REF = "origin/master"
DEFAULT_HEAD_REF = "HEAD"
TRUTHY_VALUES = {"true", "yes", "on", "1", ""}

_REPOSITORY_PATTERN = re.compile(r"^[\w.-]+/[\w.-]+$")


class Config(BaseModel):
    """Configuration for rubocop-checks with validation."""

    repository: str | None = Field(default=None, description="Repository as owner/name")
    commit_sha: str | None = Field(default=None, description="Commit the check run reports on")
    github_token: str | None = Field(default=None, description="Checks API bearer token")
    api_url: str = Field(default="https://api.github.com", description="Checks API root URL")
    api_timeout_seconds: float = Field(
        default=30.0, gt=0, le=600, description="API timeout in seconds"
    )
    check_name: str = Field(default="Rubocop", min_length=1, description="Check run name")
    changes_only: bool = Field(default=False, description="Only lint files changed between refs")
    base_ref: str = Field(default=DEFAULT_BASE_REF, min_length=1, description="Diff base revision")
    head_ref: str = Field(default=DEFAULT_HEAD_REF, min_length=1, description="Diff head revision")
    rubocop_command: list[str] = Field(
        default_factory=lambda: ["rubocop"], min_length=1, description="RuboCop argv prefix"
    )
    force_exclusion: bool = Field(
        default=True, description="Honour RuboCop Exclude config for explicit files"
    )
    exclude: list[str] = Field(
        default_factory=list, description="Changed-file patterns never handed to RuboCop"
    )
    show_progress: bool = Field(default=True, description="Show a spinner while linting")

    @field_validator("repository")
    @classmethod
    def validate_repository(cls, v: str | None) -> str | None:
        """Ensure repository looks like owner/name."""
        if v is not None and not _REPOSITORY_PATTERN.match(v):
            raise ValueError(f"repository must be 'owner/name', got {v!r}")
        return v

    @field_validator("rubocop_command", mode="before")
    @classmethod
    def split_command(cls, v: Any) -> Any:
        """Accept the command as a shell-style string too."""
        if isinstance(v, str):
            return shlex.split(v)
        return v

    @field_validator("exclude")
    @classmethod
    def validate_exclude_patterns(cls, v: list[str]) -> list[str]:
        """Ensure exclude patterns are non-empty strings."""
        for pattern in v:
            if not pattern.strip():
                raise ValueError("exclude patterns cannot be empty strings")
        return v


def parse_bool_flag(value: str | None) -> bool:
    """Interpret a boolean-like environment value.

    ``true``, ``yes``, ``on``, ``1`` and the empty string are truthy
    (case-insensitive); anything else, or an unset variable, is falsy.
    """
    if value is None:
        return False
    return value.strip().lower() in TRUTHY_VALUES


def default_base_ref(environ: Mapping[str, str]) -> str:
    """Base revision GitHub implies for this build."""
    base_branch = environ.get("GITHUB_BASE_REF")
    if base_branch:
        return f"origin/{base_branch}"
    return DEFAULT_BASE_REF


def default_head_ref(environ: Mapping[str, str]) -> str:
    """Head revision GitHub implies for this build."""
    return environ.get("GITHUB_SHA") or DEFAULT_HEAD_REF


def get_default_config() -> Config:
    """Return default configuration.

    Returns:
        Config with default values
    """
    return Config()


def _from_file(data: dict[str, Any], snake: str, camel: str, default: Any) -> Any:
    return data.get(snake, data.get(camel, default))


def load_config(config_path: Path, environ: Mapping[str, str] | None = None) -> Config:
    """Load configuration from an optional file and the CI environment.

    Tool settings come from the JSON file (snake_case preferred, camelCase
    accepted). Build context (repository, commit, token, changed-files mode,
    refs) comes from the environment, which wins over the file.

    Args:
        config_path: Path to .rubocop-checks.json file
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Config object

    Raises:
        ValueError: If configuration values are invalid
    """
    env = os.environ if environ is None else environ

    data: dict[str, Any] = {}
    if config_path.exists():
        with config_path.open(encoding="utf-8") as f:
            data = json.load(f)

    defaults = get_default_config()

    config_data = {
        "exclude": data.get("exclude", defaults.exclude),
        "check_name": _from_file(data, "check_name", "checkName", defaults.check_name),
        "rubocop_command": _from_file(
            data, "rubocop_command", "rubocopCommand", defaults.rubocop_command
        ),
        "force_exclusion": _from_file(
            data, "force_exclusion", "forceExclusion", defaults.force_exclusion
        ),
        "api_timeout_seconds": _from_file(
            data, "api_timeout_seconds", "apiTimeoutSeconds", defaults.api_timeout_seconds
        ),
        "show_progress": _from_file(data, "show_progress", "showProgress", defaults.show_progress),
        "changes_only": _from_file(data, "changes_only", "changesOnly", defaults.changes_only),
        "base_ref": _from_file(data, "base_ref", "baseRef", default_base_ref(env)),
        "head_ref": _from_file(data, "head_ref", "headRef", default_head_ref(env)),
        "repository": env.get("GITHUB_REPOSITORY") or None,
        "commit_sha": env.get("GITHUB_SHA") or None,
        "github_token": env.get("GITHUB_TOKEN") or None,
        "api_url": env.get("GITHUB_API_URL") or defaults.api_url,
    }

    if "CHANGES_ONLY" in env:
        config_data["changes_only"] = parse_bool_flag(env["CHANGES_ONLY"])
    if env.get("BASE_REF"):
        config_data["base_ref"] = env["BASE_REF"]
    if env.get("HEAD_REF"):
        config_data["head_ref"] = env["HEAD_REF"]
    if env.get("RUBOCOP_COMMAND"):
        config_data["rubocop_command"] = env["RUBOCOP_COMMAND"]
    if env.get("RUBOCOP_CHECKS_NO_PROGRESS"):
        config_data["show_progress"] = False

    return Config(**config_data)
