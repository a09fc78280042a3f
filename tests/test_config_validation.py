"""Tests for config validation."""
import pytest
from pydantic import ValidationError

from rubocop_checks.config import Config


def test_config_rejects_bad_repository():
    """Test that repository must be owner/name."""
    with pytest.raises(ValidationError, match="repository"):
        Config(repository="not-a-slug")


def test_config_rejects_negative_api_timeout():
    """Test that negative timeout raises error."""
    with pytest.raises(ValidationError, match="api_timeout_seconds"):
        Config(api_timeout_seconds=-1.0)


def test_config_rejects_excessive_api_timeout():
    """Test that timeouts above ten minutes are rejected."""
    with pytest.raises(ValidationError, match="api_timeout_seconds"):
        Config(api_timeout_seconds=601)


def test_config_rejects_blank_exclude_pattern():
    """Test that blank exclude patterns raise error."""
    with pytest.raises(ValidationError, match="exclude"):
        Config(exclude=["vendor/**", "  "])


def test_config_rejects_empty_rubocop_command():
    """Test that the linter command cannot be empty."""
    with pytest.raises(ValidationError, match="rubocop_command"):
        Config(rubocop_command=[])


def test_config_rejects_empty_check_name():
    """Test that the check run needs a name."""
    with pytest.raises(ValidationError, match="check_name"):
        Config(check_name="")


def test_config_accepts_valid_values():
    """Test that valid config is accepted."""
    config = Config(
        exclude=["vendor/**"],
        repository="octo-org/my.repo",
        rubocop_command="bundle exec rubocop",
        api_timeout_seconds=120.0,
    )

    assert config.repository == "octo-org/my.repo"
    assert config.rubocop_command == ["bundle", "exec", "rubocop"]
    assert config.api_timeout_seconds == 120.0
