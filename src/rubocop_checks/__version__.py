"""Version information for rubocop-checks."""

__version__ = "0.1.0"
