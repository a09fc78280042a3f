"""Exception hierarchy for rubocop-checks.

Every failure the orchestrator distinguishes has its own type so the
abort/recover decision is made on the exception class, never on message text.
"""


class RubocopChecksError(Exception):
    """Base exception for all rubocop-checks errors."""


class DiffError(RubocopChecksError):
    """Raised when ``git diff`` fails to compare two revisions."""

    def __init__(self, returncode: int, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr.strip() else ""
        super().__init__(f"git diff exited with status {returncode}{detail}")


class RemoteApiError(RubocopChecksError):
    """Raised when the check-run API answers with a non-success status.

    ``status`` is None when no HTTP response was received at all
    (connection refused, timeout, TLS failure). ``requests_made`` counts the
    requests issued by the failing operation, the failed one included.
    """

    def __init__(self, status: int | None, body: str = "", requests_made: int = 1) -> None:
        self.status = status
        self.body = body
        self.requests_made = requests_made
        label = f"HTTP {status}" if status is not None else "no response"
        super().__init__(f"Check run API request failed ({label}): {body}")


class MalformedReportError(RubocopChecksError):
    """Raised when linter output is not a report we fully understand."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed rubocop report: {reason}")


class InvalidTransitionError(RubocopChecksError):
    """Raised when the run state machine is asked for an illegal transition."""

    def __init__(self, source: object, target: object) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Illegal run state transition: {source} -> {target}")
