"""Domain models for lint reports and check-run annotations."""
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """RuboCop offense severities."""

    REFACTOR = "refactor"
    CONVENTION = "convention"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


class AnnotationLevel(str, Enum):
    """Annotation levels accepted by the GitHub Checks API."""

    NOTICE = "notice"
    WARNING = "warning"
    FAILURE = "failure"


class Conclusion(str, Enum):
    """Conclusions a check run can be closed with."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Offense:
    """Single rule violation at a source location."""

    start_line: int
    end_line: int
    severity: Severity
    message: str
    rule_id: str
    start_column: int | None = None
    end_column: int | None = None

    @property
    def is_single_line(self) -> bool:
        return self.start_line == self.end_line


@dataclass(frozen=True)
class FileReport:
    """Offenses reported for one inspected file."""

    path: str
    offenses: tuple[Offense, ...] = ()


@dataclass(frozen=True)
class ReportTotals:
    """Aggregate counts from the report summary."""

    offense_count: int
    inspected_file_count: int


@dataclass(frozen=True)
class LintReport:
    """Normalized linter report."""

    files: tuple[FileReport, ...]
    totals: ReportTotals

    @property
    def offense_total(self) -> int:
        """Number of offenses actually listed across files."""
        return sum(len(f.offenses) for f in self.files)


@dataclass(frozen=True)
class Annotation:
    """One inline annotation on a check run."""

    path: str
    start_line: int
    end_line: int
    annotation_level: AnnotationLevel
    title: str
    message: str
    start_column: int | None = None
    end_column: int | None = None

    def to_payload(self) -> dict[str, Any]:
        """Convert to the JSON object the Checks API expects.

        Column keys are only emitted when set.
        """
        payload: dict[str, Any] = {
            "path": self.path,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "annotation_level": self.annotation_level.value,
            "title": self.title,
            "message": self.message,
        }
        if self.start_column is not None and self.end_column is not None:
            payload["start_column"] = self.start_column
            payload["end_column"] = self.end_column
        return payload


@dataclass(frozen=True)
class CheckSummary:
    """Conclusion and output text for closing a check run."""

    conclusion: Conclusion
    title: str
    summary: str


@dataclass(frozen=True)
class LinterResult:
    """Captured output of one linter process."""

    stdout: str
    exit_code: int
    stderr: str = ""
    files: tuple[str, ...] | None = None
