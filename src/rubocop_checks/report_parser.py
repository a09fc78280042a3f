"""Strict decoding of RuboCop's ``--format json`` report."""
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from rubocop_checks.errors import MalformedReportError
from rubocop_checks.logging_config import get_logger
from rubocop_checks.models import FileReport, LintReport, Offense, ReportTotals, Severity

logger = get_logger(__name__)


class _Location(BaseModel):
    model_config = ConfigDict(strict=True)

    start_line: int = Field(ge=1)
    last_line: int = Field(ge=1)
    start_column: int | None = Field(default=None, ge=1)
    last_column: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_line_order(self) -> "_Location":
        if self.last_line < self.start_line:
            raise ValueError(
                f"last_line {self.last_line} is before start_line {self.start_line}"
            )
        return self


class _Offense(BaseModel):
    model_config = ConfigDict(strict=True)

    severity: Severity
    message: str
    cop_name: str
    location: _Location


class _File(BaseModel):
    model_config = ConfigDict(strict=True)

    path: str
    offenses: list[_Offense]


class _Summary(BaseModel):
    model_config = ConfigDict(strict=True)

    offense_count: int = Field(ge=0)
    inspected_file_count: int = Field(ge=0)


class _Report(BaseModel):
    model_config = ConfigDict(strict=True)

    files: list[_File]
    summary: _Summary


def _describe(exc: ValidationError) -> str:
    """Condense a pydantic error into one line naming the first bad field."""
    errors = exc.errors()
    first = errors[0]
    location = ".".join(str(part) for part in first["loc"]) or "<document>"
    more = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{location}: {first['msg']}{more}"


def parse_report(raw: str) -> LintReport:
    """Decode raw linter stdout into a LintReport.

    Absent required fields are fatal, never defaulted.

    Args:
        raw: Text written by ``rubocop --format json``

    Returns:
        Normalized LintReport

    Raises:
        MalformedReportError: If the text is not valid JSON or does not match
            the report schema
    """
    if not raw or not raw.strip():
        raise MalformedReportError("linter produced no output")

    try:
        decoded = _Report.model_validate_json(raw)
    except ValidationError as e:
        reason = _describe(e)
        logger.debug(f"Report validation failed: {e}")
        raise MalformedReportError(reason) from e

    files = tuple(
        FileReport(
            path=f.path,
            offenses=tuple(
                Offense(
                    start_line=o.location.start_line,
                    end_line=o.location.last_line,
                    start_column=o.location.start_column,
                    end_column=o.location.last_column,
                    severity=o.severity,
                    message=o.message,
                    rule_id=o.cop_name,
                )
                for o in f.offenses
            ),
        )
        for f in decoded.files
    )
    totals = ReportTotals(
        offense_count=decoded.summary.offense_count,
        inspected_file_count=decoded.summary.inspected_file_count,
    )
    return LintReport(files=files, totals=totals)
