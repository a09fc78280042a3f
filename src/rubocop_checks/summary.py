"""Check-run conclusion and summary text."""
from rubocop_checks.models import CheckSummary, Conclusion, ReportTotals

DEFAULT_TITLE = "Rubocop"


def conclusion_for_exit_code(exit_code: int) -> Conclusion:
    """Success iff the linter exited 0, whatever the offense counts say."""
    return Conclusion.SUCCESS if exit_code == 0 else Conclusion.FAILURE


def format_totals(totals: ReportTotals) -> str:
    """Render the one-line offense summary."""
    return (
        f"Found {totals.offense_count} offense(s) in "
        f"{totals.inspected_file_count} inspected file(s)."
    )


def build_summary(
    totals: ReportTotals, exit_code: int, title: str = DEFAULT_TITLE
) -> CheckSummary:
    """Build the closing summary for a parsed report.

    Args:
        totals: Report totals
        exit_code: Exit status of the linter process
        title: Output title shown on the check run

    Returns:
        CheckSummary with conclusion, title and summary text
    """
    return CheckSummary(
        conclusion=conclusion_for_exit_code(exit_code),
        title=title,
        summary=format_totals(totals),
    )


def build_internal_error_summary(
    reason: str, exit_code: int, title: str = DEFAULT_TITLE
) -> CheckSummary:
    """Build the forced-failure summary used when the report is unreadable."""
    return CheckSummary(
        conclusion=Conclusion.FAILURE,
        title=title,
        summary=(
            f"Rubocop output could not be parsed "
            f"(exit status {exit_code}): {reason}"
        ),
    )


def build_unexpected_error_summary(reason: str, title: str = DEFAULT_TITLE) -> CheckSummary:
    """Build the forced-failure summary for a run that broke after opening."""
    return CheckSummary(
        conclusion=Conclusion.FAILURE,
        title=title,
        summary=f"Internal error while running rubocop: {reason}",
    )
