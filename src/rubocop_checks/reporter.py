"""Report formatting and output."""
import json
from itertools import groupby

from rubocop_checks.states import RunOutcome


def format_detailed_report(outcome: RunOutcome) -> str:
    """Format a run as a human-readable report for the CI log.

    Args:
        outcome: Finished run

    Returns:
        Formatted report string
    """
    lines = []
    lines.append("=" * 70)
    lines.append("RUBOCOP CHECK RUN REPORT")
    lines.append("=" * 70)
    lines.append("")

    for path, group in groupby(outcome.annotations, key=lambda a: a.path):
        annotations = list(group)
        lines.append(f"[FILE] {path}")
        lines.append(f"   {len(annotations)} offense(s) found:")
        lines.append("")
        for annotation in annotations:
            if annotation.start_line == annotation.end_line:
                line_info = f"line {annotation.start_line}"
            else:
                line_info = f"lines {annotation.start_line}-{annotation.end_line}"
            lines.append(
                f"   [{annotation.annotation_level.value.upper()}] "
                f"[{annotation.title}] ({line_info})"
            )
            lines.append(f"      {annotation.message}")
            lines.append("")

    if outcome.summary is not None:
        lines.append(f"Conclusion: {outcome.summary.conclusion.value}")
        lines.append(outcome.summary.summary)
    if outcome.error:
        lines.append(f"Error: {outcome.error}")
    if outcome.close_error:
        lines.append(f"Check run was not closed: {outcome.close_error}")
    lines.append("")

    metrics = outcome.metrics
    lines.append("=" * 70)
    lines.append("RUN METRICS")
    lines.append("=" * 70)
    lines.append(f"Final state: {outcome.state.value}")
    lines.append(f"Elapsed time: {metrics.elapsed_seconds:.2f}s")
    if metrics.files_requested is None:
        lines.append("Files requested: all")
    else:
        lines.append(f"Files requested: {metrics.files_requested}")
    lines.append(f"Files inspected: {metrics.files_inspected}")
    lines.append(f"Offenses found: {metrics.offenses_found}")
    lines.append(f"Annotations posted: {metrics.annotations_posted}")
    lines.append(f"API calls made: {metrics.api_calls_made}")
    lines.append(f"Exit code: {outcome.exit_code}")
    lines.append("")

    return "\n".join(lines)


def format_json_report(outcome: RunOutcome) -> str:
    """Format a run as JSON.

    Args:
        outcome: Finished run

    Returns:
        JSON string
    """
    summary = None
    if outcome.summary is not None:
        summary = {
            "conclusion": outcome.summary.conclusion.value,
            "title": outcome.summary.title,
            "summary": outcome.summary.summary,
        }

    report = {
        "state": outcome.state.value,
        "exit_code": outcome.exit_code,
        "check_run_id": outcome.check_run_id,
        "check_run_closed": outcome.check_run_closed,
        "annotations": [a.to_payload() for a in outcome.annotations],
        "summary": summary,
        "error": outcome.error,
        "close_error": outcome.close_error,
        "metrics": outcome.metrics.to_dict(),
    }

    return json.dumps(report, indent=2)
