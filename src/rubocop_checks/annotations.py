"""Translation of lint offenses into check-run annotations."""
from collections.abc import Iterable

from rubocop_checks.models import Annotation, AnnotationLevel, LintReport, Offense, Severity


def annotation_level(severity: Severity) -> AnnotationLevel:
    """Collapse a RuboCop severity onto a Checks annotation level.

    Only ``warning`` stays a warning; refactor, convention, error and fatal
    all become failures.
    """
    if severity is Severity.WARNING:
        return AnnotationLevel.WARNING
    return AnnotationLevel.FAILURE


def map_offense(path: str, offense: Offense) -> Annotation:
    """Build the annotation for a single offense.

    The Checks API rejects column ranges that span lines, so columns are
    only carried over for single-line offenses.
    """
    start_column = end_column = None
    if (
        offense.is_single_line
        and offense.start_column is not None
        and offense.end_column is not None
    ):
        start_column = offense.start_column
        end_column = offense.end_column

    return Annotation(
        path=path,
        start_line=offense.start_line,
        end_line=offense.end_line,
        annotation_level=annotation_level(offense.severity),
        title=offense.rule_id,
        message=offense.message,
        start_column=start_column,
        end_column=end_column,
    )


def map_offenses(path: str, offenses: Iterable[Offense]) -> list[Annotation]:
    """Map every offense of one file, preserving order."""
    return [map_offense(path, offense) for offense in offenses]


def annotations_for_report(report: LintReport) -> list[Annotation]:
    """Map a whole report in file order, then offense order."""
    annotations: list[Annotation] = []
    for file_report in report.files:
        annotations.extend(map_offenses(file_report.path, file_report.offenses))
    return annotations
