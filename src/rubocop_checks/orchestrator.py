"""Main orchestrator driving one check run from file selection to close."""
from datetime import datetime, timezone
from pathlib import Path

from rubocop_checks.annotations import annotations_for_report
from rubocop_checks.api_client import CheckRunClient
from rubocop_checks.change_set import resolve_change_set
from rubocop_checks.config import Config
from rubocop_checks.errors import DiffError, MalformedReportError, RemoteApiError
from rubocop_checks.linter import run_rubocop
from rubocop_checks.logging_config import get_logger
from rubocop_checks.models import CheckSummary, LinterResult
from rubocop_checks.report_parser import parse_report
from rubocop_checks.states import RunOutcome, RunState
from rubocop_checks.summary import (
    build_internal_error_summary,
    build_summary,
    build_unexpected_error_summary,
)
from rubocop_checks.validation import validate_project_root, validate_run_context

logger = get_logger(__name__)

CREATE_FAILED_EXIT_CODE = 1
INTERNAL_ERROR_EXIT_CODE = 1
EMPTY_REPORT = '{"files": [], "summary": {"offense_count": 0, "inspected_file_count": 0}}'


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC timestamp."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def run_lint_check(
    project_root: Path, config: Config, client: CheckRunClient | None = None
) -> RunOutcome:
    """Run RuboCop and report its findings to a GitHub check run.

    Args:
        project_root: Repository root to lint
        config: Configuration with build context
        client: Check run client; one is built from config when omitted

    Returns:
        RunOutcome in a terminal state with the process exit code set

    Raises:
        ValueError: If the project root or build context is invalid
    """
    validate_project_root(project_root)
    validate_run_context(config)

    outcome = RunOutcome()

    try:
        outcome.change_set = resolve_change_set(
            config.changes_only,
            config.base_ref,
            config.head_ref,
            project_root,
            config.exclude,
        )
    except DiffError as e:
        logger.error(f"Could not list changed files: {e}")
        return _abort_before_open(outcome, e.returncode, str(e))

    if outcome.change_set is not None:
        outcome.metrics.files_requested = len(outcome.change_set)
    outcome.advance(RunState.FILE_SET_RESOLVED)

    if client is not None:
        return _run_check(outcome, project_root, config, client)

    # validate_run_context() guarantees these are set
    assert config.repository is not None and config.github_token is not None
    with CheckRunClient(
        repository=config.repository,
        token=config.github_token,
        api_url=config.api_url,
        timeout=config.api_timeout_seconds,
    ) as owned_client:
        return _run_check(outcome, project_root, config, owned_client)


def _run_check(
    outcome: RunOutcome, project_root: Path, config: Config, client: CheckRunClient
) -> RunOutcome:
    assert config.commit_sha is not None

    outcome.metrics.api_calls_made += 1
    try:
        outcome.check_run_id = client.create(config.commit_sha, utc_timestamp(), config.check_name)
    except RemoteApiError as e:
        logger.error(f"Could not create check run: {e}")
        return _abort_before_open(outcome, CREATE_FAILED_EXIT_CODE, str(e))
    outcome.advance(RunState.CHECK_RUN_OPEN)

    try:
        return _lint_and_report(outcome, project_root, config, client)
    except Exception as e:
        # Past REPORTED the close has already been attempted
        if outcome.state not in (RunState.CHECK_RUN_OPEN, RunState.LINTED):
            raise
        logger.exception("Unexpected error after the check run was opened")
        exit_code = outcome.metrics.linter_exit_code
        if exit_code is None:
            exit_code = INTERNAL_ERROR_EXIT_CODE
        return _abort_after_open(
            outcome,
            client,
            build_unexpected_error_summary(f"{type(e).__name__}: {e}", config.check_name),
            exit_code,
            str(e),
        )


def _lint_and_report(
    outcome: RunOutcome, project_root: Path, config: Config, client: CheckRunClient
) -> RunOutcome:
    result = _lint(project_root, outcome.change_set, config)
    outcome.metrics.linter_exit_code = result.exit_code
    outcome.advance(RunState.LINTED)

    try:
        report = parse_report(result.stdout)
    except MalformedReportError as e:
        logger.error(f"{e}; closing check run as failed")
        if result.stderr.strip():
            logger.error(f"rubocop stderr: {result.stderr.strip()}")
        return _abort_after_open(
            outcome,
            client,
            build_internal_error_summary(e.reason, result.exit_code, config.check_name),
            result.exit_code,
            str(e),
        )

    outcome.report = report
    outcome.annotations = annotations_for_report(report)
    outcome.summary = build_summary(report.totals, result.exit_code, config.check_name)
    outcome.metrics.files_inspected = report.totals.inspected_file_count
    outcome.metrics.offenses_found = report.totals.offense_count
    outcome.advance(RunState.REPORTED)

    _close(client, outcome)
    outcome.advance(RunState.CLOSED)
    return _finish(outcome, result.exit_code)


def _lint(project_root: Path, files: tuple[str, ...] | None, config: Config) -> LinterResult:
    """Run the linter, or short-circuit when no changed file is left."""
    if files is not None and not files:
        logger.info("No changed files to lint, skipping rubocop")
        return LinterResult(stdout=EMPTY_REPORT, exit_code=0, files=files)

    if not config.show_progress:
        return run_rubocop(project_root, files, config.rubocop_command, config.force_exclusion)

    from rich.console import Console

    with Console(stderr=True).status("[bold blue]Running rubocop..."):
        return run_rubocop(project_root, files, config.rubocop_command, config.force_exclusion)


def _close(client: CheckRunClient, outcome: RunOutcome) -> None:
    """Close the check run; a failure here is logged, never raised."""
    assert outcome.check_run_id is not None and outcome.summary is not None
    try:
        requests_made = client.close(outcome.check_run_id, outcome.summary, outcome.annotations)
    except RemoteApiError as e:
        outcome.metrics.api_calls_made += e.requests_made
        outcome.close_error = str(e)
        logger.error(
            f"Could not close check run {outcome.check_run_id}, "
            f"it may stay in progress: {e}"
        )
        return

    outcome.metrics.api_calls_made += requests_made
    outcome.metrics.annotations_posted = len(outcome.annotations)
    outcome.check_run_closed = True


def _abort_after_open(
    outcome: RunOutcome,
    client: CheckRunClient,
    summary: CheckSummary,
    exit_code: int,
    error: str,
) -> RunOutcome:
    """Close the open check run as failed, without annotations."""
    outcome.error = error
    outcome.summary = summary
    outcome.annotations = []
    outcome.advance(RunState.ABORTED_AFTER_OPEN)
    _close(client, outcome)
    return _finish(outcome, exit_code)


def _abort_before_open(outcome: RunOutcome, exit_code: int, error: str) -> RunOutcome:
    outcome.error = error
    outcome.advance(RunState.ABORTED_BEFORE_OPEN)
    return _finish(outcome, exit_code)


def _finish(outcome: RunOutcome, exit_code: int) -> RunOutcome:
    outcome.exit_code = exit_code
    outcome.metrics.finish()
    return outcome
