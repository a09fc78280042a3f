"""RuboCop process invocation."""
import subprocess
from pathlib import Path

from rubocop_checks.logging_config import get_logger
from rubocop_checks.models import LinterResult

logger = get_logger(__name__)

# Conventional shell statuses for "command not found" and "not executable".
COMMAND_NOT_FOUND_EXIT_CODE = 127
COMMAND_NOT_EXECUTABLE_EXIT_CODE = 126
SIGNAL_EXIT_CODE_BASE = 128


def shell_exit_status(returncode: int) -> int:
    """Map a subprocess return code to the status a shell would report.

    A child killed by signal N has a negative return code (-N); shells
    report that as 128 + N.
    """
    if returncode < 0:
        return SIGNAL_EXIT_CODE_BASE - returncode
    return returncode


def build_rubocop_args(
    command: list[str], files: tuple[str, ...] | None, force_exclusion: bool = True
) -> list[str]:
    """Build the argv for a JSON-formatted RuboCop run.

    Explicit files are passed with ``--only-recognized-file-types`` so RuboCop
    itself skips anything it would not lint by default.

    Args:
        command: Base command, e.g. ``["rubocop"]`` or ``["bundle", "exec", "rubocop"]``
        files: Explicit files to lint, or None to let RuboCop pick
        force_exclusion: Apply the project's Exclude config to explicit files

    Returns:
        Argument vector for subprocess
    """
    args = [*command, "--format", "json"]
    if files is not None:
        if force_exclusion:
            args.append("--force-exclusion")
        args.append("--only-recognized-file-types")
        args.extend(files)
    return args


def run_rubocop(
    project_root: Path,
    files: tuple[str, ...] | None,
    command: list[str],
    force_exclusion: bool = True,
) -> LinterResult:
    """Run RuboCop and capture its report.

    A nonzero exit is RuboCop's normal "offenses found" outcome and is not
    raised. A linter that cannot be started is reported as exit status 127
    (missing) or 126 (not executable) with empty output, so it surfaces as an
    unreadable report. Undecodable bytes in the output are replaced rather
    than raised, which leaves the report unparseable as well.

    Args:
        project_root: Directory to run in
        files: Explicit files, or None for the whole project
        command: Base RuboCop command
        force_exclusion: See build_rubocop_args

    Returns:
        LinterResult with stdout, stderr and exit status
    """
    args = build_rubocop_args(command, files, force_exclusion)
    logger.info(f"Running: {' '.join(args)}")

    try:
        result = subprocess.run(
            args,
            cwd=project_root,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        logger.error(f"Could not start linter: {e}")
        if isinstance(e, FileNotFoundError):
            exit_code = COMMAND_NOT_FOUND_EXIT_CODE
        else:
            exit_code = COMMAND_NOT_EXECUTABLE_EXIT_CODE
        return LinterResult(
            stdout="",
            stderr=str(e),
            exit_code=exit_code,
            files=files,
        )

    if result.stderr.strip():
        logger.info(f"rubocop stderr: {result.stderr.strip()}")

    exit_code = shell_exit_status(result.returncode)
    if exit_code != result.returncode:
        logger.warning(f"rubocop was killed by signal {-result.returncode}")

    return LinterResult(
        stdout=result.stdout,
        stderr=result.stderr,
        exit_code=exit_code,
        files=files,
    )
