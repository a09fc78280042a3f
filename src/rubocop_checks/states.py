"""Run lifecycle states and the record of one run."""
from dataclasses import dataclass, field
from enum import Enum

from rubocop_checks.errors import InvalidTransitionError
from rubocop_checks.logging_config import get_logger
from rubocop_checks.metrics import RunMetrics
from rubocop_checks.models import Annotation, CheckSummary, LintReport

logger = get_logger(__name__)


class RunState(str, Enum):
    """Lifecycle states of a check-run job."""

    INIT = "init"
    FILE_SET_RESOLVED = "file_set_resolved"
    CHECK_RUN_OPEN = "check_run_open"
    LINTED = "linted"
    REPORTED = "reported"
    CLOSED = "closed"
    ABORTED_BEFORE_OPEN = "aborted_before_open"
    ABORTED_AFTER_OPEN = "aborted_after_open"


TRANSITIONS: dict[RunState, frozenset[RunState]] = {
    RunState.INIT: frozenset({RunState.FILE_SET_RESOLVED, RunState.ABORTED_BEFORE_OPEN}),
    RunState.FILE_SET_RESOLVED: frozenset(
        {RunState.CHECK_RUN_OPEN, RunState.ABORTED_BEFORE_OPEN}
    ),
    RunState.CHECK_RUN_OPEN: frozenset({RunState.LINTED, RunState.ABORTED_AFTER_OPEN}),
    RunState.LINTED: frozenset({RunState.REPORTED, RunState.ABORTED_AFTER_OPEN}),
    RunState.REPORTED: frozenset({RunState.CLOSED}),
    RunState.CLOSED: frozenset(),
    RunState.ABORTED_BEFORE_OPEN: frozenset(),
    RunState.ABORTED_AFTER_OPEN: frozenset(),
}

TERMINAL_STATES = frozenset(state for state, targets in TRANSITIONS.items() if not targets)


@dataclass
class RunOutcome:
    """Everything a run produced, plus the path it took through the states."""

    state: RunState = RunState.INIT
    history: list[RunState] = field(default_factory=lambda: [RunState.INIT])
    exit_code: int | None = None
    change_set: tuple[str, ...] | None = None
    check_run_id: int | None = None
    report: LintReport | None = None
    summary: CheckSummary | None = None
    annotations: list[Annotation] = field(default_factory=list)
    error: str | None = None
    close_error: str | None = None
    check_run_closed: bool = False
    metrics: RunMetrics = field(default_factory=RunMetrics)

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES

    def advance(self, target: RunState) -> None:
        """Move to ``target``.

        Raises:
            InvalidTransitionError: If the transition table forbids it
        """
        if target not in TRANSITIONS[self.state]:
            raise InvalidTransitionError(self.state.value, target.value)
        logger.info(f"Run state: {self.state.value} -> {target.value}")
        self.state = target
        self.history.append(target)
