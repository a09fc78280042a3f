"""rubocop-checks: publish RuboCop offenses as GitHub check runs."""

from rubocop_checks.__version__ import __version__
from rubocop_checks.api_client import CheckRunClient
from rubocop_checks.config import Config, get_default_config, load_config
from rubocop_checks.errors import DiffError, MalformedReportError, RemoteApiError
from rubocop_checks.models import Annotation, LintReport, Offense
from rubocop_checks.orchestrator import run_lint_check
from rubocop_checks.states import RunOutcome, RunState

__all__ = [
    "__version__",
    "Annotation",
    "CheckRunClient",
    "Config",
    "DiffError",
    "LintReport",
    "MalformedReportError",
    "Offense",
    "RemoteApiError",
    "RunOutcome",
    "RunState",
    "get_default_config",
    "load_config",
    "run_lint_check",
]
