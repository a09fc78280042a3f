"""Run metrics."""
import time
from dataclasses import dataclass, field


@dataclass
class RunMetrics:
    """Metrics collected during one check run."""

    # Timing
    start_time: float = field(default_factory=time.time)
    end_time: float | None = None

    # Files
    files_requested: int | None = None
    files_inspected: int = 0

    # Findings
    offenses_found: int = 0
    annotations_posted: int = 0

    # API calls
    api_calls_made: int = 0

    linter_exit_code: int | None = None

    def finish(self) -> None:
        """Mark the run as finished."""
        self.end_time = time.time()

    @property
    def elapsed_seconds(self) -> float:
        """Get elapsed time in seconds."""
        end = self.end_time or time.time()
        return end - self.start_time

    def to_dict(self) -> dict:
        """Convert metrics to dictionary."""
        return {
            "elapsed_seconds": round(self.elapsed_seconds, 2),
            "files_requested": self.files_requested,
            "files_inspected": self.files_inspected,
            "offenses_found": self.offenses_found,
            "annotations_posted": self.annotations_posted,
            "api_calls_made": self.api_calls_made,
            "linter_exit_code": self.linter_exit_code,
        }
