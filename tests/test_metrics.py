import time

from rubocop_checks.metrics import RunMetrics


def test_metrics_elapsed_time():
    """Test elapsed time is measured until finish()."""
    metrics = RunMetrics()
    time.sleep(0.01)
    metrics.finish()

    elapsed = metrics.elapsed_seconds
    assert elapsed >= 0.01
    assert metrics.elapsed_seconds == elapsed


def test_metrics_to_dict():
    """Test converting metrics to a dict."""
    metrics = RunMetrics(
        files_requested=3,
        files_inspected=3,
        offenses_found=4,
        annotations_posted=4,
        api_calls_made=2,
        linter_exit_code=1,
    )
    metrics.finish()

    data = metrics.to_dict()

    assert data["files_requested"] == 3
    assert data["offenses_found"] == 4
    assert data["annotations_posted"] == 4
    assert data["api_calls_made"] == 2
    assert data["linter_exit_code"] == 1
    assert "elapsed_seconds" in data


def test_metrics_defaults():
    """Test that a fresh run requested no explicit files."""
    metrics = RunMetrics()

    assert metrics.files_requested is None
    assert metrics.api_calls_made == 0
