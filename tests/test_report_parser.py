import copy
import json

import pytest

from rubocop_checks.errors import MalformedReportError
from rubocop_checks.models import Severity
from rubocop_checks.report_parser import parse_report

REPORT = {
    "metadata": {"rubocop_version": "1.60.0"},
    "files": [
        {
            "path": "a.rb",
            "offenses": [
                {
                    "severity": "warning",
                    "message": "Line too long",
                    "cop_name": "Layout/LineLength",
                    "corrected": False,
                    "location": {
                        "start_line": 3,
                        "last_line": 3,
                        "start_column": 1,
                        "last_column": 5,
                        "length": 5,
                    },
                }
            ],
        },
        {"path": "b.rb", "offenses": []},
    ],
    "summary": {"offense_count": 1, "target_file_count": 2, "inspected_file_count": 2},
}


def test_parse_report():
    """Test decoding a well-formed report."""
    report = parse_report(json.dumps(REPORT))

    assert [f.path for f in report.files] == ["a.rb", "b.rb"]
    assert report.totals.offense_count == 1
    assert report.totals.inspected_file_count == 2

    offense = report.files[0].offenses[0]
    assert offense.start_line == 3
    assert offense.end_line == 3
    assert offense.start_column == 1
    assert offense.end_column == 5
    assert offense.severity is Severity.WARNING
    assert offense.message == "Line too long"
    assert offense.rule_id == "Layout/LineLength"
    assert report.files[1].offenses == ()


def test_parse_report_without_columns():
    """Test that column fields are optional."""
    data = copy.deepcopy(REPORT)
    location = data["files"][0]["offenses"][0]["location"]
    del location["start_column"]
    del location["last_column"]

    offense = parse_report(json.dumps(data)).files[0].offenses[0]

    assert offense.start_column is None
    assert offense.end_column is None


def test_parse_report_empty_files():
    """Test a clean report with no files listed."""
    report = parse_report(
        '{"files": [], "summary": {"offense_count": 0, "inspected_file_count": 3}}'
    )

    assert report.files == ()
    assert report.totals.inspected_file_count == 3
    assert report.offense_total == 0


@pytest.mark.parametrize(
    "raw",
    ['{"files": [{"path": "a.rb", "offe', "not json at all", "[]", "null"],
)
def test_parse_report_rejects_invalid_documents(raw):
    """Test that truncated or non-object output is rejected."""
    with pytest.raises(MalformedReportError):
        parse_report(raw)


@pytest.mark.parametrize("raw", ["", "   \n"])
def test_parse_report_rejects_empty_output(raw):
    """Test that empty linter output is rejected."""
    with pytest.raises(MalformedReportError, match="no output"):
        parse_report(raw)


@pytest.mark.parametrize(
    "path",
    [
        ("files",),
        ("summary",),
        ("summary", "offense_count"),
        ("summary", "inspected_file_count"),
        ("files", 0, "path"),
        ("files", 0, "offenses"),
        ("files", 0, "offenses", 0, "severity"),
        ("files", 0, "offenses", 0, "message"),
        ("files", 0, "offenses", 0, "cop_name"),
        ("files", 0, "offenses", 0, "location"),
        ("files", 0, "offenses", 0, "location", "start_line"),
        ("files", 0, "offenses", 0, "location", "last_line"),
    ],
)
def test_parse_report_rejects_missing_required_field(path):
    """Test that every required field is enforced, never defaulted."""
    data = copy.deepcopy(REPORT)
    target = data
    for key in path[:-1]:
        target = target[key]
    del target[path[-1]]

    with pytest.raises(MalformedReportError) as exc_info:
        parse_report(json.dumps(data))

    assert str(path[-1]) in exc_info.value.reason


def test_parse_report_rejects_unknown_severity():
    """Test that severities outside RuboCop's taxonomy are rejected."""
    data = copy.deepcopy(REPORT)
    data["files"][0]["offenses"][0]["severity"] = "catastrophic"

    with pytest.raises(MalformedReportError, match="severity"):
        parse_report(json.dumps(data))


def test_parse_report_rejects_inverted_line_range():
    """Test that last_line before start_line is rejected."""
    data = copy.deepcopy(REPORT)
    data["files"][0]["offenses"][0]["location"]["last_line"] = 1

    with pytest.raises(MalformedReportError, match="last_line"):
        parse_report(json.dumps(data))


def test_parse_report_rejects_negative_totals():
    """Test that negative summary counts are rejected."""
    data = copy.deepcopy(REPORT)
    data["summary"]["offense_count"] = -1

    with pytest.raises(MalformedReportError, match="offense_count"):
        parse_report(json.dumps(data))


@pytest.mark.parametrize(
    "path,value",
    [
        (("files", 0, "offenses", 0, "location", "start_line"), "3"),
        (("files", 0, "offenses", 0, "location", "last_line"), 3.0),
        (("files", 0, "offenses", 0, "location", "start_column"), "1"),
        (("files", 0, "offenses", 0, "message"), 42),
        (("files", 0, "path"), ["a.rb"]),
        (("summary", "offense_count"), True),
        (("summary", "inspected_file_count"), "1"),
    ],
)
def test_parse_report_rejects_wrong_types(path, value):
    """Test that mistyped values are rejected rather than coerced."""
    data = copy.deepcopy(REPORT)
    target = data
    for key in path[:-1]:
        target = target[key]
    target[path[-1]] = value

    with pytest.raises(MalformedReportError) as exc_info:
        parse_report(json.dumps(data))

    assert str(path[-1]) in exc_info.value.reason
