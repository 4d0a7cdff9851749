"""Tests for reporters/json_reporter.py."""

import io
import json

from decorum.application.reporters.json_reporter import JSONReporter
from decorum.domain.model.enums import DiagnosticCode, Severity
from tests.factories import make_diagnostic, make_location


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_empty(self) -> None:
        """Empty report passes with zero counts."""
        output = io.StringIO()
        JSONReporter(output).report(())

        data = json.loads(output.getvalue())
        assert data == {
            "passed": True,
            "summary": {"diagnostic_count": 0, "error_count": 0},
            "diagnostics": [],
        }

    def test_diagnostic_fields(self) -> None:
        """Every diagnostic is serialized with code, severity and location."""
        output = io.StringIO()
        diagnostic = make_diagnostic(
            code=DiagnosticCode.BAD_FACTORY_ARITY,
            message="bad arity",
            location=make_location(line=3),
        )
        JSONReporter(output).report((diagnostic,))

        data = json.loads(output.getvalue())
        assert data["passed"] is False
        assert data["summary"]["error_count"] == 1
        assert data["diagnostics"] == [
            {
                "code": "bad-factory-arity",
                "severity": "ERROR",
                "message": "bad arity",
                "subject": "Host.add",
                "location": {"file": "/test/file.py", "line": 3, "function": None},
            }
        ]

    def test_warning_passes(self) -> None:
        """Warnings are counted but do not fail."""
        output = io.StringIO()
        JSONReporter(output).report((make_diagnostic(severity=Severity.WARNING),))

        data = json.loads(output.getvalue())
        assert data["passed"] is True
        assert data["summary"] == {"diagnostic_count": 1, "error_count": 0}
        assert data["diagnostics"][0]["location"] is None

    def test_compact(self) -> None:
        """indent=None writes a single line."""
        output = io.StringIO()
        JSONReporter(output, indent=None).report((make_diagnostic(),))
        assert output.getvalue().count("\n") == 1
