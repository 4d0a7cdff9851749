"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from decorum.application.reporters._base import BaseReporter
from decorum.domain.model.enums import Severity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from decorum.domain.model.diagnostic import Diagnostic


class JSONReporter(BaseReporter):
    """JSON reporter for CI/CD integration and tooling."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Report diagnostics as one JSON document.

        Args:
            diagnostics: Diagnostics to serialize
        """
        items = tuple(diagnostics)
        errors = sum(1 for d in items if d.severity is Severity.ERROR)
        data = {
            "passed": errors == 0,
            "summary": {
                "diagnostic_count": len(items),
                "error_count": errors,
            },
            "diagnostics": [self._diagnostic_to_dict(d) for d in items],
        }
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        """Convert Diagnostic to JSON-serializable dict."""
        location: dict[str, object] | None = None
        if diagnostic.location is not None:
            location = {
                "file": str(diagnostic.location.file),
                "line": diagnostic.location.line,
                "function": diagnostic.location.function,
            }
        return {
            "code": diagnostic.code.value,
            "severity": diagnostic.severity.name,
            "message": diagnostic.message,
            "subject": diagnostic.subject,
            "location": location,
        }
