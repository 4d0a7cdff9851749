"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from decorum.application.reporters._base import BaseReporter
from decorum.domain.model.enums import Severity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from decorum.domain.model.diagnostic import Diagnostic


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Report diagnostics as plain text.

        Args:
            diagnostics: Diagnostics to print
        """
        items = tuple(diagnostics)
        errors = sum(1 for d in items if d.severity is Severity.ERROR)

        self._write("=" * 70)
        self._write("Decorator Weaving Diagnostics")
        self._write("=" * 70)
        self._write()
        self._write(f"  Diagnostics: {len(items)}")
        self._write(f"    Errors: {errors}")
        self._write(f"    Other: {len(items) - errors}")

        for i, diagnostic in enumerate(items, start=1):
            self._write()
            self._write(f"{i}. [{diagnostic.severity.name}] {diagnostic.code.value}")
            self._write(f"   {diagnostic.message}")
            if diagnostic.subject is not None:
                self._write(f"   Method: {diagnostic.subject}")
            if diagnostic.location is not None:
                self._write(f"   At: {diagnostic.location}")

        self._write()
        self._write("=" * 70)
        self._write(f"Result: {'FAILED' if errors else 'PASSED'}")
        self._write("=" * 70)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
