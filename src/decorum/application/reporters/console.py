"""Console reporter: diagnostics → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from decorum.domain.model.enums import Severity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from decorum.domain.model.diagnostic import Diagnostic

_SEVERITY_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_locations: Add a source location column.
        min_severity: Skip diagnostics less severe than this. None = show all.
        width: Console width in characters.
    """

    show_locations: bool = True
    min_severity: Severity | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format diagnostics as rich formatted string.

        Args:
            diagnostics: Diagnostics to format.

        Returns:
            Formatted string with colors and a table.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        items = self._filter(diagnostics)

        console.print()
        console.rule("[bold]DECORATOR DIAGNOSTICS[/bold]")
        console.print()
        errors = sum(1 for d in items if d.severity is Severity.ERROR)
        console.print(f"[bold]Diagnostics:[/bold] {len(items)} (errors: {errors})")
        console.print()

        if items:
            console.print(self._table(items))
            console.print()

        return output.getvalue()

    def _filter(self, diagnostics: Iterable[Diagnostic]) -> tuple[Diagnostic, ...]:
        """Drop diagnostics below min_severity (ERROR > WARNING > INFO)."""
        min_severity = self._config.min_severity
        if min_severity is None:
            return tuple(diagnostics)
        order = (Severity.ERROR, Severity.WARNING, Severity.INFO)
        limit = order.index(min_severity)
        return tuple(d for d in diagnostics if order.index(d.severity) <= limit)

    def _table(self, items: tuple[Diagnostic, ...]) -> Table:
        """Build diagnostics table."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Severity")
        table.add_column("Code")
        table.add_column("Method")
        table.add_column("Message")
        if self._config.show_locations:
            table.add_column("Location")

        for diagnostic in items:
            style = _SEVERITY_STYLES[diagnostic.severity]
            row = [
                f"[{style}]{diagnostic.severity.name}[/{style}]",
                diagnostic.code.value,
                diagnostic.subject or "-",
                diagnostic.message,
            ]
            if self._config.show_locations:
                row.append(str(diagnostic.location) if diagnostic.location else "-")
            table.add_row(*row)
        return table
