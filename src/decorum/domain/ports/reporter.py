"""Reporter protocol for diagnostic output.

Users extend decorum by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from decorum.domain.model.diagnostic import Diagnostic


class ReporterProtocol(Protocol):
    """Contract for diagnostic reporters.

    decorum provides PlainTextReporter, JSONReporter and ConsoleReporter.

    Example:
        class LogReporter:
            def report(self, diagnostics: Iterable[Diagnostic]) -> None:
                for diagnostic in diagnostics:
                    logging.getLogger("weaving").warning("%s", diagnostic)
    """

    def report(self, diagnostics: Iterable[Diagnostic]) -> object:
        """Report diagnostics.

        Implementation decides output format and destination.

        Args:
            diagnostics: Diagnostics in reporting order
        """
        ...
