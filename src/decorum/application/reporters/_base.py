"""Base reporter class for diagnostic output.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from decorum.domain.model.diagnostic import Diagnostic


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Example:
        class CountReporter(BaseReporter):
            def report(self, diagnostics: Iterable[Diagnostic]) -> None:
                print(f"Diagnostics: {len(tuple(diagnostics))}")
    """

    @abstractmethod
    def report(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Report diagnostics.

        Args:
            diagnostics: Diagnostics in reporting order
        """
