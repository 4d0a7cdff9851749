"""Diagnostic collection for weaving passes.

Configuration problems are collected here instead of raised, so one bad
annotation never stops the rest of a class from being woven.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from decorum.domain.exceptions.configuration import DecoratorConfigurationError
from decorum.domain.model.diagnostic import Diagnostic
from decorum.domain.model.enums import Severity

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    Severity.ERROR: logging.WARNING,
    Severity.WARNING: logging.WARNING,
    Severity.INFO: logging.INFO,
}


class DiagnosticCollector:
    """Ordered, append-only collection of diagnostics.

    Not thread-safe: weaving is single-threaded.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic.

        Raises:
            TypeError: If diagnostic is not a Diagnostic (FAIL-FIRST)
        """
        if not isinstance(diagnostic, Diagnostic):
            raise TypeError(f"expected Diagnostic, got {type(diagnostic).__name__}")
        self._diagnostics.append(diagnostic)
        logger.log(_LOG_LEVELS[diagnostic.severity], "%s", diagnostic)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """All diagnostics in reporting order."""
        return tuple(self._diagnostics)

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        """Diagnostics with ERROR severity."""
        return tuple(d for d in self._diagnostics if d.severity is Severity.ERROR)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        """Diagnostics with WARNING severity."""
        return tuple(d for d in self._diagnostics if d.severity is Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        """At least one ERROR diagnostic was reported."""
        return any(d.severity is Severity.ERROR for d in self._diagnostics)

    def since(self, mark: int) -> tuple[Diagnostic, ...]:
        """Diagnostics reported after len() returned mark."""
        if mark < 0:
            raise ValueError(f"mark must be >= 0, got {mark}")
        return tuple(self._diagnostics[mark:])

    def clear(self) -> None:
        """Forget all diagnostics."""
        self._diagnostics.clear()

    def raise_for_errors(self) -> None:
        """Raise if any ERROR diagnostic was reported.

        Raises:
            DecoratorConfigurationError: With all error diagnostics
        """
        errors = self.errors
        if errors:
            raise DecoratorConfigurationError(errors)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(tuple(self._diagnostics))

    def __len__(self) -> int:
        return len(self._diagnostics)
