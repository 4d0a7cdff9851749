"""Application layer for decorator composition.

Components:
- registry: Per-type slot registry (SlotRegistry)
- driver: Applies one annotation occurrence at a time (DecoratorApplicationDriver)
- diagnostics: Configuration error collection (DiagnosticCollector)
- reporters: Output formatting (PlainText, JSON, Console)
"""

from decorum.application.diagnostics import DiagnosticCollector
from decorum.application.driver import DecoratorApplicationDriver
from decorum.application.registry import SlotRegistry
from decorum.application.reporters import (
    BaseReporter,
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)

__all__ = [
    # Composition
    "DecoratorApplicationDriver",
    "SlotRegistry",
    # Diagnostics
    "DiagnosticCollector",
    # Reporters
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
