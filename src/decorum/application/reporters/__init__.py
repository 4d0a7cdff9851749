"""Reporters for weaving diagnostics.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders with rich.
"""

from decorum.application.reporters._base import BaseReporter
from decorum.application.reporters.console import ConsoleConfig, ConsoleReporter
from decorum.application.reporters.json_reporter import JSONReporter
from decorum.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
