"""pytest plugin for decorum.

Provides fixtures:
    decorum_config: WeaverConfig (override in conftest.py)
    decorum_diagnostics: Fresh DiagnosticCollector
    decorum_weaver: ClassWeaver bound to the two fixtures above

Configuration (pytest.ini or pyproject.toml):
    decorum_strict: Raise on configuration errors while weaving (default: false)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from decorum.presentation.pytest_plugin.fixtures import (
    decorum_config,
    decorum_diagnostics,
    decorum_weaver,
)

if TYPE_CHECKING:
    import pytest

__all__ = [
    "decorum_config",
    "decorum_diagnostics",
    "decorum_weaver",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "decorum_strict",
        "Raise DecoratorConfigurationError when weaving reports errors",
        default="false",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "decorum: mark test as exercising woven decorators",
    )
