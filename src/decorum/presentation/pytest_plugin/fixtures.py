"""pytest fixtures for testing decorated classes.

Each test gets its own weaver and collector, so diagnostics and woven
state never leak between tests.
"""

from __future__ import annotations

import pytest

from decorum.application.diagnostics import DiagnosticCollector
from decorum.domain.model.configuration import WeaverConfig
from decorum.infrastructure.weaver import ClassWeaver

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _get_ini_flag(config: pytest.Config, name: str) -> bool:
    """Read a boolean ini option.

    Args:
        config: pytest Config object
        name: ini option name

    Returns:
        True if the option is set to a truthy string
    """
    value = config.getini(name)
    return str(value).strip().lower() in _TRUTHY


@pytest.fixture
def decorum_config(request: pytest.FixtureRequest) -> WeaverConfig:
    """Weaver configuration for tests.

    Reads decorum_strict from pytest.ini or pyproject.toml.
    Override in conftest.py for custom settings.
    """
    return WeaverConfig(strict=_get_ini_flag(request.config, "decorum_strict"))


@pytest.fixture
def decorum_diagnostics() -> DiagnosticCollector:
    """Empty diagnostic collector."""
    return DiagnosticCollector()


@pytest.fixture
def decorum_weaver(
    decorum_config: WeaverConfig,
    decorum_diagnostics: DiagnosticCollector,
) -> ClassWeaver:
    """Isolated weaver reporting into decorum_diagnostics."""
    return ClassWeaver(config=decorum_config, diagnostics=decorum_diagnostics)
