"""Tests for the decorum pytest plugin fixtures."""

import pytest

from decorum.application.diagnostics import DiagnosticCollector
from decorum.domain.model.configuration import WeaverConfig
from decorum.infrastructure.weaver import ClassWeaver
from tests.factories import Double, Unmarked


class TestFixtures:
    """Fixtures provided by decorum.presentation.pytest_plugin."""

    def test_config_defaults_to_lenient(self, decorum_config: WeaverConfig) -> None:
        """decorum_strict ini option defaults to false."""
        assert decorum_config.strict is False

    def test_diagnostics_start_empty(self, decorum_diagnostics: DiagnosticCollector) -> None:
        """Each test gets an empty collector."""
        assert len(decorum_diagnostics) == 0

    @pytest.mark.decorum
    def test_weaver_reports_into_fixture(
        self,
        decorum_weaver: ClassWeaver,
        decorum_diagnostics: DiagnosticCollector,
    ) -> None:
        """decorum_weaver shares decorum_diagnostics."""

        class Calc:
            @Double()
            @Unmarked()
            def add(self, a: int, b: int) -> int:
                return a + b

        decorum_weaver.weave(Calc)
        assert Calc().add(2, 3) == 10
        assert decorum_weaver.diagnostics is decorum_diagnostics
        assert len(decorum_diagnostics.errors) == 1


class TestPluginHooks:
    """Hooks registered by the plugin."""

    def test_marker_registered(self, pytestconfig: pytest.Config) -> None:
        """The decorum marker is declared."""
        markers = pytestconfig.getini("markers")
        assert any(line.startswith("decorum:") for line in markers)

    def test_strict_option_registered(self, pytestconfig: pytest.Config) -> None:
        """decorum_strict is a known ini option."""
        assert pytestconfig.getini("decorum_strict") == "false"
