"""Tests for presentation/api/weaving.py."""

import pytest

from decorum import (
    Annotation,
    ClassWeaver,
    Decorated,
    DecoratorConfigurationError,
    WeaverConfig,
    annotate,
    default_weaver,
    method_decorator,
    slot_of,
    weave,
)
from decorum.presentation.api import weaving
from tests.factories import AddOne, Double, Negate, TimesTen, Unmarked


class TestWeaveDecorator:
    """Tests for weave()."""

    def test_bare(self) -> None:
        """@weave uses the default weaver."""

        @weave
        class Calc:
            @Double()
            def add(self, a: int, b: int) -> int:
                return a + b

        assert Calc().add(2, 3) == 10
        assert slot_of(Calc, "add") is not None

    def test_with_weaver(self) -> None:
        """@weave(weaver=...) reports into the given weaver."""
        weaver = ClassWeaver()

        @weave(weaver=weaver)
        class Calc:
            @Unmarked()
            def add(self, a: int, b: int) -> int:
                return a + b

        assert len(weaver.diagnostics) == 1
        assert Calc().add(2, 3) == 5

    def test_annotate_then_reweave(self) -> None:
        """annotate() plus weave() adds an outer layer."""
        weaver = ClassWeaver()

        @weave(weaver=weaver)
        class Calc:
            @AddOne()
            def f(self, x: int) -> int:
                return x

        annotate(Calc, "f", TimesTen(), weaver=weaver)
        weave(Calc, weaver=weaver)
        assert Calc().f(3) == 40

    def test_slot_of_unwoven(self) -> None:
        """slot_of() is None for plain methods."""

        class Calc:
            def add(self, a, b):
                return a + b

        assert slot_of(Calc, "add") is None


class TestDefaultWeaver:
    """Tests for default_weaver()."""

    def test_singleton(self) -> None:
        """Repeated calls return the same weaver."""
        assert default_weaver() is default_weaver()

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """First use configures strict mode from DECORUM_STRICT."""
        monkeypatch.setattr(weaving, "_default_weaver", None)
        monkeypatch.setenv("DECORUM_STRICT", "1")
        assert default_weaver().config.strict is True


class TestDecorated:
    """Tests for the Decorated base class."""

    def test_subclass_woven_on_definition(self) -> None:
        """Subclasses are woven as soon as they are defined."""

        class Calc(Decorated):
            @Negate()
            @Double()
            def add(self, a: int, b: int) -> int:
                return a + b

        assert Calc().add(2, 3) == -10

    def test_weaver_keyword_inherited(self) -> None:
        """The weaver chosen by a class is used for its subclasses."""
        weaver = ClassWeaver()

        class Service(Decorated, weaver=weaver):
            @Unmarked()
            def run(self) -> None:
                return None

        class SubService(Service):
            @Unmarked()
            def stop(self) -> None:
                return None

        assert SubService.__decorum_weaver__ is weaver
        assert len(weaver.diagnostics) == 2

    def test_strict_weaver_raises_at_definition(self) -> None:
        """A strict weaver rejects the class definition."""
        weaver = ClassWeaver(WeaverConfig(strict=True))

        with pytest.raises(DecoratorConfigurationError):

            class Broken(Decorated, weaver=weaver):
                @Unmarked()
                def run(self) -> None:
                    return None

    def test_context_factory(self) -> None:
        """(inner, context) factories read annotation values."""

        def times(inner, context):
            return lambda args: inner(args) * context.annotation.times

        @method_decorator(times)
        class Times(Annotation):
            pass

        class Calc(Decorated):
            @Times(times=4)
            def one(self) -> int:
                return 1

        assert Calc().one() == 4
