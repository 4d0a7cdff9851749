"""Tests for domain/model/slot.py."""

import pytest

from decorum.domain.model.binding import DecoratorBinding
from decorum.domain.model.decorated_callable import DecoratedCallable
from decorum.domain.model.enums import MethodKind
from decorum.domain.model.slot import Slot
from tests.factories import make_method


def _slot() -> Slot:
    method = make_method()
    return Slot(
        key=method.key,
        field_name="decorating$addintint",
        owner=method.identity,
        current=DecoratedCallable.of(method),
    )


class TestSlot:
    def test_starts_with_original_body(self) -> None:
        slot = _slot()
        assert slot.applied == 0
        assert slot.invoke((2, 3)) == 5

    def test_name_from_key(self) -> None:
        assert _slot().name == "add"

    def test_apply_replaces_current(self) -> None:
        slot = _slot()
        before = slot.current
        after = slot.apply(DecoratorBinding(factory=lambda inner: lambda args: inner(args) * 2))
        assert slot.current is after
        assert after.inner is before
        assert slot.applied == 1
        assert slot.invoke((2, 3)) == 10

    def test_identity_equality(self) -> None:
        assert _slot() != _slot()

    def test_empty_field_name_raises(self) -> None:
        method = make_method()
        with pytest.raises(ValueError, match="field_name must not be empty"):
            Slot(method.key, "", method.identity, DecoratedCallable.of(method))

    def test_negative_applied_raises(self) -> None:
        method = make_method()
        with pytest.raises(ValueError, match="applied must be >= 0"):
            Slot(method.key, "f", method.identity, DecoratedCallable.of(method), applied=-1)

    def test_invoke_on_binds_receiver(self) -> None:
        def describe(self, a, b):
            return (self, a + b)

        method = make_method(body=describe, kind=MethodKind.INSTANCE)
        slot = Slot(
            key=method.key,
            field_name="decorating$addintint",
            owner=method.identity,
            current=DecoratedCallable.of(method),
        )
        receiver = object()
        assert slot.invoke_on(receiver, (2, 3)) == (receiver, 5)
