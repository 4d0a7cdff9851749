"""Tests for domain/model/annotation.py."""

import pytest

from decorum.domain.model.annotation import (
    ANNOTATIONS_ATTR,
    Annotation,
    DecoratorDeclaration,
    annotations_of,
    declaration_of,
    method_decorator,
)
from tests.factories import AddOne, Double, Host, TimesTen, Unmarked


class Retry(Annotation):
    pass


class TestAnnotationValues:
    def test_values_as_attributes(self) -> None:
        usage = Retry(times=3, delay=0.5)
        assert usage.times == 3
        assert usage.delay == 0.5

    def test_values_mapping_is_read_only(self) -> None:
        usage = Retry(times=3)
        with pytest.raises(TypeError):
            usage.values["times"] = 4  # type: ignore[index]

    def test_missing_value_raises(self) -> None:
        with pytest.raises(AttributeError, match="Retry usage has no value 'times'"):
            Retry().times  # noqa: B018

    def test_private_name_raises(self) -> None:
        with pytest.raises(AttributeError):
            Retry()._missing  # noqa: B018

    def test_name(self) -> None:
        assert Retry().name == "Retry"

    def test_repr(self) -> None:
        assert repr(Retry(times=3)) == "Retry(times=3)"


class TestAnnotationOccurrences:
    def test_records_in_application_order(self) -> None:
        @TimesTen()
        @AddOne()
        def body(x):
            return x

        assert [type(a) for a in annotations_of(body)] == [AddOne, TimesTen]

    def test_returns_function_unchanged(self) -> None:
        def body():
            return None

        assert AddOne()(body) is body

    def test_same_type_repeated(self) -> None:
        first, second = Double(), Double()

        @second
        @first
        def body():
            return None

        assert annotations_of(body) == (first, second)

    def test_unwraps_staticmethod(self) -> None:
        def body():
            return None

        wrapped = staticmethod(body)
        assert AddOne()(wrapped) is wrapped
        assert len(getattr(body, ANNOTATIONS_ATTR)) == 1
        assert annotations_of(wrapped) == annotations_of(body)

    def test_non_callable_raises(self) -> None:
        with pytest.raises(TypeError, match="can only annotate functions"):
            AddOne()(42)

    def test_unannotated_function(self) -> None:
        def body():
            return None

        assert annotations_of(body) == ()


class TestMethodDecorator:
    def test_marks_annotation_type(self) -> None:
        declaration = declaration_of(Double)
        assert declaration is not None
        assert not declaration.is_class

    def test_unmarked_has_no_declaration(self) -> None:
        assert declaration_of(Unmarked) is None

    def test_declaration_is_inherited(self) -> None:
        class LoudDouble(Double):
            pass

        assert declaration_of(LoudDouble) is declaration_of(Double)

    def test_baggage(self) -> None:
        @method_decorator(lambda inner, context: inner, baggage={"level": 2})
        class Traced(Annotation):
            pass

        assert declaration_of(Traced).baggage == {"level": 2}

    def test_rejects_plain_class(self) -> None:
        with pytest.raises(TypeError, match="only mark Annotation subclasses"):
            method_decorator(lambda inner: inner)(Host)

    def test_rejects_non_callable_reference(self) -> None:
        with pytest.raises(TypeError, match="decorator reference must be callable"):
            method_decorator(42)  # type: ignore[arg-type]


class TestDecoratorDeclaration:
    def test_function_reference_is_factory(self) -> None:
        def factory(inner):
            return inner

        declaration = DecoratorDeclaration(reference=factory)
        assert declaration.resolve_factory(Host) is factory

    def test_class_reference_instantiated_with_owner(self) -> None:
        class Memoize:
            def __init__(self, owner):
                self.owner = owner

            def __call__(self, inner):
                return inner

        declaration = DecoratorDeclaration(reference=Memoize)
        factory = declaration.resolve_factory(Host)
        assert declaration.is_class
        assert isinstance(factory, Memoize)
        assert factory.owner is Host
