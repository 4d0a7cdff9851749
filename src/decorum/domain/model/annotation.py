"""Annotation model.

An annotation type is an Annotation subclass; a usage is an instance
carrying literal values. Marking the type with @method_decorator makes it
decorator-capable:

    @method_decorator(lambda inner: lambda args: inner(args) * 2)
    class Double(Annotation):
        pass

    class Calc:
        @Double()
        def add(self, a, b): ...

Occurrences are recorded on the function in application order. Python
applies stacked decorators bottom-up, so the bottom-most annotation is
discovered first and ends up innermost.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Mapping

ANNOTATIONS_ATTR = "__decorum_annotations__"
DECLARATION_ATTR = "__decorum_decorator__"

A = TypeVar("A", bound=type)
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class DecoratorDeclaration:
    """Decorator reference declared by an annotation type.

    Attributes:
        reference: Factory callable, or a class instantiated with the declaring type
        baggage: Extra value passed to (inner, context) factories
    """

    reference: Callable[..., object]
    baggage: object = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not callable(self.reference):
            raise TypeError(
                f"decorator reference must be callable, got {type(self.reference).__name__}"
            )

    @property
    def is_class(self) -> bool:
        """Reference is a reusable decorator class."""
        return isinstance(self.reference, type)

    def resolve_factory(self, owner: type) -> Callable[..., object]:
        """Factory for one annotation occurrence on a method of owner."""
        if self.is_class:
            return self.reference(owner)
        return self.reference


class Annotation:
    """Base class of annotation types.

    Keyword arguments of a usage are its literal values,
    readable as attributes: Retry(times=3).times == 3.
    """

    def __init__(self, **values: object) -> None:
        self._values: Mapping[str, object] = MappingProxyType(dict(values))

    @property
    def values(self) -> Mapping[str, object]:
        """Literal values of this usage."""
        return self._values

    @property
    def name(self) -> str:
        """Annotation type name."""
        return type(self).__qualname__

    def __getattr__(self, name: str) -> object:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} usage has no value '{name}'"
            ) from None

    def __call__(self, func: F) -> F:
        """Record this occurrence on func and return func unchanged."""
        target = _unwrap_descriptor(func)
        if not callable(target):
            raise TypeError(f"{self.name} can only annotate functions")
        setattr(target, ANNOTATIONS_ATTR, (*annotations_of(target), self))
        return func

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"{self.name}({args})"


def method_decorator(
    reference: Callable[..., object],
    *,
    baggage: object = None,
) -> Callable[[A], A]:
    """Mark an annotation type as decorator-capable.

    Args:
        reference: Factory callable or decorator class
        baggage: Extra value passed to (inner, context) factories

    Returns:
        Class decorator for Annotation subclasses
    """
    declaration = DecoratorDeclaration(reference=reference, baggage=baggage)

    def mark(annotation_type: A) -> A:
        if not (isinstance(annotation_type, type) and issubclass(annotation_type, Annotation)):
            raise TypeError("@method_decorator can only mark Annotation subclasses")
        setattr(annotation_type, DECLARATION_ATTR, declaration)
        return annotation_type

    return mark


def declaration_of(annotation_type: type) -> DecoratorDeclaration | None:
    """Decorator declaration of an annotation type, None if unmarked."""
    declaration = getattr(annotation_type, DECLARATION_ATTR, None)
    if isinstance(declaration, DecoratorDeclaration):
        return declaration
    return None


def annotations_of(func: object) -> tuple[Annotation, ...]:
    """Annotation occurrences of func in discovery order."""
    return tuple(getattr(_unwrap_descriptor(func), ANNOTATIONS_ATTR, ()))


def _unwrap_descriptor(func: object) -> object:
    if isinstance(func, (staticmethod, classmethod)):
        return func.__func__
    return func
