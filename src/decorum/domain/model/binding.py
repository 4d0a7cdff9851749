"""Decorator binding: factory plus the context handed to it."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from decorum.domain.exceptions.configuration import FactoryArityError

if TYPE_CHECKING:
    from decorum.domain.model.annotation import Annotation
    from decorum.domain.model.decorated_callable import DecoratedCallable
    from decorum.domain.model.method import MethodRef

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def factory_arity(factory: Callable[..., object]) -> int:
    """Decide how a decorator factory is called.

    Returns 2 when the factory can take (inner, context), otherwise 1.

    Raises:
        FactoryArityError: If neither form is callable
    """
    try:
        signature = inspect.signature(factory)
    except (TypeError, ValueError):
        raise FactoryArityError(factory, None) from None

    required = 0
    accepted = 0
    variadic = False
    for param in signature.parameters.values():
        if param.kind in _POSITIONAL:
            accepted += 1
            if param.default is inspect.Parameter.empty:
                required += 1
        elif param.kind is inspect.Parameter.VAR_POSITIONAL:
            variadic = True
        elif param.kind is inspect.Parameter.KEYWORD_ONLY:
            if param.default is inspect.Parameter.empty:
                raise FactoryArityError(factory, required)

    if required > 2 or (accepted == 0 and not variadic):
        raise FactoryArityError(factory, required)
    if variadic or accepted >= 2:
        return 2
    return 1


@dataclass(frozen=True, slots=True)
class DecoratorContext:
    """What an (inner, context) factory learns about its annotation.

    Attributes:
        annotation: Annotation occurrence with its literal values
        method: Method the annotation sits on
        baggage: Extra value declared by the annotation type
    """

    annotation: Annotation
    method: MethodRef
    baggage: object = None

    @property
    def owner(self) -> type:
        """Declaring type of the method."""
        return self.method.declaring_type


@dataclass(frozen=True, slots=True)
class DecoratorBinding:
    """Instantiated decorator for one annotation occurrence.

    Consumed by exactly one DecoratedCallable.decorate_with() call.

    Attributes:
        factory: (inner) -> outer or (inner, context) -> outer
        context: Passed to two-argument factories
        arity: 1 or 2, computed from the factory signature
    """

    factory: Callable[..., object]
    context: DecoratorContext | None = None
    arity: int = field(init=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not callable(self.factory):
            raise TypeError(f"factory must be callable, got {type(self.factory).__name__}")
        object.__setattr__(self, "arity", factory_arity(self.factory))

    def create(self, inner: DecoratedCallable) -> object:
        """Call the factory with the current callable."""
        if self.arity == 1:
            return self.factory(inner)
        return self.factory(inner, self.context)
