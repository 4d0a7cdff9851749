"""Composable function value carrying method identity."""

from __future__ import annotations

import contextvars
from typing import TYPE_CHECKING

from decorum.domain.exceptions.composition import (
    FactoryResultError,
    UnboundReceiverError,
)
from decorum.domain.model.enums import MethodKind

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from decorum.domain.model.binding import DecoratorBinding
    from decorum.domain.model.method import MethodRef

# Receiver (self/cls) of the instance or class method call in progress
_receiver: contextvars.ContextVar[object] = contextvars.ContextVar("decorum_receiver")


class DecoratedCallable:
    """The method, as currently composed.

    Immutable linked chain: every decorate_with() returns a new callable
    whose delegate was produced by the decorator factory from this one.
    The innermost callable invokes the original body.

    Decorators receive instances of this class as `inner` and call it with
    the positional argument sequence: inner(args). For instance and class
    methods the sequence holds the declared parameters only; the receiver
    is bound per call by invoke_on() and passed to the original body.

    Attributes:
        name: Original method name (same on every layer)
        return_type: Original return type (same on every layer)
        inner: Previous layer, None for the original body
    """

    __slots__ = ("_delegate", "_inner", "_name", "_return_type")

    def __init__(
        self,
        name: str,
        return_type: object,
        delegate: Callable[[Sequence[object]], object],
        inner: DecoratedCallable | None = None,
    ) -> None:
        """Initialize layer.

        Args:
            name: Method name
            return_type: Method return type
            delegate: Callable receiving the argument sequence
            inner: Previous layer

        Raises:
            ValueError: If name is empty
            TypeError: If delegate is not callable
        """
        if not name:
            raise ValueError("name must not be empty")
        if not callable(delegate):
            raise TypeError("delegate must be callable")

        self._name = name
        self._return_type = return_type
        self._delegate = delegate
        self._inner = inner

    @classmethod
    def of(cls, method: MethodRef) -> DecoratedCallable:
        """Wrap the original body of a method.

        The body is called with the argument sequence spread positionally.
        Instance and class methods get the receiver bound by invoke_on()
        in front of it; the sequence itself never contains self/cls.

        Raises (at call time):
            UnboundReceiverError: If an instance or class method body runs
                with no receiver bound
        """
        body = method.body

        if method.kind is MethodKind.STATIC:

            def invoke_body(args: Sequence[object]) -> object:
                return body(*args)

        else:
            qualified_name = method.qualified_name

            def invoke_body(args: Sequence[object]) -> object:
                try:
                    receiver = _receiver.get()
                except LookupError:
                    raise UnboundReceiverError(qualified_name) from None
                return body(receiver, *args)

        return cls(method.name, method.return_type, invoke_body)

    @property
    def name(self) -> str:
        """Original method name."""
        return self._name

    @property
    def return_type(self) -> object:
        """Original return type."""
        return self._return_type

    @property
    def inner(self) -> DecoratedCallable | None:
        """Previous layer in the chain."""
        return self._inner

    @property
    def depth(self) -> int:
        """Number of decorator layers above the original body."""
        depth = 0
        layer = self._inner
        while layer is not None:
            depth += 1
            layer = layer._inner
        return depth

    def invoke(self, args: Sequence[object]) -> object:
        """Forward positional arguments to the delegate.

        Exceptions from decorators or the body propagate unchanged.
        """
        return self._delegate(args)

    def invoke_on(self, receiver: object, args: Sequence[object]) -> object:
        """Invoke with receiver bound as self/cls of the original body.

        The binding lasts for this call only and is restored afterwards,
        so nested and recursive calls on other receivers are unaffected.
        """
        token = _receiver.set(receiver)
        try:
            return self._delegate(args)
        finally:
            _receiver.reset(token)

    def __call__(self, args: Sequence[object]) -> object:
        """Same as invoke(); lets decorators write inner(args)."""
        return self._delegate(args)

    def decorate_with(self, binding: DecoratorBinding) -> DecoratedCallable:
        """Layer a decorator on top of this callable.

        This callable is left untouched and stays usable as the new layer's inner.

        Args:
            binding: Factory plus context

        Returns:
            New callable with the factory's result as delegate

        Raises:
            FactoryResultError: If the factory returned a non-callable
        """
        outer = binding.create(self)
        if not callable(outer):
            raise FactoryResultError(self._name, outer)
        return DecoratedCallable(self._name, self._return_type, outer, inner=self)

    def __repr__(self) -> str:
        return f"DecoratedCallable(name={self._name!r}, depth={self.depth})"
