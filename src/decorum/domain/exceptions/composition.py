"""Composition exceptions."""

from __future__ import annotations

from decorum.domain.exceptions.base import DecorumError


class FactoryResultError(DecorumError, TypeError):
    """Decorator factory returned something that cannot be called.

    Attributes:
        method_name: Name of the method being decorated
        result: Value returned by the factory
    """

    def __init__(self, method_name: str, result: object) -> None:
        if not method_name:
            raise ValueError("method_name must not be empty")

        self.method_name = method_name
        self.result = result
        super().__init__(
            f"decorator for '{method_name}' returned non-callable {type(result).__name__}"
        )


class SlotCollisionError(DecorumError, RuntimeError):
    """Slot field name probing did not terminate.

    Internal invariant violation: every probe adds a marker to a name
    unused by a finite set of slots, so probing must end.

    Attributes:
        field_name: Last probed field name
        attempts: Number of probes made
    """

    def __init__(self, field_name: str, attempts: int) -> None:
        self.field_name = field_name
        self.attempts = attempts
        super().__init__(
            f"slot name probing exhausted after {attempts} attempt(s) at '{field_name}'"
        )


class UnboundReceiverError(DecorumError, RuntimeError):
    """Innermost layer of an instance or class method ran outside a call.

    The receiver (self/cls) is bound only while the method's entry point
    runs. An inner callable kept by a decorator and invoked afterwards, or
    from a thread that did not copy the caller's context, has none.

    Attributes:
        method_name: Qualified name of the method
    """

    def __init__(self, method_name: str) -> None:
        if not method_name:
            raise ValueError("method_name must not be empty")

        self.method_name = method_name
        super().__init__(
            f"'{method_name}' was invoked without a receiver; "
            "call it through the class or run inner inside the caller's context"
        )
