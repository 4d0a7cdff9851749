"""Slot: per-signature storage cell of the current composed callable."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from decorum.domain.model.binding import DecoratorBinding
    from decorum.domain.model.decorated_callable import DecoratedCallable
    from decorum.domain.model.signature import SignatureKey


@dataclass(slots=True, eq=False)
class Slot:
    """Mutable cell owned by one method of one declaring type.

    Mutated only while weaving; read by the method's entry point afterwards.
    Compared by identity.

    Attributes:
        key: Structured signature key
        field_name: Unique textual name within the declaring type
        owner: Identity tag of the owning method (its original body)
        current: Latest composed callable
        applied: Number of decorators applied so far
    """

    key: SignatureKey
    field_name: str
    owner: object
    current: DecoratedCallable
    applied: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.field_name:
            raise ValueError("field_name must not be empty")
        if self.applied < 0:
            raise ValueError(f"applied must be >= 0, got {self.applied}")

    @property
    def name(self) -> str:
        """Method name."""
        return self.key.name

    def apply(self, binding: DecoratorBinding) -> DecoratedCallable:
        """Wrap the current callable and store the result."""
        self.current = self.current.decorate_with(binding)
        self.applied += 1
        return self.current

    def invoke(self, args: Sequence[object]) -> object:
        """Call the current callable."""
        return self.current.invoke(args)

    def invoke_on(self, receiver: object, args: Sequence[object]) -> object:
        """Call the current callable with receiver bound as self/cls."""
        return self.current.invoke_on(receiver, args)
