"""Method reference handed from the weaver to the composition engine."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from decorum.domain.model.enums import MethodKind
from decorum.domain.model.signature import SignatureKey

if TYPE_CHECKING:
    from decorum.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class MethodRef:
    """A method declaration as seen at weaving time.

    Attributes:
        declaring_type: Class that declares the method
        name: Method name
        body: Original function, captured before any rewriting
        parameter_types: Parameter types in declaration order, implicit self/cls excluded
        return_type: Return type, None if unannotated
        kind: INSTANCE/CLASS/STATIC
        location: Source location, None if unknown
    """

    declaring_type: type
    name: str
    body: Callable[..., object]
    parameter_types: tuple[object, ...] = ()
    return_type: object = None
    kind: MethodKind = MethodKind.INSTANCE
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.declaring_type, type):
            raise TypeError(
                f"declaring_type must be a class, got {type(self.declaring_type).__name__}"
            )
        if not self.name:
            raise ValueError("method name must not be empty")
        if not callable(self.body):
            raise TypeError(f"body of '{self.name}' must be callable")
        if not isinstance(self.parameter_types, tuple):
            raise TypeError("parameter_types must be tuple")

    @property
    def identity(self) -> object:
        """Owner tag of the method's slot: the original body."""
        return self.body

    @property
    def key(self) -> SignatureKey:
        """Structured signature key."""
        return SignatureKey(self.name, self.parameter_types)

    @property
    def qualified_name(self) -> str:
        """Class.method name."""
        return f"{self.declaring_type.__qualname__}.{self.name}"
