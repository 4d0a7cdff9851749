"""Signature keys for method slots.

A method is identified within its declaring type by name plus the ordered
list of parameter types. Two forms exist:

- build_key(): deterministic text, e.g. "decorating$addintint"
- SignatureKey: structured key with structural equality on the type tuple

Text keys may collide (labels drop module paths); structured keys only
collide for identical types. Resolving collisions is the registry's job.
"""

from __future__ import annotations

import re
import typing
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

KEY_PREFIX = "decorating$"
UNTYPED_LABEL = "Object"
ARRAY_SUFFIX = "Array"

_NON_IDENTIFIER = re.compile(r"\W")


@dataclass(frozen=True, slots=True)
class ArrayOf:
    """Explicit array type: ArrayOf(int) is labeled "intArray".

    Also used for *args parameters, whose values arrive as one sequence.

    Attributes:
        element: Element type (None = untyped)
    """

    element: object = None


def sanitize(name: str) -> str:
    """Replace every non-identifier character with underscore."""
    return _NON_IDENTIFIER.sub("_", name)


def type_label(tp: object) -> str:
    """Short label of a parameter type.

    Args:
        tp: Type, typing construct, forward reference string, ArrayOf, or None

    Returns:
        Label without module path; arrays end with "Array"
    """
    if tp is None:
        return UNTYPED_LABEL
    if isinstance(tp, ArrayOf):
        return type_label(tp.element) + ARRAY_SUFFIX
    if isinstance(tp, str):
        return sanitize(tp.rsplit(".", 1)[-1])
    if tp is list or tp is tuple:
        return UNTYPED_LABEL + ARRAY_SUFFIX

    origin = typing.get_origin(tp)
    if origin is not None:
        args = typing.get_args(tp)
        if origin is list:
            return type_label(args[0] if args else None) + ARRAY_SUFFIX
        if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
            return type_label(args[0]) + ARRAY_SUFFIX
        return type_label(origin)

    name = getattr(tp, "__qualname__", None) or getattr(tp, "__name__", None) or repr(tp)
    return sanitize(str(name).replace(".", ""))


def build_key(
    method_name: str,
    parameter_types: Iterable[object],
    *,
    prefix: str = KEY_PREFIX,
) -> str:
    """Build textual signature key.

    Args:
        method_name: Method name (sanitized before use)
        parameter_types: Parameter types in declaration order
        prefix: Fixed marker placed before the name

    Returns:
        prefix + sanitized name + concatenated type labels

    Raises:
        ValueError: If method_name is empty (FAIL-FIRST)
    """
    if not method_name:
        raise ValueError("method_name must not be empty")

    labels = "".join(type_label(tp) for tp in parameter_types)
    return f"{prefix}{sanitize(method_name)}{labels}"


@dataclass(frozen=True, slots=True)
class SignatureKey:
    """Structured signature: method name + parameter types.

    Attributes:
        name: Method name
        parameter_types: Parameter types in declaration order (hashable)
    """

    name: str
    parameter_types: tuple[object, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("signature name must not be empty")
        if not isinstance(self.parameter_types, tuple):
            raise TypeError(
                f"parameter_types must be tuple, got {type(self.parameter_types).__name__}"
            )
        for tp in self.parameter_types:
            try:
                hash(tp)
            except TypeError:
                raise TypeError(f"parameter type {tp!r} is not hashable") from None

    @classmethod
    def of(cls, name: str, parameter_types: Iterable[object] = ()) -> SignatureKey:
        """Create key from any iterable of parameter types."""
        return cls(name=name, parameter_types=tuple(parameter_types))

    @property
    def labels(self) -> tuple[str, ...]:
        """Type labels in declaration order."""
        return tuple(type_label(tp) for tp in self.parameter_types)

    @property
    def text(self) -> str:
        """Textual key with the default prefix."""
        return build_key(self.name, self.parameter_types)

    def __str__(self) -> str:
        """Format as name(label, label)."""
        return f"{self.name}({', '.join(self.labels)})"
