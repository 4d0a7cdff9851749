"""Reading method declarations from live classes."""

from __future__ import annotations

import inspect
import typing
from typing import TYPE_CHECKING

from decorum.domain.model.enums import MethodKind
from decorum.domain.model.location import Location
from decorum.domain.model.method import MethodRef
from decorum.domain.model.signature import ArrayOf

if TYPE_CHECKING:
    from collections.abc import Callable

_UNPOSITIONAL = (inspect.Parameter.KEYWORD_ONLY, inspect.Parameter.VAR_KEYWORD)


def method_kind(member: object) -> MethodKind:
    """Kind of a class attribute holding a method."""
    if isinstance(member, staticmethod):
        return MethodKind.STATIC
    if isinstance(member, classmethod):
        return MethodKind.CLASS
    return MethodKind.INSTANCE


def resolve_hints(func: Callable[..., object]) -> dict[str, object]:
    """Evaluated annotations of func.

    Unresolvable forward references keep their raw (string) form.
    """
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError):
        return dict(getattr(func, "__annotations__", {}))


def unsupported_parameters(func: Callable[..., object]) -> tuple[str, ...]:
    """Parameters that cannot be passed positionally (keyword-only, **kwargs)."""
    signature = inspect.signature(func)
    return tuple(
        name for name, param in signature.parameters.items() if param.kind in _UNPOSITIONAL
    )


def parameter_types(func: Callable[..., object], kind: MethodKind) -> tuple[object, ...]:
    """Declared parameter types in order, implicit self/cls excluded.

    Unannotated parameters yield None; *args yields ArrayOf(element type).
    """
    hints = resolve_hints(func)
    params = list(inspect.signature(func).parameters.values())
    if kind is not MethodKind.STATIC and params:
        params = params[1:]

    types: list[object] = []
    for param in params:
        if param.kind in _UNPOSITIONAL:
            continue
        hint = hints.get(param.name)
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            types.append(ArrayOf(hint))
        else:
            types.append(hint)
    return tuple(types)


def method_ref(
    cls: type,
    name: str,
    member: object,
    body: Callable[..., object],
) -> MethodRef:
    """Build the MethodRef for body, declared on cls as attribute name.

    Args:
        cls: Declaring class
        name: Attribute name
        member: Class attribute as stored (function, staticmethod, classmethod)
        body: Original function
    """
    kind = method_kind(member)
    return MethodRef(
        declaring_type=cls,
        name=name,
        body=body,
        parameter_types=parameter_types(body, kind),
        return_type=resolve_hints(body).get("return"),
        kind=kind,
        location=Location.of(body),
    )
