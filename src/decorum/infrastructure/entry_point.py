"""Rewritten method entry points.

An entry point replaces the method on its class. Every call binds the
arguments to positions and forwards them to the slot's current callable.
"""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING

from decorum.domain.model.enums import MethodKind

if TYPE_CHECKING:
    from decorum.domain.model.method import MethodRef
    from decorum.domain.model.slot import Slot

SLOT_ATTR = "__decorum_slot__"


def make_entry_point(slot: Slot, method: MethodRef) -> object:
    """Create the class attribute that replaces method.

    Keyword arguments are bound to their positions and defaults are filled
    in, so decorators always see the complete positional argument tuple.
    For instance and class methods self/cls is split off that tuple and
    bound as the receiver of the call.

    Returns:
        Function, staticmethod or classmethod, matching method.kind
    """
    signature = inspect.signature(method.body)

    if method.kind is MethodKind.STATIC:

        def entry(*args: object, **kwargs: object) -> object:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            return slot.current.invoke(bound.args)

    else:

        def entry(*args: object, **kwargs: object) -> object:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            receiver, *rest = bound.args
            return slot.current.invoke_on(receiver, tuple(rest))

    # updated=() keeps the body's __dict__ (annotation records) off the entry point
    functools.update_wrapper(entry, method.body, updated=())
    setattr(entry, SLOT_ATTR, slot)

    if method.kind is MethodKind.STATIC:
        return staticmethod(entry)
    if method.kind is MethodKind.CLASS:
        return classmethod(entry)
    return entry


def unwrap_member(member: object) -> object:
    """Function behind a staticmethod/classmethod, else member itself."""
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    return member


def is_entry_point(member: object) -> bool:
    """member is (or wraps) an entry point made by make_entry_point()."""
    return getattr(unwrap_member(member), SLOT_ATTR, None) is not None


def slot_of_member(member: object) -> Slot | None:
    """Slot behind an entry point, None for ordinary attributes."""
    return getattr(unwrap_member(member), SLOT_ATTR, None)


def original_function(member: object) -> object | None:
    """Original body of a class attribute, None if it is not a function.

    Entry points resolve to the body they replaced.
    """
    func = unwrap_member(member)
    if not inspect.isfunction(func):
        return None
    if getattr(func, SLOT_ATTR, None) is not None:
        return func.__wrapped__
    return func
