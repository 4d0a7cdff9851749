"""Infrastructure: weaving live Python classes."""

from decorum.infrastructure.entry_point import SLOT_ATTR, make_entry_point
from decorum.infrastructure.introspection import method_ref
from decorum.infrastructure.weaver import ClassWeaver

__all__ = [
    "SLOT_ATTR",
    "ClassWeaver",
    "make_entry_point",
    "method_ref",
]
