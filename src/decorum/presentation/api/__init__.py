"""Public API for declaring and weaving decorators."""

from decorum.presentation.api.weaving import (
    Decorated,
    annotate,
    default_weaver,
    slot_of,
    weave,
)

__all__ = [
    "Decorated",
    "annotate",
    "default_weaver",
    "slot_of",
    "weave",
]
