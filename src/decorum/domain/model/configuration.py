"""Weaver configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from decorum.domain.model.signature import KEY_PREFIX

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class WeaverConfig:
    """Weaving options.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        strict: Raise DecoratorConfigurationError when a pass reports errors.
        key_prefix: Marker placed before method names in slot field names.
        disambiguation_marker: Prepended to a field name until it is unique.
        store_slots_on_class: Expose each slot as a class attribute named by its field name.
    """

    strict: bool = False
    key_prefix: str = KEY_PREFIX
    disambiguation_marker: str = "_"
    store_slots_on_class: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.key_prefix:
            raise ValueError("key_prefix must not be empty")
        if not self.disambiguation_marker:
            raise ValueError("disambiguation_marker must not be empty")

    @classmethod
    def from_env(cls) -> WeaverConfig:
        """Defaults, with strict taken from DECORUM_STRICT."""
        strict = os.getenv("DECORUM_STRICT", "").strip().lower() in _TRUTHY
        return cls(strict=strict)
