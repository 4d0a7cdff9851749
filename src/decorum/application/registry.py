"""Slot registry: one storage slot per distinct method of a declaring type."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from decorum.domain.exceptions.composition import SlotCollisionError
from decorum.domain.model.decorated_callable import DecoratedCallable
from decorum.domain.model.method import MethodRef
from decorum.domain.model.signature import KEY_PREFIX, build_key
from decorum.domain.model.slot import Slot

if TYPE_CHECKING:
    from collections.abc import Iterator

    from decorum.domain.model.configuration import WeaverConfig
    from decorum.domain.model.signature import SignatureKey

logger = logging.getLogger(__name__)

SlotListener = Callable[[Slot, MethodRef], None]


class SlotRegistry:
    """Slots of one declaring type, resolved by signature then by owner.

    Lookup is structural: slots are bucketed by SignatureKey, and within a
    bucket the slot whose owner is the method's identity wins. Methods with
    different identities never share a slot, even under equal keys.

    Each slot also gets a field name unique within the registry, built by
    build_key() and prefixed with the disambiguation marker while taken.

    Mutable - only during weaving, which is single-threaded.
    """

    def __init__(
        self,
        declaring_type: type,
        *,
        key_prefix: str = KEY_PREFIX,
        disambiguation_marker: str = "_",
    ) -> None:
        """Initialize empty registry.

        Args:
            declaring_type: Class whose methods this registry serves
            key_prefix: Marker placed before method names in field names
            disambiguation_marker: Prepended to taken field names

        Raises:
            TypeError: If declaring_type is not a class (FAIL-FIRST)
            ValueError: If prefix or marker is empty
        """
        if not isinstance(declaring_type, type):
            raise TypeError(
                f"declaring_type must be a class, got {type(declaring_type).__name__}"
            )
        if not key_prefix:
            raise ValueError("key_prefix must not be empty")
        if not disambiguation_marker:
            raise ValueError("disambiguation_marker must not be empty")

        self._declaring_type = declaring_type
        self._key_prefix = key_prefix
        self._marker = disambiguation_marker
        self._buckets: dict[SignatureKey, list[Slot]] = {}
        self._by_field: dict[str, Slot] = {}
        self._listeners: list[SlotListener] = []

    @classmethod
    def from_config(cls, declaring_type: type, config: WeaverConfig) -> SlotRegistry:
        """Create registry using key settings from config."""
        return cls(
            declaring_type,
            key_prefix=config.key_prefix,
            disambiguation_marker=config.disambiguation_marker,
        )

    @property
    def declaring_type(self) -> type:
        """Class served by this registry."""
        return self._declaring_type

    def on_slot_created(self, listener: SlotListener) -> SlotListener:
        """Register a callback run once per newly created slot.

        This is where the method's entry point gets rewritten.
        Returns the listener, so it can be used as a decorator.
        """
        self._listeners.append(listener)
        return listener

    def find(self, method: MethodRef) -> Slot | None:
        """Slot owned by method, None if not created yet."""
        self._check_declaring_type(method)
        for slot in self._buckets.get(method.key, ()):
            if slot.owner is method.identity:
                return slot
        return None

    def get_or_create_slot(self, method: MethodRef) -> Slot:
        """Slot owned by method, created on first request.

        Idempotent per method identity: every call for the same method
        returns the same Slot, across any number of weaving passes.

        A new slot starts with the original body as its current callable,
        and every on_slot_created listener is notified.

        Raises:
            ValueError: If method belongs to another declaring type
            SlotCollisionError: If field name probing does not terminate
        """
        slot = self.find(method)
        if slot is not None:
            return slot

        key = method.key
        slot = Slot(
            key=key,
            field_name=self._free_field_name(key),
            owner=method.identity,
            current=DecoratedCallable.of(method),
        )
        self._buckets.setdefault(key, []).append(slot)
        self._by_field[slot.field_name] = slot
        logger.debug("Created slot %s for %s", slot.field_name, method.qualified_name)

        for listener in self._listeners:
            listener(slot, method)
        return slot

    def by_field_name(self, field_name: str) -> Slot | None:
        """Slot stored under field_name, None if absent."""
        return self._by_field.get(field_name)

    def slots(self) -> tuple[Slot, ...]:
        """All slots in creation order."""
        return tuple(self._by_field.values())

    def _free_field_name(self, key: SignatureKey) -> str:
        """First unused field name: the key text, then marker-prefixed variants.

        Every taken name belongs to one registered slot, so at most
        len(slots) probes can fail.
        """
        field_name = build_key(key.name, key.parameter_types, prefix=self._key_prefix)
        attempts = len(self._by_field) + 1
        for _ in range(attempts):
            if field_name not in self._by_field:
                return field_name
            field_name = self._marker + field_name
        raise SlotCollisionError(field_name, attempts)

    def _check_declaring_type(self, method: MethodRef) -> None:
        if method.declaring_type is not self._declaring_type:
            raise ValueError(
                f"{method.qualified_name} is not declared by "
                f"{self._declaring_type.__qualname__}"
            )

    def __contains__(self, method: object) -> bool:
        if not isinstance(method, MethodRef) or method.declaring_type is not self._declaring_type:
            return False
        return self.find(method) is not None

    def __iter__(self) -> Iterator[Slot]:
        return iter(self.slots())

    def __len__(self) -> int:
        return len(self._by_field)

    def __repr__(self) -> str:
        return f"SlotRegistry({self._declaring_type.__qualname__}, slots={len(self)})"
