"""Class weaver: finds annotated methods and rewrites their entry points.

This is the glue between Python classes and the composition engine:

1. scan the class namespace in definition order
2. for every annotation occurrence not applied yet, call the driver
3. when the driver creates a slot, replace the method with an entry point

Weaving is incremental. Annotations attached after a pass (annotate())
are applied by the next weave() call on top of the existing chain.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from decorum.application.driver import DecoratorApplicationDriver
from decorum.domain.exceptions.configuration import DecoratorConfigurationError
from decorum.domain.exceptions.weaving import WeavingError
from decorum.domain.model.annotation import annotations_of
from decorum.infrastructure.entry_point import (
    make_entry_point,
    original_function,
    slot_of_member,
)
from decorum.infrastructure.introspection import method_ref, unsupported_parameters

if TYPE_CHECKING:
    from decorum.application.diagnostics import DiagnosticCollector
    from decorum.domain.model.annotation import Annotation
    from decorum.domain.model.configuration import WeaverConfig
    from decorum.domain.model.method import MethodRef
    from decorum.domain.model.slot import Slot

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type)

# Class attribute holding {weaver: {attribute name: _WovenMethod}}
WOVEN_ATTR = "__decorum_woven__"


@dataclass(slots=True)
class _WovenMethod:
    """Weaving progress of one class attribute.

    The MethodRef is built on the first pass and reused, so its signature
    key stays fixed even if type hints resolve differently later.
    """

    method: MethodRef
    processed: int = 0


class ClassWeaver:
    """Weaves decorator annotations into classes.

    Attributes:
        _driver: Composition driver (owns registries and diagnostics)

    Per-class progress lives on the class under WOVEN_ATTR, keyed by weaver
    and attribute name, so aliases of one function are woven separately.
    """

    def __init__(
        self,
        config: WeaverConfig | None = None,
        diagnostics: DiagnosticCollector | None = None,
        driver: DecoratorApplicationDriver | None = None,
    ) -> None:
        """Initialize weaver.

        Args:
            config: Weaving options. Ignored when driver is given.
            diagnostics: Collector for configuration errors. Ignored when driver is given.
            driver: Existing driver to reuse
        """
        if driver is None:
            driver = DecoratorApplicationDriver(diagnostics, config)
        self._driver = driver
        self._driver.on_slot_created(self._install_entry_point)

    @property
    def driver(self) -> DecoratorApplicationDriver:
        """Composition driver."""
        return self._driver

    @property
    def config(self) -> WeaverConfig:
        """Weaving options."""
        return self._driver.config

    @property
    def diagnostics(self) -> DiagnosticCollector:
        """Collected configuration diagnostics."""
        return self._driver.diagnostics

    def weave(self, cls: C) -> C:
        """Apply all pending annotation occurrences of cls.

        Only attributes defined on cls itself are considered; inherited
        methods belong to the class that declares them.

        Returns:
            cls, so weave() works as a class decorator

        Raises:
            WeavingError: If cls is not a class
            DecoratorConfigurationError: In strict mode, if this pass reported errors
        """
        if not isinstance(cls, type):
            raise WeavingError(repr(cls), "only classes can be woven")

        mark = len(self.diagnostics)
        for name, member in list(vars(cls).items()):
            self._weave_member(cls, name, member)

        if self.config.strict:
            errors = tuple(d for d in self.diagnostics.since(mark) if d.is_error)
            if errors:
                raise DecoratorConfigurationError(errors)
        return cls

    def annotate(self, cls: type, name: str, *annotations: Annotation) -> None:
        """Attach annotation occurrences to a method for the next pass.

        Works on woven and unwoven methods alike.

        Raises:
            WeavingError: If cls has no function attribute called name
        """
        member = vars(cls).get(name) if isinstance(cls, type) else None
        body = original_function(member)
        if body is None:
            raise WeavingError(f"{getattr(cls, '__qualname__', cls)!s}.{name}", "no such method")
        for annotation in annotations:
            annotation(body)

    def slot_of(self, cls: type, name: str) -> Slot | None:
        """Slot behind a woven method, None if name is not woven."""
        return slot_of_member(inspect.getattr_static(cls, name, None))

    def _weave_member(self, cls: type, name: str, member: object) -> None:
        body = original_function(member)
        if body is None:
            return

        occurrences = annotations_of(body)
        if not occurrences:
            return

        progress = self._progress_of(cls)
        state = progress.get(name)
        if state is None or state.method.body is not body:
            state = progress[name] = _WovenMethod(method_ref(cls, name, member, body))
        pending = occurrences[state.processed :]
        if not pending:
            return
        state.processed = len(occurrences)

        method = state.method
        unsupported = unsupported_parameters(body)
        if unsupported:
            self._driver.report_unsupported(
                method,
                f"parameters {', '.join(unsupported)} cannot be passed positionally; "
                f"keyword-only parameters and **kwargs are not supported",
            )
            return

        logger.debug("Weaving %d annotation(s) into %s", len(pending), method.qualified_name)
        for annotation in pending:
            self._driver.apply_decorator(method, annotation)

    def _progress_of(self, cls: type) -> dict[str, _WovenMethod]:
        woven = vars(cls).get(WOVEN_ATTR)
        if woven is None:
            woven = {}
            setattr(cls, WOVEN_ATTR, woven)
        return woven.setdefault(self, {})

    def _install_entry_point(self, slot: Slot, method: MethodRef) -> None:
        """Replace method on its class with an entry point reading slot."""
        cls = method.declaring_type
        setattr(cls, method.name, make_entry_point(slot, method))
        if self.config.store_slots_on_class:
            setattr(cls, slot.field_name, slot)
        logger.debug("Rewrote entry point of %s", method.qualified_name)
