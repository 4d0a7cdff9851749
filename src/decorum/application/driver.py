"""Decorator application driver: one annotation occurrence, one layer."""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING

from decorum.application.diagnostics import DiagnosticCollector
from decorum.application.registry import SlotListener, SlotRegistry
from decorum.domain.exceptions.configuration import FactoryArityError
from decorum.domain.model.annotation import declaration_of
from decorum.domain.model.binding import DecoratorBinding, DecoratorContext
from decorum.domain.model.configuration import WeaverConfig
from decorum.domain.model.diagnostic import Diagnostic
from decorum.domain.model.enums import DiagnosticCode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from decorum.domain.model.annotation import Annotation
    from decorum.domain.model.method import MethodRef
    from decorum.domain.model.slot import Slot

logger = logging.getLogger(__name__)

# Class attribute holding {driver: SlotRegistry} for the class's own methods
REGISTRIES_ATTR = "__decorum_registries__"


class DecoratorApplicationDriver:
    """Applies decorator annotations to methods, one occurrence at a time.

    Keeps one SlotRegistry per declaring type, stored on the type itself so
    it is collected with the class. Because slots are resolved by
    owner, a later pass keeps wrapping the chain built by earlier passes:
    the occurrence applied last becomes the outermost layer.

    Configuration errors are reported to the DiagnosticCollector and skip
    only the offending occurrence; layers applied before stay in place.
    """

    def __init__(
        self,
        diagnostics: DiagnosticCollector | None = None,
        config: WeaverConfig | None = None,
    ) -> None:
        """Initialize driver.

        Args:
            diagnostics: Where configuration errors go. Fresh collector if None.
            config: Key settings for new registries. Defaults if None.
        """
        self._diagnostics = diagnostics if diagnostics is not None else DiagnosticCollector()
        self._config = config or WeaverConfig()
        self._registries: weakref.WeakSet[SlotRegistry] = weakref.WeakSet()
        self._listeners: list[SlotListener] = []

    @property
    def diagnostics(self) -> DiagnosticCollector:
        """Collector receiving configuration errors."""
        return self._diagnostics

    @property
    def config(self) -> WeaverConfig:
        """Driver configuration."""
        return self._config

    def on_slot_created(self, listener: SlotListener) -> SlotListener:
        """Register a slot listener on every registry, present and future."""
        self._listeners.append(listener)
        for registry in self._registries:
            registry.on_slot_created(listener)
        return listener

    def registry_for(self, declaring_type: type) -> SlotRegistry:
        """Registry of declaring_type, created on first request."""
        registries = vars(declaring_type).get(REGISTRIES_ATTR)
        if registries is None:
            registries = {}
            setattr(declaring_type, REGISTRIES_ATTR, registries)
        registry = registries.get(self)
        if registry is None:
            registry = SlotRegistry.from_config(declaring_type, self._config)
            for listener in self._listeners:
                registry.on_slot_created(listener)
            registries[self] = registry
            self._registries.add(registry)
        return registry

    def find_slot(self, method: MethodRef) -> Slot | None:
        """Slot of method, None if nothing was applied to it yet."""
        registry = vars(method.declaring_type).get(REGISTRIES_ATTR, {}).get(self)
        if registry is None:
            return None
        return registry.find(method)

    def apply_decorator(self, method: MethodRef, annotation: Annotation) -> Slot | None:
        """Wrap method's current callable with the decorator of annotation.

        Args:
            method: Method carrying the annotation
            annotation: Annotation occurrence

        Returns:
            The method's slot, or None if the occurrence was rejected
        """
        annotation_type = type(annotation)
        declaration = declaration_of(annotation_type)
        if declaration is None:
            self._report(
                method,
                DiagnosticCode.NOT_A_DECORATOR,
                f"Annotation to decorate method must be marked with @method_decorator. "
                f"{annotation_type.__qualname__} lacks this marker.",
            )
            return None

        try:
            factory = declaration.resolve_factory(method.declaring_type)
        except TypeError as exc:
            self._report(
                method,
                DiagnosticCode.BAD_DECORATOR_CLASS,
                f"Decorator class {declaration.reference.__qualname__} of "
                f"{annotation_type.__qualname__} cannot be created for "
                f"{method.declaring_type.__qualname__}: {exc}",
            )
            return None
        if not callable(factory):
            self._report(
                method,
                DiagnosticCode.BAD_DECORATOR_CLASS,
                f"Decorator class {declaration.reference.__qualname__} of "
                f"{annotation_type.__qualname__} must create callable instances, "
                f"got {type(factory).__name__}",
            )
            return None

        context = DecoratorContext(
            annotation=annotation,
            method=method,
            baggage=declaration.baggage,
        )
        try:
            binding = DecoratorBinding(factory=factory, context=context)
        except FactoryArityError as exc:
            self._report(method, DiagnosticCode.BAD_FACTORY_ARITY, str(exc))
            return None

        slot = self.registry_for(method.declaring_type).get_or_create_slot(method)
        slot.apply(binding)
        logger.debug(
            "Applied %s to %s (layer %d)",
            annotation_type.__qualname__,
            method.qualified_name,
            slot.applied,
        )
        return slot

    def apply_all(self, method: MethodRef, annotations: Iterable[Annotation]) -> Slot | None:
        """Apply occurrences in order; the last one ends up outermost.

        Returns:
            The method's slot, None if no occurrence was accepted
        """
        for annotation in annotations:
            self.apply_decorator(method, annotation)
        return self.find_slot(method)

    def report_unsupported(self, method: MethodRef, reason: str) -> None:
        """Report a method the weaver cannot rewrite."""
        self._report(method, DiagnosticCode.UNSUPPORTED_SIGNATURE, reason)

    def _report(self, method: MethodRef, code: DiagnosticCode, message: str) -> None:
        self._diagnostics.report(
            Diagnostic(
                code=code,
                message=message,
                subject=method.qualified_name,
                location=method.location,
            )
        )
