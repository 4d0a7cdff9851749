"""decorum - annotation-driven method decorators with ordered composition."""

__version__ = "0.1.0"

from decorum.application.diagnostics import DiagnosticCollector
from decorum.domain.exceptions import (
    DecoratorConfigurationError,
    DecorumError,
    FactoryArityError,
    FactoryResultError,
    SlotCollisionError,
    UnboundReceiverError,
    WeavingError,
)
from decorum.domain.model.annotation import Annotation, method_decorator
from decorum.domain.model.binding import DecoratorContext
from decorum.domain.model.configuration import WeaverConfig
from decorum.domain.model.decorated_callable import DecoratedCallable
from decorum.domain.model.signature import ArrayOf, build_key
from decorum.infrastructure.weaver import ClassWeaver
from decorum.presentation.api import Decorated, annotate, default_weaver, slot_of, weave

__all__ = [
    # Declaring
    "Annotation",
    "ArrayOf",
    "DecoratorContext",
    "method_decorator",
    # Weaving
    "ClassWeaver",
    "Decorated",
    "DiagnosticCollector",
    "WeaverConfig",
    "annotate",
    "default_weaver",
    "slot_of",
    "weave",
    # Composition
    "DecoratedCallable",
    "build_key",
    # Errors
    "DecorumError",
    "DecoratorConfigurationError",
    "FactoryArityError",
    "FactoryResultError",
    "SlotCollisionError",
    "UnboundReceiverError",
    "WeavingError",
    "__version__",
]
