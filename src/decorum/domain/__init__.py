"""decorum domain layer.

Pure composition model with no external dependencies.
Only imports: typing, dataclasses, enum, inspect, pathlib, contextvars, collections.abc
"""

from decorum.domain.exceptions import (
    DecoratorConfigurationError,
    DecorumError,
    FactoryArityError,
    FactoryResultError,
    SlotCollisionError,
    UnboundReceiverError,
    WeavingError,
)
from decorum.domain.model import (
    Annotation,
    ArrayOf,
    DecoratedCallable,
    DecoratorBinding,
    DecoratorContext,
    Diagnostic,
    DiagnosticCode,
    Location,
    MethodKind,
    MethodRef,
    Severity,
    SignatureKey,
    Slot,
    WeaverConfig,
    build_key,
    method_decorator,
)
from decorum.domain.ports import ReporterProtocol

__all__ = [
    # Exceptions
    "DecorumError",
    "DecoratorConfigurationError",
    "FactoryArityError",
    "FactoryResultError",
    "SlotCollisionError",
    "UnboundReceiverError",
    "WeavingError",
    # Enums
    "DiagnosticCode",
    "MethodKind",
    "Severity",
    # Value objects
    "ArrayOf",
    "Diagnostic",
    "Location",
    "MethodRef",
    "SignatureKey",
    "WeaverConfig",
    # Composition
    "Annotation",
    "DecoratedCallable",
    "DecoratorBinding",
    "DecoratorContext",
    "Slot",
    "build_key",
    "method_decorator",
    # Ports
    "ReporterProtocol",
]
