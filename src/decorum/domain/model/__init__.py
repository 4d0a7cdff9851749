"""Domain model entities."""

from decorum.domain.model.annotation import (
    Annotation,
    DecoratorDeclaration,
    annotations_of,
    declaration_of,
    method_decorator,
)
from decorum.domain.model.binding import DecoratorBinding, DecoratorContext, factory_arity
from decorum.domain.model.configuration import WeaverConfig
from decorum.domain.model.decorated_callable import DecoratedCallable
from decorum.domain.model.diagnostic import Diagnostic
from decorum.domain.model.enums import DiagnosticCode, MethodKind, Severity
from decorum.domain.model.location import Location
from decorum.domain.model.method import MethodRef
from decorum.domain.model.signature import (
    KEY_PREFIX,
    ArrayOf,
    SignatureKey,
    build_key,
    type_label,
)
from decorum.domain.model.slot import Slot

__all__ = [
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
    # Annotations
    "Annotation",
    "DecoratorDeclaration",
    "annotations_of",
    "declaration_of",
    "method_decorator",
    # Composition
    "DecoratedCallable",
    "DecoratorBinding",
    "DecoratorContext",
    "Slot",
    "factory_arity",
    # Keys
    "KEY_PREFIX",
    "build_key",
    "type_label",
]
