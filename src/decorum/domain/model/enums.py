"""Domain enumerations."""

from enum import Enum, auto


class Severity(Enum):
    """Diagnostic severity."""

    ERROR = auto()  # fails strict weaving
    WARNING = auto()
    INFO = auto()


class MethodKind(Enum):
    """How a method receives its implicit first argument."""

    INSTANCE = auto()  # self
    CLASS = auto()  # cls
    STATIC = auto()  # none


class DiagnosticCode(Enum):
    """Stable identifiers of weaving diagnostics."""

    NOT_A_DECORATOR = "not-a-decorator"
    BAD_FACTORY_ARITY = "bad-factory-arity"
    BAD_DECORATOR_CLASS = "bad-decorator-class"
    UNSUPPORTED_SIGNATURE = "unsupported-signature"
