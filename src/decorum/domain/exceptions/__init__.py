"""Domain exceptions."""

from decorum.domain.exceptions.base import DecorumError
from decorum.domain.exceptions.composition import (
    FactoryResultError,
    SlotCollisionError,
    UnboundReceiverError,
)
from decorum.domain.exceptions.configuration import (
    DecoratorConfigurationError,
    FactoryArityError,
)
from decorum.domain.exceptions.weaving import WeavingError

__all__ = [
    "DecorumError",
    "DecoratorConfigurationError",
    "FactoryArityError",
    "FactoryResultError",
    "SlotCollisionError",
    "UnboundReceiverError",
    "WeavingError",
]
