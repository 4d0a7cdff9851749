"""Weaving exceptions."""

from decorum.domain.exceptions.base import DecorumError


class WeavingError(DecorumError):
    """Weaving target is invalid.

    Raised for usage errors: weaving a non-class, annotating a missing method.

    Attributes:
        target: Name of the class or method
        reason: Why weaving failed
    """

    def __init__(self, target: str, reason: str) -> None:
        if not target:
            raise ValueError("target must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.target = target
        self.reason = reason
        super().__init__(f"Cannot weave {target}: {reason}")
