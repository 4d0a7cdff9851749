"""Base exceptions for decorum domain."""


class DecorumError(Exception):
    """Root exception for all decorum errors.

    All domain exceptions inherit from this.
    Allows catching all decorum-specific errors.
    """
