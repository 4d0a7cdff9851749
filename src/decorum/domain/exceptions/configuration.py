"""Configuration exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from decorum.domain.exceptions.base import DecorumError

if TYPE_CHECKING:
    from decorum.domain.model.diagnostic import Diagnostic


class DecoratorConfigurationError(DecorumError):
    """Weaving produced configuration errors.

    Only raised on request: strict weaving or DiagnosticCollector.raise_for_errors().
    Without that request configuration errors stay diagnostics.

    Attributes:
        diagnostics: All error diagnostics (at least one)
    """

    def __init__(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        if not diagnostics:
            raise ValueError("DecoratorConfigurationError requires at least one diagnostic")

        self.diagnostics = diagnostics

        msg_parts = [f"Found {len(diagnostics)} decorator configuration error(s):"]
        for d in diagnostics:
            msg_parts.append(str(d))

        super().__init__("\n".join(msg_parts))


class FactoryArityError(DecorumError, TypeError):
    """Decorator factory accepts neither (inner) nor (inner, context).

    Inherits TypeError for semantic correctness (wrong callable shape).

    Attributes:
        factory: The offending factory
        arity: Required positional parameter count, None if not inspectable
    """

    def __init__(self, factory: object, arity: int | None) -> None:
        self.factory = factory
        self.arity = arity
        name = getattr(factory, "__qualname__", type(factory).__qualname__)
        if arity is None:
            detail = "signature cannot be inspected"
        else:
            detail = f"got {arity} required positional parameter(s)"
        super().__init__(
            f"decorator factory {name} must accept (inner) or (inner, context): {detail}"
        )
