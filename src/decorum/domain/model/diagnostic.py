"""Diagnostic value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from decorum.domain.model.enums import DiagnosticCode, Severity

if TYPE_CHECKING:
    from decorum.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Build-time message about a decorator configuration.

    Attributes:
        code: Stable diagnostic identifier
        message: Human-readable description (must not be empty)
        severity: ERROR/WARNING/INFO
        subject: Qualified method name, None if not method-specific
        location: Source location, None if unknown
    """

    code: DiagnosticCode
    message: str
    severity: Severity = Severity.ERROR
    subject: str | None = None
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.code, DiagnosticCode):
            raise TypeError(f"code must be DiagnosticCode, got {type(self.code).__name__}")
        if not self.message:
            raise ValueError("message must not be empty")
        if self.subject is not None and not self.subject:
            raise ValueError("subject must be non-empty string or None")

    @property
    def is_error(self) -> bool:
        """Severity is ERROR."""
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        """Format as location: [SEVERITY] code: message (subject)."""
        parts = []
        if self.location is not None:
            parts.append(f"{self.location}:")
        parts.append(f"[{self.severity.name}] {self.code.value}: {self.message}")
        if self.subject is not None:
            parts.append(f"({self.subject})")
        return " ".join(parts)
