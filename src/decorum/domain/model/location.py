"""Definition site of a method body."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Location:
    """Where a method body was defined.

    Attributes:
        file: Source file as recorded in the code object
        line: First line of the definition, decorator lines included (1-based)
        function: Qualified name of the body, None if unknown
    """

    file: Path
    line: int
    function: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.file, Path):
            raise TypeError(f"file must be Path, got {type(self.file).__name__}")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.function is not None and not self.function:
            raise ValueError("function must be non-empty string or None")

    @classmethod
    def of(cls, func: object) -> Location | None:
        """Definition site of func, None for callables without a code object."""
        code = getattr(func, "__code__", None)
        if code is None:
            return None
        return cls(
            file=Path(code.co_filename),
            line=max(code.co_firstlineno, 1),
            function=getattr(func, "__qualname__", None) or None,
        )

    def __str__(self) -> str:
        """Format as file:line."""
        return f"{self.file}:{self.line}"
