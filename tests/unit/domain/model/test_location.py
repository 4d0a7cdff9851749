"""Tests for domain/model/location.py."""

from pathlib import Path

import pytest

from decorum.domain.model.location import Location


def sample(x):
    return x


class TestLocation:
    """Tests for Location."""

    def test_str(self) -> None:
        """Formats as file:line."""
        assert str(Location(file=Path("/src/calc.py"), line=12)) == "/src/calc.py:12"

    def test_function_default(self) -> None:
        assert Location(file=Path("a.py"), line=1).function is None

    def test_zero_line_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be > 0"):
            Location(file=Path("a.py"), line=0)

    def test_string_file_raises(self) -> None:
        with pytest.raises(TypeError, match="file must be Path, got str"):
            Location(file="a.py", line=1)  # type: ignore[arg-type]

    def test_empty_function_raises(self) -> None:
        with pytest.raises(ValueError, match="function must be non-empty"):
            Location(file=Path("a.py"), line=1, function="")


class TestLocationOf:
    """Tests for Location.of()."""

    def test_function(self) -> None:
        """Reads file, first line and qualified name from the code object."""
        location = Location.of(sample)
        assert location is not None
        assert location.file.name == "test_location.py"
        assert location.line == sample.__code__.co_firstlineno
        assert location.function == "sample"

    def test_nested_function_qualname(self) -> None:
        def inner():
            return None

        location = Location.of(inner)
        assert location is not None
        assert location.function.endswith("<locals>.inner")

    def test_builtin_has_no_location(self) -> None:
        assert Location.of(len) is None
