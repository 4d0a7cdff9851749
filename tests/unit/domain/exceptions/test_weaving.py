"""Tests for domain/exceptions/weaving.py."""

import pytest

from decorum.domain.exceptions import WeavingError


class TestWeavingError:
    def test_message(self) -> None:
        error = WeavingError("Calc.add", "no such method")
        assert str(error) == "Cannot weave Calc.add: no such method"
        assert error.target == "Calc.add"
        assert error.reason == "no such method"

    def test_empty_target_raises(self) -> None:
        with pytest.raises(ValueError, match="target must not be empty"):
            WeavingError("", "reason")

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must not be empty"):
            WeavingError("Calc", "")
