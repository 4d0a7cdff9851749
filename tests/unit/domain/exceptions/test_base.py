"""Tests for domain/exceptions/base.py."""

import pytest

from decorum.domain.exceptions import (
    DecoratorConfigurationError,
    DecorumError,
    FactoryArityError,
    FactoryResultError,
    SlotCollisionError,
    WeavingError,
)


class TestDecorumError:
    def test_is_exception(self) -> None:
        assert issubclass(DecorumError, Exception)

    @pytest.mark.parametrize(
        "exc_type",
        [
            DecoratorConfigurationError,
            FactoryArityError,
            FactoryResultError,
            SlotCollisionError,
            WeavingError,
        ],
    )
    def test_hierarchy(self, exc_type: type) -> None:
        assert issubclass(exc_type, DecorumError)

    def test_builtin_bases(self) -> None:
        assert issubclass(FactoryArityError, TypeError)
        assert issubclass(FactoryResultError, TypeError)
        assert issubclass(SlotCollisionError, RuntimeError)
