"""Tests for domain/model/method.py."""

import pytest

from decorum.domain.model.method import MethodRef
from decorum.domain.model.signature import SignatureKey
from tests.factories import Host, add, make_method


class TestMethodRef:
    def test_identity_is_body(self) -> None:
        assert make_method().identity is add

    def test_key(self) -> None:
        assert make_method().key == SignatureKey("add", (int, int))

    def test_qualified_name(self) -> None:
        assert make_method().qualified_name == "Host.add"

    def test_not_a_class_raises(self) -> None:
        with pytest.raises(TypeError, match="declaring_type must be a class"):
            MethodRef(declaring_type=Host(), name="add", body=add)  # type: ignore[arg-type]

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="method name must not be empty"):
            MethodRef(declaring_type=Host, name="", body=add)

    def test_non_callable_body_raises(self) -> None:
        with pytest.raises(TypeError, match="must be callable"):
            MethodRef(declaring_type=Host, name="add", body=None)  # type: ignore[arg-type]

    def test_list_parameter_types_raises(self) -> None:
        with pytest.raises(TypeError, match="parameter_types must be tuple"):
            MethodRef(Host, "add", add, [int, int])  # type: ignore[arg-type]
