"""Tests for the error hierarchy."""

from __future__ import annotations

from wbem_path._errors import (
    InvalidParameter,
    NoSuchInterface,
    NotImplementedOperation,
    OutOfMemory,
    PathError,
)


class TestBaseError:
    """PathError carries an optional path."""

    def test_default_attributes(self) -> None:
        e = PathError("boom")
        assert e.path is None

    def test_with_path(self) -> None:
        e = PathError("boom", path="\\\\srv\\root")
        assert e.path == "\\\\srv\\root"

    def test_str_without_context(self) -> None:
        assert str(PathError("boom")) == "boom"


class TestFlatHierarchy:
    """Concrete errors inherit directly from PathError."""

    def test_all_errors_inherit_directly_from_base(self) -> None:
        for cls in [InvalidParameter, OutOfMemory, NotImplementedOperation, NoSuchInterface]:
            assert cls.__mro__[1] is PathError, f"{cls.__name__} does not directly inherit PathError"


class TestNotImplementedOperation:
    def test_operation_attribute(self) -> None:
        e = NotImplementedOperation("nope", operation="set_server")
        assert e.operation == "set_server"
        assert e.path is None

    def test_str_includes_operation(self) -> None:
        assert "set_server" in str(NotImplementedOperation("nope", operation="set_server"))

    def test_repr_includes_operation(self) -> None:
        r = repr(NotImplementedOperation("nope", operation="set_server"))
        assert r.startswith("NotImplementedOperation(")
        assert "operation='set_server'" in r


class TestNoSuchInterface:
    def test_interface_attribute(self) -> None:
        e = NoSuchInterface("no", interface="1234")
        assert e.interface == "1234"
        assert "1234" in str(e)
        assert "interface='1234'" in repr(e)


class TestStrRepr:
    """Meaningful str/repr output."""

    def test_str_includes_path(self) -> None:
        e = OutOfMemory("Out of memory", path="root\\cimv2")
        assert str(e) == "Out of memory | path='root\\\\cimv2'"

    def test_repr_includes_class_name(self) -> None:
        e = InvalidParameter("bad mode", path="root")
        r = repr(e)
        assert "InvalidParameter" in r
        assert "path='root'" in r
