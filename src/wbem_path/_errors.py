"""Normalized error hierarchy for wbem_path."""

from __future__ import annotations

from typing import Optional


class PathError(Exception):
    """Base class for all wbem_path errors.

    :param message: Human-readable error description.
    :param path: The path text involved in the error, if any.
    """

    def __init__(self, message: str = "", *, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)

    def _context(self) -> list[str]:
        parts: list[str] = []
        if self.path is not None:
            parts.append(f"path={self.path!r}")
        return parts

    def __str__(self) -> str:
        parts = [super().__str__(), *self._context()]
        return " | ".join(p for p in parts if p)

    def __repr__(self) -> str:
        cls = type(self).__name__
        args = [repr(super().__str__()), *self._context()]
        return f"{cls}({', '.join(args)})"


class InvalidParameter(PathError):
    """Raised for a missing argument, a zero mode or an unknown flag value."""


class OutOfMemory(PathError):
    """Raised when an allocation fails while parsing or building path text."""


class NotImplementedOperation(PathError):
    """Raised when an operation of the path interface is not implemented.

    :param operation: The name of the unimplemented operation.
    """

    def __init__(self, message: str = "", *, path: Optional[str] = None, operation: str = "") -> None:
        self.operation = operation
        super().__init__(message, path=path)

    def _context(self) -> list[str]:
        parts = super()._context()
        if self.operation:
            parts.append(f"operation={self.operation!r}")
        return parts


class NoSuchInterface(PathError):
    """Raised when an interface query names an unsupported interface.

    :param interface: The requested interface identifier.
    """

    def __init__(self, message: str = "", *, path: Optional[str] = None, interface: str = "") -> None:
        self.interface = interface
        super().__init__(message, path=path)

    def _context(self) -> list[str]:
        parts = super()._context()
        if self.interface:
            parts.append(f"interface={self.interface!r}")
        return parts
