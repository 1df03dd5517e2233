"""PathInterface abstract base class — the path object contract."""

from __future__ import annotations

import abc
import logging
from typing import TYPE_CHECKING, NoReturn, Optional

from wbem_path._capabilities import Capability
from wbem_path._errors import NotImplementedOperation

if TYPE_CHECKING:
    import uuid
    from types import TracebackType

    from wbem_path._capabilities import CapabilitySet
    from wbem_path._types import TextBuffer

log = logging.getLogger(__name__)


class PathInterface(abc.ABC):
    """Abstract base class for all path object types.

    Declares the complete operation set of a management object path. The
    lifecycle, ``set_text``, ``get_text`` and ``get_namespace_count`` must be
    implemented by every type. The remaining operations default to raising
    ``NotImplementedOperation`` unless the type declares the matching
    :class:`Capability` and overrides them; they never change state.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Unique identifier for this path type (e.g. ``'wbem'``)."""

    @property
    @abc.abstractmethod
    def capabilities(self) -> CapabilitySet:
        """Declared capabilities of this path type."""

    # region: lifecycle

    @abc.abstractmethod
    def add_ref(self) -> int:
        """Take a reference and return the new reference count."""

    @abc.abstractmethod
    def release(self) -> int:
        """Drop a reference and return the new count; state is freed at zero."""

    @abc.abstractmethod
    def query_interface(self, iid: uuid.UUID) -> PathInterface:
        """Return this object (with a new reference) if it implements ``iid``.

        :raises NoSuchInterface: If ``iid`` is not supported.
        """

    def __enter__(self) -> PathInterface:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.release()

    # endregion

    # region: implemented operations

    @abc.abstractmethod
    def set_text(self, mode: int, text: Optional[str]) -> None:
        """Replace the whole path with the parse of ``text``.

        :raises InvalidParameter: If ``mode`` is zero or ``text`` is ``None``.
        :raises OutOfMemory: If parsing fails; the path is left cleared.
        """

    @abc.abstractmethod
    def get_text(self, flags: int, capacity: Optional[int], buffer: TextBuffer = None) -> int:
        """Copy the text projection selected by ``flags`` into ``buffer``.

        :returns: The required capacity, including the terminator.
        :raises InvalidParameter: If ``capacity`` is missing, or it is
            sufficient but ``buffer`` is missing or shorter than required.
        """

    @abc.abstractmethod
    def get_namespace_count(self) -> int:
        """Number of namespace segments in the current path."""

    # endregion

    # region: optional operations

    def _unsupported(self, cap: Capability, *args: object) -> NoReturn:
        if not self.capabilities.supports(cap):
            log.warning("%s.%s%r is not implemented", type(self).__name__, cap.value, args)
        self.capabilities.require(cap, path_type=self.name)
        raise NotImplementedOperation(
            f"{type(self).__name__} declares '{cap.value}' but does not override it",
            operation=cap.value,
        )

    def get_info(self, requested_info: int) -> int:
        return self._unsupported(Capability.GET_INFO, requested_info)

    def set_server(self, name: Optional[str]) -> None:
        self._unsupported(Capability.SET_SERVER, name)

    def get_server(self, capacity: Optional[int], buffer: TextBuffer = None) -> int:
        return self._unsupported(Capability.GET_SERVER, capacity)

    def set_namespace_at(self, index: int, name: Optional[str]) -> None:
        self._unsupported(Capability.SET_NAMESPACE_AT, index, name)

    def get_namespace_at(self, index: int, capacity: Optional[int], buffer: TextBuffer = None) -> int:
        return self._unsupported(Capability.GET_NAMESPACE_AT, index, capacity)

    def remove_namespace_at(self, index: int) -> None:
        self._unsupported(Capability.REMOVE_NAMESPACE_AT, index)

    def remove_all_namespaces(self) -> None:
        self._unsupported(Capability.REMOVE_ALL_NAMESPACES)

    def get_scope_count(self) -> int:
        return self._unsupported(Capability.GET_SCOPE_COUNT)

    def set_scope(self, index: int, class_name: Optional[str]) -> None:
        self._unsupported(Capability.SET_SCOPE, index, class_name)

    def set_scope_from_text(self, index: int, text: Optional[str]) -> None:
        self._unsupported(Capability.SET_SCOPE_FROM_TEXT, index, text)

    def get_scope(self, index: int, capacity: Optional[int], buffer: TextBuffer = None) -> tuple[int, object]:
        """Class name of a scope plus its key list."""
        return self._unsupported(Capability.GET_SCOPE, index, capacity)

    def get_scope_as_text(self, index: int, capacity: Optional[int], buffer: TextBuffer = None) -> int:
        return self._unsupported(Capability.GET_SCOPE_AS_TEXT, index, capacity)

    def remove_scope(self, index: int) -> None:
        self._unsupported(Capability.REMOVE_SCOPE, index)

    def remove_all_scopes(self) -> None:
        self._unsupported(Capability.REMOVE_ALL_SCOPES)

    def set_class_name(self, name: Optional[str]) -> None:
        self._unsupported(Capability.SET_CLASS_NAME, name)

    def get_class_name(self, capacity: Optional[int], buffer: TextBuffer = None) -> int:
        return self._unsupported(Capability.GET_CLASS_NAME, capacity)

    def get_key_list(self) -> object:
        return self._unsupported(Capability.GET_KEY_LIST)

    def create_class_part(self, flags: int, name: Optional[str]) -> None:
        self._unsupported(Capability.CREATE_CLASS_PART, flags, name)

    def delete_class_part(self, flags: int) -> None:
        self._unsupported(Capability.DELETE_CLASS_PART, flags)

    def is_relative(self, machine: Optional[str], namespace: Optional[str]) -> bool:
        return self._unsupported(Capability.IS_RELATIVE, machine, namespace)

    def is_relative_or_child(self, machine: Optional[str], namespace: Optional[str], flags: int = 0) -> bool:
        return self._unsupported(Capability.IS_RELATIVE_OR_CHILD, machine, namespace, flags)

    def is_local(self, machine: Optional[str]) -> bool:
        return self._unsupported(Capability.IS_LOCAL, machine)

    def is_same_class_name(self, class_name: Optional[str]) -> bool:
        return self._unsupported(Capability.IS_SAME_CLASS_NAME, class_name)

    # endregion
