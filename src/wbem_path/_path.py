"""WbemPath — reference-counted management object path."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Optional

from wbem_path._builder import build_text
from wbem_path._capabilities import Capability, CapabilitySet
from wbem_path._config import DEFAULT_CONFIG
from wbem_path._errors import InvalidParameter, NoSuchInterface, OutOfMemory
from wbem_path._interface import PathInterface
from wbem_path._models import PathBuffer
from wbem_path._parser import parse_text
from wbem_path._types import IID_IUnknown, IID_IWbemPath, TextFlag

if TYPE_CHECKING:
    import uuid

    from wbem_path._config import PathConfig
    from wbem_path._types import TextBuffer

log = logging.getLogger(__name__)


class WbemPath(PathInterface):
    """A path such as ``\\\\server\\root\\cimv2:Win32_Process``, decomposed.

    The object starts with one reference and an empty buffer. Only the
    reference count is synchronized: callers must not run :meth:`set_text`
    on one thread while another thread reads the same object.

    :param config: Rendering settings. Validates immediately.
    :raises ValueError: If config is invalid.
    """

    _CAPABILITIES = CapabilitySet(
        {
            Capability.SET_TEXT,
            Capability.GET_TEXT,
            Capability.GET_NAMESPACE_COUNT,
        }
    )
    _INTERFACES = frozenset({IID_IUnknown, IID_IWbemPath})

    def __init__(self, config: Optional[PathConfig] = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._config.validate()
        self._buffer = PathBuffer()
        self._refs = 1
        self._lock = threading.Lock()
        log.debug("Created %r", self)

    @property
    def name(self) -> str:
        return "wbem"

    @property
    def capabilities(self) -> CapabilitySet:
        return self._CAPABILITIES

    @property
    def config(self) -> PathConfig:
        return self._config

    @property
    def buffer(self) -> PathBuffer:
        """The decomposed fields of the current path. Read only by convention."""
        return self._buffer

    @property
    def refs(self) -> int:
        """Current reference count; 0 once the object is destroyed."""
        return self._refs

    @property
    def destroyed(self) -> bool:
        return self._refs == 0

    def __repr__(self) -> str:
        return f"WbemPath(text={self._buffer.text!r}, refs={self._refs})"

    # region: lifecycle

    def add_ref(self) -> int:
        with self._lock:
            if self._refs == 0:
                raise InvalidParameter("Path object has already been destroyed", path=self._buffer.text)
            self._refs += 1
            return self._refs

    def release(self) -> int:
        with self._lock:
            if self._refs == 0:
                raise InvalidParameter("Path object has already been destroyed", path=self._buffer.text)
            self._refs -= 1
            refs = self._refs
        if refs == 0:
            log.debug("Destroying %r", self)
            self._buffer.clear()
        return refs

    def query_interface(self, iid: uuid.UUID) -> WbemPath:
        log.debug("query_interface(%s) on %r", iid, self)
        if iid not in self._INTERFACES:
            raise NoSuchInterface(f"Interface {iid} is not implemented", interface=str(iid))
        self.add_ref()
        return self

    # endregion

    # region: text

    def set_text(self, mode: int, text: Optional[str]) -> None:
        log.debug("set_text(0x%x, %r)", mode, text)
        if not mode or text is None:
            raise InvalidParameter("set_text requires a non-zero mode and a text", path=text)

        self._buffer.clear()
        try:
            self._buffer.load(parse_text(text), text)
        except OutOfMemory:
            self._buffer.clear()
            raise
        except MemoryError as exc:
            self._buffer.clear()
            raise OutOfMemory("Out of memory while storing path text", path=text) from exc

    def get_text(self, flags: int, capacity: Optional[int], buffer: TextBuffer = None) -> int:
        """Two-call text retrieval into a ``ctypes`` wide character buffer.

        Call once with ``capacity=0`` to learn the required size, allocate
        e.g. ``ctypes.create_unicode_buffer(required)``, then call again with
        that capacity and buffer. A projection with no data is copied as an
        empty string and needs a capacity of 1.

        :param flags: One of the :class:`TextFlag` values.
        :param capacity: Capacity of ``buffer`` in characters.
        :param buffer: Destination, written with a terminator.
        :returns: The required capacity, including the terminator.
        :raises InvalidParameter: If ``capacity`` is ``None``, ``flags`` is
            unknown, or the capacity is sufficient but ``buffer`` is missing
            or smaller than required.
        :raises OutOfMemory: If the text could not be built.
        """
        if capacity is None:
            raise InvalidParameter("get_text requires a capacity", path=self._buffer.text)

        text = build_text(self._buffer, flags, self._config)
        required = (len(text) if text is not None else 0) + 1
        if capacity < required:
            return required
        if buffer is None:
            raise InvalidParameter("Capacity is sufficient but no buffer was supplied", path=self._buffer.text)
        if len(buffer) < required:
            raise InvalidParameter(
                f"Buffer holds {len(buffer)} characters, {required} required",
                path=self._buffer.text,
            )
        buffer.value = text or ""
        log.debug("get_text(0x%x) -> %r", flags, text)
        return required

    def text(self, flags: int = TextFlag.DEFAULT) -> Optional[str]:
        """Return the projection selected by ``flags``, or ``None`` if it has no data.

        :raises InvalidParameter: If ``flags`` is unknown.
        :raises OutOfMemory: If the text could not be built.
        """
        return build_text(self._buffer, flags, self._config)

    def get_namespace_count(self) -> int:
        return self._buffer.num_namespaces

    # endregion
