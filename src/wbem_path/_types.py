"""Flag enums, interface identifiers and type aliases used throughout wbem_path."""

from __future__ import annotations

import ctypes
import enum
import uuid
from typing import Union

IID_IUnknown = uuid.UUID("00000000-0000-0000-c000-000000000046")
IID_IWbemPath = uuid.UUID("3bc15af2-736c-477e-9e51-238af8667dcc")

SEPARATORS = ("\\", "/")

TextBuffer = Union["ctypes.Array[ctypes.c_wchar]", None]


class CreateFlag(enum.IntFlag):
    """Accepted ``set_text`` mode bits (``WBEMPATH_CREATE_*``)."""

    ACCEPT_RELATIVE = 0x1
    ACCEPT_ABSOLUTE = 0x2
    ACCEPT_ALL = 0x4
    TREAT_SINGLE_IDENT_AS_NS = 0x8


class TextFlag(enum.IntEnum):
    """Output projections for ``get_text`` (``WBEMPATH_GET_*``)."""

    DEFAULT = 0x0
    RELATIVE_ONLY = 0x2
    SERVER_TOO = 0x4
    SERVER_AND_NAMESPACE_ONLY = 0x8
    NAMESPACE_ONLY = 0x10
    ORIGINAL = 0x20
