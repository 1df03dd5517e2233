"""Text parser: decompose a path string into server, namespaces and class."""

from __future__ import annotations

import logging

from wbem_path._errors import OutOfMemory
from wbem_path._models import PathComponents
from wbem_path._types import SEPARATORS

log = logging.getLogger(__name__)

_SERVER_PREFIXES = ("\\\\", "//")


def _capture(text: str, start: int, end: int) -> str:
    """Copy ``text[start:end]`` into a new string. Every field is taken through here."""
    return text[start:end]


def _find_separator(text: str, start: int, stop: int) -> int:
    """Index of the first separator in ``text[start:stop]``, or ``stop``."""
    for i in range(start, stop):
        if text[i] in SEPARATORS:
            return i
    return stop


def _split_namespaces(text: str, start: int, stop: int) -> list[str]:
    """Collect the namespace segments of the chain ``text[start:stop]``.

    Each separator opens a segment running to the next separator or ``stop``.
    A chain that does not open with a separator keeps its leading run as the
    first segment only when a separator follows it; a bare run before ``:``
    is not a namespace.
    Empty segments are kept.
    """
    segments: list[str] = []
    pos = start
    if pos < stop and text[pos] not in SEPARATORS:
        pos = _find_separator(text, start, stop)
        if pos < stop:
            segments.append(_capture(text, start, pos))
    while pos < stop:
        nxt = _find_separator(text, pos + 1, stop)
        segments.append(_capture(text, pos + 1, nxt))
        pos = nxt
    return segments


def _parse(text: str) -> PathComponents:
    end = len(text)
    pos = 0

    server = None
    if text.startswith(_SERVER_PREFIXES):
        pos = _find_separator(text, 2, end)
        server = _capture(text, 2, pos)

    colon = text.find(":", pos)
    chain_end = colon if colon != -1 else end
    namespaces = _split_namespaces(text, pos, chain_end)

    pos = chain_end + 1 if colon != -1 else end
    dot = text.find(".", pos)
    class_end = dot if dot != -1 else end
    class_name = _capture(text, pos, class_end) if class_end > pos else None

    key_list = None
    if dot != -1:
        key_list = _capture(text, dot + 1, end)
        log.warning("Key list is not parsed, ignoring %r in %r", key_list, text)

    return PathComponents(
        server=server,
        namespaces=tuple(namespaces),
        class_name=class_name,
        key_list=key_list,
    )


def parse_text(text: str) -> PathComponents:
    """Parse a path such as ``\\\\server\\root\\cimv2:Win32_Process``.

    Both ``\\`` and ``/`` are accepted as separators. Parsing is lenient:
    malformed text never fails, it only yields fewer or empty components.
    A key list after the class name is not parsed; its text is returned in
    :attr:`PathComponents.key_list`.

    :param text: The raw path text.
    :raises OutOfMemory: If a component could not be allocated. No partial
        result is returned.
    """
    try:
        components = _parse(text)
    except MemoryError as exc:
        raise OutOfMemory("Out of memory while parsing path text", path=text) from exc
    log.debug(
        "Parsed %r: server=%r namespaces=%r class=%r",
        text,
        components.server,
        components.namespaces,
        components.class_name,
    )
    return components
