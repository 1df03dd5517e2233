"""Text builder: render a PathBuffer in one of the TextFlag projections."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from wbem_path._config import DEFAULT_CONFIG
from wbem_path._errors import InvalidParameter, OutOfMemory
from wbem_path._types import TextFlag

if TYPE_CHECKING:
    from wbem_path._config import PathConfig
    from wbem_path._models import PathBuffer


def build_namespace(buffer: PathBuffer, *, leading_separator: bool, config: PathConfig = DEFAULT_CONFIG) -> str:
    """Join the namespace segments, optionally with a separator in front of the first."""
    sep = config.separator
    joined = sep.join(buffer.namespaces)
    if leading_separator and buffer.namespaces:
        return sep + joined
    return joined


def build_server(buffer: PathBuffer, *, config: PathConfig = DEFAULT_CONFIG) -> str:
    """Render ``\\\\server``, or the local machine marker if no server was captured."""
    prefix = config.separator * 2
    if buffer.len_server:
        return prefix + buffer.server  # type: ignore[operator]
    return prefix + config.local_server


def _with_class(buffer: PathBuffer, head: str) -> str:
    if buffer.len_class:
        return f"{head}:{buffer.class_name}"
    return head


def _build(buffer: PathBuffer, flags: int, config: PathConfig) -> Optional[str]:
    if flags == TextFlag.DEFAULT:
        return _with_class(buffer, build_namespace(buffer, leading_separator=False, config=config))
    if flags == TextFlag.RELATIVE_ONLY:
        return buffer.class_name if buffer.len_class else None
    if flags == TextFlag.SERVER_TOO:
        head = build_server(buffer, config=config) + build_namespace(buffer, leading_separator=True, config=config)
        return _with_class(buffer, head)
    if flags == TextFlag.SERVER_AND_NAMESPACE_ONLY:
        return build_server(buffer, config=config) + build_namespace(buffer, leading_separator=True, config=config)
    if flags == TextFlag.NAMESPACE_ONLY:
        return build_namespace(buffer, leading_separator=False, config=config)
    if flags == TextFlag.ORIGINAL:
        return buffer.text
    raise InvalidParameter(f"Unhandled text flags 0x{flags:x}", path=buffer.text)


def build_text(buffer: PathBuffer, flags: int, config: Optional[PathConfig] = None) -> Optional[str]:
    """Render the buffer in the projection selected by ``flags``.

    Returns ``None`` when the projection has no source data: ``RELATIVE_ONLY``
    without a class, or ``ORIGINAL`` before any text was set. An empty string
    is a present, zero-length result.

    :param buffer: The decomposed path to render.
    :param flags: One of the :class:`TextFlag` values.
    :param config: Rendering settings; defaults to ``\\`` and ``\\\\.``.
    :raises InvalidParameter: If ``flags`` is not a known projection.
    :raises OutOfMemory: If the result could not be allocated.
    """
    try:
        return _build(buffer, flags, config or DEFAULT_CONFIG)
    except MemoryError as exc:
        raise OutOfMemory("Out of memory while building path text", path=buffer.text) from exc
