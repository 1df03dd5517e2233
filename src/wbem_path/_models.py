"""Decomposed path state: the parser's result and the buffer that owns it."""

from __future__ import annotations

import dataclasses
from typing import Optional


@dataclasses.dataclass(frozen=True)
class PathComponents:
    """Immutable result of parsing one path text.

    :param server: Server name, ``None`` when the text had no ``\\\\`` prefix.
    :param namespaces: Namespace segments in left-to-right order.
    :param class_name: Class name, ``None`` when there is no class component.
    :param key_list: Trailing key-list text that was not parsed, if any.
    """

    server: Optional[str] = None
    namespaces: tuple[str, ...] = ()
    class_name: Optional[str] = None
    key_list: Optional[str] = None


@dataclasses.dataclass
class PathBuffer:
    """Mutable owner of the decomposed fields of a path object.

    Either every field reflects the last accepted text, or the buffer is
    fully cleared. :meth:`load` and :meth:`clear` are the only mutators.
    """

    text: Optional[str] = None
    server: Optional[str] = None
    namespaces: list[str] = dataclasses.field(default_factory=list)
    class_name: Optional[str] = None

    @property
    def len_text(self) -> int:
        return len(self.text) if self.text is not None else 0

    @property
    def len_server(self) -> int:
        return len(self.server) if self.server is not None else 0

    @property
    def num_namespaces(self) -> int:
        return len(self.namespaces)

    @property
    def len_class(self) -> int:
        return len(self.class_name) if self.class_name is not None else 0

    @property
    def is_empty(self) -> bool:
        """``True`` if no text has been loaded since the last clear."""
        return self.text is None and self.server is None and not self.namespaces and self.class_name is None

    def load(self, components: PathComponents, text: str) -> None:
        """Replace every field from a parse result and its source text."""
        self.text = text
        self.server = components.server
        self.namespaces = list(components.namespaces)
        self.class_name = components.class_name

    def clear(self) -> None:
        """Reset every field to the absent state."""
        self.text = None
        self.server = None
        self.namespaces = []
        self.class_name = None
