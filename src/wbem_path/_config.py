"""Configuration model — immutable settings for rendering path text."""

from __future__ import annotations

import dataclasses

from wbem_path._types import SEPARATORS


@dataclasses.dataclass(frozen=True)
class PathConfig:
    """Describes how decomposed paths are rendered back to text.

    Parsing always accepts both ``\\`` and ``/``; only output is affected.

    :param separator: Separator placed between server and namespace segments.
    :param local_server: Server name rendered when none was captured.
    """

    separator: str = "\\"
    local_server: str = "."

    def validate(self) -> None:
        """Validate the separator and local server marker.

        :raises ValueError: If either setting cannot produce a well-formed path.
        """
        if self.separator not in SEPARATORS:
            raise ValueError(f"Separator must be one of {list(SEPARATORS)}, got {self.separator!r}")
        if not self.local_server:
            raise ValueError("Local server marker must not be empty")
        if any(sep in self.local_server for sep in SEPARATORS):
            raise ValueError(f"Local server marker must not contain a separator: {self.local_server!r}")

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> PathConfig:
        """Construct from a plain dict (e.g. parsed TOML/JSON).

        :param data: Dict with optional ``separator`` and ``local_server`` keys.
        """
        values: dict[str, str] = {}
        for key in ("separator", "local_server"):
            if key not in data:
                continue
            value = data[key]
            if not isinstance(value, str):
                msg = f"Config value '{key}' must be a string"
                raise TypeError(msg)
            values[key] = value
        config = cls(**values)
        config.validate()
        return config


DEFAULT_CONFIG = PathConfig()
