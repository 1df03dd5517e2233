"""Registry — path type factories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from wbem_path._config import PathConfig
    from wbem_path._interface import PathInterface

# Global path factory registry: maps type strings to path classes.
_PATH_FACTORIES: dict[str, type[PathInterface]] = {}


def register_path_type(type_name: str, cls: type[PathInterface]) -> None:
    """Register a path class for a given type string.

    :param type_name: The type identifier (e.g. ``"wbem"``).
    :param cls: The path class to instantiate. It must accept a ``config`` keyword.
    """
    _PATH_FACTORIES[type_name] = cls


def _register_builtin_types() -> None:
    """Register the built-in path types."""
    from wbem_path._path import WbemPath

    if "wbem" not in _PATH_FACTORIES:
        register_path_type("wbem", WbemPath)


def create_path(type_name: str = "wbem", *, config: Optional[PathConfig] = None) -> PathInterface:
    """Create a new path object holding one reference.

    :param type_name: The registered path type.
    :param config: Rendering settings passed to the path type.
    :raises ValueError: If no path type with this name is registered, or
        ``config`` is invalid.
    """
    _register_builtin_types()
    if type_name not in _PATH_FACTORIES:
        raise ValueError(f"Unknown path type '{type_name}'. Registered types: {sorted(_PATH_FACTORIES.keys())}")
    factory = _PATH_FACTORIES[type_name]
    return factory(config=config)  # type: ignore[call-arg]
