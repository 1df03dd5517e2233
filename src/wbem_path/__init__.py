"""Parser and builder for WMI management object paths."""

from wbem_path._builder import build_namespace, build_server, build_text
from wbem_path._capabilities import Capability, CapabilitySet
from wbem_path._config import PathConfig
from wbem_path._errors import (
    InvalidParameter,
    NoSuchInterface,
    NotImplementedOperation,
    OutOfMemory,
    PathError,
)
from wbem_path._interface import PathInterface
from wbem_path._models import PathBuffer, PathComponents
from wbem_path._parser import parse_text
from wbem_path._path import WbemPath
from wbem_path._registry import create_path, register_path_type
from wbem_path._types import IID_IUnknown, IID_IWbemPath, CreateFlag, TextFlag

__version__ = "0.1.0"

__all__ = [
    # Core
    "WbemPath",
    "PathInterface",
    "create_path",
    "register_path_type",
    # Parsing & building
    "parse_text",
    "build_text",
    "build_namespace",
    "build_server",
    "PathBuffer",
    "PathComponents",
    # Flags & identifiers
    "CreateFlag",
    "TextFlag",
    "IID_IUnknown",
    "IID_IWbemPath",
    # Capabilities
    "Capability",
    "CapabilitySet",
    # Config
    "PathConfig",
    # Errors
    "PathError",
    "InvalidParameter",
    "OutOfMemory",
    "NotImplementedOperation",
    "NoSuchInterface",
    # Version
    "__version__",
]
