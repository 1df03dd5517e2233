"""Capability enum and CapabilitySet."""

from __future__ import annotations

import enum

from wbem_path._errors import NotImplementedOperation


class Capability(enum.Enum):
    """Operations a path object may implement."""

    SET_TEXT = "set_text"
    GET_TEXT = "get_text"
    GET_INFO = "get_info"
    SET_SERVER = "set_server"
    GET_SERVER = "get_server"
    GET_NAMESPACE_COUNT = "get_namespace_count"
    SET_NAMESPACE_AT = "set_namespace_at"
    GET_NAMESPACE_AT = "get_namespace_at"
    REMOVE_NAMESPACE_AT = "remove_namespace_at"
    REMOVE_ALL_NAMESPACES = "remove_all_namespaces"
    GET_SCOPE_COUNT = "get_scope_count"
    SET_SCOPE = "set_scope"
    SET_SCOPE_FROM_TEXT = "set_scope_from_text"
    GET_SCOPE = "get_scope"
    GET_SCOPE_AS_TEXT = "get_scope_as_text"
    REMOVE_SCOPE = "remove_scope"
    REMOVE_ALL_SCOPES = "remove_all_scopes"
    SET_CLASS_NAME = "set_class_name"
    GET_CLASS_NAME = "get_class_name"
    GET_KEY_LIST = "get_key_list"
    CREATE_CLASS_PART = "create_class_part"
    DELETE_CLASS_PART = "delete_class_part"
    IS_RELATIVE = "is_relative"
    IS_RELATIVE_OR_CHILD = "is_relative_or_child"
    IS_LOCAL = "is_local"
    IS_SAME_CLASS_NAME = "is_same_class_name"


class CapabilitySet(frozenset[Capability]):
    """The operations a path type implements, as a frozenset of :class:`Capability`."""

    __slots__ = ()

    def supports(self, cap: Capability) -> bool:
        return cap in self

    def require(self, cap: Capability, *, path_type: str = "") -> None:
        """Raise if a capability is not implemented.

        :raises NotImplementedOperation: If the capability is missing.
        """
        if cap not in self:
            where = f" by path type '{path_type}'" if path_type else ""
            raise NotImplementedOperation(
                f"Operation '{cap.value}' is not implemented{where}",
                operation=cap.value,
            )

    def __repr__(self) -> str:
        return f"CapabilitySet({{{', '.join(sorted(c.name for c in self))}}})"
