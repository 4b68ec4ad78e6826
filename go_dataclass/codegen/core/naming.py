"""
Naming utilities for generated identifiers.

Go decides visibility by the case of the first character, so a single
source name yields both the exported accessor name and the unexported
field, parameter and struct names.
"""

from .generator import InvalidTypeName


def _require_non_empty(value: str) -> None:
    if not value:
        raise ValueError("identifier must not be empty")


def capitalize(value: str) -> str:
    """Return value with its first character upper-cased, rest unchanged."""
    _require_non_empty(value)
    return value[0].upper() + value[1:]


def decapitalize(value: str) -> str:
    """Return value with its first character lower-cased, rest unchanged."""
    _require_non_empty(value)
    return value[0].lower() + value[1:]


def is_public(value: str) -> bool:
    """
    Check whether value is an exported (public) identifier.

    An identifier is public when it equals its own capitalized form and its
    first character is an upper-case letter. The second check is needed:
    names starting with "_" or a digit are their own capitalized form too.
    """
    return bool(value) and value[0].isupper() and capitalize(value) == value


def validate_type_name(type_name: str) -> str:
    """
    Validate the interface name supplied by the caller.

    Args:
        type_name: Requested interface name

    Returns:
        The type name, unchanged

    Raises:
        InvalidTypeName: If the name is empty or not public
    """
    if not type_name:
        raise InvalidTypeName("type must be set", type_name)
    if not is_public(type_name):
        raise InvalidTypeName(f"type must be public: {type_name}", type_name)
    return type_name
