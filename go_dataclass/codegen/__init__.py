"""
Code generation for Go dataclasses.

Generates a read-only interface, a private struct, accessors and a
constructor from an interface name and a ``Name type`` field list.
"""

from .core.generator import (
    GeneratorError,
    GenerationResult,
    InvalidTypeName,
    ParseError,
    EmptyFieldList,
    MalformedField,
    InvalidFieldName,
    InvalidTypeSyntax,
    DuplicateFieldName,
    generate_code as _generate_code,
)
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .core.naming import validate_type_name
from .languages.go import DataclassGenerator, FieldDeclaration, parse_fields


# Convenience functions
def generate_dataclass(type_name, fields, config=None):
    """
    Generate Go declarations for a dataclass.

    Args:
        type_name: Public interface name
        fields: Field list such as ``"First *Request|Second string"``
        config: Optional GeneratorConfig

    Returns:
        Interface, struct, accessors and constructor as Go source

    Raises:
        GeneratorError: If the type name or the field list is invalid
    """
    validate_type_name(type_name)
    generator = DataclassGenerator(type_name, config)
    return generator.render(fields)


def generate_code(type_name, fields, config=None):
    """
    Generate Go declarations, reporting failures in the result.

    Args:
        type_name: Public interface name
        fields: Field list
        config: Optional GeneratorConfig

    Returns:
        GenerationResult with generated code or the error
    """
    try:
        validate_type_name(type_name)
    except InvalidTypeName as e:
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
    return _generate_code(DataclassGenerator(type_name, config), fields)


# Export main interfaces
__all__ = [
    "DataclassGenerator",
    "FieldDeclaration",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "GenerationResult",
    "GeneratorError",
    "InvalidTypeName",
    "ParseError",
    "EmptyFieldList",
    "MalformedField",
    "InvalidFieldName",
    "InvalidTypeSyntax",
    "DuplicateFieldName",
    "generate_dataclass",
    "generate_code",
    "load_config",
    "parse_fields",
]
