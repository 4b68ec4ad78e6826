"""
Go dataclass generator module.

Parses ``Name type`` field lists and emits a read-only interface with its
backing struct, accessors and constructor.
"""

from .generator import DataclassGenerator
from .fields import FieldDeclaration, parse_fields
from .specs import InterfaceSpec, StructSpec
from .typeexpr import TypeExpressionError, parse_type_expr, validate_type_expr

__all__ = [
    "DataclassGenerator",
    "FieldDeclaration",
    "parse_fields",
    "InterfaceSpec",
    "StructSpec",
    "TypeExpressionError",
    "parse_type_expr",
    "validate_type_expr",
]
