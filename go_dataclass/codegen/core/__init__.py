"""
Core code generation components.

Provides the base generator, error types, naming, configuration and
template utilities.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    generate_code,
    InvalidTypeName,
    ParseError,
    EmptyFieldList,
    MalformedField,
    InvalidFieldName,
    InvalidTypeSyntax,
    DuplicateFieldName,
)
from .naming import capitalize, decapitalize, is_public, validate_type_name
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config, validate_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Error taxonomy
    "InvalidTypeName",
    "ParseError",
    "EmptyFieldList",
    "MalformedField",
    "InvalidFieldName",
    "InvalidTypeSyntax",
    "DuplicateFieldName",
    # Naming utilities
    "capitalize",
    "decapitalize",
    "is_public",
    "validate_type_name",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "validate_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
