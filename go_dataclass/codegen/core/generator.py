"""
Base generator interface and the error taxonomy of code generation.

Defines the contract the Go dataclass generator implements, the exceptions
raised for invalid input, and a result wrapper for callers that prefer a
value over an exception.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional

from .config import GeneratorConfig, validate_config
from .templates import TemplateEngine, create_template_engine


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class InvalidTypeName(GeneratorError):
    """The requested interface name is empty or not public."""

    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.name = name


class ParseError(GeneratorError):
    """Base exception for field list parsing errors."""

    pass


class EmptyFieldList(ParseError):
    """The field list yields no fields."""

    def __init__(self, message: str = "no fields found"):
        super().__init__(message)


class MalformedField(ParseError):
    """A field segment does not split into a name and a type."""

    def __init__(self, segment: str):
        super().__init__(f"invalid field: {segment}")
        self.segment = segment


class InvalidFieldName(ParseError):
    """A field name contains whitespace or is not public."""

    def __init__(self, name: str):
        super().__init__(f"invalid field name: {name}")
        self.name = name


class InvalidTypeSyntax(ParseError):
    """The type part of a field is not a valid Go expression."""

    def __init__(self, segment: str, cause: Exception):
        super().__init__(f"failed to parse field {segment}: {cause}")
        self.segment = segment
        self.cause = cause


class DuplicateFieldName(ParseError):
    """The same field name appears more than once."""

    def __init__(self, name: str):
        super().__init__(f"invalid field duplicated name: {name}")
        self.name = name


class CodeGenerator(ABC):
    """Abstract base class for code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(self.config.templates)
        return self._template_engine

    @property
    def indent(self) -> str:
        """One level of indentation as configured."""
        if self.config.use_tabs:
            return "\t"
        return " " * self.config.indent_size

    @abstractmethod
    def generate(self) -> str:
        """
        Generate code for the parsed input.

        Returns:
            Generated code as a string
        """
        pass

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator, raw_fields: str) -> GenerationResult:
    """
    Run a generator over a raw field list, capturing errors in the result.

    Args:
        generator: Generator instance (its type name is already validated)
        raw_fields: Field list such as ``"First *Request|Second string"``

    Returns:
        GenerationResult with code and metadata, or the error that stopped it
    """
    try:
        code = generator.render(raw_fields)
    except GeneratorError as e:
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "type_name": generator.type_name,
        "field_count": len(generator.fields),
    }
    return GenerationResult(code, validate_config(generator.config), metadata)
