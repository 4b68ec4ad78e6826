"""
Go dataclass generator.

Generates a read-only interface, its unexported backing struct, one
accessor per field and a ``New<Interface>`` constructor.
"""

import io
from typing import List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, EmptyFieldList
from ...core.naming import decapitalize
from .fields import FieldDeclaration, parse_fields
from .specs import InterfaceSpec, StructSpec

logger = get_logger(__name__)


class DataclassGenerator(CodeGenerator):
    """Code generator for Go accessor interfaces."""

    def __init__(self, type_name: str, config: Optional[GeneratorConfig] = None):
        """
        Initialize the generator.

        Args:
            type_name: Interface name, already validated as public
            config: Generator configuration
        """
        super().__init__(config)
        self.type_name = type_name
        self.fields: List[FieldDeclaration] = []
        self._buf = io.StringIO()

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    @property
    def debug(self) -> bool:
        return self.config.debug

    def printf(self, fmt: str, *args) -> None:
        """Append formatted text to the output buffer."""
        self._buf.write(fmt % args if args else fmt)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return self._buf.getvalue()

    def bytes(self) -> bytes:
        return self.getvalue().encode("utf-8")

    def parse_fields(self, raw: str) -> List[FieldDeclaration]:
        """Parse and keep the field list; see ``fields.parse_fields``."""
        self.fields = parse_fields(
            raw, separator=self.config.field_separator, debug=self.debug
        )
        return self.fields

    def write_header(self, args: str, package_name: str) -> None:
        """Write the generated-code marker and the package clause."""
        self.printf(
            self.render_template(
                "header.go.j2", {"args": args, "package_name": package_name}
            )
        )

    def build_specs(self) -> tuple[InterfaceSpec, StructSpec]:
        """Project the parsed fields onto the interface and struct specs."""
        if not self.fields:
            raise EmptyFieldList()

        engine = self.template_engine
        interface_spec = InterfaceSpec(self.type_name, indent=self.indent, engine=engine)
        struct_spec = StructSpec(
            decapitalize(self.type_name), indent=self.indent, engine=engine
        )
        for f in self.fields:
            interface_spec.add(f.name, f.type_expr)
            struct_spec.add(f.name, f.type_expr)
        return interface_spec, struct_spec

    def generate(self) -> str:
        """
        Emit the interface followed by the struct, accessors and constructor.

        Returns:
            The text appended to the buffer by this call
        """
        interface_spec, struct_spec = self.build_specs()
        code = interface_spec.generate() + struct_spec.generate(self.type_name)
        if self.debug:
            logger.debug(
                "Generated %s with %d field(s)", self.type_name, len(self.fields)
            )
        self.printf(code)
        return code

    def render(self, raw: str) -> str:
        """Parse raw fields and return only the emitted declarations."""
        self.parse_fields(raw)
        return self.generate()
