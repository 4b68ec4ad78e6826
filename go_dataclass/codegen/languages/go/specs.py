"""
Intermediate representation of the generated declarations.

The interface spec holds the exported method set; the struct spec holds
the unexported storage, the accessors satisfying the interface, and the
constructor. Both are filled from the same ordered field declarations.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ...core.naming import capitalize, decapitalize
from ...core.templates import TemplateEngine, get_default_template_engine

DEFAULT_INDENT = "\t"


@dataclass(frozen=True)
class InterfaceMethod:
    name: str
    return_type: str


@dataclass(frozen=True)
class StructField:
    name: str
    type_expr: str


@dataclass(frozen=True)
class StructMethod:
    name: str
    field_name: str
    return_type: str


@dataclass
class InterfaceSpec:
    """Method signatures exposed to consumers of the generated type."""

    name: str
    methods: List[InterfaceMethod] = field(default_factory=list)
    indent: str = DEFAULT_INDENT
    engine: Optional[TemplateEngine] = field(default=None, repr=False)

    def add(self, field_name: str, type_expr: str) -> None:
        """Append one ``Name() Type`` method."""
        self.methods.append(InterfaceMethod(name=field_name, return_type=type_expr))

    def generate(self) -> str:
        engine = self.engine or get_default_template_engine()
        return engine.render_template(
            "interface.go.j2",
            {"name": self.name, "methods": self.methods, "indent": self.indent},
        )


@dataclass
class StructSpec:
    """Private backing struct, its accessors and its constructor."""

    name: str
    fields: List[StructField] = field(default_factory=list)
    accessors: List[StructMethod] = field(default_factory=list)
    indent: str = DEFAULT_INDENT
    engine: Optional[TemplateEngine] = field(default=None, repr=False)

    def add(self, field_name: str, type_expr: str) -> None:
        """Append the private field and the public accessor for one field."""
        private_name = decapitalize(field_name)
        self.fields.append(StructField(name=private_name, type_expr=type_expr))
        self.accessors.append(
            StructMethod(
                name=capitalize(field_name),
                field_name=private_name,
                return_type=type_expr,
            )
        )

    def generate(self, interface_name: str) -> str:
        """
        Render the struct block, the accessors and the constructor.

        Args:
            interface_name: Interface the constructor returns

        Returns:
            Go source text
        """
        engine = self.engine or get_default_template_engine()
        body = engine.render_template(
            "struct.go.j2",
            {
                "name": self.name,
                "fields": self.fields,
                "accessors": self.accessors,
                "indent": self.indent,
            },
        )
        return body + self.generate_constructor(interface_name)

    def generate_constructor(self, interface_name: str) -> str:
        # The constructor returns the interface type, never the struct
        engine = self.engine or get_default_template_engine()
        return engine.render_template(
            "constructor.go.j2",
            {
                "interface_name": interface_name,
                "struct_name": self.name,
                "fields": self.fields,
                "indent": self.indent,
            },
        )
