"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering and holds the
built-in Go templates used to emit dataclass declarations.
"""

from typing import Dict, Any, Optional

from jinja2 import Environment, DictLoader, TemplateNotFound


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation settings."""

    def __init__(self, templates: Optional[Dict[str, str]] = None):
        """
        Initialize template engine.

        Args:
            templates: Initial in-memory templates, keyed by name
        """
        # Settings for line-exact source output
        self._env = Environment(
            loader=DictLoader(dict(templates or {})),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template can be loaded."""
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True


# Built-in Go templates. Block tags sit on their own lines and vanish
# together with their newline, so every emitted line is a template line.
GO_HEADER_TEMPLATE = """\
// Code generated by "dataclass {{ args }}"; DO NOT EDIT.

package {{ package_name }}

"""

GO_INTERFACE_TEMPLATE = """\
type {{ name }} interface {
{% for method in methods %}
{{ indent }}{{ method.name }}() {{ method.return_type }}
{% endfor %}
}
"""

GO_STRUCT_TEMPLATE = """\
type {{ name }} struct {
{% for field in fields %}
{{ indent }}{{ field.name }} {{ field.type_expr }}
{% endfor %}
}
{% for accessor in accessors %}
func (s *{{ name }}) {{ accessor.name }}() {{ accessor.return_type }} { return s.{{ accessor.field_name }} }
{% endfor %}
"""

GO_CONSTRUCTOR_TEMPLATE = """\
func New{{ interface_name }}(
{% for field in fields %}
{{ indent }}{{ field.name }} {{ field.type_expr }},
{% endfor %}
) {{ interface_name }} {
{{ indent }}return &{{ struct_name }}{
{% for field in fields %}
{{ indent }}{{ indent }}{{ field.name }}: {{ field.name }},
{% endfor %}
{{ indent }}}
}
"""

BUILTIN_TEMPLATES = {
    "header.go.j2": GO_HEADER_TEMPLATE,
    "interface.go.j2": GO_INTERFACE_TEMPLATE,
    "struct.go.j2": GO_STRUCT_TEMPLATE,
    "constructor.go.j2": GO_CONSTRUCTOR_TEMPLATE,
}


def create_template_engine(overrides: Optional[Dict[str, str]] = None) -> TemplateEngine:
    """
    Create a template engine loaded with the built-in Go templates.

    Args:
        overrides: Templates replacing built-ins of the same name
    """
    engine = TemplateEngine(BUILTIN_TEMPLATES)
    for name, content in (overrides or {}).items():
        engine.add_template(name, content)
    return engine


# Default template engine instance
_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the shared engine holding the built-in templates."""
    global _default_engine
    if _default_engine is None:
        _default_engine = create_template_engine()
    return _default_engine
