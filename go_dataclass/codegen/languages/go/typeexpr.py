"""
Go type-expression validation using tree-sitter.

The text is parsed twice inside a throwaway Go file, first as the type of a
variable (``var _ T``) and then as its initial value (``var _ = E``), so both
type literals and ordinary expressions are accepted. Generated code keeps the
text exactly as written; the tree is only used to decide whether it is valid.
"""

from typing import Optional, Tuple

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from ....logging_config import get_logger

logger = get_logger(__name__)

GO_LANGUAGE = Language(tree_sitter_go.language())

_DEFAULT_ENCODING = "utf-8"

# Wrappers placing the text where Go expects a type or a value
_PACKAGE_PREFIX = "package p\n"
_TYPE_PREFIX = _PACKAGE_PREFIX + "var _ "
_VALUE_PREFIX = _PACKAGE_PREFIX + "var _ = "

_PARAMETER_KINDS = ("parameter_declaration", "variadic_parameter_declaration")


class TypeExpressionError(ValueError):
    """Raised when a string is not a syntactically valid Go expression."""

    def __init__(self, message: str, source: str, offset: int):
        self.message = message
        self.source = source
        self.offset = offset
        self.line = source.count("\n", 0, offset) + 1
        self.column = offset - (source.rfind("\n", 0, offset) + 1) + 1
        super().__init__(f"{self.line}:{self.column}: {message}")


def _get_parser() -> Parser:
    """Get a tree-sitter Parser configured for Go."""
    parser = Parser()
    parser.language = GO_LANGUAGE
    return parser


def parse_go_source(source: bytes) -> Node:
    """
    Parse Go source.

    Returns:
        Root node of the syntax tree (``source_file``)
    """
    return _get_parser().parse(source).root_node


def _named(node: Node) -> list:
    return [child for child in node.named_children if child.type != "comment"]


def _first_error(node: Node) -> Optional[Node]:
    """Depth-first search for the first ERROR or MISSING node."""
    if node.is_error or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _first_error(child)
        if found is not None:
            return found
    return node


def _describe_error(node: Node) -> str:
    if node.is_missing:
        return f"missing {node.type}"
    text = node.text.decode(_DEFAULT_ENCODING, errors="replace").strip() if node.text else ""
    if not text:
        return "unexpected end of expression"
    return f"syntax error at {text.splitlines()[0]!r}"


class _Attempt:
    """One parse of the text inside a wrapper."""

    def __init__(self, source: str, prefix: str):
        self.source = source
        self.prefix_len = len(prefix.encode(_DEFAULT_ENCODING))
        self._source_bytes = source.encode(_DEFAULT_ENCODING)
        self.root = parse_go_source((prefix + source + "\n").encode(_DEFAULT_ENCODING))

    def offset(self, node: Node) -> int:
        """Character offset of node within the caller's text."""
        byte_offset = min(max(node.start_byte - self.prefix_len, 0), len(self._source_bytes))
        return len(self._source_bytes[:byte_offset].decode(_DEFAULT_ENCODING, errors="ignore"))

    def error(self, message: str, node: Node) -> TypeExpressionError:
        return TypeExpressionError(message, self.source, self.offset(node))

    def var_spec(self) -> Node:
        """
        Return the single ``var_spec`` the wrapper declares.

        Raises:
            TypeExpressionError: If the tree has syntax errors or the text
                spills into further declarations
        """
        error = _first_error(self.root)
        if error is not None:
            raise self.error(_describe_error(error), error)

        declarations = _named(self.root)
        if len(declarations) != 2 or declarations[1].type != "var_declaration":
            extra = declarations[2] if len(declarations) > 2 else self.root
            raise self.error("expected a single expression", extra)
        return _named(declarations[1])[0]


def _parse_as_type(source: str) -> Tuple[_Attempt, Node]:
    attempt = _Attempt(source, _TYPE_PREFIX)
    spec = attempt.var_spec()
    type_node = spec.child_by_field_name("type")
    if type_node is None or spec.child_by_field_name("value") is not None:
        raise attempt.error("expected a type", spec)
    return attempt, type_node


def _parse_as_value(source: str) -> Tuple[_Attempt, Node]:
    attempt = _Attempt(source, _VALUE_PREFIX)
    spec = attempt.var_spec()
    values = spec.child_by_field_name("value")
    if values is None or len(_named(values)) != 1:
        raise attempt.error("expected a single expression", spec)
    return attempt, _named(values)[0]


def _check_tree(attempt: _Attempt, node: Node) -> None:
    """Reject constructs the grammar accepts but a field type cannot hold."""
    if node.type == "func_literal":
        raise attempt.error("function literals are not supported", node)
    if node.type == "type_assertion_expression":
        asserted = node.child_by_field_name("type")
        if asserted is not None and asserted.text == b"type":
            raise attempt.error("use of .(type) outside type switch", asserted)
    if node.type == "parameter_list":
        _check_parameters(attempt, node)
    for child in node.named_children:
        _check_tree(attempt, child)


def _check_parameters(attempt: _Attempt, node: Node) -> None:
    params = [child for child in node.named_children if child.type in _PARAMETER_KINDS]

    # Either every parameter is named or none is
    named = [p.child_by_field_name("name") is not None for p in params]
    if any(named) and not all(named):
        raise attempt.error("mixed named and unnamed parameters", params[named.index(False)])

    is_result = node.parent is not None and node.parent.child_by_field_name("result") == node
    for position, param in enumerate(params):
        if param.type != "variadic_parameter_declaration":
            continue
        if is_result or position != len(params) - 1:
            raise attempt.error("can only use ... with final parameter in list", param)


def parse_type_expr(source: str) -> Node:
    """
    Parse source as a single Go type or expression.

    Returns:
        The tree-sitter node of the type or expression

    Raises:
        TypeExpressionError: If source is not a valid expression
    """
    if not source.strip():
        raise TypeExpressionError("missing type expression", source, 0)

    try:
        attempt, node = _parse_as_type(source)
    except TypeExpressionError as type_error:
        try:
            attempt, node = _parse_as_value(source)
        except TypeExpressionError as value_error:
            # Report whichever reading got further into the text
            if value_error.offset > type_error.offset:
                raise value_error from None
            raise type_error from None

    _check_tree(attempt, node)
    return node


def validate_type_expr(source: str) -> str:
    """
    Check that source is a syntactically valid Go type expression.

    Returns:
        The source text, unchanged

    Raises:
        TypeExpressionError: If source does not parse
    """
    node = parse_type_expr(source)
    logger.debug("Type expression %r parsed as %s", source, node.type)
    return source


def read_package_name(source: bytes) -> Optional[str]:
    """
    Read the package clause of a Go file.

    Returns:
        The package name, or None when the file does not start with a
        package clause
    """
    declarations = _named(parse_go_source(source))
    if not declarations or declarations[0].type != "package_clause":
        return None
    for child in declarations[0].named_children:
        if child.type == "package_identifier":
            return child.text.decode(_DEFAULT_ENCODING)
    return None
