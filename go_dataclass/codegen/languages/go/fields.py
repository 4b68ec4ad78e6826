"""
Field list parsing.

Turns ``"First *http.Request|Second string"`` into validated, ordered
field declarations.
"""

from dataclasses import dataclass
from typing import List

from ....logging_config import get_logger
from ...core.config import FIELD_SEPARATOR
from ...core.generator import (
    EmptyFieldList,
    MalformedField,
    InvalidFieldName,
    InvalidTypeSyntax,
    DuplicateFieldName,
)
from ...core.naming import is_public
from .typeexpr import TypeExpressionError, validate_type_expr

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldDeclaration:
    """One ``Name type`` pair describing an accessor to generate."""

    name: str
    type_expr: str


def _split_segments(raw: str, separator: str) -> List[str]:
    if not separator:
        return [raw]
    return raw.split(separator)


def _is_valid_name(name: str) -> bool:
    # No whitespace anywhere, and exported
    return bool(name) and not any(ch.isspace() for ch in name) and is_public(name)


def parse_fields(
    raw: str, separator: str = FIELD_SEPARATOR, debug: bool = False
) -> List[FieldDeclaration]:
    """
    Parse a raw field list.

    Each segment is split on its first space into a name and a type. The
    name must be public and whitespace-free, the type must be a valid Go
    expression, and names must not repeat.

    Args:
        raw: Field list such as ``"A int|B []string"``
        separator: Field separator
        debug: Log every parsed segment

    Returns:
        Field declarations in input order

    Raises:
        EmptyFieldList: If raw is empty
        MalformedField: If a segment has no space
        InvalidFieldName: If a name is not public or contains whitespace
        InvalidTypeSyntax: If a type does not parse
        DuplicateFieldName: If a name appears twice
    """
    if not raw:
        raise EmptyFieldList()

    fields: List[FieldDeclaration] = []
    seen = set()

    for i, segment in enumerate(_split_segments(raw, separator)):
        if debug:
            logger.debug("Parse field[%d]: %s", i, segment)

        parts = segment.split(" ", 1)
        if len(parts) != 2:
            raise MalformedField(segment)

        name, type_expr = parts
        if not _is_valid_name(name):
            raise InvalidFieldName(name)

        try:
            validate_type_expr(type_expr)
        except TypeExpressionError as e:
            raise InvalidTypeSyntax(segment, e) from e

        if name in seen:
            raise DuplicateFieldName(name)
        seen.add(name)

        if debug:
            logger.debug(
                "Parse field[%d]: %s -> name = %s typeName = %s",
                i, segment, name, type_expr,
            )
        fields.append(FieldDeclaration(name=name, type_expr=type_expr))

    if not fields:
        raise EmptyFieldList()
    return fields
