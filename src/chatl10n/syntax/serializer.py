"""Serialize template AST back to template source.

Converts AST nodes to source text. Useful for:
- Diagnostics that name the expression that failed
- Code generators
- Property-based testing (roundtrip: parse -> serialize -> parse)

Python 3.13+.
"""

from chatl10n.constants import ESCAPE_CHAR, EXPRESSION_CLOSE, EXPRESSION_OPEN

from .ast import (
    Call,
    ComputedAccess,
    Expression,
    Identifier,
    NumberLiteral,
    Placeable,
    PropertyAccess,
    StringLiteral,
    Template,
    TextElement,
)

__all__ = ["serialize", "serialize_expression"]

_STRING_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def _escape_text(value: str, *, before_placeable: bool) -> str:
    r"""Escape text so the parser reads it back unchanged.

    Backslashes are doubled and "${" becomes "\${". A trailing "$" is
    escaped when a placeable follows it.
    """
    out: list[str] = []
    for i, ch in enumerate(value):
        if ch == ESCAPE_CHAR:
            out.append(ESCAPE_CHAR * 2)
        elif ch == "$" and (
            value.startswith("{", i + 1) or (before_placeable and i == len(value) - 1)
        ):
            out.append(ESCAPE_CHAR + "$")
        else:
            out.append(ch)
    return "".join(out)


def serialize_expression(expr: Expression) -> str:
    """Serialize a single expression (the text between ${ and }).

    Example:
        >>> serialize_expression(Call(Identifier("pluralize"), (Identifier("n"),)))
        'pluralize(n)'
    """
    match expr:
        case Identifier():
            return expr.name
        case StringLiteral():
            escaped = "".join(_STRING_ESCAPES.get(ch, ch) for ch in expr.value)
            return f"'{escaped}'"
        case NumberLiteral():
            return expr.raw
        case PropertyAccess():
            return f"{_serialize_target(expr.target)}.{expr.name}"
        case ComputedAccess():
            return f"{_serialize_target(expr.target)}[{serialize_expression(expr.key)}]"
        case Call():
            args = ", ".join(serialize_expression(arg) for arg in expr.arguments)
            return f"{_serialize_target(expr.callee)}({args})"
        case _:
            msg = f"Cannot serialize {type(expr).__name__}"
            raise TypeError(msg)


def _serialize_target(expr: Expression) -> str:
    # Number targets need parentheses: "1.x" would read as a float.
    if isinstance(expr, NumberLiteral):
        return f"({expr.raw})"
    return serialize_expression(expr)


def serialize(template: Template) -> str:
    """Serialize a Template back to source text.

    Args:
        template: Template root node

    Returns:
        Source text that parses to an equal Template
    """
    parts: list[str] = []
    elements = template.elements
    for index, element in enumerate(elements):
        match element:
            case TextElement():
                followed_by_placeable = index + 1 < len(elements) and isinstance(
                    elements[index + 1], Placeable
                )
                parts.append(_escape_text(element.value, before_placeable=followed_by_placeable))
            case Placeable():
                parts.append(
                    f"{EXPRESSION_OPEN}{serialize_expression(element.expression)}{EXPRESSION_CLOSE}"
                )
    return "".join(parts)
