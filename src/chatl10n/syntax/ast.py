"""Template AST (Abstract Syntax Tree) node definitions.

A template is a sequence of text runs and placeables. A placeable holds one
expression: an identifier, a literal, or a chain of property accesses,
indexing and calls built on top of one of those.

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field
from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    # Template structure
    "Template",
    "TextElement",
    "Placeable",
    # Expressions
    "Identifier",
    "StringLiteral",
    "NumberLiteral",
    "PropertyAccess",
    "ComputedAccess",
    "Call",
    # Type aliases
    "TemplateElement",
    "Literal",
    "Expression",
    "ASTNode",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: "Hi ${name}!"
        Placeable span: Span(start=3, end=10)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


# ============================================================================
# TEMPLATE STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class Template:
    """Root node: text runs and placeables in source order."""

    elements: tuple["TemplateElement", ...]

    @property
    def has_placeables(self) -> bool:
        """True if any element is a placeable."""
        return any(Placeable.guard(element) for element in self.elements)


@dataclass(frozen=True, slots=True)
class TextElement:
    """Literal text segment (escapes already resolved)."""

    value: str

    @staticmethod
    def guard(elem: object) -> TypeIs["TextElement"]:
        """Type guard for TextElement.

        Enables type-safe narrowing without circular imports.

        Args:
            elem: Object to check

        Returns:
            True if elem is TextElement

        Example:
            if TextElement.guard(elem):
                elem.value  # Type-safe! mypy knows elem is TextElement
        """
        return isinstance(elem, TextElement)


@dataclass(frozen=True, slots=True)
class Placeable:
    """Embedded expression: ${ expression }

    The span is excluded from equality: two placeables are equal when
    their expressions are.
    """

    expression: "Expression"
    span: Span | None = field(default=None, compare=False)

    @staticmethod
    def guard(elem: object) -> TypeIs["Placeable"]:
        """Type guard for Placeable."""
        return isinstance(elem, Placeable)


# ============================================================================
# EXPRESSIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Identifier:
    """Parameter reference: [A-Za-z_$][A-Za-z0-9_$]*"""

    name: str

    @staticmethod
    def guard(expr: object) -> TypeIs["Identifier"]:
        """Type guard for Identifier."""
        return isinstance(expr, Identifier)


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """String literal: 'text' or "text"

    Backslash escapes the next character; \\n and \\t produce a newline
    and a tab.
    """

    value: str


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    """Number literal: 42 or 3.14

    The raw field preserves original source for serialization.
    """

    value: int | float
    """Parsed numeric value."""

    raw: str
    """Original source representation (for serialization)."""


@dataclass(frozen=True, slots=True)
class PropertyAccess:
    """Named property of a value: target.name"""

    target: "Expression"
    name: str

    @staticmethod
    def guard(expr: object) -> TypeIs["PropertyAccess"]:
        """Type guard for PropertyAccess."""
        return isinstance(expr, PropertyAccess)

    @property
    def root(self) -> "Expression":
        """Innermost non-access expression of the chain (user in user.a.b)."""
        node: Expression = self.target
        while isinstance(node, (PropertyAccess, ComputedAccess)):
            node = node.target
        return node


@dataclass(frozen=True, slots=True)
class ComputedAccess:
    """Indexing with a literal key: target['name'] or target[0]"""

    target: "Expression"
    key: "Literal"

    @staticmethod
    def guard(expr: object) -> TypeIs["ComputedAccess"]:
        """Type guard for ComputedAccess."""
        return isinstance(expr, ComputedAccess)

    @property
    def root(self) -> "Expression":
        """Innermost non-access expression of the chain."""
        node: Expression = self.target
        while isinstance(node, (PropertyAccess, ComputedAccess)):
            node = node.target
        return node


@dataclass(frozen=True, slots=True)
class Call:
    """Function call: callee(arg, ...)"""

    callee: "Expression"
    arguments: tuple["Expression", ...] = ()

    @staticmethod
    def guard(expr: object) -> TypeIs["Call"]:
        """Type guard for Call."""
        return isinstance(expr, Call)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type TemplateElement = TextElement | Placeable
type Literal = StringLiteral | NumberLiteral
type Expression = (
    Identifier | StringLiteral | NumberLiteral | PropertyAccess | ComputedAccess | Call
)

type ASTNode = (
    Template
    | TextElement
    | Placeable
    | Identifier
    | StringLiteral
    | NumberLiteral
    | PropertyAccess
    | ComputedAccess
    | Call
    | Span
)
