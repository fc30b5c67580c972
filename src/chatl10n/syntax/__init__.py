"""Template syntax: AST, parser, visitor and serializer.

Exports:
    TemplateParser / parse_template: source text -> Template AST
    ASTVisitor: Base class for AST walkers
    serialize / serialize_expression: Template AST -> source text
    AST node types

Python 3.13+. Zero external dependencies.
"""

from .ast import (
    ASTNode,
    Call,
    ComputedAccess,
    Expression,
    Identifier,
    Literal,
    NumberLiteral,
    Placeable,
    PropertyAccess,
    Span,
    StringLiteral,
    Template,
    TemplateElement,
    TextElement,
)
from .cursor import Cursor, ParseResult
from .parser import TemplateParser, parse_template
from .serializer import serialize, serialize_expression
from .visitor import ASTVisitor

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Parsing
    "TemplateParser",
    "parse_template",
    "Cursor",
    "ParseResult",
    # Traversal and serialization
    "ASTVisitor",
    "serialize",
    "serialize_expression",
    # AST nodes
    "Span",
    "Template",
    "TextElement",
    "Placeable",
    "Identifier",
    "StringLiteral",
    "NumberLiteral",
    "PropertyAccess",
    "ComputedAccess",
    "Call",
    # Type aliases
    "ASTNode",
    "Expression",
    "Literal",
    "TemplateElement",
]
