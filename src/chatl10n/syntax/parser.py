"""Template parser - converts template source text to an AST.

Recursive descent over an immutable Cursor. Text outside ${ } is kept
verbatim except for the escapes \\$, \\` and \\\\, which emit the escaped
character. Inside ${ } the parser accepts identifiers, string and number
literals, parentheses, and any chain of .name, [literal] and (args) suffixes.

Unlike a general expression language there are no operators: anything else
inside ${ } is a syntax error.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import NoReturn

from chatl10n.constants import (
    ESCAPABLE_CHARS,
    ESCAPE_CHAR,
    EXPRESSION_CLOSE,
    EXPRESSION_OPEN,
    MAX_DEPTH,
)
from chatl10n.core.depth_guard import depth_clamp
from chatl10n.diagnostics import Diagnostic, ErrorTemplate, TemplateSyntaxError

from .ast import (
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

__all__ = ["TemplateParser", "is_identifier_char", "is_identifier_start", "parse_template"]

_QUOTES: frozenset[str] = frozenset({"'", '"'})
_STRING_ESCAPES: dict[str, str] = {"n": "\n", "t": "\t", "r": "\r"}
_POSTFIX_EXPECTED: tuple[str, ...] = ("'}'", "'.'", "'('", "'['")
_DIGITS: frozenset[str] = frozenset("0123456789")


def is_identifier_start(ch: str) -> bool:
    """Check if ch may begin an identifier: [A-Za-z_$]."""
    return ch.isascii() and (ch.isalpha() or ch in "_$")


def is_identifier_char(ch: str) -> bool:
    """Check if ch may continue an identifier: [A-Za-z0-9_$]."""
    return ch.isascii() and (ch.isalnum() or ch in "_$")


class TemplateParser:
    """Parser for ${ } interpolation templates.

    Stateless between calls; one instance may be shared across threads.

    Example:
        >>> parser = TemplateParser()
        >>> template = parser.parse("Hello ${user.name}!")
        >>> [type(e).__name__ for e in template.elements]
        ['TextElement', 'Placeable', 'TextElement']
    """

    __slots__ = ("_max_nesting_depth",)

    def __init__(self, *, max_nesting_depth: int | None = None) -> None:
        """Initialize parser.

        Args:
            max_nesting_depth: Maximum depth of nested calls, parentheses and
                access chains inside one expression (default: MAX_DEPTH).
        """
        requested = max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        if requested < 1:
            msg = f"max_nesting_depth must be >= 1, got {requested}"
            raise ValueError(msg)
        self._max_nesting_depth = depth_clamp(requested)

    @property
    def max_nesting_depth(self) -> int:
        """Maximum expression nesting depth accepted by this parser."""
        return self._max_nesting_depth

    def parse(self, source: str) -> Template:
        """Parse template source into a Template AST.

        Args:
            source: Template text

        Returns:
            Template root node

        Raises:
            TemplateSyntaxError: If an expression is malformed or unterminated
        """
        cursor = Cursor(source, 0)
        elements: list[TemplateElement] = []
        text: list[str] = []

        while not cursor.is_eof:
            ch = cursor.current
            if ch == ESCAPE_CHAR and cursor.peek(1) in ESCAPABLE_CHARS:
                text.append(cursor.source[cursor.pos + 1])
                cursor = cursor.advance(2)
                continue
            if cursor.starts_with(EXPRESSION_OPEN):
                if text:
                    elements.append(TextElement("".join(text)))
                    text = []
                result = self._parse_placeable(cursor)
                elements.append(result.value)
                cursor = result.cursor
                continue
            text.append(ch)
            cursor = cursor.advance()

        if text:
            elements.append(TextElement("".join(text)))
        return Template(elements=tuple(elements))

    # ------------------------------------------------------------------
    # Placeables
    # ------------------------------------------------------------------

    def _parse_placeable(self, cursor: Cursor) -> ParseResult[Placeable]:
        """Parse ${ expression } starting at the '${' marker."""
        start = cursor
        cursor = cursor.advance(len(EXPRESSION_OPEN)).skip_whitespace()

        if cursor.is_eof:
            self._fail(ErrorTemplate.unterminated_expression(start.span_to(cursor.pos)), start)
        if cursor.current == EXPRESSION_CLOSE:
            self._fail(ErrorTemplate.empty_expression(start.span_to(cursor.pos + 1)), start)

        result = self._parse_expression(cursor, 1)
        cursor = result.cursor.skip_whitespace()

        if cursor.is_eof:
            self._fail(ErrorTemplate.unterminated_expression(start.span_to(cursor.pos)), start)
        if cursor.current != EXPRESSION_CLOSE:
            self._unexpected(cursor, _POSTFIX_EXPECTED)

        cursor = cursor.advance()
        placeable = Placeable(expression=result.value, span=Span(start.pos, cursor.pos))
        return ParseResult(placeable, cursor)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _parse_expression(self, cursor: Cursor, depth: int) -> ParseResult[Expression]:
        """Parse primary followed by any number of postfix suffixes.

        Each suffix counts as one nesting level, so every accepted
        expression can be walked recursively within the same limit.
        """
        self._check_depth(cursor, depth)
        result = self._parse_primary(cursor, depth)
        expr = result.value
        cursor = result.cursor

        while True:
            lookahead = cursor.skip_whitespace()
            if lookahead.is_eof:
                break
            ch = lookahead.current
            if ch not in ".([":
                break
            depth += 1
            self._check_depth(lookahead, depth)
            if ch == ".":
                name_result = self._parse_identifier_name(lookahead.advance().skip_whitespace())
                expr = PropertyAccess(target=expr, name=name_result.value)
                cursor = name_result.cursor
            elif ch == "(":
                args_result = self._parse_arguments(lookahead.advance(), depth)
                expr = Call(callee=expr, arguments=args_result.value)
                cursor = args_result.cursor
            else:
                key_result = self._parse_index(lookahead.advance())
                expr = ComputedAccess(target=expr, key=key_result.value)
                cursor = key_result.cursor

        return ParseResult(expr, cursor)

    def _parse_primary(self, cursor: Cursor, depth: int) -> ParseResult[Expression]:
        """Parse identifier, literal, or parenthesized expression."""
        cursor = cursor.skip_whitespace()
        if cursor.is_eof:
            self._unexpected(cursor, ("identifier", "string", "number", "'('"))

        ch = cursor.current
        if is_identifier_start(ch):
            name_result = self._parse_identifier_name(cursor)
            return ParseResult(Identifier(name_result.value), name_result.cursor)
        if ch in _QUOTES or ch in _DIGITS:
            literal_result = self._parse_literal(cursor)
            return ParseResult(literal_result.value, literal_result.cursor)
        if ch == "(":
            inner = self._parse_expression(cursor.advance().skip_whitespace(), depth + 1)
            closing = inner.cursor.skip_whitespace()
            after = closing.expect(")")
            if after is None:
                self._unexpected(closing, ("')'", "'.'", "'('", "'['"))
            return ParseResult(inner.value, after)

        self._unexpected(cursor, ("identifier", "string", "number", "'('"))

    def _parse_arguments(
        self, cursor: Cursor, depth: int
    ) -> ParseResult[tuple[Expression, ...]]:
        """Parse call arguments after '(' up to and including ')'.

        A trailing comma before ')' is accepted.
        """
        args: list[Expression] = []
        cursor = cursor.skip_whitespace()
        while True:
            if (after := cursor.expect(")")) is not None:
                return ParseResult(tuple(args), after)
            arg = self._parse_expression(cursor, depth + 1)
            args.append(arg.value)
            cursor = arg.cursor.skip_whitespace()
            if (after := cursor.expect(",")) is not None:
                cursor = after.skip_whitespace()
                continue
            if cursor.expect(")") is None:
                self._unexpected(cursor, ("','", "')'"))

    def _parse_index(self, cursor: Cursor) -> ParseResult[Literal]:
        """Parse [literal] after '[' up to and including ']'."""
        cursor = cursor.skip_whitespace()
        if cursor.is_eof or not (cursor.current in _QUOTES or cursor.current in _DIGITS):
            self._unexpected(cursor, ("string", "number"))
        literal = self._parse_literal(cursor)
        closing = literal.cursor.skip_whitespace()
        after = closing.expect("]")
        if after is None:
            self._unexpected(closing, ("']'",))
        return ParseResult(literal.value, after)

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def _parse_identifier_name(self, cursor: Cursor) -> ParseResult[str]:
        """Parse [A-Za-z_$][A-Za-z0-9_$]*."""
        if cursor.is_eof or not is_identifier_start(cursor.current):
            self._unexpected(cursor, ("identifier",))
        start = cursor
        cursor = cursor.advance()
        while not cursor.is_eof and is_identifier_char(cursor.current):
            cursor = cursor.advance()
        return ParseResult(start.slice_to(cursor.pos), cursor)

    def _parse_literal(self, cursor: Cursor) -> ParseResult[Literal]:
        """Parse a string or number literal at cursor."""
        if cursor.current in _QUOTES:
            return self._parse_string(cursor)
        return self._parse_number(cursor)

    def _parse_string(self, cursor: Cursor) -> ParseResult[Literal]:
        """Parse 'text' or "text" with backslash escapes."""
        start = cursor
        quote = cursor.current
        cursor = cursor.advance()
        chars: list[str] = []
        while True:
            if cursor.is_eof:
                self._fail(ErrorTemplate.unterminated_string(start.span_to(cursor.pos)), start)
            ch = cursor.current
            if ch == quote:
                return ParseResult(StringLiteral("".join(chars)), cursor.advance())
            if ch == ESCAPE_CHAR:
                escaped = cursor.peek(1)
                if escaped is None:
                    self._fail(
                        ErrorTemplate.unterminated_string(start.span_to(cursor.pos)), start
                    )
                chars.append(_STRING_ESCAPES.get(escaped, escaped))
                cursor = cursor.advance(2)
                continue
            chars.append(ch)
            cursor = cursor.advance()

    def _parse_number(self, cursor: Cursor) -> ParseResult[Literal]:
        """Parse digits with an optional fractional part."""
        start = cursor
        while not cursor.is_eof and cursor.current in _DIGITS:
            cursor = cursor.advance()
        is_float = False
        fraction_digit = cursor.peek(1)
        if (
            not cursor.is_eof
            and cursor.current == "."
            and fraction_digit is not None
            and fraction_digit in _DIGITS
        ):
            is_float = True
            cursor = cursor.advance()
            while not cursor.is_eof and cursor.current in _DIGITS:
                cursor = cursor.advance()
        raw = start.slice_to(cursor.pos)
        value: int | float = float(raw) if is_float else int(raw)
        return ParseResult(NumberLiteral(value=value, raw=raw), cursor)

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def _check_depth(self, cursor: Cursor, depth: int) -> None:
        if depth > self._max_nesting_depth:
            self._fail(
                ErrorTemplate.nesting_depth_exceeded(self._max_nesting_depth, cursor.span_to()),
                cursor,
            )

    def _unexpected(self, cursor: Cursor, expected: tuple[str, ...]) -> NoReturn:
        found = "EOF" if cursor.is_eof else cursor.current
        self._fail(ErrorTemplate.unexpected_character(found, expected, cursor.span_to()), cursor)

    @staticmethod
    def _fail(diagnostic: Diagnostic, cursor: Cursor) -> NoReturn:
        raise TemplateSyntaxError(diagnostic, source=cursor.source, position=cursor.pos)


def parse_template(source: str) -> Template:
    """Parse template source with a default TemplateParser.

    Args:
        source: Template text

    Returns:
        Template root node

    Raises:
        TemplateSyntaxError: If the template is malformed
    """
    return _DEFAULT_PARSER.parse(source)


_DEFAULT_PARSER = TemplateParser()
