"""Template evaluator - renders a Template AST against a data mapping.

Walks the AST, resolving identifiers from the data mapping, following
property and index access, and calling helpers. Every failure raises
TemplateRuntimeError; the Template itself is never modified and can be
evaluated again.

Python 3.13+. Zero external dependencies.

Thread Safety:
    Evaluation state (the depth guard) is created per call, making the
    evaluator fully reentrant.
"""

from collections.abc import Mapping, Sequence

from chatl10n.constants import MAX_DEPTH
from chatl10n.core.depth_guard import DepthGuard
from chatl10n.diagnostics import ErrorTemplate, LocalizationError, TemplateRuntimeError
from chatl10n.syntax import (
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
    serialize_expression,
)

__all__ = ["TemplateEvaluator", "format_value"]


def format_value(value: object) -> str:
    """Format an evaluated value for splicing into the output.

    - str: returned as-is
    - bool: "true"/"false"
    - None: empty string
    - anything else: str(value)
    """
    if isinstance(value, str):
        return value
    # Check bool BEFORE the generic case (bool is subclass of int in Python)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


class TemplateEvaluator:
    """Evaluates parsed templates.

    Example:
        >>> evaluator = TemplateEvaluator()
        >>> evaluator.evaluate(parse_template("Hi ${user.name}"), {"user": {"name": "Ann"}})
        'Hi Ann'
    """

    __slots__ = ("_max_depth",)

    def __init__(self, *, max_depth: int = MAX_DEPTH) -> None:
        """Initialize evaluator.

        Args:
            max_depth: Maximum expression nesting depth (default: MAX_DEPTH)
        """
        self._max_depth = max_depth

    def evaluate(self, template: Template, data: Mapping[str, object]) -> str:
        """Render template with data.

        Args:
            template: Parsed template
            data: Parameter values by name

        Returns:
            Rendered text

        Raises:
            TemplateRuntimeError: If a parameter is missing, a property does
                not exist, a call target is not callable, or a helper raised
            DepthLimitExceededError: If the expression nests deeper than max_depth
        """
        guard = DepthGuard(max_depth=self._max_depth)
        parts: list[str] = []
        for element in template.elements:
            match element:
                case TextElement():
                    parts.append(element.value)
                case Placeable():
                    value = self._evaluate_expression(element.expression, data, guard)
                    parts.append(format_value(value))
        return "".join(parts)

    def _evaluate_expression(
        self, expr: Expression, data: Mapping[str, object], guard: DepthGuard
    ) -> object:
        """Evaluate expression to a value.

        Uses pattern matching; each case delegates to a specialized method.
        """
        with guard:
            match expr:
                case Identifier():
                    return self._evaluate_identifier(expr, data)
                case StringLiteral() | NumberLiteral():
                    return expr.value
                case PropertyAccess():
                    target = self._evaluate_expression(expr.target, data, guard)
                    return self._get_property(target, expr.name, expr.target)
                case ComputedAccess():
                    target = self._evaluate_expression(expr.target, data, guard)
                    return self._get_item(target, expr.key.value, expr.target)
                case Call():
                    return self._evaluate_call(expr, data, guard)
                case _:
                    raise TemplateRuntimeError(
                        ErrorTemplate.unknown_expression(type(expr).__name__)
                    )

    def _evaluate_identifier(self, expr: Identifier, data: Mapping[str, object]) -> object:
        if expr.name not in data:
            raise TemplateRuntimeError(ErrorTemplate.parameter_not_provided(expr.name))
        return data[expr.name]

    def _get_property(self, target: object, name: str, target_expr: Expression) -> object:
        """Mapping key lookup for mappings, attribute lookup otherwise."""
        if isinstance(target, Mapping):
            if name in target:
                return target[name]
        elif target is not None and not name.startswith("_") and hasattr(target, name):
            return getattr(target, name)
        raise TemplateRuntimeError(
            ErrorTemplate.property_not_found(serialize_expression(target_expr), name)
        )

    def _get_item(self, target: object, key: str | int | float, target_expr: Expression) -> object:
        """Index lookup: mapping key, then sequence index, then attribute."""
        if isinstance(target, Mapping):
            if key in target:
                return target[key]
            if str(key) in target:
                return target[str(key)]
        elif isinstance(target, Sequence) and isinstance(key, int):
            if -len(target) <= key < len(target):
                return target[key]
        elif target is not None and isinstance(key, str):
            return self._get_property(target, key, target_expr)
        raise TemplateRuntimeError(
            ErrorTemplate.property_not_found(serialize_expression(target_expr), str(key))
        )

    def _evaluate_call(self, expr: Call, data: Mapping[str, object], guard: DepthGuard) -> object:
        """Evaluate callee and arguments left to right, then call."""
        callee = self._evaluate_expression(expr.callee, data, guard)
        name = serialize_expression(expr.callee)
        if not callable(callee):
            raise TemplateRuntimeError(ErrorTemplate.not_callable(name, type(callee).__name__))

        args = [self._evaluate_expression(arg, data, guard) for arg in expr.arguments]
        try:
            return callee(*args)
        except LocalizationError:
            raise
        except Exception as e:
            raise TemplateRuntimeError(ErrorTemplate.helper_failed(name, str(e))) from e
