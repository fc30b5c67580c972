"""Tests for ASTVisitor traversal.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from chatl10n.core import DepthLimitExceededError
from chatl10n.syntax import (
    ASTVisitor,
    Call,
    Identifier,
    Placeable,
    Template,
    parse_template,
)
from chatl10n.syntax.ast import ASTNode


class _NameCollector(ASTVisitor[ASTNode]):
    """Collects identifier names in visit order."""

    def __init__(self, *, max_depth: int | None = None) -> None:
        super().__init__(max_depth=max_depth)
        self.names: list[str] = []

    def visit_Identifier(self, node: Identifier) -> ASTNode:
        self.names.append(node.name)
        return self.generic_visit(node)


class TestASTVisitor:
    """Dispatch and generic traversal."""

    def test_visits_all_identifiers(self) -> None:
        """generic_visit reaches identifiers in every position."""
        collector = _NameCollector()
        collector.visit(parse_template("${f(a.b, g(c), d[0])} and ${e}"))
        assert collector.names == ["f", "a", "g", "c", "d", "e"]

    def test_generic_visit_returns_node(self) -> None:
        """The base visitor returns the node it was given."""
        template = parse_template("${x}")
        assert ASTVisitor().visit(template) is template

    def test_dispatch_table_per_subclass(self) -> None:
        """Subclasses get their own dispatch table."""
        assert "Identifier" in _NameCollector._class_visit_methods
        assert "Identifier" not in ASTVisitor._class_visit_methods

    def test_depth_limit(self) -> None:
        """Deep hand-built trees raise DepthLimitExceededError."""
        expr: Call | Identifier = Identifier("x")
        for _ in range(30):
            expr = Call(callee=Identifier("f"), arguments=(expr,))
        template = Template(elements=(Placeable(expression=expr),))
        with pytest.raises(DepthLimitExceededError):
            _NameCollector(max_depth=10).visit(template)
