"""Tests for template compilation and template values.

Covers:
- Static templates ignore their input
- Compiled templates render data and stay reusable after failures
- MissingKeyTemplate renders its key
- TemplateValue protocol conformance

Python 3.13+.
"""

from __future__ import annotations

import pytest

from chatl10n.diagnostics import DiagnosticCode, TemplateRuntimeError, TemplateSyntaxError
from chatl10n.runtime import (
    CompiledTemplate,
    MissingKeyTemplate,
    StaticTemplate,
    TemplateValue,
    compile_template,
)
from chatl10n.syntax import TemplateParser

# ============================================================================
# COMPILATION
# ============================================================================


class TestCompileTemplate:
    """compile_template() selects the template value kind."""

    def test_text_without_marker_is_static(self) -> None:
        """Plain text compiles to a StaticTemplate."""
        value = compile_template("Hello!")
        assert isinstance(value, StaticTemplate)
        assert value.source == "Hello!"

    def test_lone_dollar_stays_static(self) -> None:
        """A $ not followed by { does not trigger compilation."""
        assert isinstance(compile_template("Costs $5 {approx}"), StaticTemplate)

    def test_marker_compiles(self) -> None:
        """Text containing ${ compiles to a CompiledTemplate."""
        value = compile_template("Hi ${name}")
        assert isinstance(value, CompiledTemplate)
        assert value.source == "Hi ${name}"
        assert value.template.has_placeables

    def test_malformed_template_raises_at_compile_time(self) -> None:
        """Syntax errors surface when compiling, not when rendering."""
        with pytest.raises(TemplateSyntaxError):
            compile_template("Hi ${name")

    def test_custom_parser(self) -> None:
        """A parser with a small nesting limit is honored."""
        with pytest.raises(TemplateSyntaxError):
            compile_template("${a.b.c.d.e}", parser=TemplateParser(max_nesting_depth=2))

    @pytest.mark.parametrize(
        "value",
        [StaticTemplate("x"), compile_template("${x}"), MissingKeyTemplate("x")],
    )
    def test_protocol_conformance(self, value: object) -> None:
        """Every template value satisfies the TemplateValue protocol."""
        assert isinstance(value, TemplateValue)


# ============================================================================
# RENDERING
# ============================================================================


class TestStaticTemplate:
    """StaticTemplate returns its text unchanged."""

    def test_ignores_data(self) -> None:
        """Any data mapping yields the same text."""
        value = compile_template("Welcome!")
        assert value() == "Welcome!"
        assert value({"name": "Ann", "unused": object()}) == "Welcome!"

    def test_escaped_marker_text_is_verbatim(self) -> None:
        """Static text is never unescaped."""
        assert compile_template("Back\\slash")({}) == "Back\\slash"


class TestCompiledTemplate:
    """CompiledTemplate renders against data."""

    def test_simple_substitution(self) -> None:
        """Identifiers are replaced with their values."""
        assert compile_template("Welcome, ${name}!")({"name": "Ann"}) == "Welcome, Ann!"

    def test_non_string_values(self) -> None:
        """Numbers, booleans and None are formatted."""
        value = compile_template("${n}|${flag}|${nothing}|${ratio}")
        assert value({"n": 3, "flag": True, "nothing": None, "ratio": 0.5}) == "3|true||0.5"

    def test_nested_property_access(self) -> None:
        """Property access reads nested mappings."""
        value = compile_template("${user.profile.city}")
        assert value({"user": {"profile": {"city": "Oslo"}}}) == "Oslo"

    def test_missing_parameter_raises(self) -> None:
        """A missing parameter raises TemplateRuntimeError."""
        with pytest.raises(TemplateRuntimeError) as exc_info:
            compile_template("Hi ${name}")({})
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PARAMETER_NOT_PROVIDED

    def test_reusable_after_failure(self) -> None:
        """A failed render leaves the template usable."""
        value = compile_template("Hi ${name}")
        with pytest.raises(TemplateRuntimeError):
            value({})
        assert value({"name": "Bob"}) == "Hi Bob"

    def test_escaped_marker_renders_literally(self) -> None:
        """\\${ in a compiled template renders as ${."""
        value = compile_template("\\${literal} and ${name}")
        assert value({"name": "x"}) == "${literal} and x"

    def test_equality_ignores_evaluator(self) -> None:
        """Two compilations of the same text compare equal."""
        assert compile_template("${a}") == compile_template("${a}")


class TestMissingKeyTemplate:
    """MissingKeyTemplate renders its resource key."""

    def test_renders_key(self) -> None:
        """The placeholder renders the key regardless of data."""
        value = MissingKeyTemplate("checkout.title")
        assert value() == "checkout.title"
        assert value({"anything": 1}) == "checkout.title"
        assert value.source == "checkout.title"
