"""Template compiler and template values.

A template value is the compiled form of one resource string: a callable
that takes a data mapping and returns text. Text without the "${" marker
compiles to a StaticTemplate that returns the text unchanged for every
input; everything else is parsed once into a CompiledTemplate.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from chatl10n.constants import INTERPOLATION_MARKER
from chatl10n.syntax import Template, TemplateParser

from .evaluator import TemplateEvaluator

__all__ = [
    "CompiledTemplate",
    "MissingKeyTemplate",
    "StaticTemplate",
    "TemplateValue",
    "compile_template",
]

logger = logging.getLogger(__name__)

_EMPTY_DATA: Mapping[str, object] = {}
_DEFAULT_PARSER = TemplateParser()
_DEFAULT_EVALUATOR = TemplateEvaluator()


@runtime_checkable
class TemplateValue(Protocol):
    """Compiled resource string: data mapping in, text out."""

    @property
    def source(self) -> str:
        """Text the value was compiled from."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def __call__(self, data: Mapping[str, object] = _EMPTY_DATA, /) -> str:
        ...  # pragma: no cover  # Protocol stub - not executable


@dataclass(frozen=True, slots=True)
class StaticTemplate:
    """Template value for text without placeables.

    Returns the text unchanged, whatever the data.
    """

    source: str

    def __call__(self, data: Mapping[str, object] = _EMPTY_DATA, /) -> str:
        return self.source


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """Template value holding a parsed AST.

    Attributes:
        source: Original template text
        template: Parsed AST
    """

    source: str
    template: Template
    evaluator: TemplateEvaluator = field(default=_DEFAULT_EVALUATOR, repr=False, compare=False)

    def __call__(self, data: Mapping[str, object] = _EMPTY_DATA, /) -> str:
        """Render with data.

        Raises:
            TemplateRuntimeError: If evaluation fails
            DepthLimitExceededError: If the expression nests too deeply
        """
        return self.evaluator.evaluate(self.template, data)


@dataclass(frozen=True, slots=True)
class MissingKeyTemplate:
    """Placeholder template value that renders its resource key.

    Synthesized when a key is missing everywhere and allow_missing is set.
    Never stored in a repository.
    """

    resource_key: str

    @property
    def source(self) -> str:
        """The resource key."""
        return self.resource_key

    def __call__(self, data: Mapping[str, object] = _EMPTY_DATA, /) -> str:
        return self.resource_key


def compile_template(raw: str, *, parser: TemplateParser | None = None) -> TemplateValue:
    """Compile resource text into a template value.

    Args:
        raw: Resource text
        parser: Parser to use (default: shared TemplateParser)

    Returns:
        StaticTemplate if raw has no "${", otherwise CompiledTemplate

    Raises:
        TemplateSyntaxError: If raw contains a malformed expression

    Example:
        >>> compile_template("Hello")({"x": 1})
        'Hello'
        >>> compile_template("Hi ${name}")({"name": "Ann"})
        'Hi Ann'
    """
    if INTERPOLATION_MARKER not in raw:
        return StaticTemplate(raw)
    template = (parser or _DEFAULT_PARSER).parse(raw)
    logger.debug("Compiled template with %d elements", len(template.elements))
    return CompiledTemplate(source=raw, template=template)
