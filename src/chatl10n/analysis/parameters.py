"""Static parameter analysis of resource templates.

Derives, without rendering anything, which parameters each resource
template needs and what shape each must have:

    ${name}                      -> name: value
    ${user.name}                 -> user: object
    ${pluralize(count, 'a')}     -> pluralize: callable, count: value
    ${format(order.total)}       -> format: callable, order: object

Only the root of a property chain is reported (user, never user.name), and
literals contribute nothing. Templates are parsed with the same parser the
compiler uses and are never evaluated.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterator, Mapping
from dataclasses import dataclass

from chatl10n.constants import INTERPOLATION_MARKER, MAX_DEPTH
from chatl10n.diagnostics import AnalysisParseError, ErrorTemplate, TemplateSyntaxError
from chatl10n.enums import ParameterKind
from chatl10n.localization.flatten import prepare_resource_data
from chatl10n.localization.types import ResourceDefinitions, ResourceKey, TemplateSource
from chatl10n.syntax import (
    Call,
    ComputedAccess,
    Expression,
    Identifier,
    Placeable,
    PropertyAccess,
    Template,
    TemplateParser,
)
from chatl10n.syntax.visitor import ASTVisitor

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Results
    "ParameterInfo",
    "ResourceParameters",
    "ParameterSchema",
    # Analysis
    "analyze",
    "analyze_template",
    # Internal (accessible for testing)
    "ParameterCollector",
]

logger = logging.getLogger(__name__)

_DEFAULT_PARSER = TemplateParser()


# ==============================================================================
# RESULT TYPES
# ==============================================================================


@dataclass(frozen=True, slots=True, order=True)
class ParameterInfo:
    """One required parameter of a template.

    Ordered by (name, kind).
    """

    name: str
    """Parameter name as written in the template."""

    kind: ParameterKind
    """Shape the template requires."""


@dataclass(frozen=True, slots=True)
class ResourceParameters:
    """Parameters of one resource key.

    Attributes:
        resource_key: Dotted resource key
        parameters: Sorted parameters, or None when the text has no
            placeables at all (an empty tuple means every reference was
            a global parameter or a literal)
    """

    resource_key: ResourceKey
    parameters: tuple[ParameterInfo, ...] | None

    @property
    def has_parameters(self) -> bool:
        """Check if callers must supply anything for this key."""
        return bool(self.parameters)

    def names(self) -> frozenset[str]:
        """Distinct parameter names."""
        return frozenset(p.name for p in self.parameters or ())

    def kinds_of(self, name: str) -> tuple[ParameterKind, ...]:
        """Kinds required of one parameter name, sorted."""
        return tuple(p.kind for p in self.parameters or () if p.name == name)


@dataclass(frozen=True, slots=True)
class ParameterSchema:
    """Parameters of every analyzed resource key, in input key order.

    Example:
        >>> schema = analyze({"greeting": "Hi ${name}", "bye": "Bye"})
        >>> schema.to_dict()
        {'greeting': {'name': ['value']}, 'bye': None}
    """

    entries: tuple[ResourceParameters, ...]

    def __iter__(self) -> Iterator[ResourceParameters]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, resource_key: object) -> bool:
        return any(entry.resource_key == resource_key for entry in self.entries)

    def keys(self) -> tuple[ResourceKey, ...]:
        """Analyzed resource keys in input order."""
        return tuple(entry.resource_key for entry in self.entries)

    def get(self, resource_key: ResourceKey) -> ResourceParameters | None:
        """Entry for one key, or None if the key was not analyzed."""
        for entry in self.entries:
            if entry.resource_key == resource_key:
                return entry
        return None

    @classmethod
    def from_dict(
        cls, data: Mapping[ResourceKey, Mapping[str, list[str]] | None]
    ) -> ParameterSchema:
        """Rebuild a schema from its to_dict() form.

        Raises:
            ValueError: If a kind is not a ParameterKind value
        """
        entries: list[ResourceParameters] = []
        for key, params in data.items():
            if params is None:
                entries.append(ResourceParameters(key, None))
                continue
            infos = sorted(
                ParameterInfo(name=name, kind=ParameterKind(kind))
                for name, kinds in params.items()
                for kind in kinds
            )
            entries.append(ResourceParameters(key, tuple(infos)))
        return cls(entries=tuple(entries))

    def to_dict(self) -> dict[ResourceKey, dict[str, list[str]] | None]:
        """JSON-ready form: key -> None, or parameter name -> list of kinds."""
        result: dict[ResourceKey, dict[str, list[str]] | None] = {}
        for entry in self.entries:
            if entry.parameters is None:
                result[entry.resource_key] = None
                continue
            params: dict[str, list[str]] = {}
            for info in entry.parameters:
                params.setdefault(info.name, []).append(str(info.kind))
            result[entry.resource_key] = params
        return result


# ==============================================================================
# COLLECTOR
# ==============================================================================


class ParameterCollector(ASTVisitor[None]):
    """AST visitor that collects (name, kind) pairs from one template.

    Traversal is in document order; pairs are deduplicated in a set, so a
    name referenced twice the same way is reported once.

    Depth Limiting:
        Includes DepthGuard to prevent stack overflow on programmatically
        constructed deeply nested ASTs.
    """

    __slots__ = ("_global_parameters", "parameters")

    def __init__(
        self, *, global_parameters: Collection[str] = (), max_depth: int = MAX_DEPTH
    ) -> None:
        """Initialize collector with an empty result set.

        Args:
            global_parameters: Names supplied ambiently; never reported
            max_depth: Maximum expression nesting depth (default: MAX_DEPTH)
        """
        super().__init__(max_depth=max_depth)
        self._global_parameters = frozenset(global_parameters)
        self.parameters: set[ParameterInfo] = set()

    def visit_Template(self, node: Template) -> None:
        """Collect from every placeable; text contributes nothing."""
        for element in node.elements:
            if Placeable.guard(element):
                self.visit_Placeable(element)

    def visit_Placeable(self, node: Placeable) -> None:
        """Collect from the placeable's expression."""
        self._collect(node.expression)

    def sorted_parameters(self) -> tuple[ParameterInfo, ...]:
        """Collected parameters sorted by (name, kind)."""
        return tuple(sorted(self.parameters))

    def _add(self, name: str, kind: ParameterKind) -> None:
        if name not in self._global_parameters:
            self.parameters.add(ParameterInfo(name=name, kind=kind))

    def _collect(self, expr: Expression) -> None:
        with self._depth_guard:
            match expr:
                case Identifier():
                    self._add(expr.name, ParameterKind.VALUE)
                case PropertyAccess() | ComputedAccess():
                    self._collect_access_root(expr.root)
                case Call():
                    self._collect_callee(expr.callee)
                    for argument in expr.arguments:
                        self._collect(argument)
                case _:
                    pass  # Literals require nothing

    def _collect_access_root(self, root: Expression) -> None:
        # The chain below the root is never descended: user.a.b needs only user.
        if Identifier.guard(root):
            self._add(root.name, ParameterKind.OBJECT)
        else:
            self._collect(root)

    def _collect_callee(self, callee: Expression) -> None:
        match callee:
            case Identifier():
                self._add(callee.name, ParameterKind.CALLABLE)
            case PropertyAccess() | ComputedAccess():
                self._collect_access_root(callee.root)
            case _:
                self._collect(callee)


# ==============================================================================
# ANALYSIS
# ==============================================================================


def analyze_template(
    text: TemplateSource,
    *,
    global_parameters: Collection[str] = (),
    parser: TemplateParser | None = None,
) -> tuple[ParameterInfo, ...] | None:
    """Parameters of a single template.

    Args:
        text: Template source text
        global_parameters: Names supplied ambiently; never reported
        parser: Parser to use (default: shared TemplateParser)

    Returns:
        Sorted parameters, or None if text has no "${" marker

    Raises:
        TemplateSyntaxError: If text is malformed

    Example:
        >>> analyze_template("${foo(bar.baz)}")
        (ParameterInfo(name='bar', kind=<ParameterKind.OBJECT: 'object'>),
         ParameterInfo(name='foo', kind=<ParameterKind.CALLABLE: 'callable'>))
    """
    if INTERPOLATION_MARKER not in text:
        return None
    template = (parser or _DEFAULT_PARSER).parse(text)
    collector = ParameterCollector(global_parameters=global_parameters)
    collector.visit(template)
    return collector.sorted_parameters()


def analyze(
    resource_definitions: ResourceDefinitions,
    global_parameters: Collection[str] = (),
    *,
    parser: TemplateParser | None = None,
) -> ParameterSchema:
    """Parameter schema for every resource key of a definitions mapping.

    Args:
        resource_definitions: Nested or flat resource definitions (the same
            input the repository ingests)
        global_parameters: Names supplied ambiently (e.g. "pluralize");
            never reported
        parser: Parser to use (default: shared TemplateParser)

    Returns:
        Schema with one entry per resource key, in input order

    Raises:
        AnalysisParseError: If any template is malformed. No partial
            schema is returned.
    """
    globals_set = frozenset(global_parameters)
    entries: list[ResourceParameters] = []
    for key, text in prepare_resource_data(resource_definitions).items():
        try:
            parameters = analyze_template(text, global_parameters=globals_set, parser=parser)
        except TemplateSyntaxError as e:
            logger.error("Parsing of the key '%s' failed, template: %s", key, text)
            raise AnalysisParseError(
                ErrorTemplate.analysis_parse_failed(key, text, str(e.diagnostic or e)),
                resource_key=key,
                template=text,
            ) from e
        entries.append(ResourceParameters(resource_key=key, parameters=parameters))
    logger.debug("Analyzed %d resource keys", len(entries))
    return ParameterSchema(entries=tuple(entries))

