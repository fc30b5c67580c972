"""Static contract generation from a parameter schema.

Renders a schema as a Python typing module so call sites can be checked:

    from typing import Literal, TypedDict

    ResourceKey = Literal[
        "cart",
        "greeting",
    ]

    CartParams = TypedDict("CartParams", {
        "apples": str | int | float | Mapping[str, object],
    })

    RESOURCE_PARAMS: dict[str, object] = {
        "cart": CartParams,
        "greeting": None,
    }

The functional TypedDict form is used so that any parameter name,
including Python keywords and names containing "$", is representable.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Collection
from pathlib import Path

from chatl10n.enums import ParameterKind
from chatl10n.localization.types import ResourceDefinitions, ResourceKey

from .parameters import ParameterSchema, ResourceParameters, analyze

__all__ = ["KIND_MEMBERS", "KIND_TYPES", "generate_contract", "render_contract", "schema_to_json"]

logger = logging.getLogger(__name__)

# Top-level union members emitted for each parameter kind.
KIND_MEMBERS: dict[ParameterKind, tuple[str, ...]] = {
    ParameterKind.VALUE: ("str", "int", "float", "Mapping[str, object]"),
    ParameterKind.OBJECT: ("Mapping[str, object]",),
    ParameterKind.CALLABLE: ("Callable[..., str | int | float]",),
}

# Annotation text emitted for each parameter kind.
KIND_TYPES: dict[ParameterKind, str] = {
    kind: " | ".join(members) for kind, members in KIND_MEMBERS.items()
}

_HEADER = '''"""Resource parameter contract.

Generated by chatl10n from locale definitions. Do not edit.
"""

from collections.abc import Callable, Mapping
from typing import Literal, TypedDict
'''

_WORD_RE = re.compile(r"[A-Za-z0-9]+")


def _class_name(resource_key: ResourceKey, taken: set[str]) -> str:
    """CamelCase params class name for a key, unique within one contract."""
    words = _WORD_RE.findall(resource_key)
    base = "".join(word[:1].upper() + word[1:] for word in words) or "Resource"
    if base[0].isdigit():
        base = f"Key{base}"
    name = f"{base}Params"
    suffix = 2
    while name in taken:
        name = f"{base}{suffix}Params"
        suffix += 1
    taken.add(name)
    return name


def _annotation(entry: ResourceParameters, name: str) -> str:
    """Union of the types of every kind required of one name."""
    parts: list[str] = []
    for kind in entry.kinds_of(name):
        for member in KIND_MEMBERS[kind]:
            if member not in parts:
                parts.append(member)
    return " | ".join(parts)


def render_contract(schema: ParameterSchema) -> str:
    """Render a schema as Python typing source.

    Keys whose parameter set is None or empty map to None in
    RESOURCE_PARAMS and get no TypedDict.

    Args:
        schema: Parameter schema

    Returns:
        Python module source text
    """
    lines: list[str] = [_HEADER]

    keys = schema.keys()
    if keys:
        lines.append("ResourceKey = Literal[")
        lines.extend(f"    {json.dumps(key, ensure_ascii=False)}," for key in keys)
        lines.append("]")
    else:
        lines.append("ResourceKey = str")
    lines.append("")

    taken: set[str] = set()
    class_names: dict[ResourceKey, str | None] = {}
    for entry in schema:
        if not entry.has_parameters:
            class_names[entry.resource_key] = None
            continue
        class_name = _class_name(entry.resource_key, taken)
        class_names[entry.resource_key] = class_name
        lines.append(f"{class_name} = TypedDict({json.dumps(class_name)}, {{")
        for name in sorted(entry.names()):
            lines.append(f"    {json.dumps(name)}: {_annotation(entry, name)},")
        lines.append("})")
        lines.append("")

    lines.append("RESOURCE_PARAMS: dict[str, object] = {")
    for key, class_name in class_names.items():
        lines.append(f"    {json.dumps(key, ensure_ascii=False)}: {class_name or 'None'},")
    lines.append("}")
    return "\n".join(lines) + "\n"


def schema_to_json(schema: ParameterSchema, *, indent: int | None = 2) -> str:
    """Serialize a schema to JSON (see ParameterSchema.to_dict)."""
    return json.dumps(schema.to_dict(), indent=indent, ensure_ascii=False)


def generate_contract(
    resource_definitions: ResourceDefinitions,
    output: str | Path | None = None,
    global_parameters: Collection[str] = (),
) -> str:
    """Analyze definitions and render their contract, optionally writing it.

    Args:
        resource_definitions: Nested or flat resource definitions
        output: File to write the contract to (UTF-8); parent directories
            are created. Nothing is written when None.
        global_parameters: Names supplied ambiently; excluded from the contract

    Returns:
        Contract source text

    Raises:
        AnalysisParseError: If a template is malformed (nothing is written)
        OSError: If output cannot be written
    """
    schema = analyze(resource_definitions, global_parameters)
    text = render_contract(schema)
    if output is not None:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info("Wrote contract for %d resource keys to '%s'", len(schema), path)
    return text
