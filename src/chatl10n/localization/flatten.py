"""Flattening of nested resource definitions.

Locale files nest resource strings:

    cart:
      title: Your cart
      items: ${count} items

Ingestion and analysis both work on the flat form {"cart.title": ...,
"cart.items": ...}. Flattening walks mappings explicitly; leaves are kept
as-is, including lists.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

from chatl10n.constants import MAX_DEPTH, RESOURCE_KEY_SEPARATOR
from chatl10n.core.depth_guard import DepthGuard

from .types import ResourceDefinitions, ResourceKey, TemplateSource

__all__ = ["flatten_resources", "prepare_resource_data", "stringify_leaf"]


def flatten_resources(
    data: ResourceDefinitions, *, max_depth: int = MAX_DEPTH
) -> dict[ResourceKey, object]:
    """Flatten nested mappings into dotted keys.

    Insertion order is preserved. Keys that are not strings (YAML allows
    integer keys) are converted with str().

    Args:
        data: Nested resource definitions
        max_depth: Maximum nesting depth

    Returns:
        Flat mapping of dotted keys to leaf values

    Raises:
        DepthLimitExceededError: If nesting exceeds max_depth

    Example:
        >>> flatten_resources({"a": {"b": "x", "c": {"d": 1}}, "e": "y"})
        {'a.b': 'x', 'a.c.d': 1, 'e': 'y'}
    """
    result: dict[ResourceKey, object] = {}
    _flatten_into(result, data, "", DepthGuard(max_depth=max_depth))
    return result


def _flatten_into(
    result: dict[ResourceKey, object],
    data: Mapping[object, object],
    prefix: str,
    guard: DepthGuard,
) -> None:
    with guard:
        for key, value in data.items():
            full_key = f"{prefix}{RESOURCE_KEY_SEPARATOR}{key}" if prefix else str(key)
            if isinstance(value, Mapping):
                _flatten_into(result, value, full_key, guard)
            else:
                result[full_key] = value


def stringify_leaf(value: object) -> TemplateSource:
    """Convert a leaf value to resource text.

    Booleans and None use their JSON/YAML spelling ("true", "false",
    "null"); list items are joined with ",".

    Example:
        >>> stringify_leaf(True)
        'true'
        >>> stringify_leaf(["a", 1])
        'a,1'
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_leaf(item) for item in value)
    return str(value)


def prepare_resource_data(data: ResourceDefinitions) -> dict[ResourceKey, TemplateSource]:
    """Flatten definitions and stringify every leaf.

    Accepts nested or already-flat mappings; a flat mapping comes back with
    the same keys.

    Args:
        data: Resource definitions

    Returns:
        Flat mapping of resource key to resource text
    """
    return {key: stringify_leaf(value) for key, value in flatten_resources(data).items()}
