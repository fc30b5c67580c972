"""Enumerations for chatl10n type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ParameterKind(StrEnum):
    """Shape a template requires of one of its parameters.

    StrEnum provides automatic string conversion: str(ParameterKind.VALUE) == "value"
    """

    VALUE = "value"
    """Bare reference: ${name}. Any scalar or object is accepted."""

    OBJECT = "object"
    """Root of a property access: ${user.name}. Must have at least that shape."""

    CALLABLE = "callable"
    """Call target: ${pluralize(count, 'item', 'items')}."""


class LoadStatus(StrEnum):
    """Outcome of loading a single locale definition file.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """File parsed and merged into the repository."""

    SKIPPED = "skipped"
    """File extension is not a supported locale format."""

    EMPTY = "empty"
    """File parsed to an empty document; nothing was merged."""


__all__ = [
    "LoadStatus",
    "ParameterKind",
]
