"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating I18n call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "LanguageCode",
    "ResourceDefinitions",
    "ResourceKey",
    "TemplateData",
    "TemplateSource",
]

type LanguageCode = str
"""Language code as reported by the chat platform (e.g., 'en', 'en-us', 'ru')."""

type ResourceKey = str
"""Dotted key of one resource string (e.g., 'greeting', 'cart.title')."""

type TemplateSource = str
"""Raw resource text, possibly containing ${ } placeables."""

type TemplateData = Mapping[str, object]
"""Parameter values by name, as passed to render calls."""

type ResourceDefinitions = Mapping[str, object]
"""Nested or flat mapping of resource keys to resource text."""
