"""Localization: repository, resolution, rendering contexts and I18n.

Python 3.13+.
"""

from .config import I18nConfig, default_template_data
from .context import RenderContext
from .flatten import flatten_resources, prepare_resource_data, stringify_leaf
from .loading import (
    LoadSummary,
    LocaleDocument,
    ResourceLoadResult,
    load_directory,
    read_locale_file,
    read_locale_files,
)
from .orchestrator import I18n
from .repository import LocaleRepository
from .resolution import LanguageSelection, ResolutionPolicy, resolve, select_language
from .session import (
    SESSION_LANGUAGE_FIELD,
    read_session_language,
    session_of,
    write_session_language,
)
from .types import LanguageCode, ResourceDefinitions, ResourceKey, TemplateData, TemplateSource

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Orchestration
    "I18n",
    "I18nConfig",
    "default_template_data",
    "RenderContext",
    # Repository and resolution
    "LocaleRepository",
    "LanguageSelection",
    "ResolutionPolicy",
    "resolve",
    "select_language",
    # Flattening
    "flatten_resources",
    "prepare_resource_data",
    "stringify_leaf",
    # File loading
    "LocaleDocument",
    "LoadSummary",
    "ResourceLoadResult",
    "load_directory",
    "read_locale_file",
    "read_locale_files",
    # Session boundary
    "SESSION_LANGUAGE_FIELD",
    "read_session_language",
    "session_of",
    "write_session_language",
    # Types
    "LanguageCode",
    "ResourceDefinitions",
    "ResourceKey",
    "TemplateData",
    "TemplateSource",
]
