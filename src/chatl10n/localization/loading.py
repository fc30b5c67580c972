"""Locale file loading: a directory of YAML/JSON files, one per language.

Each file's lowercased stem names its language ("EN-us.yaml" -> "en-us").
YAML is read with PyYAML's safe_load, JSON with the json module. Files with
other extensions are skipped.

Components:
    LocaleDocument - One parsed locale file
    read_locale_files - Parse every locale file of a directory
    load_directory - Flattened definitions per language
    ResourceLoadResult - Immutable result of a single file load
    LoadSummary - Immutable aggregate of all file results

Python 3.13+. Depends on PyYAML.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml

from chatl10n.constants import JSON_EXTENSIONS, YAML_EXTENSIONS
from chatl10n.diagnostics import ErrorTemplate, RepositoryLoadError
from chatl10n.enums import LoadStatus

from .flatten import prepare_resource_data
from .types import LanguageCode, ResourceDefinitions, ResourceKey, TemplateSource

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Reading
    "LocaleDocument",
    "read_locale_file",
    "read_locale_files",
    "load_directory",
    # Load result types
    "ResourceLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleDocument:
    """One locale file.

    Attributes:
        language: Lowercased file stem
        path: File path
        status: SUCCESS, SKIPPED (unsupported extension) or EMPTY
        definitions: Parsed mapping (empty unless status is SUCCESS)
    """

    language: LanguageCode
    path: Path
    status: LoadStatus
    definitions: ResourceDefinitions

    @property
    def has_definitions(self) -> bool:
        """Check if the file contributed resource definitions."""
        return self.status == LoadStatus.SUCCESS


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading a single locale file.

    Attributes:
        language: Language code the file was loaded as
        source_path: File path
        status: Load status
        key_count: Resource keys merged into the repository
    """

    language: LanguageCode
    source_path: str
    status: LoadStatus
    key_count: int = 0

    @property
    def is_success(self) -> bool:
        """Check if the file was merged into the repository."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_skipped(self) -> bool:
        """Check if the file was ignored because of its extension."""
        return self.status == LoadStatus.SKIPPED

    @property
    def is_empty(self) -> bool:
        """Check if the file parsed to nothing."""
        return self.status == LoadStatus.EMPTY


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of file load results from one directory load.

    Attributes:
        results: All individual load results in file-name order

    Example:
        >>> summary = i18n.load_locales("locales")
        >>> summary.languages
        ('en', 'ru')
        >>> summary.total_keys
        17
    """

    results: tuple[ResourceLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"skipped={self.skipped}, "
            f"empty={self.empty})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of files seen."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of files merged into the repository."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def skipped(self) -> int:
        """Number of files with unsupported extensions."""
        return sum(1 for r in self.results if r.is_skipped)

    @property
    def empty(self) -> int:
        """Number of files that parsed to nothing."""
        return sum(1 for r in self.results if r.is_empty)

    @property
    def total_keys(self) -> int:
        """Resource keys merged across all files."""
        return sum(r.key_count for r in self.results)

    @property
    def languages(self) -> tuple[LanguageCode, ...]:
        """Languages that received definitions, in first-seen order."""
        return tuple(dict.fromkeys(r.language for r in self.results if r.is_success))

    def get_successful(self) -> tuple[ResourceLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_language(self, language: LanguageCode) -> tuple[ResourceLoadResult, ...]:
        """Get all results for a specific language."""
        return tuple(r for r in self.results if r.language == language)


def _parse_text(path: Path, text: str) -> object:
    suffix = path.suffix.lower()
    if suffix in YAML_EXTENSIONS:
        return yaml.safe_load(text)
    return json.loads(text)


def read_locale_file(path: str | Path) -> LocaleDocument:
    """Read and parse one locale file.

    Args:
        path: File path

    Returns:
        Parsed document (SKIPPED for unsupported extensions, EMPTY when the
        file parses to nothing)

    Raises:
        RepositoryLoadError: If the file cannot be read or parsed, or its
            top level is not a mapping
    """
    path = Path(path)
    language = path.stem.lower()
    suffix = path.suffix.lower()
    if suffix not in YAML_EXTENSIONS and suffix not in JSON_EXTENSIONS:
        logger.debug("Skipping '%s': unsupported extension", path)
        return LocaleDocument(language, path, LoadStatus.SKIPPED, {})

    try:
        data = _parse_text(path, path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        logger.error("Failed to parse locale file '%s'", path)
        raise RepositoryLoadError(ErrorTemplate.file_parse_failed(str(path), str(e))) from e

    if data is None or (isinstance(data, Mapping) and not data):
        logger.debug("Locale file '%s' is empty", path)
        return LocaleDocument(language, path, LoadStatus.EMPTY, {})
    if not isinstance(data, Mapping):
        raise RepositoryLoadError(ErrorTemplate.invalid_document(str(path), type(data).__name__))
    return LocaleDocument(language, path, LoadStatus.SUCCESS, data)


def read_locale_files(directory: str | Path) -> list[LocaleDocument]:
    """Read every file of a locale directory in file-name order.

    Subdirectories are ignored.

    Raises:
        RepositoryLoadError: If the directory does not exist or a locale
            file is malformed
    """
    root = Path(directory)
    if not root.is_dir():
        raise RepositoryLoadError(ErrorTemplate.directory_not_found(str(directory)))
    return [read_locale_file(path) for path in sorted(root.iterdir()) if path.is_file()]


def load_directory(
    directory: str | Path,
) -> dict[LanguageCode, dict[ResourceKey, TemplateSource]]:
    """Flattened resource definitions per language from a locale directory.

    Files naming the same language ("en.yaml" and "en.json") are merged in
    file-name order; later files win on duplicate keys.

    Raises:
        RepositoryLoadError: If the directory does not exist or a locale
            file is malformed
    """
    languages: dict[LanguageCode, dict[ResourceKey, TemplateSource]] = {}
    for document in read_locale_files(directory):
        if document.has_definitions:
            languages.setdefault(document.language, {}).update(
                prepare_resource_data(document.definitions)
            )
    return languages
