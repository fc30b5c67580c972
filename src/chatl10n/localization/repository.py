"""Locale repository: compiled template values per language.

The repository maps lowercase language codes to a table of resource key ->
template value. Loading a language merges into its table: new keys
overwrite, untouched keys persist. Every template of a batch is compiled
before anything is merged, so a batch with one bad template changes
nothing.

Python 3.13+.

Thread Safety:
    Writers (load_locale, reset_locale) are serialized with a lock and
    replace tables copy-on-write. Readers never block and always see a
    complete table.
"""

import logging
import threading
from collections.abc import Iterator, Mapping

from chatl10n.core import DepthLimitExceededError
from chatl10n.diagnostics import (
    ErrorTemplate,
    RepositoryLoadError,
    TemplateSyntaxError,
)
from chatl10n.runtime import TemplateValue, compile_template
from chatl10n.syntax import TemplateParser

from .flatten import prepare_resource_data
from .types import LanguageCode, ResourceDefinitions, ResourceKey

__all__ = ["LocaleRepository"]

logger = logging.getLogger(__name__)


class LocaleRepository:
    """Mapping of language code -> resource key -> template value.

    Example:
        >>> repo = LocaleRepository()
        >>> repo.load_locale("EN", {"greeting": "Hello ${name}"})
        1
        >>> repo.get_template("en", "greeting")({"name": "Ann"})
        'Hello Ann'
        >>> "en" in repo
        True
    """

    __slots__ = ("_lock", "_parser", "_tables")

    def __init__(self, *, parser: TemplateParser | None = None) -> None:
        """Initialize an empty repository.

        Args:
            parser: Parser used to compile templates (default: TemplateParser())
        """
        self._tables: dict[LanguageCode, Mapping[ResourceKey, TemplateValue]] = {}
        self._lock = threading.Lock()
        self._parser = parser or TemplateParser()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"LocaleRepository(languages={self.available_locales()!r})"

    def __contains__(self, language_code: object) -> bool:
        """Check if a language has been loaded (case-insensitive)."""
        return isinstance(language_code, str) and self.has_language(language_code)

    def __len__(self) -> int:
        """Number of loaded languages."""
        return len(self._tables)

    def __iter__(self) -> Iterator[LanguageCode]:
        """Iterate over loaded language codes."""
        return iter(self.available_locales())

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def load_locale(self, language_code: LanguageCode, definitions: ResourceDefinitions) -> int:
        """Compile definitions and merge them into a language.

        Args:
            language_code: Language code (stored lowercase)
            definitions: Nested or flat resource definitions

        Returns:
            Number of resource keys loaded

        Raises:
            RepositoryLoadError: If definitions is not a mapping, nests deeper
                than the depth limit, or a template fails to compile. The
                repository is unchanged.
        """
        language = language_code.lower()
        if not isinstance(definitions, Mapping):
            raise RepositoryLoadError(
                ErrorTemplate.invalid_document(language, type(definitions).__name__)
            )

        try:
            flat = prepare_resource_data(definitions)
        except DepthLimitExceededError as e:
            logger.error("Definitions for '%s' exceed the nesting limit", language)
            raise RepositoryLoadError(
                ErrorTemplate.definitions_too_deep(language, str(e.diagnostic or e))
            ) from e

        compiled: dict[ResourceKey, TemplateValue] = {}
        for key, source in flat.items():
            try:
                compiled[key] = compile_template(source, parser=self._parser)
            except TemplateSyntaxError as e:
                logger.error("Template '%s.%s' failed to compile", language, key)
                raise RepositoryLoadError(
                    ErrorTemplate.template_compile_failed(language, key, str(e.diagnostic or e))
                ) from e
            logger.debug("Compiled '%s.%s'", language, key)

        with self._lock:
            merged = dict(self._tables.get(language, {}))
            merged.update(compiled)
            self._tables[language] = merged

        logger.info("Loaded %d resource keys for language '%s'", len(compiled), language)
        return len(compiled)

    def reset_locale(self, language_code: LanguageCode | None = None) -> None:
        """Remove one language, or every language when called without one.

        Removing a language that is not loaded is a no-op.
        """
        with self._lock:
            if language_code is None:
                self._tables = {}
                logger.info("Reset all languages")
            else:
                self._tables.pop(language_code.lower(), None)
                logger.info("Reset language '%s'", language_code.lower())

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def available_locales(self) -> list[LanguageCode]:
        """Loaded language codes in load order."""
        return list(self._tables)

    def resource_keys(self, language_code: LanguageCode) -> list[ResourceKey]:
        """Resource keys of a language in load order (empty if not loaded)."""
        return list(self._tables.get(language_code.lower(), {}))

    def has_language(self, language_code: LanguageCode) -> bool:
        """Check if a language has been loaded (case-insensitive)."""
        return language_code.lower() in self._tables

    def get_template(
        self, language_code: LanguageCode, resource_key: ResourceKey
    ) -> TemplateValue | None:
        """Template value for a key, or None if the language or key is absent.

        The language code is matched exactly; callers lowercase it first.
        """
        table = self._tables.get(language_code)
        if table is None:
            return None
        return table.get(resource_key)
