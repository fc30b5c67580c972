"""I18n orchestrator: configuration, repository and contexts in one object.

Implements the application-facing API: load languages from mappings or a
directory, render one-off strings, hand out rendering contexts, and report
translation coverage between languages.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import I18nConfig
from .context import RenderContext
from .loading import LoadSummary, ResourceLoadResult, read_locale_files
from .repository import LocaleRepository
from .session import read_session_language, session_of, write_session_language
from .types import LanguageCode, ResourceDefinitions, ResourceKey, TemplateData

__all__ = ["I18n"]

logger = logging.getLogger(__name__)


class I18n:
    """Localization entry point.

    Example - Direct resource provision:
        >>> i18n = I18n(default_language="en")
        >>> i18n.load_locale("en", {"greeting": "Hello, ${name}!"})
        1
        >>> i18n.t("en", "greeting", {"name": "Ann"})
        'Hello, Ann!'

    Example - Locale directory:
        >>> i18n = I18n(directory="locales")
        >>> ctx = i18n.create_context("ru-RU", {"bot": "Shop"})
        >>> ctx.t("cart", {"apples": 3})
    """

    __slots__ = ("_config", "_repository")

    def __init__(self, config: I18nConfig | None = None, /, **overrides: object) -> None:
        """Initialize orchestrator.

        Args:
            config: Base configuration (default: I18nConfig())
            **overrides: Fields replacing those of config

        Raises:
            RepositoryLoadError: If config.directory is set and cannot be loaded
        """
        base = config if config is not None else I18nConfig()
        self._config = base.with_overrides(**overrides) if overrides else base
        self._repository = LocaleRepository()
        logger.info(
            "I18n configured: default_language=%s allow_missing=%s "
            "default_language_on_missing=%s",
            self._config.default_language,
            self._config.allow_missing,
            self._config.default_language_on_missing,
        )
        if self._config.directory is not None:
            self.load_locales(self._config.directory)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"I18n(default_language={self._config.default_language!r}, "
            f"languages={self.available_locales()!r})"
        )

    @property
    def config(self) -> I18nConfig:
        """Active configuration."""
        return self._config

    @property
    def repository(self) -> LocaleRepository:
        """Underlying locale repository."""
        return self._repository

    # ------------------------------------------------------------------
    # Repository management
    # ------------------------------------------------------------------

    def load_locale(self, language_code: LanguageCode, definitions: ResourceDefinitions) -> int:
        """Merge resource definitions into a language.

        Returns:
            Number of resource keys loaded

        Raises:
            RepositoryLoadError: If a template fails to compile
        """
        return self._repository.load_locale(language_code, definitions)

    def load_locales(self, directory: str | Path) -> LoadSummary:
        """Load every YAML/JSON file of a directory, one language per file.

        All files are parsed before any is merged. Files are then merged in
        file-name order.

        Returns:
            Per-file load results

        Raises:
            RepositoryLoadError: If the directory does not exist, a file is
                malformed, or a template fails to compile
        """
        documents = read_locale_files(directory)
        results: list[ResourceLoadResult] = []
        for document in documents:
            key_count = 0
            if document.has_definitions:
                key_count = self._repository.load_locale(document.language, document.definitions)
            results.append(
                ResourceLoadResult(
                    language=document.language,
                    source_path=str(document.path),
                    status=document.status,
                    key_count=key_count,
                )
            )
        summary = LoadSummary(results=tuple(results))
        logger.info("Loaded locales from '%s': %r", directory, summary)
        return summary

    def reset_locale(self, language_code: LanguageCode | None = None) -> None:
        """Remove one language, or every language when called without one."""
        self._repository.reset_locale(language_code)

    def available_locales(self) -> list[LanguageCode]:
        """Loaded language codes."""
        return self._repository.available_locales()

    def resource_keys(self, language_code: LanguageCode) -> list[ResourceKey]:
        """Resource keys loaded for a language (empty if not loaded)."""
        return self._repository.resource_keys(language_code)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def create_context(
        self, language_code: LanguageCode, template_data: TemplateData | None = None
    ) -> RenderContext:
        """Create a rendering context for a language.

        Args:
            language_code: Requested language (any case)
            template_data: Per-context values visible to every render call
        """
        return RenderContext(self._repository, self._config, language_code, template_data)

    def t(
        self,
        language_code: LanguageCode,
        resource_key: ResourceKey,
        params: TemplateData | None = None,
    ) -> str:
        """Render one resource key without keeping a context.

        Raises:
            KeyNotFoundError: If the key is missing and allow_missing is disabled
            TemplateEvaluationError: If the template fails while rendering
        """
        return self.create_context(language_code, params).render(resource_key, params)

    # ------------------------------------------------------------------
    # Session boundary
    # ------------------------------------------------------------------

    def session_of(self, host: object) -> object:
        """Session a host keeps under the configured session_name.

        Example:
            >>> i18n = I18n(use_session=True)
            >>> i18n.session_of({"session": {"__language_code": "ru"}})
            {'__language_code': 'ru'}
        """
        return session_of(host, self._config.session_name)

    def context_from_session(
        self,
        session: object,
        fallback_language: LanguageCode | None = None,
        template_data: TemplateData | None = None,
    ) -> RenderContext:
        """Create a context for the language stored in a session.

        The session is consulted only when use_session is enabled. Otherwise,
        or when the session holds no language, fallback_language (typically
        the sender's client language) is used, then default_language.

        Hosts holding the session on a framework context pass
        session_of(host) as the session.
        """
        stored = read_session_language(session) if self._config.use_session else None
        language = stored or fallback_language or self._config.default_language
        return self.create_context(language, template_data)

    def store_session_language(self, session: object, context: RenderContext) -> None:
        """Write a context's language back to the session.

        Does nothing when use_session is disabled or session is None.
        """
        if self._config.use_session and session is not None:
            write_session_language(session, context.language)

    # ------------------------------------------------------------------
    # Coverage
    # ------------------------------------------------------------------

    def missing_keys(
        self, language_code: LanguageCode, reference_language: LanguageCode | None = None
    ) -> list[ResourceKey]:
        """Keys of the reference language absent from a language.

        Args:
            language_code: Language to check
            reference_language: Language to compare against (default: default_language)

        Returns:
            Missing keys in reference order
        """
        reference = reference_language or self._config.default_language
        present = set(self.resource_keys(language_code))
        return [key for key in self.resource_keys(reference) if key not in present]

    def overspecified_keys(
        self, language_code: LanguageCode, reference_language: LanguageCode | None = None
    ) -> list[ResourceKey]:
        """Keys of a language absent from the reference language."""
        reference = reference_language or self._config.default_language
        return self.missing_keys(reference, language_code)

    def translation_progress(
        self, language_code: LanguageCode, reference_language: LanguageCode | None = None
    ) -> float:
        """Share of reference keys present in a language (0.0 to 1.0).

        Raises:
            ValueError: If the reference language has no keys
        """
        reference = reference_language or self._config.default_language
        reference_count = len(self.resource_keys(reference))
        if reference_count == 0:
            msg = f"Reference language '{reference}' has no resource keys"
            raise ValueError(msg)
        missing = len(self.missing_keys(language_code, reference))
        return (reference_count - missing) / reference_count
