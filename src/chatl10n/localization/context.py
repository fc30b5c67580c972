"""Rendering context: one language, ambient data, and render calls.

A context is what a message handler talks to. It remembers the selected
language and the data every template in the conversation can see (the
configured helpers plus per-context values such as the sender), and turns
resource keys into text.

Python 3.13+.
"""

import functools
import logging
from collections.abc import Mapping
from types import MappingProxyType

from chatl10n.diagnostics import (
    ErrorTemplate,
    KeyNotFoundError,
    TemplateEvaluationError,
)
from chatl10n.runtime import is_context_helper

from .config import I18nConfig
from .repository import LocaleRepository
from .resolution import resolve, select_language
from .types import LanguageCode, ResourceKey, TemplateData

__all__ = ["RenderContext"]

logger = logging.getLogger(__name__)


class RenderContext:
    """Renders resource keys in a selected language.

    The repository is shared and read-only from the context's side; any
    number of contexts can render from it at once.

    Example:
        >>> ctx = RenderContext(repo, I18nConfig(), "en-US", {"bot": "Shop"})
        >>> ctx.language
        'en-us'
        >>> ctx.render("greeting", {"name": "Ann"})
        'Hello Ann, I am Shop'
    """

    __slots__ = (
        "_config",
        "_language_code",
        "_repository",
        "_short_language_code",
        "_template_data",
    )

    def __init__(
        self,
        repository: LocaleRepository,
        config: I18nConfig,
        language_code: LanguageCode,
        template_data: TemplateData | None = None,
    ) -> None:
        """Initialize context and select its language.

        Args:
            repository: Loaded languages
            config: Fallback policy, default language and global template data
            language_code: Requested language (any case)
            template_data: Per-context values; override config.template_data
        """
        self._repository = repository
        self._config = config
        self._template_data: Mapping[str, object] = MappingProxyType(
            {**config.template_data, **(template_data or {})}
        )
        self._language_code = ""
        self._short_language_code = ""
        self.set_language(language_code)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"RenderContext(language={self._language_code!r})"

    @property
    def language(self) -> LanguageCode:
        """Selected language code (lowercase)."""
        return self._language_code

    @property
    def short_language_code(self) -> LanguageCode:
        """Selected language code up to the first '-'."""
        return self._short_language_code

    @property
    def template_data(self) -> Mapping[str, object]:
        """Ambient data merged into every render call (read-only)."""
        return self._template_data

    @property
    def config(self) -> I18nConfig:
        """Configuration this context was created with."""
        return self._config

    def get_language(self) -> LanguageCode:
        """Selected language code (same as the language property)."""
        return self._language_code

    def set_language(self, language_code: LanguageCode) -> None:
        """Select a new language against the current repository contents.

        Falls back to the default language when neither the code nor its
        short form is loaded.
        """
        selection = select_language(
            self._repository, language_code, self._config.default_language
        )
        self._language_code = selection.language_code
        self._short_language_code = selection.short_language_code

    def render(self, resource_key: ResourceKey, params: TemplateData | None = None) -> str:
        """Render a resource key in the selected language.

        Args:
            resource_key: Key to render
            params: Call parameters; override ambient data of the same name

        Returns:
            Rendered text

        Raises:
            KeyNotFoundError: If the key is missing everywhere and
                allow_missing is disabled
            TemplateEvaluationError: If the template fails while rendering
                (the original error is chained as __cause__)
        """
        try:
            template = resolve(
                self._repository,
                self._language_code,
                resource_key,
                short_language_code=self._short_language_code,
                policy=self._config.policy,
            )
        except KeyNotFoundError:
            logger.warning("Resource '%s.%s' not found", self._language_code, resource_key)
            raise

        data = self._prepare_data(params)
        try:
            return template(data)
        except Exception as e:
            logger.warning(
                "Resource '%s.%s' failed to render: %s", self._language_code, resource_key, e
            )
            diagnostic = getattr(e, "diagnostic", None)
            raise TemplateEvaluationError(
                ErrorTemplate.template_evaluation_failed(
                    self._language_code, resource_key, str(diagnostic or e)
                ),
                language=self._language_code,
                resource_key=resource_key,
            ) from e

    t = render

    def _prepare_data(self, params: TemplateData | None) -> dict[str, object]:
        """Merge ambient data with call params and bind context helpers."""
        data: dict[str, object] = {**self._template_data, **(params or {})}
        for name, value in list(data.items()):
            if callable(value) and is_context_helper(value):
                data[name] = functools.partial(value, self)
        return data
