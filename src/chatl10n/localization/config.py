"""Configuration for the I18n orchestrator.

Python 3.13+.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType

from chatl10n.constants import DEFAULT_LANGUAGE, DEFAULT_SESSION_NAME
from chatl10n.runtime import pluralize

from .resolution import ResolutionPolicy
from .types import LanguageCode

__all__ = ["I18nConfig", "default_template_data"]

logger = logging.getLogger(__name__)


def default_template_data() -> Mapping[str, object]:
    """Helpers available to every template unless template_data is replaced."""
    return {"pluralize": pluralize}


@dataclass(frozen=True, slots=True)
class I18nConfig:
    """Immutable I18n settings.

    Attributes:
        default_language: Language substituted for unloaded languages and,
            with default_language_on_missing, tried for missing keys
        session_name: Name of the session attribute hosts keep the session in
        allow_missing: Render the resource key instead of raising when a
            key is missing everywhere
        default_language_on_missing: Try default_language for keys missing
            in the selected language
        use_session: Read and write the selected language in the session
        directory: Locale directory loaded when I18n is constructed
        template_data: Values and helpers available to every template.
            Replacing it drops the built-in pluralize helper unless the new
            mapping includes it.

    Example:
        >>> config = I18nConfig(default_language="EN", allow_missing=False)
        >>> config.default_language
        'en'
        >>> config.with_overrides(allow_missing=True).allow_missing
        True
    """

    default_language: LanguageCode = DEFAULT_LANGUAGE
    session_name: str = DEFAULT_SESSION_NAME
    allow_missing: bool = True
    default_language_on_missing: bool = False
    use_session: bool = False
    directory: str | Path | None = None
    template_data: Mapping[str, object] = field(default_factory=default_template_data)

    def __post_init__(self) -> None:
        """Validate and normalize settings."""
        if not self.default_language:
            msg = "default_language must be a non-empty language code"
            raise ValueError(msg)
        if not self.session_name:
            msg = "session_name must be non-empty"
            raise ValueError(msg)
        # frozen=True: normalize through object.__setattr__
        object.__setattr__(self, "default_language", self.default_language.lower())
        object.__setattr__(self, "template_data", MappingProxyType(dict(self.template_data)))

    @property
    def policy(self) -> ResolutionPolicy:
        """Fallback behavior derived from this configuration."""
        return ResolutionPolicy(
            default_language=self.default_language,
            default_language_on_missing=self.default_language_on_missing,
            allow_missing=self.allow_missing,
        )

    def with_overrides(self, **overrides: object) -> "I18nConfig":
        """Return a copy with the given fields replaced.

        Raises:
            TypeError: If an override names an unknown field
        """
        if overrides:
            logger.debug("Config overrides: %s", ", ".join(sorted(overrides)))
        return replace(self, **overrides)  # type: ignore[arg-type]
