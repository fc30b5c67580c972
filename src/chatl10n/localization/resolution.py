"""Resolution engine: language selection and the key fallback chain.

Language selection happens once per context: a requested code is
lowercased, and if neither it nor its short form ("en" for "en-us") is
loaded, the default language is used instead.

Key resolution walks:

    exact language -> short language -> default language (optional)
    -> missing-key placeholder (optional) -> KeyNotFoundError

Python 3.13+.
"""

import logging
from dataclasses import dataclass

from chatl10n.constants import DEFAULT_LANGUAGE
from chatl10n.diagnostics import ErrorTemplate, KeyNotFoundError
from chatl10n.locale_utils import short_language_code as to_short_language_code
from chatl10n.runtime import MissingKeyTemplate, TemplateValue

from .repository import LocaleRepository
from .types import LanguageCode, ResourceKey

__all__ = ["LanguageSelection", "ResolutionPolicy", "resolve", "select_language"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LanguageSelection:
    """Outcome of language selection.

    Attributes:
        language_code: Lowercased selected language code
        short_language_code: Portion of language_code before the first '-'
    """

    language_code: LanguageCode
    short_language_code: LanguageCode


@dataclass(frozen=True, slots=True)
class ResolutionPolicy:
    """Fallback behavior for keys missing in the selected language.

    Attributes:
        default_language: Language tried when default_language_on_missing is set
        default_language_on_missing: Try the default language before giving up
        allow_missing: Render the key itself instead of raising
    """

    default_language: LanguageCode = DEFAULT_LANGUAGE
    default_language_on_missing: bool = False
    allow_missing: bool = True


def select_language(
    repository: LocaleRepository,
    requested: LanguageCode,
    default_language: LanguageCode,
) -> LanguageSelection:
    """Choose the language a context renders in.

    Args:
        repository: Loaded languages
        requested: Language code asked for (any case)
        default_language: Substitute when neither requested nor its short
            form is loaded

    Returns:
        Selected code and its short form

    Example:
        >>> repo.available_locales()
        ['en', 'ru']
        >>> select_language(repo, "RU-ru", "en")
        LanguageSelection(language_code='ru-ru', short_language_code='ru')
        >>> select_language(repo, "de", "en")
        LanguageSelection(language_code='en', short_language_code='en')
    """
    code = requested.lower()
    short_code = to_short_language_code(code)
    if not repository.has_language(code) and not repository.has_language(short_code):
        logger.warning(
            "Language '%s' is not loaded; using default language '%s'",
            code,
            default_language,
        )
        code = default_language.lower()
    return LanguageSelection(language_code=code, short_language_code=to_short_language_code(code))


def resolve(
    repository: LocaleRepository,
    language_code: LanguageCode,
    resource_key: ResourceKey,
    *,
    short_language_code: LanguageCode | None = None,
    policy: ResolutionPolicy | None = None,
) -> TemplateValue:
    """Find the template value for a key, walking the fallback chain.

    Args:
        repository: Loaded languages
        language_code: Selected (lowercase) language code
        resource_key: Key to resolve
        short_language_code: Short form of language_code (computed if omitted)
        policy: Fallback behavior (default: ResolutionPolicy())

    Returns:
        Template value; a MissingKeyTemplate when the key is missing and
        policy.allow_missing is set

    Raises:
        KeyNotFoundError: If the key is missing everywhere and
            policy.allow_missing is not set
    """
    policy = policy or ResolutionPolicy()
    short_code = short_language_code or to_short_language_code(language_code)

    template = repository.get_template(language_code, resource_key)
    if template is None and short_code != language_code:
        template = repository.get_template(short_code, resource_key)
    if template is not None:
        return template

    if policy.default_language_on_missing:
        template = repository.get_template(policy.default_language.lower(), resource_key)
        if template is not None:
            logger.debug(
                "Key '%s' missing for '%s'; using default language '%s'",
                resource_key,
                language_code,
                policy.default_language,
            )
            return template

    if policy.allow_missing:
        logger.warning(
            "Key '%s' missing for '%s'; rendering the key itself", resource_key, language_code
        )
        return MissingKeyTemplate(resource_key)

    raise KeyNotFoundError(
        ErrorTemplate.resource_key_not_found(language_code, resource_key),
        language=language_code,
        resource_key=resource_key,
    )
