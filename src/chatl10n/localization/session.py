"""Session field boundary.

Hosts keep a session object under a configurable name (the config's
session_name, "session" by default) and the selected language inside it
under one field, "__language_code". The session may be a mutable mapping
(dict-like session stores) or a plain object with attributes. No other field is ever
read or written.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping, MutableMapping

from chatl10n.constants import SESSION_LANGUAGE_FIELD

from .types import LanguageCode

__all__ = [
    "SESSION_LANGUAGE_FIELD",
    "read_session_language",
    "session_of",
    "write_session_language",
]


def session_of(host: object, session_name: str) -> object:
    """Session object a host keeps under session_name, or None if absent.

    The host is usually the per-update context of a bot framework. It may
    be a mapping or an object with attributes.

    Example:
        >>> session_of({"session": {"__language_code": "ru"}}, "session")
        {'__language_code': 'ru'}
    """
    if host is None:
        return None
    if isinstance(host, Mapping):
        return host.get(session_name)
    return getattr(host, session_name, None)


def read_session_language(session: object) -> LanguageCode | None:
    """Language code stored in a session, or None if unset.

    Args:
        session: Mapping or attribute-style session object (None allowed)

    Example:
        >>> read_session_language({"__language_code": "ru"})
        'ru'
        >>> read_session_language({}) is None
        True
    """
    if session is None:
        return None
    if isinstance(session, Mapping):
        value = session.get(SESSION_LANGUAGE_FIELD)
    else:
        value = getattr(session, SESSION_LANGUAGE_FIELD, None)
    return value if isinstance(value, str) and value else None


def write_session_language(session: object, language_code: LanguageCode) -> None:
    """Store a language code in a session.

    Args:
        session: Mutable mapping or attribute-style session object
        language_code: Language code to store

    Raises:
        TypeError: If session is an immutable mapping or rejects attributes
    """
    if isinstance(session, MutableMapping):
        session[SESSION_LANGUAGE_FIELD] = language_code
        return
    if isinstance(session, Mapping):
        msg = f"Cannot store language in read-only session ({type(session).__name__})"
        raise TypeError(msg)
    try:
        setattr(session, SESSION_LANGUAGE_FIELD, language_code)
    except AttributeError as e:
        msg = f"Cannot store language on session of type {type(session).__name__}"
        raise TypeError(msg) from e
