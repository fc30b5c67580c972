"""Tests for the session field boundary.

Python 3.13+.
"""

from __future__ import annotations

from types import MappingProxyType, SimpleNamespace

import pytest

from chatl10n.localization import (
    SESSION_LANGUAGE_FIELD,
    read_session_language,
    session_of,
    write_session_language,
)


class _Frozen:
    __slots__ = ()


class TestReadSessionLanguage:
    """read_session_language()."""

    @pytest.mark.parametrize(
        ("session", "expected"),
        [
            ({SESSION_LANGUAGE_FIELD: "ru"}, "ru"),
            ({}, None),
            ({SESSION_LANGUAGE_FIELD: ""}, None),
            ({SESSION_LANGUAGE_FIELD: 7}, None),
            (None, None),
            (SimpleNamespace(**{SESSION_LANGUAGE_FIELD: "de"}), "de"),
            (SimpleNamespace(), None),
        ],
    )
    def test_values(self, session: object, expected: str | None) -> None:
        """Only non-empty strings count as a stored language."""
        assert read_session_language(session) == expected


class TestWriteSessionLanguage:
    """write_session_language()."""

    def test_mapping(self) -> None:
        """Only the language field is written."""
        session: dict[str, object] = {"other": 1}
        write_session_language(session, "ru")
        assert session == {"other": 1, SESSION_LANGUAGE_FIELD: "ru"}

    def test_object(self) -> None:
        """Attribute sessions receive the field."""
        session = SimpleNamespace()
        write_session_language(session, "ru")
        assert read_session_language(session) == "ru"

    def test_read_only_mapping(self) -> None:
        """Immutable mappings raise TypeError."""
        with pytest.raises(TypeError, match="read-only"):
            write_session_language(MappingProxyType({}), "ru")

    def test_object_without_attributes(self) -> None:
        """Objects refusing attributes raise TypeError."""
        with pytest.raises(TypeError, match="_Frozen"):
            write_session_language(_Frozen(), "ru")


class TestSessionOf:
    """session_of()."""

    def test_attribute_host(self) -> None:
        """Object hosts are read by attribute."""
        session = {SESSION_LANGUAGE_FIELD: "ru"}
        assert session_of(SimpleNamespace(session=session), "session") is session

    def test_mapping_host(self) -> None:
        """Mapping hosts are read by key."""
        session = SimpleNamespace()
        assert session_of({"state": session}, "state") is session

    @pytest.mark.parametrize("host", [None, {}, SimpleNamespace(), _Frozen()])
    def test_absent_session(self, host: object) -> None:
        """Hosts without the named session yield None."""
        assert session_of(host, "session") is None
