"""Tests for the I18n orchestrator.

Covers:
- End-to-end rendering scenarios
- Directory loading with load summaries
- Session boundary
- Translation coverage reports

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType, SimpleNamespace

import pytest

from chatl10n import I18n, I18nConfig
from chatl10n.diagnostics import DiagnosticCode, KeyNotFoundError, RepositoryLoadError
from chatl10n.enums import LoadStatus

# ============================================================================
# SCENARIOS
# ============================================================================


class TestScenarios:
    """End-to-end behavior through the public API."""

    def test_simple_substitution(self) -> None:
        """Hello ${name}! renders with a name."""
        i18n = I18n()
        i18n.load_locale("en", {"hello": "Hello ${name}!"})
        assert i18n.t("en", "hello", {"name": "Ann"}) == "Hello Ann!"

    def test_regional_request_uses_short_language(self) -> None:
        """en-US finds templates loaded under en."""
        i18n = I18n(allow_missing=False)
        i18n.load_locale("en", {"hello": "Hello"})
        assert i18n.t("en-US", "hello") == "Hello"

    def test_unloaded_language_substituted(self) -> None:
        """fr is replaced by the default language before lookup."""
        i18n = I18n(default_language="en", allow_missing=False)
        i18n.load_locale("en", {"hello": "Hello"})
        ctx = i18n.create_context("fr")
        assert ctx.language == "en"
        assert ctx.render("hello") == "Hello"

    def test_missing_everywhere_renders_key(self) -> None:
        """allow_missing renders a key missing from every language."""
        i18n = I18n(default_language="en", allow_missing=True, default_language_on_missing=True)
        i18n.load_locale("en", {"hello": "Hello"})
        i18n.load_locale("ru", {"hello": "Привет"})
        assert i18n.t("ru", "checkout") == "checkout"

    def test_default_language_on_missing(self) -> None:
        """A key missing in ru is rendered from en when enabled."""
        i18n = I18n(default_language="en", default_language_on_missing=True)
        i18n.load_locale("en", {"hello": "Hello ${name}"})
        i18n.load_locale("ru", {})
        assert i18n.t("ru", "hello", {"name": "Ann"}) == "Hello Ann"

    def test_t_missing_key_strict(self, i18n: I18n) -> None:
        """With allow_missing disabled, t() raises KeyNotFoundError."""
        with pytest.raises(KeyNotFoundError):
            i18n.t("ru", "checkout")

    def test_t_params_are_template_data(self, i18n: I18n) -> None:
        """t() makes params visible as context data."""
        assert i18n.t("ru", "cart", {"apples": 5}) == "5 яблок в корзине"


# ============================================================================
# CONFIGURATION
# ============================================================================


class TestConfiguration:
    """Constructor configuration handling."""

    def test_overrides_applied(self) -> None:
        """Keyword overrides replace fields of the base config."""
        base = I18nConfig(default_language="ru")
        i18n = I18n(base, allow_missing=False)
        assert i18n.config.default_language == "ru"
        assert i18n.config.allow_missing is False
        assert base.allow_missing is True

    def test_unknown_override_rejected(self) -> None:
        """Unknown fields raise TypeError."""
        with pytest.raises(TypeError):
            I18n(no_such_option=True)

    def test_directory_loaded_on_construction(self, locale_dir: Path) -> None:
        """config.directory is loaded eagerly."""
        i18n = I18n(directory=locale_dir)
        assert sorted(i18n.available_locales()) == ["en", "ru"]

    def test_repr(self) -> None:
        """repr() shows the default language and loaded languages."""
        i18n = I18n()
        i18n.load_locale("en", {})
        assert repr(i18n) == "I18n(default_language='en', languages=['en'])"


# ============================================================================
# DIRECTORY LOADING
# ============================================================================


class TestLoadLocales:
    """load_locales() from a directory."""

    def test_summary(self, locale_dir: Path) -> None:
        """The summary counts merged, skipped and empty files."""
        i18n = I18n()
        summary = i18n.load_locales(locale_dir)
        assert summary.total_attempted == 3
        assert summary.successful == 2
        assert summary.skipped == 1
        assert summary.empty == 0
        assert summary.total_keys == 4
        assert set(summary.languages) == {"en", "ru"}

    def test_file_stem_names_language(self, locale_dir: Path) -> None:
        """RU.json loads as ru; nested keys are flattened."""
        i18n = I18n()
        i18n.load_locales(locale_dir)
        assert i18n.resource_keys("ru") == ["greeting", "cart.title"]
        assert i18n.t("ru", "cart.title", {"name": "Ann"}) == "Корзина Ann"

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing directory raises DIRECTORY_NOT_FOUND."""
        with pytest.raises(RepositoryLoadError) as exc_info:
            I18n().load_locales(tmp_path / "absent")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.DIRECTORY_NOT_FOUND

    def test_malformed_file_changes_nothing(self, locale_dir: Path) -> None:
        """A file that fails to parse aborts before any merge."""
        (locale_dir / "zz.yaml").write_text("key: [unclosed\n", encoding="utf-8")
        i18n = I18n()
        with pytest.raises(RepositoryLoadError):
            i18n.load_locales(locale_dir)
        assert i18n.available_locales() == []

    def test_empty_file_reported(self, locale_dir: Path) -> None:
        """An empty file is reported EMPTY and loads no language."""
        (locale_dir / "de.yml").write_text("", encoding="utf-8")
        i18n = I18n()
        summary = i18n.load_locales(locale_dir)
        assert summary.empty == 1
        (result,) = summary.get_by_language("de")
        assert result.status == LoadStatus.EMPTY
        assert "de" not in i18n.available_locales()

    def test_reload_merges(self, locale_dir: Path) -> None:
        """Loading the directory twice keeps the same keys."""
        i18n = I18n()
        i18n.load_locales(locale_dir)
        i18n.load_locale("en", {"extra": "Extra"})
        i18n.load_locales(locale_dir)
        assert i18n.resource_keys("en") == ["greeting", "cart.title", "extra"]


# ============================================================================
# SESSION
# ============================================================================


class TestSession:
    """Session boundary."""

    def test_session_language_used_when_enabled(self, i18n: I18n) -> None:
        """use_session reads the stored language."""
        strict = I18n(i18n.config, use_session=True)
        strict.load_locale("ru", {"greeting": "Привет!"})
        ctx = strict.context_from_session({"__language_code": "ru"}, fallback_language="en")
        assert ctx.language == "ru"

    def test_session_ignored_when_disabled(self, i18n: I18n) -> None:
        """Without use_session the fallback language is used."""
        ctx = i18n.context_from_session({"__language_code": "ru"}, fallback_language="en")
        assert ctx.language == "en"

    def test_default_language_without_session_or_fallback(self, i18n: I18n) -> None:
        """No stored language and no fallback: default language."""
        ctx = i18n.context_from_session(None)
        assert ctx.language == "en"

    def test_store_language_in_mapping(self) -> None:
        """The selected language is written to a dict session."""
        i18n = I18n(use_session=True)
        i18n.load_locale("ru", {})
        session: dict[str, object] = {"cart": [1]}
        i18n.store_session_language(session, i18n.create_context("ru"))
        assert session == {"cart": [1], "__language_code": "ru"}

    def test_store_language_on_object(self) -> None:
        """Attribute-style sessions are supported."""
        i18n = I18n(use_session=True)
        i18n.load_locale("ru", {})
        session = SimpleNamespace()
        i18n.store_session_language(session, i18n.create_context("ru"))
        assert getattr(session, "__language_code") == "ru"  # noqa: B009

    def test_store_noop_when_disabled(self, i18n: I18n) -> None:
        """Nothing is written unless use_session is enabled."""
        session: dict[str, object] = {}
        i18n.store_session_language(session, i18n.create_context("ru"))
        assert session == {}

    def test_session_of_uses_configured_name(self) -> None:
        """The session is taken from the host under session_name."""
        i18n = I18n(use_session=True, session_name="state")
        i18n.load_locale("ru", {"greeting": "Привет!"})
        session = {"__language_code": "ru"}
        host = SimpleNamespace(state=session, session={"__language_code": "en"})
        assert i18n.session_of(host) is session
        ctx = i18n.context_from_session(i18n.session_of(host), fallback_language="en")
        assert ctx.language == "ru"

    def test_session_of_mapping_host(self) -> None:
        """Mapping hosts are read by key; a missing session is None."""
        i18n = I18n(use_session=True)
        session: dict[str, object] = {}
        assert i18n.session_of({"session": session}) is session
        assert i18n.session_of({}) is None
        assert i18n.session_of(None) is None

    def test_store_through_host_session(self) -> None:
        """Writes land in the session found under session_name."""
        i18n = I18n(use_session=True, session_name="state")
        i18n.load_locale("ru", {})
        host = SimpleNamespace(state={})
        i18n.store_session_language(i18n.session_of(host), i18n.create_context("ru"))
        assert host.state == {"__language_code": "ru"}

    def test_store_into_read_only_session_fails(self) -> None:
        """Read-only mappings are rejected."""
        i18n = I18n(use_session=True)
        with pytest.raises(TypeError):
            i18n.store_session_language(MappingProxyType({}), i18n.create_context("en"))


# ============================================================================
# COVERAGE
# ============================================================================


class TestCoverage:
    """missing_keys, overspecified_keys and translation_progress."""

    @pytest.fixture
    def coverage_i18n(self) -> I18n:
        """en with 10 keys, ru with 7 of them plus one extra."""
        i18n = I18n(default_language="en")
        i18n.load_locale("en", {f"key{i}": f"Text {i}" for i in range(10)})
        ru = {f"key{i}": f"Текст {i}" for i in range(7)}
        ru["ru_only"] = "Только"
        i18n.load_locale("ru", ru)
        return i18n

    def test_missing_keys(self, coverage_i18n: I18n) -> None:
        """The three untranslated keys are reported in reference order."""
        assert coverage_i18n.missing_keys("ru") == ["key7", "key8", "key9"]

    def test_translation_progress(self, coverage_i18n: I18n) -> None:
        """7 of 10 reference keys are translated."""
        assert coverage_i18n.translation_progress("ru") == pytest.approx(0.7)

    def test_overspecified_keys(self, coverage_i18n: I18n) -> None:
        """Keys absent from the reference are reported."""
        assert coverage_i18n.overspecified_keys("ru") == ["ru_only"]

    def test_explicit_reference(self, coverage_i18n: I18n) -> None:
        """A reference language other than the default may be given."""
        assert coverage_i18n.missing_keys("en", "ru") == ["ru_only"]
        assert coverage_i18n.translation_progress("en", "ru") == pytest.approx(7 / 8)

    def test_unloaded_language_has_everything_missing(self, coverage_i18n: I18n) -> None:
        """An unloaded language misses every reference key."""
        assert len(coverage_i18n.missing_keys("de")) == 10
        assert coverage_i18n.translation_progress("de") == 0.0

    def test_empty_reference_rejected(self) -> None:
        """Progress against an empty reference raises ValueError."""
        with pytest.raises(ValueError, match="no resource keys"):
            I18n().translation_progress("ru")

    def test_reset_locale(self, coverage_i18n: I18n) -> None:
        """reset_locale() is delegated to the repository."""
        coverage_i18n.reset_locale("ru")
        assert coverage_i18n.available_locales() == ["en"]
