"""Pytest configuration for the chatl10n test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from chatl10n import I18n

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

EN_DEFINITIONS: dict[str, object] = {
    "greeting": "Hello!",
    "welcome": "Welcome, ${name}!",
    "cart": "${apples} ${pluralize(apples, 'apple', 'apples')} in your cart",
    "profile": {
        "title": "Profile of ${user.first_name}",
        "age": "Age: ${user.age}",
    },
    "checkout": "Checkout",
}

RU_DEFINITIONS: dict[str, object] = {
    "greeting": "Привет!",
    "welcome": "Добро пожаловать, ${name}!",
    "cart": "${apples} ${pluralize(apples, 'яблоко', 'яблока', 'яблок')} в корзине",
}


@pytest.fixture
def i18n() -> I18n:
    """I18n with English and Russian loaded, allow_missing disabled."""
    instance = I18n(default_language="en", allow_missing=False)
    instance.load_locale("en", EN_DEFINITIONS)
    instance.load_locale("ru", RU_DEFINITIONS)
    return instance


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    """Directory with one YAML, one JSON and one ignored file."""
    (tmp_path / "en.yaml").write_text(
        "greeting: Hello!\ncart:\n  title: Cart of ${name}\n", encoding="utf-8"
    )
    (tmp_path / "RU.json").write_text(
        '{"greeting": "Привет!", "cart": {"title": "Корзина ${name}"}}', encoding="utf-8"
    )
    (tmp_path / "README.md").write_text("not a locale", encoding="utf-8")
    return tmp_path
