"""Shared constants for chatl10n.

Centralizes configuration constants used across the syntax, runtime,
localization and analysis packages. Placing them here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Template syntax: interpolation markers and escapes
- Language defaults: default language and session field
- Depth limits: recursion protection for parsing, evaluation and flattening

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template syntax
    "INTERPOLATION_MARKER",
    "EXPRESSION_OPEN",
    "EXPRESSION_CLOSE",
    "ESCAPE_CHAR",
    "ESCAPABLE_CHARS",
    # Language defaults
    "DEFAULT_LANGUAGE",
    "DEFAULT_SESSION_NAME",
    "SESSION_LANGUAGE_FIELD",
    "LANGUAGE_SEPARATOR",
    "RESOURCE_KEY_SEPARATOR",
    # Depth limits
    "MAX_DEPTH",
    # Supported file extensions
    "YAML_EXTENSIONS",
    "JSON_EXTENSIONS",
]

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================

# Text containing this marker is compiled; anything else is a constant.
INTERPOLATION_MARKER: str = "${"
EXPRESSION_OPEN: str = "${"
EXPRESSION_CLOSE: str = "}"

# A backslash before one of these characters emits the character literally.
ESCAPE_CHAR: str = "\\"
ESCAPABLE_CHARS: frozenset[str] = frozenset({"$", "`", "\\"})

# ============================================================================
# LANGUAGE DEFAULTS
# ============================================================================

DEFAULT_LANGUAGE: str = "en"
DEFAULT_SESSION_NAME: str = "session"

# The only session field this package reads or writes.
SESSION_LANGUAGE_FIELD: str = "__language_code"

# "en-us" -> short form "en"
LANGUAGE_SEPARATOR: str = "-"

# Nested resource definitions are flattened to "a.b.c" keys.
RESOURCE_KEY_SEPARATOR: str = "."

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Unified maximum depth for recursion protection.
# Used by: template parser (nested calls and parentheses), evaluator,
# resource flattening, and AST visitors.
MAX_DEPTH: int = 100

# ============================================================================
# FILE LOADING
# ============================================================================

YAML_EXTENSIONS: frozenset[str] = frozenset({".yaml", ".yml"})
JSON_EXTENSIONS: frozenset[str] = frozenset({".json"})
