"""Static analysis of resource templates.

Exports:
    analyze / analyze_template: Required parameters and their kinds
    ParameterSchema, ResourceParameters, ParameterInfo: Analysis results
    render_contract / generate_contract: Typing module for call sites
    schema_to_json: JSON form of a schema

Python 3.13+.
"""

from .contract import KIND_TYPES, generate_contract, render_contract, schema_to_json
from .parameters import (
    ParameterCollector,
    ParameterInfo,
    ParameterSchema,
    ResourceParameters,
    analyze,
    analyze_template,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Analysis
    "analyze",
    "analyze_template",
    "ParameterCollector",
    # Results
    "ParameterInfo",
    "ResourceParameters",
    "ParameterSchema",
    # Contract
    "KIND_TYPES",
    "generate_contract",
    "render_contract",
    "schema_to_json",
]
