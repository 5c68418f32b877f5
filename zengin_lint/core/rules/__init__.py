"""
Zengin Rule Engine.

Provides per-record and file-level validation of Zengin transfer files.

Usage:
    from zengin_lint.core.rules import validate

    report = validate(text)

    for diagnostic in report.diagnostics:
        print(f"{diagnostic.code}: {diagnostic.message}")
"""

from __future__ import annotations

from .aggregator import RecordTally, check_line_count, check_structure
from .constraints import is_digits, is_digits_range, parse_digits
from .loader import ConfigError, load_profile
from .models import DEFAULT_PROFILE, ValidationReport, ValidationSummary, ZenginProfile
from .pipeline import ValidationPipeline
from .records import validate_data, validate_end, validate_header, validate_trailer


def validate(content: str, profile: ZenginProfile | None = None) -> ValidationReport:
    """
    Validate the decoded text of a Zengin file.

    Args:
        content: Full file content
        profile: Literal values for the header/data rules, None for default

    Returns:
        ValidationReport with ordered diagnostics and summary
    """
    return ValidationPipeline(profile=profile).run(content)


__all__ = [
    "DEFAULT_PROFILE",
    "ConfigError",
    # Aggregation
    "RecordTally",
    # Models
    "ValidationPipeline",
    "ValidationReport",
    "ValidationSummary",
    "ZenginProfile",
    "check_line_count",
    "check_structure",
    # Predicates
    "is_digits",
    "is_digits_range",
    "load_profile",
    "parse_digits",
    # Main function
    "validate",
    # Record validators
    "validate_data",
    "validate_end",
    "validate_header",
    "validate_trailer",
]
