"""
zengin-lint: Zengin transfer file validator.

A library and CLI tool for validating Zengin-format domestic bank-transfer
batch files (header / data / trailer / end records). Detects field shape
errors, record cardinality problems and count/amount mismatches.

Usage:
    from zengin_lint import validate
    report = validate(text)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__version__ = "0.1.0"

if TYPE_CHECKING:
    from zengin_lint.core.rules import ValidationReport, ZenginProfile


def validate(content: str, profile: ZenginProfile | None = None) -> ValidationReport:
    """Validate the decoded text of a Zengin file. See zengin_lint.core.rules.validate."""
    from zengin_lint.core.rules import validate as _validate

    return _validate(content, profile)


def __getattr__(name: str) -> Any:
    if name == "validate_file":
        from zengin_lint.core.files import validate_file

        return validate_file
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__", "validate", "validate_file"]
