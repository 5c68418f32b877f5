"""
Rule Engine data models.

Profiles, summaries and the validation report.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from zengin_lint.core.parser.errors import Diagnostic, Severity

# =============================================================================
# Profile Model
# =============================================================================


class ZenginProfile(BaseModel, frozen=True):
    """
    Literal values the header and data rules compare against.

    The defaults describe the bank-specified layout (originator bank 0036).
    """

    id: str = Field(default="default", description="Profile ID")
    label: str = Field(default="Zengin transfer (bank 0036)")

    type_code: str = Field(default="21", pattern=r"^[0-9]{2}$")
    charset_code: str = Field(default="0", pattern=r"^[0-9]$")
    originator_bank_code: str = Field(default="0036", pattern=r"^[0-9]{4}$")
    deposit_types: list[str] = Field(default_factory=lambda: ["1", "2", "4"], min_length=1)
    new_code: str = Field(default="1", pattern=r"^[0-9]$")

    model_config = {"frozen": True, "extra": "forbid"}


DEFAULT_PROFILE = ZenginProfile()


# =============================================================================
# Execution Result Models
# =============================================================================


class ValidationSummary(BaseModel, frozen=True):
    """Record counts and amounts gathered during a validation run."""

    total_lines: int = 0
    header_count: int = 0
    data_count: int = 0
    trailer_count: int = 0
    end_count: int = 0

    # Amounts
    total_data_amount: int = 0
    declared_total_amount: int = 0

    model_config = {"frozen": True}


class ValidationReport(BaseModel, frozen=True):
    """
    Result of validating one file.

    diagnostics are in discovery order: per-line diagnostics in line order,
    file-level diagnostics last.
    """

    diagnostics: list[Diagnostic] = Field(default_factory=list)
    summary: ValidationSummary = Field(default_factory=ValidationSummary)

    model_config = {"frozen": True}

    @property
    def valid(self) -> bool:
        """True if no diagnostic has ERROR severity."""
        return not any(d.is_error for d in self.diagnostics)

    @property
    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.is_error)

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == Severity.WARNING)
