"""
Diagnostic models.

This module defines the structured diagnostics produced by the Zengin
validation engine. Every diagnostic carries a code from the ZGN-XXX-NNN
taxonomy in addition to the kind/line/field/message/severity it reports.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class DiagnosticKind(Enum):
    """What a diagnostic is about."""

    SYNTAX = "syntax"  # Line does not match the field grammar
    LOGIC = "logic"  # File is internally inconsistent


class Severity(Enum):
    """Diagnostic severity levels."""

    ERROR = "error"  # Invalidates the file
    WARNING = "warning"  # Advisory only


class Diagnostic(BaseModel, frozen=True):
    """
    Structured validation diagnostic.

    Uses codes from the Diagnostic Catalog (ZGN-XXX-NNN).
    Code domains:
    - ZGN-IO-*: File loading errors (caller side)
    - ZGN-STR-*: File structure errors
    - ZGN-REC-*: Record kind errors
    - ZGN-HDR-*: Header record errors
    - ZGN-DAT-*: Data record errors
    - ZGN-TRL-*: Trailer record errors
    - ZGN-END-*: End record errors
    - ZGN-CNT-*: Record cardinality errors
    - ZGN-AMT-*: Amount reconciliation errors
    """

    code: str = Field(
        pattern=r"^ZGN-[A-Z]{2,5}-\d{3}$",
        description="Diagnostic code, e.g., 'ZGN-HDR-002'",
    )
    kind: DiagnosticKind
    line: int = Field(
        default=0,
        ge=0,
        description="1-indexed non-empty line, 0 for file-level diagnostics",
    )
    field: str | None = Field(default=None, description="Field label")
    message: str = Field(description="Human-readable message")
    severity: Severity = Severity.ERROR
    context: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional context (expected, actual, etc.)",
    )

    @classmethod
    def syntax(
        cls,
        code: str,
        message: str,
        *,
        line: int = 0,
        field: str | None = None,
        severity: Severity = Severity.ERROR,
        context: dict[str, Any] | None = None,
    ) -> Diagnostic:
        """Create a SYNTAX diagnostic."""
        return cls(
            code=code,
            kind=DiagnosticKind.SYNTAX,
            line=line,
            field=field,
            message=message,
            severity=severity,
            context=context or {},
        )

    @classmethod
    def logic(
        cls,
        code: str,
        message: str,
        *,
        line: int = 0,
        field: str | None = None,
        severity: Severity = Severity.ERROR,
        context: dict[str, Any] | None = None,
    ) -> Diagnostic:
        """Create a LOGIC diagnostic."""
        return cls(
            code=code,
            kind=DiagnosticKind.LOGIC,
            line=line,
            field=field,
            message=message,
            severity=severity,
            context=context or {},
        )

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR

    def __str__(self) -> str:
        """Format diagnostic for display."""
        where = f"line {self.line}" if self.line else "file"
        if self.field:
            where = f"{where}, {self.field}"
        return f"[{self.code}] {self.severity.value.upper()} ({where}): {self.message}"


# =============================================================================
# Diagnostic Catalog
# =============================================================================

DIAGNOSTIC_CODES: dict[str, str] = {
    # Loading errors
    "ZGN-IO-001": "File could not be read",
    "ZGN-IO-002": "File exceeds maximum size",
    # Structure
    "ZGN-STR-001": "File has fewer than 4 non-empty lines",
    # Record kind
    "ZGN-REC-001": "Record kind is not one of 1, 2, 8, 9",
    # Header record
    "ZGN-HDR-001": "Header record has fewer than 13 fields",
    "ZGN-HDR-002": "Type code is not 21",
    "ZGN-HDR-003": "Character-set code is not 0",
    "ZGN-HDR-004": "Client code is not 10 digits",
    "ZGN-HDR-005": "Execution date is not MMDD (4 digits)",
    "ZGN-HDR-006": "Originator bank code does not match the profile",
    # Data record
    "ZGN-DAT-001": "Data record has fewer than 15 fields",
    "ZGN-DAT-002": "Payee bank code is not 4 digits",
    "ZGN-DAT-003": "Payee branch code is not 3 digits",
    "ZGN-DAT-004": "Deposit type is not one of 1, 2, 4",
    "ZGN-DAT-005": "Payee account number is not 1-7 digits",
    "ZGN-DAT-006": "Transfer amount is not a positive 1-10 digit number",
    "ZGN-DAT-007": "New-registration code is not 1",
    # Trailer record
    "ZGN-TRL-001": "Trailer record has fewer than 4 fields",
    "ZGN-TRL-002": "Request count is not 1-6 digits",
    "ZGN-TRL-003": "Request count does not match the number of data records",
    "ZGN-TRL-004": "Total amount is not 1-12 digits",
    # End record
    "ZGN-END-001": "End record has fewer than 2 fields",
    # Cardinality
    "ZGN-CNT-001": "File must contain exactly one header record",
    "ZGN-CNT-002": "File must contain exactly one trailer record",
    "ZGN-CNT-003": "File must contain exactly one end record",
    # Amounts
    "ZGN-AMT-001": "Sum of data amounts does not match the trailer total",
}


def get_diagnostic_description(code: str) -> str | None:
    """Get the description for a diagnostic code."""
    return DIAGNOSTIC_CODES.get(code)
