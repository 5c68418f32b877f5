"""
Structural aggregation.

RecordTally is an immutable accumulator folded over the records of a file.
check_structure() turns the final tally into the file-level diagnostics.
"""

from __future__ import annotations

from pydantic import BaseModel

from zengin_lint.core.parser.errors import Diagnostic
from zengin_lint.core.parser.models import RecordKind

from .models import ValidationSummary

MIN_LINES = 4


class RecordTally(BaseModel, frozen=True):
    """Per-kind record counts and running amounts."""

    header_count: int = 0
    data_count: int = 0
    trailer_count: int = 0
    end_count: int = 0
    total_data_amount: int = 0
    declared_total_amount: int = 0

    model_config = {"frozen": True}

    def add(self, kind: RecordKind, amount: int = 0) -> RecordTally:
        """
        Count one record.

        For DATA records amount is added to the running sum. For TRAILER
        records amount replaces the declared total. UNKNOWN records are not
        counted.
        """
        if kind == RecordKind.HEADER:
            return self.model_copy(update={"header_count": self.header_count + 1})
        if kind == RecordKind.DATA:
            return self.model_copy(
                update={
                    "data_count": self.data_count + 1,
                    "total_data_amount": self.total_data_amount + amount,
                }
            )
        if kind == RecordKind.TRAILER:
            return self.model_copy(
                update={
                    "trailer_count": self.trailer_count + 1,
                    "declared_total_amount": amount,
                }
            )
        if kind == RecordKind.END:
            return self.model_copy(update={"end_count": self.end_count + 1})
        return self

    def to_summary(self, total_lines: int) -> ValidationSummary:
        return ValidationSummary(total_lines=total_lines, **self.model_dump())


def check_line_count(total_lines: int) -> list[Diagnostic]:
    """Structural pre-check: a file needs header, data, trailer and end."""
    if total_lines >= MIN_LINES:
        return []
    return [
        Diagnostic.syntax(
            "ZGN-STR-001",
            f"minimum {MIN_LINES} lines required (header, data, trailer, end); "
            f"found {total_lines}",
            context={"expected": MIN_LINES, "actual": total_lines},
        )
    ]


def check_structure(tally: RecordTally) -> list[Diagnostic]:
    """
    File-level checks, run after every line has been validated.

    Order is fixed: header, trailer and end cardinality, then amount
    reconciliation. Each check runs regardless of the others.
    """
    diagnostics: list[Diagnostic] = []

    cardinality = (
        ("ZGN-CNT-001", "header", tally.header_count),
        ("ZGN-CNT-002", "trailer", tally.trailer_count),
        ("ZGN-CNT-003", "end", tally.end_count),
    )
    for code, label, count in cardinality:
        if count != 1:
            diagnostics.append(
                Diagnostic.logic(
                    code,
                    f"exactly one {label} record required (actual: {count})",
                    context={"expected": 1, "actual": count},
                )
            )

    # A declared total of 0 means the trailer was missing or malformed and
    # has already been reported.
    declared = tally.declared_total_amount
    if declared > 0 and tally.total_data_amount != declared:
        diagnostics.append(
            Diagnostic.logic(
                "ZGN-AMT-001",
                f"total amount mismatch (declared {declared:,}, "
                f"sum of data records {tally.total_data_amount:,})",
                context={"expected": declared, "actual": tally.total_data_amount},
            )
        )

    return diagnostics
