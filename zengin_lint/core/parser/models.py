"""
Parser data models.

Core data models for Zengin file parsing.

CRITICAL DESIGN DECISIONS:
- All field values are ALWAYS strings (bank, branch and account codes keep
  their leading zeros)
- fields keeps the raw tokens, quote characters included; quotes are only
  stripped when a value is read for a rule
- All models are frozen (immutable)
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from .tokenizer import strip_quotes

# =============================================================================
# Enums
# =============================================================================


class RecordKind(Enum):
    """Record kind, selected by the first field of a line."""

    HEADER = "1"
    DATA = "2"
    TRAILER = "8"
    END = "9"
    UNKNOWN = "unknown"

    @classmethod
    def from_value(cls, value: str) -> RecordKind:
        """Map a quote-stripped record-kind value to a kind."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS = {
    RecordKind.HEADER: "header",
    RecordKind.DATA: "data",
    RecordKind.TRAILER: "trailer",
    RecordKind.END: "end",
    RecordKind.UNKNOWN: "unknown",
}


# =============================================================================
# Record Model
# =============================================================================


class Record(BaseModel, frozen=True):
    """
    One classified, non-empty line of a Zengin file.

    line_no counts non-empty lines only (blank lines do not consume a number).
    """

    line_no: int = Field(ge=1, description="1-indexed non-empty line number")
    kind: RecordKind
    raw_kind: str = Field(description="Quote-stripped value of field 0")
    fields: list[str] = Field(
        default_factory=list,
        description="Raw field tokens, possibly quote-wrapped",
    )

    model_config = {"frozen": True}

    @property
    def field_count(self) -> int:
        return len(self.fields)

    def value(self, index: int) -> str | None:
        """Get the quote-stripped value at index, None if the slot is absent."""
        if index < 0 or index >= len(self.fields):
            return None
        return strip_quotes(self.fields[index])
