"""
Zengin Parser Core.

Line splitting, field tokenizing and record classification for Zengin
transfer files.

Usage:
    from zengin_lint.core.parser import split_lines, parse_record

    for line_no, line in enumerate(split_lines(text), start=1):
        record = parse_record(line, line_no)
        print(record.kind, record.value(1))

API Functions:
    split_lines(text) -> list[str]
    tokenize_line(line) -> list[str]
    strip_quotes(value) -> str
    classify_record(fields) -> RecordKind | None
    parse_record(line, line_no) -> Record | None
    detect_encoding(data) -> str
"""

from __future__ import annotations

from .detector import classify_record, parse_record
from .encoding import decode_with_fallback, detect_encoding
from .errors import (
    DIAGNOSTIC_CODES,
    Diagnostic,
    DiagnosticKind,
    Severity,
    get_diagnostic_description,
)
from .models import Record, RecordKind
from .tokenizer import split_lines, strip_quotes, tokenize_line

__all__ = [
    "DIAGNOSTIC_CODES",
    # Models
    "Diagnostic",
    "DiagnosticKind",
    "Record",
    "RecordKind",
    "Severity",
    # Functions
    "classify_record",
    "decode_with_fallback",
    "detect_encoding",
    "get_diagnostic_description",
    "parse_record",
    "split_lines",
    "strip_quotes",
    "tokenize_line",
]
