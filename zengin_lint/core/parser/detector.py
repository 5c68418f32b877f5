"""
Record kind detection for Zengin files.

The first field of every line selects the record kind:
1 = header, 2 = data, 8 = trailer, 9 = end.
"""

from __future__ import annotations

import logging

from .models import Record, RecordKind
from .tokenizer import strip_quotes, tokenize_line

logger = logging.getLogger(__name__)


def classify_record(fields: list[str]) -> RecordKind | None:
    """
    Detect the record kind of a tokenized line.

    Args:
        fields: Raw field tokens of one line

    Returns:
        RecordKind, or None when there are no fields at all
    """
    if not fields:
        return None
    return RecordKind.from_value(strip_quotes(fields[0]))


def parse_record(line: str, line_no: int) -> Record | None:
    """
    Tokenize and classify one non-empty line.

    Args:
        line: Raw line text
        line_no: 1-indexed non-empty line number

    Returns:
        Record, or None if the line produced no fields
    """
    fields = tokenize_line(line)
    kind = classify_record(fields)
    if kind is None:
        return None

    logger.debug("line %d: %s record, %d fields", line_no, kind.label, len(fields))
    return Record(
        line_no=line_no,
        kind=kind,
        raw_kind=strip_quotes(fields[0]),
        fields=fields,
    )
