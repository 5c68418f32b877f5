"""
Line splitter and field tokenizer for Zengin files.

Zengin CSV files use a deliberately naive dialect:
- Delimiter: comma (,)
- Quote character: double quote ("), toggling an "inside quotes" state
- No escaping: neither backslashes nor doubled quotes are recognised
- Line terminator: LF or CRLF; blank lines are skipped

Quote characters are kept in the tokens. Rules strip them when they read a
value, see strip_quotes().
"""

from __future__ import annotations

import re
from enum import Enum, auto

DELIMITER = ","
QUOTECHAR = '"'

_LINE_BREAK = re.compile(r"\r?\n")


class TokenizerState(Enum):
    """State of the tokenizer state machine."""

    UNQUOTED = auto()  # Commas split fields
    QUOTED = auto()  # Commas are literal


def split_lines(text: str) -> list[str]:
    """
    Split a text buffer into its non-empty lines.

    Lines that are empty after stripping surrounding whitespace are dropped,
    so the Nth returned line is the Nth non-empty line of the buffer.

    Args:
        text: The full decoded file content

    Returns:
        Non-empty lines, otherwise unmodified
    """
    return [line for line in _LINE_BREAK.split(text) if line.strip()]


def tokenize_line(line: str) -> list[str]:
    """
    Tokenize a single line into fields.

    Every quote character flips the state and is kept in the field. A comma
    outside quotes ends the current field. The last field is always emitted,
    so a line without commas yields one field and a trailing comma yields a
    trailing empty field.

    Args:
        line: The line to tokenize (without line terminator)

    Returns:
        List of raw field values (possibly quote-wrapped)
    """
    fields: list[str] = []
    field_buffer: list[str] = []
    state = TokenizerState.UNQUOTED

    for char in line:
        if char == QUOTECHAR:
            state = (
                TokenizerState.UNQUOTED
                if state == TokenizerState.QUOTED
                else TokenizerState.QUOTED
            )
            field_buffer.append(char)
        elif char == DELIMITER and state == TokenizerState.UNQUOTED:
            fields.append("".join(field_buffer))
            field_buffer = []
        else:
            field_buffer.append(char)

    fields.append("".join(field_buffer))
    return fields


def strip_quotes(value: str) -> str:
    """Remove every literal quote character from a field value."""
    return value.replace(QUOTECHAR, "")
