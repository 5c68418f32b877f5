"""
Encoding detection for Zengin files.

Zengin transfer files are usually delivered in:
- Shift_JIS / CP932 (JIS family, the bank default)
- UTF-8 with or without BOM

Decoding is a caller concern: the validation engine only ever sees text.
This module provides robust encoding detection using charset-normalizer.
"""

from __future__ import annotations

from charset_normalizer import from_bytes

# Size of data to use for encoding detection (8KB is usually sufficient)
DETECTION_SAMPLE_SIZE = 8192

_JIS_FAMILY = ("shift_jis", "shift-jis", "sjis", "cp932", "ms932", "windows-31j")


def detect_encoding(data: bytes) -> str:
    """
    Detect encoding of Zengin file data.

    Detection priority:
    1. UTF-8 BOM (explicit marker)
    2. charset-normalizer detection
    3. Fallback to UTF-8, then CP932

    Args:
        data: First ~8KB of file content (or full file if smaller)

    Returns:
        Encoding name: "utf-8-sig", "utf-8", "cp932" or another detected codec
    """
    if data.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"

    results = from_bytes(data[:DETECTION_SAMPLE_SIZE])

    if results:
        best = results.best()
        if best is not None:
            encoding = best.encoding.lower()

            # Normalize encoding names
            if encoding in ("ascii", "utf-8", "utf8", "utf_8"):
                return "utf-8"

            # CP932 is a superset of Shift_JIS and covers vendor extensions
            if encoding.replace("_", "-") in _JIS_FAMILY or encoding in _JIS_FAMILY:
                return "cp932"

            return encoding

    try:
        data[:DETECTION_SAMPLE_SIZE].decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        return "cp932"


def decode_with_fallback(data: bytes, encoding: str) -> str:
    """
    Decode bytes with encoding, using replacement for invalid sequences.

    Args:
        data: Bytes to decode
        encoding: Target encoding

    Returns:
        Decoded string (with replacement characters for invalid bytes)
    """
    try:
        return data.decode(encoding)
    except UnicodeDecodeError:
        return data.decode(encoding, errors="replace")
    except LookupError:
        return data.decode("utf-8", errors="replace")
