"""
File loading.

Reads a Zengin file from disk, decodes it and hands the text to the
validation engine. Read failures are reported as diagnostics, so callers
always get a complete report.
"""

from __future__ import annotations

import logging
from pathlib import Path

from zengin_lint.core.parser import Diagnostic, decode_with_fallback, detect_encoding
from zengin_lint.core.rules import ValidationReport, ZenginProfile, validate

logger = logging.getLogger(__name__)


class FileTooLargeError(Exception):
    """Input exceeds the configured size limit."""

    def __init__(self, path: Path, max_bytes: int) -> None:
        self.path = path
        self.max_bytes = max_bytes
        super().__init__(f"{path} exceeds maximum size of {max_bytes} bytes")


def read_text(path: Path | str, *, max_bytes: int | None = None) -> str:
    """
    Read and decode a file.

    Args:
        path: File to read
        max_bytes: Maximum bytes to read (None or 0 = unlimited)

    Returns:
        Decoded file content

    Raises:
        OSError: If the file cannot be read
        FileTooLargeError: If the file exceeds max_bytes
    """
    path = Path(path)

    if max_bytes is not None and max_bytes > 0:
        with path.open("rb") as f:
            data = f.read(max_bytes + 1)
        if len(data) > max_bytes:
            raise FileTooLargeError(path, max_bytes)
    else:
        data = path.read_bytes()

    encoding = detect_encoding(data)
    logger.debug("%s: %d bytes, encoding %s", path, len(data), encoding)
    return decode_with_fallback(data, encoding)


def validate_file(
    path: Path | str,
    profile: ZenginProfile | None = None,
    *,
    max_bytes: int | None = None,
) -> ValidationReport:
    """
    Validate a Zengin file on disk.

    Args:
        path: File to validate
        profile: Profile for the header/data rules, None for default
        max_bytes: Maximum file size (None or 0 = unlimited)

    Returns:
        ValidationReport; a file that cannot be read yields a report with a
        single ZGN-IO diagnostic and an all-zero summary
    """
    try:
        content = read_text(path, max_bytes=max_bytes)
    except FileTooLargeError as e:
        logger.warning("%s", e)
        return _error_report(
            Diagnostic.syntax(
                "ZGN-IO-002",
                f"file exceeds maximum size of {e.max_bytes} bytes",
                context={"max_bytes": e.max_bytes},
            )
        )
    except OSError as e:
        logger.warning("cannot read %s: %s", path, e)
        return _error_report(
            Diagnostic.syntax(
                "ZGN-IO-001",
                f"file could not be read: {e.strerror or e}",
                context={"path": str(path)},
            )
        )

    return validate(content, profile)


def _error_report(diagnostic: Diagnostic) -> ValidationReport:
    """Create a report for a file that never reached the engine."""
    return ValidationReport(diagnostics=[diagnostic])
