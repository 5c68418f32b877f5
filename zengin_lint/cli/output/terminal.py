"""
Terminal output adapter.

Renders diagnostics with ANSI colors when writing to a TTY.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from zengin_lint.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from zengin_lint.core.parser.errors import Diagnostic
    from zengin_lint.core.rules.models import ValidationReport


def _supports_unicode() -> bool:
    """Check if terminal supports Unicode."""
    try:
        "✓".encode(sys.stdout.encoding or "utf-8")
        return True
    except (UnicodeEncodeError, LookupError):
        return False


SEVERITY_COLORS = {
    "error": "red",
    "warning": "yellow",
}

SEVERITY_SYMBOLS_UNICODE = {
    "error": "✖",
    "warning": "⚠",
}

SEVERITY_SYMBOLS_ASCII = {
    "error": "X",
    "warning": "!",
}

SUCCESS_SYMBOL_UNICODE = "✓"
SUCCESS_SYMBOL_ASCII = "OK"


class TerminalOutput(OutputAdapter):
    """Terminal output with ANSI colors."""

    format = OutputFormat.TERMINAL

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        super().__init__(stream=stream, color=color)
        self._use_color = color and self._is_tty()
        self._use_unicode = _supports_unicode()
        self._severity_symbols = (
            SEVERITY_SYMBOLS_UNICODE if self._use_unicode else SEVERITY_SYMBOLS_ASCII
        )
        self._success_symbol = SUCCESS_SYMBOL_UNICODE if self._use_unicode else SUCCESS_SYMBOL_ASCII

    def _is_tty(self) -> bool:
        """Check if output is a TTY."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def render_report(self, report: ValidationReport, file: str | None = None) -> str:
        """Render a validation report."""
        lines: list[str] = []

        if file:
            lines.append(self._style(file, "bold"))

        # Diagnostics keep discovery order; file-level ones come last.
        for diagnostic in report.diagnostics:
            lines.append(self._format_diagnostic(diagnostic))

        if report.diagnostics:
            lines.append("")
        lines.extend(self._format_summary(report))

        return "\n".join(lines)

    def _format_diagnostic(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic."""
        severity = diagnostic.severity.value
        color = SEVERITY_COLORS.get(severity, "white")
        symbol = self._severity_symbols.get(severity, "*")

        loc_parts = [f"L{diagnostic.line}" if diagnostic.line else "file"]
        if diagnostic.field:
            loc_parts.append(diagnostic.field)
        location_str = ":".join(loc_parts)

        styled_symbol = self._style(symbol, color)
        styled_code = self._style(diagnostic.code, "dim")

        return (
            f"  {styled_symbol} {location_str}: {diagnostic.message} "
            f"({diagnostic.kind.value}) [{styled_code}]"
        )

    def _format_summary(self, report: ValidationReport) -> list[str]:
        """Format summary block."""
        summary = report.summary
        lines = [
            f"Lines: {summary.total_lines}  "
            f"Header: {summary.header_count}  "
            f"Data: {summary.data_count}  "
            f"Trailer: {summary.trailer_count}  "
            f"End: {summary.end_count}",
            f"Data amount: {summary.total_data_amount:,}  "
            f"Declared total: {summary.declared_total_amount:,}",
        ]

        if report.valid and not report.diagnostics:
            lines.append(self._style(f"{self._success_symbol} No issues found.", "green"))
            return lines

        parts = []
        if report.error_count > 0:
            parts.append(self._style(f"{report.error_count} error(s)", "red"))
        if report.warning_count > 0:
            parts.append(self._style(f"{report.warning_count} warning(s)", "yellow"))
        lines.append(f"Found: {', '.join(parts)}")

        return lines

    def _style(self, text: str, style: str) -> str:
        """Apply style to text if colors are enabled."""
        if not self._use_color:
            return text

        codes = {
            "bold": "\033[1m",
            "dim": "\033[2m",
            "red": "\033[31m",
            "green": "\033[32m",
            "yellow": "\033[33m",
            "white": "\033[37m",
        }
        reset = "\033[0m"

        code = codes.get(style, "")
        if code:
            return f"{code}{text}{reset}"
        return text
