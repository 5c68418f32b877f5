"""
JSON output adapter.

Renders the validation report as JSON for machine processing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TextIO

import zengin_lint
from zengin_lint.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from zengin_lint.core.parser.errors import Diagnostic
    from zengin_lint.core.rules.models import ValidationReport, ValidationSummary


class JsonOutput(OutputAdapter):
    """JSON output adapter."""

    format = OutputFormat.JSON

    def __init__(self, stream: TextIO | None = None, color: bool = False, indent: int = 2):
        super().__init__(stream=stream, color=False)  # Never colorize JSON
        self.indent = indent

    def render_report(self, report: ValidationReport, file: str | None = None) -> str:
        """Render a validation report as JSON."""
        output: dict[str, Any] = {
            "file": file,
            "engine_version": zengin_lint.__version__,
            "valid": report.valid,
            "diagnostics": [self._diagnostic_to_dict(d) for d in report.diagnostics],
            "summary": self._summary_to_dict(report.summary),
        }
        return json.dumps(output, indent=self.indent, ensure_ascii=False, default=str)

    def _diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, Any]:
        """Convert diagnostic to dictionary."""
        return {
            "code": diagnostic.code,
            "kind": diagnostic.kind.value,
            "line": diagnostic.line,
            "field": diagnostic.field,
            "message": diagnostic.message,
            "severity": diagnostic.severity.value,
            "context": diagnostic.context,
        }

    def _summary_to_dict(self, summary: ValidationSummary) -> dict[str, Any]:
        """Convert summary to dictionary."""
        return {
            "total_lines": summary.total_lines,
            "header_count": summary.header_count,
            "data_count": summary.data_count,
            "trailer_count": summary.trailer_count,
            "end_count": summary.end_count,
            "total_data_amount": summary.total_data_amount,
            "declared_total_amount": summary.declared_total_amount,
        }
