"""
Validation Pipeline.

Orchestrates line splitting, record classification, per-record validation
and the file-level structural checks.
"""

from __future__ import annotations

import logging
import time

from zengin_lint.core.parser import Diagnostic, Record, RecordKind, parse_record, split_lines

from .aggregator import RecordTally, check_line_count, check_structure
from .models import DEFAULT_PROFILE, ValidationReport, ZenginProfile
from .records import (
    invalid_kind,
    validate_data,
    validate_end,
    validate_header,
    validate_trailer,
)

logger = logging.getLogger(__name__)


class ValidationPipeline:
    """
    Single-pass validator for Zengin file content.

    The pipeline holds no per-run state, so one instance may validate any
    number of inputs, including concurrently.
    """

    def __init__(self, profile: ZenginProfile | None = None) -> None:
        self.profile = profile or DEFAULT_PROFILE

    def run(self, content: str) -> ValidationReport:
        """Validate the full decoded text of one file."""
        start_time = time.perf_counter()

        lines = split_lines(content)
        diagnostics: list[Diagnostic] = check_line_count(len(lines))
        tally = RecordTally()

        for line_no, line in enumerate(lines, start=1):
            record = parse_record(line, line_no)
            if record is None:
                continue

            record_diagnostics, tally = self._validate_record(record, tally)
            diagnostics.extend(record_diagnostics)

        diagnostics.extend(check_structure(tally))

        report = ValidationReport(
            diagnostics=diagnostics,
            summary=tally.to_summary(total_lines=len(lines)),
        )

        duration_ms = int((time.perf_counter() - start_time) * 1000)
        logger.info(
            "validated %d lines with profile %s: %d data records, %d diagnostics, valid=%s (%d ms)",
            len(lines),
            self.profile.id,
            tally.data_count,
            len(diagnostics),
            report.valid,
            duration_ms,
        )
        return report

    def _validate_record(
        self,
        record: Record,
        tally: RecordTally,
    ) -> tuple[list[Diagnostic], RecordTally]:
        """Validate one record and fold it into the tally."""
        if record.kind == RecordKind.HEADER:
            return validate_header(record, self.profile), tally.add(RecordKind.HEADER)

        if record.kind == RecordKind.DATA:
            diagnostics, amount = validate_data(record, self.profile)
            return diagnostics, tally.add(RecordKind.DATA, amount)

        if record.kind == RecordKind.TRAILER:
            # The trailer is compared against the data records seen before it
            diagnostics, declared = validate_trailer(record, tally.data_count)
            return diagnostics, tally.add(RecordKind.TRAILER, declared)

        if record.kind == RecordKind.END:
            return validate_end(record), tally.add(RecordKind.END)

        return [invalid_kind(record)], tally
