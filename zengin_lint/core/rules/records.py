"""
Per-record field validators.

One validator per record kind. Every field check runs independently, so a
record with several bad fields reports all of them. Only a short record
stops early, with a single "missing fields" diagnostic.
"""

from __future__ import annotations

from zengin_lint.core.parser.errors import Diagnostic
from zengin_lint.core.parser.models import Record, RecordKind

from .constraints import is_digits, is_digits_range, is_one_of, parse_digits
from .models import DEFAULT_PROFILE, ZenginProfile

# Minimum field counts per record kind
MIN_FIELDS = {
    RecordKind.HEADER: 13,
    RecordKind.DATA: 15,
    RecordKind.TRAILER: 4,
    RecordKind.END: 2,
}

# Field indices and labels, per record kind
HEADER_FIELDS = {
    1: "type code",
    2: "character-set code",
    3: "client code",
    5: "execution date",
    6: "originator bank code",
}

DATA_FIELDS = {
    1: "payee bank code",
    3: "payee branch code",
    6: "deposit type",
    7: "payee account number",
    9: "transfer amount",
    10: "new-registration code",
}

TRAILER_FIELDS = {
    1: "request count",
    2: "total amount",
}

RECORD_KIND_FIELD = "record kind"

AMOUNT_MAX_DIGITS = 10
REQUEST_COUNT_MAX_DIGITS = 6
TOTAL_AMOUNT_MAX_DIGITS = 12


def _missing_fields(record: Record, code: str) -> Diagnostic | None:
    required = MIN_FIELDS[record.kind]
    if record.field_count >= required:
        return None
    return Diagnostic.syntax(
        code,
        f"{record.kind.label} record missing fields "
        f"(expected at least {required}, got {record.field_count})",
        line=record.line_no,
        context={"expected": required, "actual": record.field_count},
    )


def _literal(
    record: Record,
    index: int,
    labels: dict[int, str],
    expected: str,
    code: str,
) -> Diagnostic | None:
    """Check a field against a fixed literal value."""
    actual = record.value(index)
    if actual == expected:
        return None
    label = labels[index]
    return Diagnostic.syntax(
        code,
        f'{label} must be "{expected}" (actual: {actual})',
        line=record.line_no,
        field=label,
        context={"expected": expected, "actual": actual},
    )


def _shape(
    record: Record,
    index: int,
    labels: dict[int, str],
    ok: bool,
    requirement: str,
    code: str,
) -> Diagnostic | None:
    """Report a shape violation for a field."""
    if ok:
        return None
    label = labels[index]
    return Diagnostic.syntax(
        code,
        f"{label} must be {requirement}",
        line=record.line_no,
        field=label,
        context={"actual": record.value(index)},
    )


# =============================================================================
# Header
# =============================================================================


def validate_header(
    record: Record,
    profile: ZenginProfile = DEFAULT_PROFILE,
) -> list[Diagnostic]:
    """
    Validate a header record (kind 1).

    Args:
        record: Classified header record
        profile: Literal values to compare against

    Returns:
        Diagnostics in field order
    """
    missing = _missing_fields(record, "ZGN-HDR-001")
    if missing is not None:
        return [missing]

    checks = [
        _literal(record, 1, HEADER_FIELDS, profile.type_code, "ZGN-HDR-002"),
        _literal(record, 2, HEADER_FIELDS, profile.charset_code, "ZGN-HDR-003"),
        _shape(
            record, 3, HEADER_FIELDS,
            is_digits(record.value(3), 10),
            "10 digits",
            "ZGN-HDR-004",
        ),
        _shape(
            record, 5, HEADER_FIELDS,
            is_digits(record.value(5), 4),
            "MMDD (4 digits)",
            "ZGN-HDR-005",
        ),
        _literal(record, 6, HEADER_FIELDS, profile.originator_bank_code, "ZGN-HDR-006"),
    ]
    return [d for d in checks if d is not None]


# =============================================================================
# Data
# =============================================================================


def validate_data(
    record: Record,
    profile: ZenginProfile = DEFAULT_PROFILE,
) -> tuple[list[Diagnostic], int]:
    """
    Validate a data record (kind 2).

    Args:
        record: Classified data record
        profile: Literal values to compare against

    Returns:
        Tuple of (diagnostics, transfer amount); the amount is 0 when the
        record is short or the amount field is invalid
    """
    missing = _missing_fields(record, "ZGN-DAT-001")
    if missing is not None:
        return [missing], 0

    amount = parse_digits(record.value(9), AMOUNT_MAX_DIGITS)
    amount_ok = amount is not None and amount > 0
    deposit_types = " ".join(f'"{t}"' for t in profile.deposit_types)

    checks = [
        _shape(
            record, 1, DATA_FIELDS,
            is_digits(record.value(1), 4),
            "4 digits",
            "ZGN-DAT-002",
        ),
        _shape(
            record, 3, DATA_FIELDS,
            is_digits(record.value(3), 3),
            "3 digits",
            "ZGN-DAT-003",
        ),
        _shape(
            record, 6, DATA_FIELDS,
            is_one_of(record.value(6), profile.deposit_types),
            f"one of {deposit_types}",
            "ZGN-DAT-004",
        ),
        _shape(
            record, 7, DATA_FIELDS,
            is_digits_range(record.value(7), 1, 7),
            "1-7 digits",
            "ZGN-DAT-005",
        ),
        _shape(
            record, 9, DATA_FIELDS,
            amount_ok,
            f"a positive number of 1-{AMOUNT_MAX_DIGITS} digits",
            "ZGN-DAT-006",
        ),
        _literal(record, 10, DATA_FIELDS, profile.new_code, "ZGN-DAT-007"),
    ]
    diagnostics = [d for d in checks if d is not None]
    return diagnostics, (amount or 0) if amount_ok else 0


# =============================================================================
# Trailer
# =============================================================================


def validate_trailer(record: Record, data_count: int) -> tuple[list[Diagnostic], int]:
    """
    Validate a trailer record (kind 8).

    Args:
        record: Classified trailer record
        data_count: Data records seen so far in the file

    Returns:
        Tuple of (diagnostics, declared total amount); the total is 0 when
        the record is short or the total field is malformed
    """
    missing = _missing_fields(record, "ZGN-TRL-001")
    if missing is not None:
        return [missing], 0

    diagnostics: list[Diagnostic] = []

    count_label = TRAILER_FIELDS[1]
    count = parse_digits(record.value(1), REQUEST_COUNT_MAX_DIGITS)
    if count is None:
        diagnostics.append(
            Diagnostic.syntax(
                "ZGN-TRL-002",
                f"{count_label} must be 1-{REQUEST_COUNT_MAX_DIGITS} digits",
                line=record.line_no,
                field=count_label,
                context={"actual": record.value(1)},
            )
        )
    elif count != data_count:
        diagnostics.append(
            Diagnostic.logic(
                "ZGN-TRL-003",
                f"request count mismatch (expected {data_count}, actual {count})",
                line=record.line_no,
                field=count_label,
                context={"expected": data_count, "actual": count},
            )
        )

    total_label = TRAILER_FIELDS[2]
    total = parse_digits(record.value(2), TOTAL_AMOUNT_MAX_DIGITS)
    if total is None:
        diagnostics.append(
            Diagnostic.syntax(
                "ZGN-TRL-004",
                f"{total_label} must be 1-{TOTAL_AMOUNT_MAX_DIGITS} digits",
                line=record.line_no,
                field=total_label,
                context={"actual": record.value(2)},
            )
        )

    return diagnostics, total or 0


# =============================================================================
# End
# =============================================================================


def validate_end(record: Record) -> list[Diagnostic]:
    """Validate an end record (kind 9). Only the field count is checked."""
    missing = _missing_fields(record, "ZGN-END-001")
    return [missing] if missing is not None else []


def invalid_kind(record: Record) -> Diagnostic:
    """Diagnostic for a line whose first field is not a known record kind."""
    return Diagnostic.syntax(
        "ZGN-REC-001",
        f"invalid record kind: {record.raw_kind}",
        line=record.line_no,
        field=RECORD_KIND_FIELD,
        context={"actual": record.raw_kind},
    )
