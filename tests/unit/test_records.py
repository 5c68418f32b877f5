"""Tests for per-record field validators."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from zengin_lint.core.parser import DiagnosticKind, Record, Severity, parse_record
from zengin_lint.core.rules import ZenginProfile
from zengin_lint.core.rules.records import (
    invalid_kind,
    validate_data,
    validate_end,
    validate_header,
    validate_trailer,
)

if TYPE_CHECKING:
    from collections.abc import Callable


def _record(line: str, line_no: int = 1) -> Record:
    record = parse_record(line, line_no)
    assert record is not None
    return record


class TestHeader:
    """Tests for validate_header."""

    def test_valid_header(self, header_line: str) -> None:
        assert validate_header(_record(header_line)) == []

    def test_missing_fields(self) -> None:
        diagnostics = validate_header(_record("1,21,0,1234567890", line_no=1))

        assert len(diagnostics) == 1
        assert diagnostics[0].code == "ZGN-HDR-001"
        assert diagnostics[0].kind == DiagnosticKind.SYNTAX
        assert diagnostics[0].severity == Severity.ERROR
        assert "missing fields" in diagnostics[0].message
        assert diagnostics[0].line == 1

    def test_wrong_type_code(self, line_factory: Callable[..., str]) -> None:
        diagnostics = validate_header(_record(line_factory("header", f1="11")))

        assert [d.code for d in diagnostics] == ["ZGN-HDR-002"]
        assert diagnostics[0].field == "type code"
        assert '"21"' in diagnostics[0].message
        assert "11" in diagnostics[0].message
        assert diagnostics[0].context == {"expected": "21", "actual": "11"}

    def test_quoted_values_are_accepted(self, line_factory: Callable[..., str]) -> None:
        line = line_factory("header", f1='"21"', f3='"1234567890"', f6='"0036"')
        assert validate_header(_record(line)) == []

    def test_all_checks_run(self, line_factory: Callable[..., str]) -> None:
        """Every field rule reports independently, in field order."""
        line = line_factory("header", f1="99", f2="1", f3="12345", f5="601", f6="0001")
        diagnostics = validate_header(_record(line, line_no=4))

        assert [d.code for d in diagnostics] == [
            "ZGN-HDR-002",
            "ZGN-HDR-003",
            "ZGN-HDR-004",
            "ZGN-HDR-005",
            "ZGN-HDR-006",
        ]
        assert all(d.line == 4 for d in diagnostics)

    def test_client_code_rejects_full_width_digits(
        self, line_factory: Callable[..., str]
    ) -> None:
        line = line_factory("header", f3="１２３４５６７８９０")
        diagnostics = validate_header(_record(line))

        assert [d.field for d in diagnostics] == ["client code"]

    def test_profile_bank_code(self, line_factory: Callable[..., str]) -> None:
        profile = ZenginProfile(originator_bank_code="0005")

        assert validate_header(_record(line_factory("header", f6="0005")), profile) == []
        diagnostics = validate_header(_record(line_factory("header")), profile)
        assert [d.code for d in diagnostics] == ["ZGN-HDR-006"]


class TestData:
    """Tests for validate_data."""

    def test_valid_data(self, data_line: str) -> None:
        diagnostics, amount = validate_data(_record(data_line))

        assert diagnostics == []
        assert amount == 1000

    def test_missing_fields(self) -> None:
        diagnostics, amount = validate_data(_record("2,0001,MIZUHO,001,HONTEN,,1,1234567,X,1000"))

        assert [d.code for d in diagnostics] == ["ZGN-DAT-001"]
        assert amount == 0

    @pytest.mark.parametrize(
        ("overrides", "code", "field"),
        [
            ({"f1": "001"}, "ZGN-DAT-002", "payee bank code"),
            ({"f3": "0001"}, "ZGN-DAT-003", "payee branch code"),
            ({"f6": "3"}, "ZGN-DAT-004", "deposit type"),
            ({"f7": "12345678"}, "ZGN-DAT-005", "payee account number"),
            ({"f7": ""}, "ZGN-DAT-005", "payee account number"),
            ({"f10": "0"}, "ZGN-DAT-007", "new-registration code"),
        ],
    )
    def test_field_rules(
        self,
        line_factory: Callable[..., str],
        overrides: dict[str, str],
        code: str,
        field: str,
    ) -> None:
        diagnostics, amount = validate_data(_record(line_factory("data", **overrides)))

        assert [(d.code, d.field) for d in diagnostics] == [(code, field)]
        assert amount == 1000

    @pytest.mark.parametrize("value", ["0", "0000", "abc", "", "12345678901", "-5", "1,000"])
    def test_invalid_amount(self, line_factory: Callable[..., str], value: str) -> None:
        """Zero, malformed or too long amounts are one diagnostic and count as 0."""
        diagnostics, amount = validate_data(_record(line_factory("data", f9=f'"{value}"')))

        assert [d.code for d in diagnostics] == ["ZGN-DAT-006"]
        assert diagnostics[0].field == "transfer amount"
        assert amount == 0

    def test_max_amount(self, line_factory: Callable[..., str]) -> None:
        diagnostics, amount = validate_data(_record(line_factory("data", f9="9999999999")))

        assert diagnostics == []
        assert amount == 9_999_999_999

    def test_deposit_types(self, line_factory: Callable[..., str]) -> None:
        for deposit_type in ("1", "2", "4"):
            diagnostics, _ = validate_data(_record(line_factory("data", f6=deposit_type)))
            assert diagnostics == []

    def test_all_checks_run(self, line_factory: Callable[..., str]) -> None:
        line = line_factory("data", f1="x", f3="y", f6="9", f7="z", f9="0", f10="2")
        diagnostics, amount = validate_data(_record(line))

        assert [d.code for d in diagnostics] == [
            "ZGN-DAT-002",
            "ZGN-DAT-003",
            "ZGN-DAT-004",
            "ZGN-DAT-005",
            "ZGN-DAT-006",
            "ZGN-DAT-007",
        ]
        assert amount == 0


class TestTrailer:
    """Tests for validate_trailer."""

    def test_valid_trailer(self, trailer_line: str) -> None:
        diagnostics, declared = validate_trailer(_record(trailer_line), data_count=1)

        assert diagnostics == []
        assert declared == 1000

    def test_missing_fields(self) -> None:
        diagnostics, declared = validate_trailer(_record("8,1,1000"), data_count=1)

        assert [d.code for d in diagnostics] == ["ZGN-TRL-001"]
        assert declared == 0

    def test_count_mismatch(self, line_factory: Callable[..., str]) -> None:
        """expected is the observed data count, actual the declared value."""
        line = line_factory("trailer", f1="2")
        diagnostics, declared = validate_trailer(_record(line, line_no=3), data_count=1)

        assert len(diagnostics) == 1
        assert diagnostics[0].code == "ZGN-TRL-003"
        assert diagnostics[0].kind == DiagnosticKind.LOGIC
        assert diagnostics[0].line == 3
        assert "expected 1, actual 2" in diagnostics[0].message
        assert declared == 1000

    def test_malformed_count_skips_mismatch(self, line_factory: Callable[..., str]) -> None:
        line = line_factory("trailer", f1="1234567")
        diagnostics, _ = validate_trailer(_record(line), data_count=1)

        assert [d.code for d in diagnostics] == ["ZGN-TRL-002"]
        assert diagnostics[0].kind == DiagnosticKind.SYNTAX

    def test_malformed_total(self, line_factory: Callable[..., str]) -> None:
        line = line_factory("trailer", f2="1234567890123")
        diagnostics, declared = validate_trailer(_record(line), data_count=1)

        assert [d.code for d in diagnostics] == ["ZGN-TRL-004"]
        assert declared == 0

    def test_count_and_total_both_reported(self, line_factory: Callable[..., str]) -> None:
        line = line_factory("trailer", f1="3", f2="x")
        diagnostics, declared = validate_trailer(_record(line), data_count=1)

        assert [d.code for d in diagnostics] == ["ZGN-TRL-003", "ZGN-TRL-004"]
        assert declared == 0


class TestEnd:
    """Tests for validate_end."""

    def test_valid_end(self, end_line: str) -> None:
        assert validate_end(_record(end_line)) == []

    def test_missing_fields(self) -> None:
        diagnostics = validate_end(_record("9"))

        assert [d.code for d in diagnostics] == ["ZGN-END-001"]

    def test_content_is_not_checked(self) -> None:
        assert validate_end(_record("9,anything,goes")) == []


class TestInvalidKind:
    def test_message(self) -> None:
        diagnostic = invalid_kind(_record("5,a,b", line_no=2))

        assert diagnostic.code == "ZGN-REC-001"
        assert diagnostic.message == "invalid record kind: 5"
        assert diagnostic.field == "record kind"
        assert diagnostic.line == 2
