"""
Pytest configuration and fixtures for zengin-lint tests.

Provides fixtures for:
- Sample record lines (header, data, trailer, end)
- Minimal valid files, as text and on disk
- Large file generation for smoke tests
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

# =============================================================================
# Sample Records
# =============================================================================

# 13 fields: kind, type, charset, client, name, date, bank, bank name,
# branch, branch name, deposit type, account, (dummy)
HEADER_FIELDS = [
    "1", "21", "0", "1234567890", "TEST SHOJI", "0601", "0036",
    "RAKUTEN", "251", "DAIICHI", "1", "7654321", "",
]

# 15 fields: kind, bank, bank name, branch, branch name, clearing house,
# deposit type, account, payee, amount, new code, customer 1, customer 2,
# transfer kind, (dummy)
DATA_FIELDS = [
    "2", "0001", "MIZUHO", "001", "HONTEN", "", "1", "1234567",
    "YAMADA TARO", "1000", "1", "", "", "", "",
]

TRAILER_FIELDS = ["8", "1", "1000", ""]

END_FIELDS = ["9", ""]


def make_line(base: list[str], **overrides: str) -> str:
    """Join record fields, replacing positions given as f<index>=value."""
    fields = list(base)
    for key, value in overrides.items():
        fields[int(key.lstrip("f"))] = value
    return ",".join(fields)


@pytest.fixture
def header_line() -> str:
    return make_line(HEADER_FIELDS)


@pytest.fixture
def data_line() -> str:
    return make_line(DATA_FIELDS)


@pytest.fixture
def trailer_line() -> str:
    return make_line(TRAILER_FIELDS)


@pytest.fixture
def end_line() -> str:
    return make_line(END_FIELDS)


@pytest.fixture
def line_factory() -> Callable[..., str]:
    """Build a record line of the given kind with field overrides."""
    bases = {
        "header": HEADER_FIELDS,
        "data": DATA_FIELDS,
        "trailer": TRAILER_FIELDS,
        "end": END_FIELDS,
    }

    def _make(kind: str, **overrides: str) -> str:
        return make_line(bases[kind], **overrides)

    return _make


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def minimal_valid_text(header_line: str, data_line: str, trailer_line: str, end_line: str) -> str:
    """Header, one data record of 1000, trailer (1 / 1000), end."""
    return "\r\n".join([header_line, data_line, trailer_line, end_line]) + "\r\n"


@pytest.fixture
def minimal_valid_file(tmp_path: Path, minimal_valid_text: str) -> Path:
    """Minimal valid file written as CP932, the usual bank encoding."""
    path = tmp_path / "zengin_valid.csv"
    path.write_bytes(minimal_valid_text.encode("cp932"))
    return path


@pytest.fixture
def invalid_file(tmp_path: Path, header_line: str, data_line: str, end_line: str) -> Path:
    """File whose trailer declares two records and a wrong total."""
    path = tmp_path / "zengin_invalid.csv"
    trailer = make_line(TRAILER_FIELDS, f1="2", f2="5000")
    path.write_text("\n".join([header_line, data_line, trailer, end_line]) + "\n")
    return path


@pytest.fixture(scope="session")
def large_file_10k(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Generate a valid file with 10k data records."""
    tmp_dir = tmp_path_factory.mktemp("large")
    path = tmp_dir / "large_10k.csv"
    _generate_large_zengin_file(path, num_rows=10_000)
    return path


def _generate_large_zengin_file(path: Path, num_rows: int) -> None:
    """Create a valid Zengin file with num_rows data records."""
    lines = [make_line(HEADER_FIELDS)]

    total = 0
    for i in range(1, num_rows + 1):
        amount = 100 + (i % 9000)
        total += amount
        lines.append(
            make_line(
                DATA_FIELDS,
                f1=f"{i % 10000:04d}",
                f3=f"{i % 1000:03d}",
                f7=f"{i:07d}",
                f9=str(amount),
            )
        )

    lines.append(make_line(TRAILER_FIELDS, f1=str(num_rows), f2=str(total)))
    lines.append(make_line(END_FIELDS))

    path.write_bytes(("\r\n".join(lines) + "\r\n").encode("cp932"))
