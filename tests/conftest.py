"""Shared fixtures: in-memory workbooks, plain and encrypted."""
from io import BytesIO
from typing import Any, Callable, Optional

import pytest
from msoffcrypto.format.ooxml import OOXMLFile
from openpyxl import Workbook

from sheetpick.config import PASSWORD_ENV_VAR, Config, set_config


TEST_PASSWORD = "s3cret-pw"


def workbook_bytes(wb: Workbook) -> bytes:
    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def table_workbook(rows: list[list[Any]], title: str = "Sheet1") -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = title
    for row in rows:
        ws.append(row)
    return workbook_bytes(wb)


def summary_workbook(cells: dict[str, Any], sheet_name: str = "정산서") -> bytes:
    wb = Workbook()
    wb.active.title = "Cover"
    wb.active["A1"] = "cover page"
    ws = wb.create_sheet(sheet_name)
    for coord, value in cells.items():
        ws[coord] = value
    return workbook_bytes(wb)


def encrypt(data: bytes, password: str = TEST_PASSWORD) -> bytes:
    encrypted = BytesIO()
    OOXMLFile(BytesIO(data)).encrypt(password, encrypted)
    return encrypted.getvalue()


@pytest.fixture(autouse=True)
def test_config(monkeypatch) -> Config:
    """Isolate every test from the user's config file and environment."""
    monkeypatch.delenv(PASSWORD_ENV_VAR, raising=False)
    config = Config()
    config.decrypt.password = TEST_PASSWORD
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def sample_rows() -> list[list[Any]]:
    return [
        ["Name", "Team", "Amount", "Team"],
        ["Alice", "A", 100, "x"],
        ["Bob", "B", 250.5, "y"],
        ["Carol", "A", 75, "z"],
    ]


@pytest.fixture
def table_bytes(sample_rows) -> bytes:
    return table_workbook(sample_rows)


@pytest.fixture
def summary_cells() -> dict[str, Any]:
    return {"F24": 100, "F25": 50, "G24": 10, "G25": 5, "P24": 110, "P25": 55}


@pytest.fixture
def summary_bytes(summary_cells) -> bytes:
    return summary_workbook(summary_cells)


@pytest.fixture
def encrypted_table_bytes(table_bytes) -> bytes:
    return encrypt(table_bytes)


@pytest.fixture
def make_table() -> Callable[..., bytes]:
    return table_workbook


@pytest.fixture
def make_summary() -> Callable[..., bytes]:
    return summary_workbook


@pytest.fixture
def make_encrypted() -> Callable[[bytes, Optional[str]], bytes]:
    return encrypt
