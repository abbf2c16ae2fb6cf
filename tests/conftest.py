"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

TESTDATA_DIR = Path(__file__).parent / "testdata"


@pytest.fixture
def testdata_dir() -> Path:
    """Directory with the checked-in query set fixtures."""
    return TESTDATA_DIR


@pytest.fixture
def tmp_sql_dir(tmp_path: Path) -> Path:
    """Temporary directory for SQL files."""
    sql_dir = tmp_path / "sql"
    sql_dir.mkdir()
    return sql_dir


@pytest.fixture
def write_sql(tmp_sql_dir: Path):
    """Helper to write SQL files into the temp directory.

    Usage:
        write_sql("users.sql", "--SQL:GetUser\\nSELECT * FROM users WHERE id = :id")
    """

    def _write(relative_path: str, content: str | bytes) -> Path:
        file_path = tmp_sql_dir / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            file_path.write_bytes(content)
        else:
            file_path.write_text(content, encoding="utf-8")
        return file_path

    return _write
