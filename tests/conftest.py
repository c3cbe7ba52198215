"""Shared test fixtures — a small IMD reference database with realistic data."""

import sqlite3
from pathlib import Path

import pytest

# (pcds, lsoa11)
ONSPD_ROWS = [
    ("SW1A 1AA", "E01004736"),
    ("M1 1AE", "E01033677"),
    ("B33 8TH", "E01009397"),
    ("CR2 6XH", "E01001052"),
    ("EC1A 1BB", "E01000001"),
    # Postcode whose LSOA has no IMD row; counted but never returned
    ("TN33 0PF", "E99999999"),
]

# (lsoa_code, lsoa_name, imd_rank, imd_decile)
IMD_ROWS = [
    ("E01004736", "Westminster 018C", 15234, 5),
    ("E01033677", "Manchester 054C", 8901, 3),
    ("E01009397", "Birmingham 037D", 412, 1),
    ("E01001052", "Croydon 038A", 30810, 10),
    ("E01000001", "City of London 001A", 29199, 9),
]


def build_reference_db(db_path: Path) -> Path:
    conn = sqlite3.connect(str(db_path))
    conn.execute(
        """
        CREATE TABLE onspd (
            pcds TEXT PRIMARY KEY,
            lsoa11 TEXT
        )
        """
    )
    conn.execute(
        """
        CREATE TABLE imd (
            lsoa_code TEXT PRIMARY KEY,
            lsoa_name TEXT,
            imd_rank INTEGER,
            imd_decile INTEGER
        )
        """
    )
    conn.executemany("INSERT INTO onspd VALUES (?, ?)", ONSPD_ROWS)
    conn.executemany("INSERT INTO imd VALUES (?, ?, ?, ?)", IMD_ROWS)
    conn.commit()
    conn.close()
    return db_path


@pytest.fixture()
def tmp_imd_db(tmp_path: Path) -> Path:
    """Create the reference database in a temporary directory."""
    return build_reference_db(tmp_path / "imd.sqlite3")


@pytest.fixture()
def checker(tmp_imd_db: Path):
    """Create an IMDChecker client over the test database."""
    from imdchecker import IMDChecker

    c = IMDChecker(db_path=tmp_imd_db)
    yield c
    c.close()


@pytest.fixture()
def restore_package_logger():
    """Put the imdchecker logger back as it was after the test."""
    import logging

    logger = logging.getLogger("imdchecker")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
