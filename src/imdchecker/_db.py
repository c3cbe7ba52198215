"""Read-only access to the IMD reference database.

The database is an external, fixed schema: ONSPD postcodes (``onspd``) and
IMD ranks per LSOA (``imd``). This module opens it read-only, checks that
schema, and runs the two batch queries built by ``imdchecker.query``.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Iterator, Sequence

from imdchecker import query
from imdchecker.exceptions import DatabaseInvalid, DatabaseNotFound
from imdchecker.models import ResultRow

logger = logging.getLogger(__name__)


class _ReferenceStore:
    """
    One lazily opened, read-only SQLite connection to the reference data.

    The connection is reopened on demand after close(), so a store can be
    reused. A database file that disappears mid-session surfaces as
    DatabaseNotFound rather than a raw sqlite3 error.
    """

    def __init__(self, path: Path):
        self._path = path
        self._conn: sqlite3.Connection | None = None

    # ── Queries ───────────────────────────────────────────────────

    def count_matches(self, postcodes: Sequence[str]) -> int:
        """Number of reference postcodes present in *postcodes*."""
        cur = self._execute(query.count_sql(len(postcodes)), tuple(postcodes))
        return int(cur.fetchone()[0])

    def fetch_rows(
        self, postcodes: Sequence[str], max_decile: int
    ) -> Iterator[ResultRow]:
        """Yield a ResultRow per matched postcode with decile <= *max_decile*."""
        cur = self._execute(
            query.lookup_sql(len(postcodes)),
            query.lookup_params(postcodes, max_decile),
        )
        for row in cur:
            yield ResultRow.from_db_row(row)

    def check_schema(self) -> None:
        """
        Confirm every table and column the lookup queries rely on exists.

        Raises DatabaseInvalid naming what is missing.
        """
        problems = []
        for table, columns in query.REQUIRED_COLUMNS.items():
            # Table names come from a fixed mapping, never from input
            cur = self._execute(f"PRAGMA table_info({table})")
            present = {row[1] for row in cur}
            if not present:
                problems.append(f"missing table {table}")
                continue
            missing = [c for c in columns if c not in present]
            if missing:
                problems.append(f"{table} lacks {', '.join(missing)}")
        if problems:
            raise DatabaseInvalid(str(self._path), "; ".join(problems))

    # ── Connection ────────────────────────────────────────────────

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        if self._conn is None:
            self._connect()
        try:
            return self._conn.execute(sql, params)
        except sqlite3.OperationalError:
            if not self._path.is_file():
                self.close()
                raise DatabaseNotFound(str(self._path))
            raise

    def _connect(self) -> None:
        if not self._path.is_file():
            raise DatabaseNotFound(str(self._path))
        self._conn = sqlite3.connect(f"file:{self._path}?mode=ro", uri=True)
        self._conn.execute("PRAGMA query_only = ON")
        logger.debug("Opened reference database %s", self._path)
