"""IMDChecker client — the main entry point for the library."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Optional, Sequence

from imdchecker import config, decile, postcode
from imdchecker._db import _ReferenceStore
from imdchecker.exceptions import BatchTooLarge, IMDCheckerError
from imdchecker.models import LookupResult, ResultRow

logger = logging.getLogger(__name__)


class IMDChecker:
    """
    Postcode -> Index of Multiple Deprivation lookup.

    Initialise with the path to the reference SQLite database (ONSPD
    postcodes joined to IMD ranks). The database must exist and contain
    the expected tables on construction.

    Batches longer than *max_postcodes* are cut to that length when
    *truncate* is true, or rejected with BatchTooLarge otherwise.
    """

    def __init__(
        self,
        db_path: str | Path | None = None,
        max_postcodes: Optional[int] = None,
        truncate: bool = True,
    ):
        self._max_postcodes = (
            config.MAX_POSTCODES if max_postcodes is None else max_postcodes
        )
        self._truncate = truncate
        self._store = _ReferenceStore(Path(db_path or config.DB_PATH))
        self._store.check_schema()

    @property
    def max_postcodes(self) -> int:
        return self._max_postcodes

    # ── Public API ────────────────────────────────────────────────

    def lookup(
        self,
        raw_postcodes: Optional[str],
        decile_present: bool = False,
        raw_decile: decile.RawDecile = None,
    ) -> LookupResult:
        """
        Look up free-text postcodes (one per line) under a decile ceiling.

        The text is normalised line by line and the decile validated, so
        this accepts request input as-is.
        """
        batch = postcode.parse_batch(raw_postcodes)
        ceiling = decile.extract_decile(decile_present, raw_decile)
        return self.lookup_postcodes(batch, ceiling)

    def lookup_postcodes(
        self, postcodes: Sequence[str], max_decile: int = decile.DEFAULT_DECILE
    ) -> LookupResult:
        """
        Look up an already normalised batch.

        Returns a LookupResult; rows come back in database order. An empty
        batch returns an empty result without querying.
        """
        batch = self._apply_limit(list(postcodes))
        if not batch:
            return LookupResult(postcodes=(), decile=max_decile, count=0)

        logger.debug(
            "Looking up %d postcodes with decile <= %d", len(batch), max_decile
        )
        count = self._store.count_matches(batch)
        rows: tuple[ResultRow, ...] = ()
        if count > 0:
            rows = tuple(self._store.fetch_rows(batch, max_decile))
        logger.debug("Matched %d postcodes, %d rows", count, len(rows))

        return LookupResult(
            postcodes=tuple(batch),
            decile=max_decile,
            count=count,
            rows=rows,
        )

    def health_check(self) -> dict:
        """
        Verify the database is accessible and has the expected schema.

        Returns a dict with status information.
        """
        status: dict = {"healthy": True, "db": "ok"}
        try:
            self._store.check_schema()
        except (IMDCheckerError, sqlite3.Error) as exc:
            status["healthy"] = False
            status["db"] = str(exc)
        return status

    def close(self) -> None:
        """Close the database connection."""
        self._store.close()

    def __enter__(self) -> IMDChecker:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ── Private helpers ───────────────────────────────────────────

    def _apply_limit(self, batch: list[str]) -> list[str]:
        if len(batch) <= self._max_postcodes:
            return batch
        if not self._truncate:
            raise BatchTooLarge(len(batch), self._max_postcodes)
        logger.warning(
            "Batch of %d postcodes cut to the first %d",
            len(batch),
            self._max_postcodes,
        )
        return batch[: self._max_postcodes]

