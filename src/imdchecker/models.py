"""Typed result models for imdchecker."""

from dataclasses import dataclass, field
from typing import Sequence, Tuple

# Column order of every rendered or exported result row.
RESULT_FIELDS = ("postcode", "lsoa_name", "imd_rank", "imd_decile")

RESULT_HEADERS = ("Postcode", "LSOA Name", "IMD Rank", "IMD Decile")


@dataclass(frozen=True)
class ResultRow:
    """One matched postcode with the deprivation rank of its LSOA."""

    postcode: str
    lsoa_name: str
    imd_rank: int            # 1 = most deprived LSOA in England
    imd_decile: int          # 1-10

    @classmethod
    def from_db_row(cls, row: Sequence) -> "ResultRow":
        """Build from a (pcds, lsoa_name, imd_rank, imd_decile) tuple."""
        return cls(
            postcode=row[0],
            lsoa_name=row[1],
            imd_rank=row[2],
            imd_decile=row[3],
        )

    def to_dict(self) -> dict:
        """Ordered plain dictionary keyed by RESULT_FIELDS."""
        return {name: getattr(self, name) for name in RESULT_FIELDS}


@dataclass(frozen=True)
class LookupResult:
    """Everything produced by one batch lookup."""

    postcodes: Tuple[str, ...]   # normalised batch actually queried
    decile: int                  # ceiling applied to the query
    count: int                   # reference postcodes matching the batch
    rows: Tuple[ResultRow, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return bool(self.rows)

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "postcodes": list(self.postcodes),
            "decile": self.decile,
            "count": self.count,
            "rows": [row.to_dict() for row in self.rows],
        }
