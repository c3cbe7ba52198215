"""Parameterised SQL for the postcode -> IMD lookup.

Query text is assembled only from fixed fragments and '?' placeholders.
Postcodes and the decile ceiling are always bound as parameters.
"""

from typing import Sequence, Tuple, Union

_LOOKUP_SQL = (
    "SELECT onspd.pcds, imd.lsoa_name, imd.imd_rank, imd.imd_decile "
    "FROM imd "
    "INNER JOIN onspd ON imd.lsoa_code = onspd.lsoa11 "
    "WHERE onspd.pcds IN ({placeholders}) "
    "AND imd.imd_decile <= ?"
)

_COUNT_SQL = (
    "SELECT COUNT(*) FROM onspd WHERE onspd.pcds IN ({placeholders})"
)

# Columns each reference table must provide for the queries above.
REQUIRED_COLUMNS = {
    "onspd": ("pcds", "lsoa11"),
    "imd": ("lsoa_code", "lsoa_name", "imd_rank", "imd_decile"),
}


def placeholders(count: int) -> str:
    """
    Return *count* '?' tokens joined by commas, e.g. 3 -> '?,?,?'.

    Zero gives ''. Only sizes an IN() clause; never carries data.
    """
    if count < 0:
        raise ValueError(f"placeholder count must be non-negative, got {count}")
    return ",".join("?" * count)


def lookup_sql(count: int) -> str:
    """Row query for a batch of *count* postcodes plus a decile bound."""
    return _LOOKUP_SQL.format(placeholders=placeholders(count))


def count_sql(count: int) -> str:
    """Count of reference postcodes matching a batch of *count*."""
    return _COUNT_SQL.format(placeholders=placeholders(count))


def lookup_params(
    postcodes: Sequence[str], decile: int
) -> Tuple[Union[str, int], ...]:
    """Positional parameters for lookup_sql(): the postcodes, then the decile."""
    return (*postcodes, decile)
