"""Tests for imdchecker.query module."""

import re

import pytest

from imdchecker.postcode import parse_batch
from imdchecker.query import count_sql, lookup_params, lookup_sql, placeholders


class TestPlaceholders:
    def test_zero(self):
        assert placeholders(0) == ""

    @pytest.mark.parametrize(("n", "expected"), [(1, "?"), (3, "?,?,?")])
    def test_small(self, n: int, expected: str):
        assert placeholders(n) == expected

    @pytest.mark.parametrize("n", [1, 2, 900, 1000])
    def test_token_and_comma_counts(self, n: int):
        result = placeholders(n)
        assert result.count("?") == n
        assert result.count(",") == n - 1
        assert re.fullmatch(r"\?(?:,\?)*", result)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            placeholders(-1)

    @pytest.mark.parametrize(
        "raw",
        [
            "'; DROP TABLE onspd; --",
            "SW1A 1AA' OR '1'='1",
            "SW1A 1AA\n1 UNION SELECT * FROM imd--",
        ],
    )
    def test_user_text_never_reaches_sql(self, raw: str):
        batch = parse_batch(raw)
        assert re.fullmatch(r"[?,]*", placeholders(len(batch)))
        sql = lookup_sql(len(batch))
        for pc in batch:
            assert pc not in sql


class TestQueries:
    def test_lookup_sql_sized_to_batch(self):
        sql = lookup_sql(3)
        assert "onspd.pcds IN (?,?,?)" in sql
        assert sql.endswith("imd.imd_decile <= ?")

    def test_count_sql(self):
        assert count_sql(2) == (
            "SELECT COUNT(*) FROM onspd WHERE onspd.pcds IN (?,?)"
        )

    def test_params_are_postcodes_then_decile(self):
        assert lookup_params(["SW1A 1AA", "M1 1AE"], 5) == ("SW1A 1AA", "M1 1AE", 5)

    def test_params_match_placeholder_count(self):
        batch = ["SW1A 1AA"] * 900
        sql = lookup_sql(len(batch))
        assert sql.count("?") == len(lookup_params(batch, 10))
