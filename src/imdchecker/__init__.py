"""imdchecker — Look up English IMD deprivation ranks for lists of UK postcodes."""

from imdchecker.client import IMDChecker
from imdchecker.decile import decile_for_display, extract_decile
from imdchecker.exceptions import (
    BatchTooLarge,
    DatabaseInvalid,
    DatabaseNotFound,
    IMDCheckerError,
)
from imdchecker.models import RESULT_FIELDS, LookupResult, ResultRow
from imdchecker.postcode import for_textarea, normalise, parse_batch, validate
from imdchecker.query import placeholders
from imdchecker.render import render_row, render_table

__all__ = [
    "IMDChecker",
    "LookupResult",
    "ResultRow",
    "RESULT_FIELDS",
    "IMDCheckerError",
    "BatchTooLarge",
    "DatabaseNotFound",
    "DatabaseInvalid",
    "normalise",
    "validate",
    "parse_batch",
    "for_textarea",
    "placeholders",
    "extract_decile",
    "decile_for_display",
    "render_row",
    "render_table",
]
