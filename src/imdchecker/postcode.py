"""UK postcode normalisation and batch parsing.

Normalisation never rejects input. The raw string is reduced to its ASCII
letters and digits, then handed to an ordered chain of matchers; the first
matcher that recognises the shape produces the canonical form. When none
does, the string is split three characters from the end, so any non-empty
input yields a consistently shaped result.
"""

import re
from typing import Callable, List, Optional, Tuple

_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

_BFPO_RE = re.compile(r"BFPO([0-9]{1,4})")
_GIROBANK = "GIR0AA"
_SHORT_MAX_LEN = 4
_INWARD_LEN = 3

# Royal Mail mainland grammar. Q, V, X never start a postcode; I, J, Z never
# appear second; the inward letters exclude C, I, K, M, O and V.
_STANDARD_RE = re.compile(
    r"""
    (?P<outward>
        [A-PR-UWYZ]
        (?:
            [0-9][0-9]?
          | [A-HK-Y][0-9][0-9]?
          | [0-9][A-HJKPSTUW]
          | [A-HK-Y][0-9][ABEHMNPRVWXY]
        )
    )
    (?P<inward>[0-9][ABD-HJLNP-UW-Z]{2})
    """,
    re.VERBOSE,
)

Matcher = Callable[[str], Optional[str]]


def strip(raw: Optional[str]) -> str:
    """Drop everything but ASCII letters and digits, then upper-case."""
    if not raw:
        return ""
    return _NON_ALNUM_RE.sub("", raw).upper()


# ── Matchers ──────────────────────────────────────────────────
# Each takes an already stripped string and returns the canonical form,
# or None to pass to the next matcher.

def match_empty(stripped: str) -> Optional[str]:
    return "" if not stripped else None


def match_bfpo(stripped: str) -> Optional[str]:
    """British Forces Post Office: 'BFPO57' -> 'BFPO 57'."""
    m = _BFPO_RE.fullmatch(stripped)
    if m is None:
        return None
    return f"BFPO {m.group(1)}"


def match_girobank(stripped: str) -> Optional[str]:
    return "GIR 0AA" if stripped == _GIROBANK else None


def match_short(stripped: str) -> Optional[str]:
    """Four characters or fewer cannot hold both halves; leave as is."""
    return stripped if len(stripped) <= _SHORT_MAX_LEN else None


def match_standard(stripped: str) -> Optional[str]:
    m = _STANDARD_RE.fullmatch(stripped)
    if m is None:
        return None
    return f"{m.group('outward')} {m.group('inward')}"


def split_fallback(stripped: str) -> str:
    """
    Insert a space three characters from the end.

    Covers overseas territory codes (e.g. 'FIQQ 1ZZ'), placeholder codes
    and garbage alike. The result has the right shape but is not validated.
    """
    return f"{stripped[:-_INWARD_LEN]} {stripped[-_INWARD_LEN:]}"


MATCHERS: Tuple[Matcher, ...] = (
    match_empty,
    match_bfpo,
    match_girobank,
    match_short,
    match_standard,
)

_RECOGNISERS: Tuple[Matcher, ...] = (match_bfpo, match_girobank, match_standard)


def normalise(raw: Optional[str]) -> str:
    """
    Normalise free text to a canonical postcode, e.g. ' sw1a-1aa ' -> 'SW1A 1AA'.

    Total: every input produces a string. Empty or symbol-only input gives ''.
    """
    stripped = strip(raw)
    for matcher in MATCHERS:
        result = matcher(stripped)
        if result is not None:
            return result
    return split_fallback(stripped)


def validate(raw: Optional[str]) -> bool:
    """
    Return True if *raw* has a recognised postcode shape.

    Recognised shapes are BFPO, Girobank and the mainland grammar. This is
    informational only; normalise() accepts everything.
    """
    stripped = strip(raw)
    return any(m(stripped) is not None for m in _RECOGNISERS)


# ── Batches ───────────────────────────────────────────────────

def parse_batch(raw: Optional[str]) -> List[str]:
    """
    Split multi-line input into normalised postcodes.

    CRLF, CR and LF all end a line. Lines that normalise to '' are dropped;
    order and duplicates are kept.
    """
    if not raw:
        return []
    postcodes = []
    for line in _LINE_BREAK_RE.split(raw):
        clean = normalise(line)
        if clean:
            postcodes.append(clean)
    return postcodes


def for_textarea(raw: Optional[str]) -> str:
    """Normalised postcodes, one per line, for echoing back into a form."""
    return "\n".join(parse_batch(raw))
