"""Maximum-decile filter handling.

Deciles run from 1 (most deprived 10%) to 10 (least deprived). A missing or
unusable filter means "include everything", which is a ceiling of 10.
"""

import re
from typing import Optional, Union

DECILE_MIN = 1
DECILE_MAX = 10
DEFAULT_DECILE = DECILE_MAX

# Optional sign, no leading zeros. Surrounding whitespace is ASCII only and
# excludes form feed.
_INT_RE = re.compile(r"[ \t\n\r\v]*([+-]?(?:0|[1-9][0-9]*))[ \t\n\r\v]*")

RawDecile = Optional[Union[str, int]]


def _parse_int(raw_value: RawDecile) -> Optional[int]:
    if isinstance(raw_value, bool):
        return None
    if isinstance(raw_value, int):
        return raw_value
    if not isinstance(raw_value, str):
        return None
    m = _INT_RE.fullmatch(raw_value)
    if m is None:
        return None
    return int(m.group(1))


def extract_decile(present: bool, raw_value: RawDecile = None) -> int:
    """
    Return the decile ceiling to query with.

    Absent, non-integer or out-of-range (outside 1-10) input gives 10.
    """
    if not present:
        return DEFAULT_DECILE
    value = _parse_int(raw_value)
    if value is None or not DECILE_MIN <= value <= DECILE_MAX:
        return DEFAULT_DECILE
    return value


def decile_for_display(present: bool, raw_value: RawDecile = None) -> str:
    """
    Return the value to put back in the decile input field.

    '' when nothing was submitted, so the field renders blank; otherwise the
    validated decile as a string.
    """
    if not present or raw_value is None or raw_value == "":
        return ""
    return str(extract_decile(True, raw_value))
