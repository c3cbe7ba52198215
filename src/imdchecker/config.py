"""Runtime configuration, read from environment variables.

    IMD_DB              Path to the IMD reference SQLite database
    IMD_MAX_POSTCODES   Largest batch a single lookup accepts
    IMD_LOG_LEVEL       Log level name used by the CLI

Explicit arguments to IMDChecker or the CLI always take priority.
"""

import os
from pathlib import Path

DEFAULT_MAX_POSTCODES = 900
DEFAULT_LOG_LEVEL = "WARNING"


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


# Fall back to CWD, which is stable regardless of where the package is
# installed.
DB_PATH = os.environ.get("IMD_DB", str(Path.cwd() / "imd.sqlite3"))

MAX_POSTCODES = _int_from_env("IMD_MAX_POSTCODES", DEFAULT_MAX_POSTCODES)

LOG_LEVEL = os.environ.get("IMD_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
