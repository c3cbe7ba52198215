"""Custom exception hierarchy for imdchecker.

The pure core (normalisation, batch parsing, placeholders, decile handling,
rendering) never raises for user input. These exceptions belong to the
edges: the reference database and the caller's batch-size policy.
"""


class IMDCheckerError(Exception):
    """Base exception for all imdchecker errors."""


class DatabaseNotFound(IMDCheckerError):
    """The reference SQLite database file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"IMD reference database not found at: {path}")


class DatabaseInvalid(IMDCheckerError):
    """A database exists but is missing expected tables or columns."""

    def __init__(self, path: str, detail: str):
        self.path = path
        super().__init__(f"Invalid database at {path}: {detail}")


class BatchTooLarge(IMDCheckerError):
    """More postcodes were submitted than the lookup policy allows."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Too many postcodes: {count} submitted, limit is {limit}"
        )
