
class PersistenceReadError(RuntimeError):
    """Raised when the stored filter slot cannot be read or parsed."""
    pass


class PersistenceWriteError(RuntimeError):
    """Raised when the filter cannot be serialized or written to its slot."""
    pass


class RemoteFetchError(RuntimeError):
    """Raised when a marketplace call fails (network error, bad status, bad payload)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StaleResponseDiscarded(RuntimeError):
    """Signals that a search result was dropped because a newer submission exists."""

    def __init__(self, submission: int, latest: int) -> None:
        super().__init__(f"submission {submission} superseded by {latest}")
        self.submission = submission
        self.latest = latest
