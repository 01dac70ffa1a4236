"""Domain and storage error types."""


class InvalidDateRangeError(ValueError):
    """Raised when a requested date range is malformed or inverted."""


class UnsortedHistoryError(ValueError):
    """Raised when an account history is not strictly ascending by date."""


class AccountNotFoundError(LookupError):
    """Raised when an account id does not exist in the directory."""

    def __init__(self, account_id: str) -> None:
        super().__init__(f"Account not found: {account_id}")
        self.account_id = account_id


class StorageError(RuntimeError):
    """Raised when the durable store fails."""


class StorageConstraintError(StorageError):
    """Raised when a write violates a storage constraint."""


__all__ = [
    "InvalidDateRangeError",
    "UnsortedHistoryError",
    "AccountNotFoundError",
    "StorageError",
    "StorageConstraintError",
]
