"""
Custom exception hierarchy for the sales engine.

Exception Hierarchy:
    SalesEngineError (base)
    └── DataLoadError          - Source file missing or row could not be parsed

    ValidationError            - Caller input validation failed

Lookups never raise: a missing id, name or foreign key yields None, an empty
list or a zero amount. Exceptions are reserved for caller misuse and for
broken source data.
"""


class SalesEngineError(Exception):
    """Base exception for all sales engine errors."""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class DataLoadError(SalesEngineError):
    """
    Source data could not be loaded.

    Raised by the CSV loader when an explicitly requested file is missing
    or when a row cannot be converted into a record.
    """

    def __init__(self, message: str, details: str = None, path: str = None, row: int = None):
        super().__init__(message, details)
        self.path = path
        self.row = row


class ValidationError(Exception):
    """
    Input validation failed.

    Used for validating caller input (status names, month names, counts,
    dates) before running a query.
    """

    def __init__(self, field: str, message: str, value: any = None):
        self.field = field
        self.message = message
        self.value = value
        super().__init__(f"{field}: {message}")

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.field}: {self.message} (got: {self.value!r})"
        return f"{self.field}: {self.message}"
