"""Errors raised by the bookkeeping services.

All of them are caller input errors and map to HTTP 400.
"""


class FinanceError(ValueError):
    """Base class for rejected requests."""


class InvalidAccount(FinanceError):
    def __init__(self, message: str = "Invalid account"):
        super().__init__(message)


class InvalidCategory(FinanceError):
    def __init__(self, message: str = "Invalid category or subcategory"):
        super().__init__(message)


class InvalidBudget(FinanceError):
    def __init__(self, message: str = "Budget must be a positive number"):
        super().__init__(message)


class MissingDateRange(FinanceError):
    def __init__(
        self,
        message: str = "Please provide start_date and end_date in YYYY-MM-DD format",
    ):
        super().__init__(message)


class InvalidAmount(FinanceError):
    def __init__(self, message: str = "Amount must be a finite number"):
        super().__init__(message)
