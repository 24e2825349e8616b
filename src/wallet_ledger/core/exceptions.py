"""Application-level exceptions.

Every failure the ledger reports is an ``AppError`` carrying a stable ``code``
and the HTTP status the API layer renders it with.
"""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR", status_code: int = 400):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when caller input is invalid (bad type, amount or currency)."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_INPUT", status_code=400)


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, code: str = "NOT_FOUND"):
        super().__init__(f"{resource} not found: {identifier}", code=code, status_code=404)


class AccountNotFoundError(NotFoundError):
    """Raised when the account a transaction targets does not exist."""

    def __init__(self, account_id: str):
        super().__init__("Account", account_id, code="ACCOUNT_NOT_FOUND")


class InsufficientFundsError(AppError):
    """Raised when a debit exceeds the account's holding of that currency."""

    def __init__(self, currency: str, requested: str):
        super().__init__(
            f"Insufficient {currency} balance: requested {requested}",
            code="INSUFFICIENT_FUNDS",
            status_code=400,
        )


class ForbiddenError(AppError):
    """Raised when a caller tries to read a record owned by another account."""

    def __init__(self, message: str = "Unauthorized to view this transaction"):
        super().__init__(message, code="FORBIDDEN", status_code=403)


class StoreUnavailableError(AppError):
    """Raised when the underlying store fails. Nothing was mutated."""

    def __init__(self, detail: str):
        super().__init__(f"Store unavailable: {detail}", code="STORE_UNAVAILABLE", status_code=503)
