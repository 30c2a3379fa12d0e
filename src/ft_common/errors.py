"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Auth/User
  2xxx: Expense
  3xxx: Budget
  9xxx: System (includes result-cache store failures)
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Auth/User ---

class UsernameExistsError(AppError):
    def __init__(self) -> None:
        super().__init__(1001, "Username already exists", 409)


class EmailExistsError(AppError):
    def __init__(self) -> None:
        super().__init__(1002, "Email already exists", 409)


class InvalidCredentialsError(AppError):
    def __init__(self) -> None:
        super().__init__(1003, "Invalid email or password", 401)


class AccountDisabledError(AppError):
    def __init__(self) -> None:
        super().__init__(1004, "Account is disabled", 403)


class InvalidRefreshTokenError(AppError):
    def __init__(self) -> None:
        super().__init__(1005, "Refresh token is invalid or expired", 401)


# --- 2xxx: Expense ---

class ExpenseNotFoundError(AppError):
    def __init__(self, expense_id: str) -> None:
        super().__init__(2001, f"Expense not found: {expense_id}", 404)


# --- 3xxx: Budget ---

class BudgetNotFoundError(AppError):
    def __init__(self, budget_id: str) -> None:
        super().__init__(3001, f"Budget not found: {budget_id}", 404)


class InvalidBudgetPeriodError(AppError):
    def __init__(self) -> None:
        super().__init__(3002, "Budget end_date must not be before start_date", 400)


# --- 9xxx: System ---

class StoreUnavailableError(AppError):
    """Cache store connection is not open, was refused, or dropped."""

    def __init__(self, detail: str = "Cache store unavailable") -> None:
        super().__init__(9101, detail, 503)


class StoreReadError(AppError):
    def __init__(self, key: str, detail: str) -> None:
        super().__init__(9102, f"Cache read failed for {key}: {detail}", 503)


class StoreWriteError(AppError):
    def __init__(self, key: str, detail: str) -> None:
        super().__init__(9103, f"Cache write failed for {key}: {detail}", 503)


class CacheSerializationError(AppError):
    def __init__(self, key: str, detail: str) -> None:
        super().__init__(9104, f"Value for {key} is not JSON-serializable: {detail}", 500)
