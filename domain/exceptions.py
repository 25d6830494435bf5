class DataAccessError(RuntimeError):
    """Raised when the underlying storage fails while reading or writing records."""

    def __init__(self, message: str, operation: str = "unknown"):
        super().__init__(message)
        self.operation = operation


class UserNotFoundError(Exception):
    """Raised when an operation targets a user id that does not exist."""

    def __init__(self, user_id: int):
        super().__init__(f"NO SUCH USER WITH ID {user_id}")
        self.user_id = user_id


class InsufficientFundsError(Exception):
    """Raised when a withdrawal would take a balance below zero."""

    def __init__(self, user_id: int, amount):
        super().__init__(f"balance of user {user_id} does not cover {amount}")
        self.user_id = user_id
        self.amount = amount
