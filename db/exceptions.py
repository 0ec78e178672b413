"""
db/exceptions.py
----------------
Errors raised by the data access layer.
"""


class DataAccessError(Exception):
    """
    A database operation failed and its transaction was rolled back.

    Wraps whatever the driver (or the pool) raised. The original
    exception is chained as ``__cause__`` and also kept on ``cause``.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
