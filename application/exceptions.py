"""
Application-layer exceptions.

These exceptions are raised by workout store implementations and handled by
the use cases. Backend errors are chained (raise ... from e) so the original
cause stays visible in logs and Sentry.
"""


class StoreError(Exception):
    """Base class for workout store failures."""

    pass


class StoreUnavailable(StoreError):
    """Reading from the key-value backend failed.

    Raised when listing keys or fetching a record errors. Callers listing
    workouts treat this as "no workouts" for display and log it.
    """

    pass


class StoreWriteError(StoreError):
    """Writing to or deleting from the key-value backend failed.

    Surfaced to the user as a blocking notice; the draft being saved is
    left untouched so the operation can be retried.
    """

    def __init__(self, message: str, key: str = ""):
        super().__init__(message)
        self.key = key
