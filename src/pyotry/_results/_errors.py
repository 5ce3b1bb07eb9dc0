from __future__ import annotations

DEFAULT_ERROR_MESSAGE = "Invalid value"
"""Message used whenever a `Failure` is built without an explicit error."""


class TryFailureError(Exception):
    """Error built from a plain message, carried by a `Failure`.

    Args:
        message (str): Human-readable description of the failure.
        cause (Exception | None): Optional underlying error, also exposed as `__cause__`.

    Example:
    ```python
    >>> from pyotry import TryFailureError
    >>> err = TryFailureError("boom", cause=KeyError("k"))
    >>> err.message
    'boom'
    >>> err.cause
    KeyError('k')

    ```
    """

    def __init__(
        self, message: str = DEFAULT_ERROR_MESSAGE, cause: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.__cause__ = cause


class ValueUnavailableError(TryFailureError):
    """Raised when reading the value of an empty `Option`."""


class PredicateRejectedError(TryFailureError):
    """Carried by `Try.filter` when the predicate rejects the value."""


def value_unavailable(owner: object) -> ValueUnavailableError:
    return ValueUnavailableError(f"Value not available for {type(owner).__name__}")


def as_error(error: Exception | str) -> Exception:
    match error:
        case str():
            return TryFailureError(error)
        case _:
            return error
