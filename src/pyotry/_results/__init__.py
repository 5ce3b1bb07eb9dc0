from ._errors import (
    DEFAULT_ERROR_MESSAGE,
    PredicateRejectedError,
    TryFailureError,
    ValueUnavailableError,
)
from ._option import NOTHING, NothingOption, Option, Some
from ._try import Failure, Success, Try

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "NOTHING",
    "Failure",
    "NothingOption",
    "Option",
    "PredicateRejectedError",
    "Some",
    "Success",
    "Try",
    "TryFailureError",
    "ValueUnavailableError",
]
