from ._core import Config, get_config
from ._results import (
    DEFAULT_ERROR_MESSAGE,
    NOTHING,
    Failure,
    NothingOption,
    Option,
    PredicateRejectedError,
    Some,
    Success,
    Try,
    TryFailureError,
    ValueUnavailableError,
)
from .traits import OptionConvertible, Pipeable, TryConvertible

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "NOTHING",
    "Config",
    "Failure",
    "NothingOption",
    "Option",
    "OptionConvertible",
    "Pipeable",
    "PredicateRejectedError",
    "Some",
    "Success",
    "Try",
    "TryFailureError",
    "TryConvertible",
    "ValueUnavailableError",
    "get_config",
]
