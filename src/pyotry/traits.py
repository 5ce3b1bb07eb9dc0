"""Public traits shared by `Option`, `Try` and custom user types.

`Pipeable` is a mixin depending only on `Self`, so it can be added to any existing class.

`OptionConvertible` and `TryConvertible` are structural protocols: any object exposing `as_option()` (resp. `as_try()`) is accepted wherever a container is expected, e.g. by `Option.zip`, `Try.zip`, `Option.some_or_else` or `Try.success_or_else`.
No inheritance is required, so both containers can be mixed freely in those calls.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Concatenate, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from ._results import Option, Try

__all__ = ["OptionConvertible", "Pipeable", "TryConvertible"]


class Pipeable:
    """Mixin class providing pipeable methods for fluent chaining."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into an object or function that can convert `Self` into another type.

        Conceptually, this allow to do `x.into(f)` instead of `f(x)`, hence keeping a fluent chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> from pyotry import Option
        >>> def describe(opt: Option[int], unit: str) -> str:
        ...     return opt.map(lambda v: f"{v} {unit}").get_or_else("unknown")
        >>>
        >>> Option.some(3).into(describe, "kg")
        '3 kg'
        >>> Option.nothing().into(describe, "kg")
        'unknown'

        ```
        """
        return func(self, *args, **kwargs)


@runtime_checkable
class OptionConvertible[T](Protocol):
    """Anything that can produce an `Option[T]`."""

    def as_option(self) -> Option[T]: ...


@runtime_checkable
class TryConvertible[T](Protocol):
    """Anything that can produce a `Try[T]`."""

    def as_try(self) -> Try[T]: ...
