from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Never, TypeIs

import cytoolz as cz

from .._core import get_config
from ..traits import OptionConvertible, Pipeable
from ._errors import value_unavailable

if TYPE_CHECKING:
    from ._try import Try


def _to_nothing(_: Exception) -> Option[Any]:
    return NOTHING


def _attempt[R](func: Callable[..., Option[R]], *args: Any) -> Option[R]:
    """Call **func**, turning any raised `Exception` into `NOTHING`."""
    return cz.excepts(Exception, func, _to_nothing)(*args)


class Option[T](Pipeable, ABC):
    """Zero or one value of type `T`.

    Variants are `Some(value)` and `NothingOption` (always returned as the `NOTHING` singleton).

    Every combinator returns a new `Option` and never raises because of a failing callback: errors raised by the functions passed to `map`, `flat_map`, `filter`, `zip`... are turned into `NOTHING`.
    Only `get_or_throw`, `get_or_else_with` and the `do_on_*` hooks let errors escape.
    """

    __slots__ = ()

    @staticmethod
    def some[V](value: V) -> Option[V]:
        """Build a `Some` holding **value**.

        Example:
        ```python
        >>> from pyotry import Option
        >>> Option.some(1)
        Some(value=1)

        ```
        """
        return Some(value)

    @staticmethod
    def nothing() -> Option[Any]:
        """Return the `NOTHING` singleton.

        Example:
        ```python
        >>> from pyotry import Option
        >>> Option.nothing()
        NOTHING

        ```
        """
        return NOTHING

    @staticmethod
    def wrap[V](value: V | None) -> Option[V]:
        """Wrap a nullable value, `None` being mapped to `NOTHING`.

        Args:
            value (V | None): The value to wrap.

        Returns:
            Option[V]: `Some(value)` if **value** is not `None`, `NOTHING` otherwise.

        Example:
        ```python
        >>> from pyotry import Option
        >>> Option.wrap("car")
        Some(value='car')
        >>> Option.wrap(None)
        NOTHING

        ```
        """
        return NOTHING if value is None else Some(value)

    @staticmethod
    def evaluate[V](supplier: Callable[[], V | None]) -> Option[V]:
        """Call **supplier** and wrap its result.

        Any error raised by **supplier** is discarded and yields `NOTHING`.
        Use `Try.evaluate` to keep the error.

        Args:
            supplier (Callable[[], V | None]): Function producing the value.

        Returns:
            Option[V]: The wrapped result, or `NOTHING` if **supplier** returned `None` or raised.

        Example:
        ```python
        >>> from pyotry import Option
        >>> Option.evaluate(lambda: int("12"))
        Some(value=12)
        >>> Option.evaluate(lambda: int("twelve"))
        NOTHING

        ```
        """
        return _attempt(cz.compose_left(supplier, Option.wrap))

    @staticmethod
    def zip[V, R](
        options: Iterable[OptionConvertible[V]],
        combiner: Callable[[list[V]], R | None],
    ) -> Option[R]:
        """Combine the values of all **options** with **combiner**.

        Each element is converted with `as_option()`, so `Option` and `Try` instances can be mixed.
        The values are passed to **combiner** as a list, in iteration order.

        Args:
            options (Iterable[OptionConvertible[V]]): The containers to combine.
            combiner (Callable[[list[V]], R | None]): Function receiving every value.

        Returns:
            Option[R]: The wrapped result of **combiner**, or `NOTHING` if any element is empty or **combiner** raised.

        Example:
        ```python
        >>> from pyotry import Option, Try
        >>> Option.zip([Option.some(1), Try.success(2)], sum)
        Some(value=3)
        >>> Option.zip([Option.some(1), Try.failure()], sum)
        NOTHING

        ```
        """

        def _combine() -> Option[R]:
            values = [opt.as_option().get_or_throw() for opt in options]
            return Option.wrap(combiner(values))

        return _attempt(_combine)

    @staticmethod
    def zip_args[V, R](
        combiner: Callable[[list[V]], R | None], *options: OptionConvertible[V]
    ) -> Option[R]:
        """Same as `Option.zip`, with the containers given as positional arguments.

        Example:
        ```python
        >>> from pyotry import Option, Try
        >>> Option.zip_args(sum, Option.some(1), Try.success(1))
        Some(value=2)

        ```
        """
        return Option.zip(options, combiner)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option holds a value.

        Example:
        ```python
        >>> from pyotry import Option
        >>> Option.some(2).is_some()
        True
        >>> Option.nothing().is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_nothing(self) -> TypeIs[NothingOption]:  # type: ignore[misc]
        """Returns `True` if the option holds no value."""
        ...

    @abstractmethod
    def get_or_throw(self) -> T:
        """Returns the contained value.

        Raises:
            ValueUnavailableError: If the option is `NOTHING`.

        Example:
        ```python
        >>> from pyotry import Option
        >>> Option.some("car").get_or_throw()
        'car'
        >>> Option.nothing().get_or_throw()
        Traceback (most recent call last):
            ...
        pyotry._results._errors.ValueUnavailableError: Value not available for NothingOption

        ```
        """
        ...

    def get_or_else(self, fallback: T) -> T:
        """Returns the contained value or **fallback**.

        Example:
        ```python
        >>> from pyotry import Option
        >>> Option.some(1).get_or_else(2)
        1
        >>> Option.nothing().get_or_else(2)
        2

        ```
        """
        return self.get_or_throw() if self.is_some() else fallback

    def get_or_else_with(self, supplier: Callable[[], T]) -> T:
        """Returns the contained value or computes one with **supplier**.

        Errors raised by **supplier** propagate to the caller.

        Example:
        ```python
        >>> from pyotry import Option
        >>> k = 10
        >>> Option.some(4).get_or_else_with(lambda: 2 * k)
        4
        >>> Option.nothing().get_or_else_with(lambda: 2 * k)
        20

        ```
        """
        return self.get_or_throw() if self.is_some() else supplier()

    def some_or_else(self, fallback: OptionConvertible[T]) -> Option[T]:
        """Returns the option if it holds a value, otherwise **fallback** converted to an `Option`.

        Example:
        ```python
        >>> from pyotry import Option, Try
        >>> Option.some(1).some_or_else(Try.success(2))
        Some(value=1)
        >>> Option.nothing().some_or_else(Try.success(2))
        Some(value=2)

        ```
        """
        return self if self.is_some() else fallback.as_option()

    def some_or_else_with(
        self, supplier: Callable[[], OptionConvertible[T]]
    ) -> Option[T]:
        """Lazy version of `some_or_else`.

        **supplier** is only called if the option is empty.
        If it raises, the result is `NOTHING`.
        """
        if self.is_some():
            return self
        return _attempt(lambda: supplier().as_option())

    def map[U](self, func: Callable[[T], U | None]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying **func** to a contained value.

        The result of **func** is wrapped, so a function returning `None` yields `NOTHING`, as does a function that raises.

        Args:
            func (Callable[[T], U | None]): The function to apply.

        Returns:
            Option[U]: A new `Option` with the mapped value.

        Example:
        ```python
        >>> from pyotry import Option
        >>> Option.some(1).map(str).map(lambda s: s + s)
        Some(value='11')
        >>> Option.some({}).map(lambda d: d["missing"])
        NOTHING
        >>> Option.nothing().map(str)
        NOTHING

        ```
        """
        if self.is_nothing():
            return NOTHING
        return _attempt(cz.compose_left(func, Option.wrap), self.get_or_throw())

    def flat_map[U](self, func: Callable[[T], OptionConvertible[U]]) -> Option[U]:
        """Calls **func** with the contained value and flattens the returned container.

        **func** may return any `OptionConvertible`, e.g. a `Try`.

        Example:
        ```python
        >>> from pyotry import Option, Try
        >>> def half(x: int) -> Try[int]:
        ...     return Try.success(x // 2) if x % 2 == 0 else Try.failure("odd")
        >>> Option.some(4).flat_map(half).flat_map(half)
        Some(value=1)
        >>> Option.some(3).flat_map(half)
        NOTHING

        ```
        """
        if self.is_nothing():
            return NOTHING
        return _attempt(lambda v: func(v).as_option(), self.get_or_throw())

    def flat_map_nullable[U](self, func: Callable[[T], U | None]) -> Option[U]:
        """Flat-maps with a function returning a nullable value."""
        return self.flat_map(cz.compose_left(func, Option.wrap))

    def zip_with[U, R](
        self, other: OptionConvertible[U], combiner: Callable[[T, U], R | None]
    ) -> Option[R]:
        """Combines this value with the value of **other**.

        Args:
            other (OptionConvertible[U]): The second container.
            combiner (Callable[[T, U], R | None]): Function receiving both values.

        Returns:
            Option[R]: The wrapped result, or `NOTHING` if either side is empty or **combiner** raised.

        Example:
        ```python
        >>> from pyotry import Option, Try
        >>> Option.some(1).zip_with(Try.success(2), lambda a, b: a + b)
        Some(value=3)
        >>> Option.some(1).zip_with(Option.nothing(), lambda a, b: a + b)
        NOTHING

        ```
        """

        def _combine() -> Option[R]:
            value = self.get_or_throw()
            return Option.wrap(combiner(value, other.as_option().get_or_throw()))

        return _attempt(_combine)

    def zip_with_nullable[U, R](
        self, other: U | None, combiner: Callable[[T, U], R | None]
    ) -> Option[R]:
        """Same as `zip_with`, **other** being a nullable value."""
        return self.zip_with(Option.wrap(other), combiner)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keeps the value only if **predicate** returns `True`.

        A raising predicate counts as a rejection.

        Example:
        ```python
        >>> from pyotry import Option
        >>> Option.some(1).filter(lambda x: x % 2 == 0)
        NOTHING
        >>> Option.some(1).filter(lambda x: x % 2 != 0)
        Some(value=1)

        ```
        """
        if self.is_nothing():
            return NOTHING
        return _attempt(lambda v: self if predicate(v) else NOTHING, self.get_or_throw())

    def do_on_next(self, func: Callable[[T], object]) -> Option[T]:
        """Calls **func** with the contained value, if any, and returns the option unchanged.

        Example:
        ```python
        >>> from pyotry import Option
        >>> Option.some(1).do_on_next(print).map(lambda x: x + 1)
        1
        Some(value=2)

        ```
        """
        if self.is_some():
            func(self.get_or_throw())
        return self

    def do_on_nothing(self, func: Callable[[], object]) -> Option[T]:
        """Calls **func** if the option is empty and returns the option unchanged."""
        if self.is_nothing():
            func()
        return self

    def catch_nothing(self, fallback: T) -> Option[T]:
        """Returns the option if it holds a value, otherwise `Some(fallback)`.

        Example:
        ```python
        >>> from pyotry import Option
        >>> Option.nothing().catch_nothing(1)
        Some(value=1)

        ```
        """
        return self if self.is_some() else Some(fallback)

    def catch_nothing_with(self, supplier: Callable[[], T]) -> Option[T]:
        """Lazy version of `catch_nothing`; a raising **supplier** yields `NOTHING`."""
        if self.is_some():
            return self
        return _attempt(cz.compose_left(supplier, Some))

    def as_option(self) -> Option[T]:
        return self

    def as_try(self) -> Try[T]:
        """Converts to a `Try`.

        An empty option becomes a `Failure` carrying a `ValueUnavailableError`.

        Example:
        ```python
        >>> from pyotry import Option
        >>> Option.some(1).as_try()
        Success(value=1)
        >>> Option.nothing().as_try()
        Failure(error=ValueUnavailableError('Value not available for NothingOption'))

        ```
        """
        from ._try import Failure, Success

        if self.is_some():
            return Success(self.get_or_throw())
        return Failure(value_unavailable(self))


@dataclass(slots=True, frozen=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Some(value={get_config().value_repr(self.value)})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_nothing(self) -> TypeIs[NothingOption]:  # type: ignore[misc]
        return False

    def get_or_throw(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class NothingOption(Option[Any]):
    """Option variant representing the absence of a value."""

    _instance: ClassVar[NothingOption | None] = None

    def __new__(cls) -> NothingOption:
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOTHING"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_nothing(self) -> TypeIs[NothingOption]:  # type: ignore[misc]
        return True

    def get_or_throw(self) -> Never:
        raise value_unavailable(self)


NOTHING: Option[Any] = NothingOption()
"""Singleton instance representing the absence of a value."""
