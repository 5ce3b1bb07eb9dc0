from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Never, TypeIs, cast

import cytoolz as cz

from .._core import get_config
from ..traits import Pipeable, TryConvertible
from ._errors import DEFAULT_ERROR_MESSAGE, PredicateRejectedError, as_error
from ._option import NOTHING, Option, Some


def _attempt[R](func: Callable[..., Try[R]], *args: Any) -> Try[R]:
    """Call **func**, turning any raised `Exception` into a `Failure` carrying it."""
    return cz.excepts(Exception, func, Failure)(*args)


class Try[T](Pipeable, ABC):
    """Either a successful value of type `T` or the error that prevented it.

    Variants are `Success(value)` and `Failure(error)`.

    Combinators never raise because of a failing callback: the raised error becomes the error of the returned `Failure`.
    A `Failure` passed through `map`, `flat_map`, `zip_with`... is returned unchanged, so the first error encountered is the one that surfaces.
    """

    __slots__ = ()

    @staticmethod
    def success[V](value: V) -> Try[V]:
        return Success(value)

    @staticmethod
    def failure(error: Exception | str = DEFAULT_ERROR_MESSAGE) -> Try[Any]:
        """Build a `Failure`.

        Args:
            error (Exception | str): The error to carry. A message is wrapped in a `TryFailureError`.

        Example:
        ```python
        >>> from pyotry import Try
        >>> Try.failure()
        Failure(error=TryFailureError('Invalid value'))
        >>> Try.failure(KeyError("k"))
        Failure(error=KeyError('k'))

        ```
        """
        return Failure(as_error(error))

    @staticmethod
    def wrap[V](
        value: V | None, error: Exception | str = DEFAULT_ERROR_MESSAGE
    ) -> Try[V]:
        """`Success(value)` unless **value** is `None`, in which case `Try.failure(error)`."""
        return Try.failure(error) if value is None else Success(value)

    @staticmethod
    def evaluate[V](supplier: Callable[[], V]) -> Try[V]:
        """Call **supplier**, capturing any raised error.

        Unlike `Option.evaluate`, the original error is kept.

        Example:
        ```python
        >>> from pyotry import Try
        >>> Try.evaluate(lambda: int("12"))
        Success(value=12)
        >>> Try.evaluate(lambda: 1 / 0)
        Failure(error=ZeroDivisionError('division by zero'))

        ```
        """
        return _attempt(cz.compose_left(supplier, Success))

    @staticmethod
    def zip[V, R](
        tries: Iterable[TryConvertible[V]],
        combiner: Callable[[list[V]], R | None],
    ) -> Try[R]:
        """Combine the values of all **tries** with **combiner**.

        Elements are converted with `as_try()` and read in order; the first failure stops the iteration and its error is returned.
        A `None` result from **combiner** becomes a default failure.

        Example:
        ```python
        >>> from pyotry import Option, Try
        >>> Try.zip([Try.success(1), Option.some(1)], sum)
        Success(value=2)
        >>> Try.zip([Try.success(1), Try.failure("first"), Try.failure("second")], sum)
        Failure(error=TryFailureError('first'))

        ```
        """
        values: list[V] = []
        for t in tries:
            match _attempt(t.as_try):
                case Failure() as failed:
                    return cast(Try[R], failed)
                case Success(value):
                    values.append(value)
        return _attempt(lambda: Try.wrap(combiner(values)))

    @staticmethod
    def zip_args[V, R](
        combiner: Callable[[list[V]], R | None], *tries: TryConvertible[V]
    ) -> Try[R]:
        """Same as `Try.zip`, with the containers given as positional arguments."""
        return Try.zip(tries, combiner)

    @abstractmethod
    def is_success(self) -> TypeIs[Success[T]]:  # type: ignore[misc]
        ...

    @abstractmethod
    def is_failure(self) -> TypeIs[Failure[T]]:  # type: ignore[misc]
        ...

    @abstractmethod
    def get_or_throw(self) -> T:
        """Returns the contained value, or raises the stored error itself.

        Example:
        ```python
        >>> from pyotry import Try
        >>> Try.failure(KeyError("k")).get_or_throw()
        Traceback (most recent call last):
            ...
        KeyError: 'k'

        ```
        """
        ...

    def get_or_else(self, fallback: T) -> T:
        return self.get_or_throw() if self.is_success() else fallback

    def get_or_else_with(self, supplier: Callable[[], T]) -> T:
        """Returns the value or the result of **supplier**, whose errors propagate."""
        return self.get_or_throw() if self.is_success() else supplier()

    def success_or_else(self, fallback: TryConvertible[T]) -> Try[T]:
        """Returns the `Try` if successful, otherwise **fallback** converted to a `Try`."""
        return self if self.is_success() else fallback.as_try()

    def success_or_else_with(self, supplier: Callable[[], TryConvertible[T]]) -> Try[T]:
        """Lazy version of `success_or_else`; a raising **supplier** yields a `Failure` carrying its error."""
        if self.is_success():
            return self
        return _attempt(lambda: supplier().as_try())

    def map[U](self, func: Callable[[T], U]) -> Try[U]:
        """Maps a `Try[T]` to `Try[U]` by applying **func** to a successful value.

        Example:
        ```python
        >>> from pyotry import Try
        >>> Try.success(1).map(str)
        Success(value='1')
        >>> Try.success(0).map(lambda x: 1 / x)
        Failure(error=ZeroDivisionError('division by zero'))
        >>> Try.failure("E").map(str)
        Failure(error=TryFailureError('E'))

        ```
        """
        if self.is_failure():
            return cast(Try[U], self)
        return _attempt(cz.compose_left(func, Success), self.get_or_throw())

    def flat_map[U](self, func: Callable[[T], TryConvertible[U]]) -> Try[U]:
        """Calls **func** with the value and flattens the returned container.

        An `Option` returned by **func** is accepted; when empty it becomes a `ValueUnavailableError` failure.
        """
        if self.is_failure():
            return cast(Try[U], self)
        return _attempt(lambda v: func(v).as_try(), self.get_or_throw())

    def flat_map_nullable[U](self, func: Callable[[T], U | None]) -> Try[U]:
        return self.flat_map(cz.compose_left(func, Option.wrap))

    def zip_with[U, R](
        self, other: TryConvertible[U], combiner: Callable[[T, U], R | None]
    ) -> Try[R]:
        """Combines this value with the value of **other**.

        If both sides failed, the error of `self` wins.

        Example:
        ```python
        >>> from pyotry import Try
        >>> Try.failure("E1").zip_with(Try.failure("E2"), lambda a, b: a + b)
        Failure(error=TryFailureError('E1'))

        ```
        """
        return Try.zip_args(lambda values: combiner(*values), self, other)

    def zip_with_nullable[U, R](
        self, other: U | None, combiner: Callable[[T, U], R | None]
    ) -> Try[R]:
        return self.zip_with(Option.wrap(other), combiner)

    def filter(
        self,
        predicate: Callable[[T], bool],
        error: Exception | str = DEFAULT_ERROR_MESSAGE,
    ) -> Try[T]:
        """Keeps the value only if **predicate** returns `True`.

        Args:
            predicate (Callable[[T], bool]): The check to run on a successful value.
            error (Exception | str): Error carried when the check fails. A message is wrapped in a `PredicateRejectedError`.

        Returns:
            Try[T]: `self` if successful and accepted, a `Failure` otherwise.
                An existing failure keeps its original error; a raising predicate gives a failure carrying the raised error.

        Example:
        ```python
        >>> from pyotry import Try
        >>> Try.success(1).filter(lambda x: x % 2 == 0, "E2")
        Failure(error=PredicateRejectedError('E2'))
        >>> Try.success(2).filter(lambda x: x % 2 == 0, "E2")
        Success(value=2)

        ```
        """
        if self.is_failure():
            return self
        rejected = PredicateRejectedError(error) if isinstance(error, str) else error
        return _attempt(
            lambda v: self if predicate(v) else Failure(rejected), self.get_or_throw()
        )

    def catch_failure(self, fallback: T) -> Try[T]:
        return self if self.is_success() else Success(fallback)

    def catch_failure_with(self, supplier: Callable[[], T]) -> Try[T]:
        """Recovers a failure with the result of **supplier**; a raising **supplier** yields a new failure."""
        if self.is_success():
            return self
        return _attempt(cz.compose_left(supplier, Success))

    def do_on_next(self, func: Callable[[T], object]) -> Try[T]:
        if self.is_success():
            func(self.get_or_throw())
        return self

    def do_on_error(self, func: Callable[[Exception], object]) -> Try[T]:
        """Calls **func** with the stored error, if any, and returns the `Try` unchanged."""
        match self:
            case Failure(error):
                func(error)
        return self

    def as_try(self) -> Try[T]:
        return self

    def as_option(self) -> Option[T]:
        """Converts to an `Option`, discarding the error of a failure.

        Example:
        ```python
        >>> from pyotry import Try
        >>> Try.success(1).as_option()
        Some(value=1)
        >>> Try.failure("lost").as_option()
        NOTHING

        ```
        """
        if self.is_success():
            return Some(self.get_or_throw())
        return NOTHING


@dataclass(slots=True, frozen=True)
class Success[T](Try[T]):
    """Represents a successful value."""

    value: T

    def __repr__(self) -> str:
        return f"Success(value={get_config().value_repr(self.value)})"

    def is_success(self) -> TypeIs[Success[T]]:  # type: ignore[misc]
        return True

    def is_failure(self) -> TypeIs[Failure[T]]:  # type: ignore[misc]
        return False

    def get_or_throw(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class Failure[T](Try[T]):
    """Represents a failed computation and the error behind it."""

    error: Exception

    def __repr__(self) -> str:
        return f"Failure(error={get_config().value_repr(self.error)})"

    def is_success(self) -> TypeIs[Success[T]]:  # type: ignore[misc]
        return False

    def is_failure(self) -> TypeIs[Failure[T]]:  # type: ignore[misc]
        return True

    def get_or_throw(self) -> Never:
        raise self.error


