"""Tests for cross-conversions between Option and Try."""

from dataclasses import dataclass

import pyotry as pt


@dataclass
class Cell:
    """A user type that only knows how to become an Option."""

    content: int | None

    def as_option(self) -> pt.Option[int]:
        return pt.Option.wrap(self.content)


@dataclass
class Job:
    """A user type that only knows how to become a Try."""

    output: int | None

    def as_try(self) -> pt.Try[int]:
        return pt.Try.wrap(self.output, "job produced nothing")


def test_identity_conversions() -> None:
    """Test as_option on Option and as_try on Try return self."""
    o1 = pt.Option.some(1)
    t1 = pt.Try.success(1)
    assert o1.as_option() is o1
    assert pt.NOTHING.as_option() is pt.NOTHING
    assert t1.as_try() is t1


def test_round_trip() -> None:
    """Test Option -> Try -> Option keeps the value."""
    assert pt.Option.some(1).as_try().as_option().get_or_throw() == 1
    assert pt.Option.some(1).as_try().get_or_throw() == 1
    assert pt.Option.nothing().as_try().is_failure()
    assert pt.Option.nothing().as_try().as_option().is_nothing()


def test_asymmetry() -> None:
    """Test Try -> Option drops the error while Option -> Try manufactures one."""
    assert pt.Try.success(1).as_option().get_or_throw() == 1
    assert pt.Try.failure(KeyError("lost")).as_option().is_nothing()
    manufactured = pt.Option.nothing().as_try()
    assert isinstance(manufactured, pt.Failure)
    assert isinstance(manufactured.error, pt.ValueUnavailableError)


def test_protocols_are_structural() -> None:
    """Test both containers and user types satisfy the protocols."""
    for container in (pt.Option.some(1), pt.NOTHING, pt.Try.success(1), pt.Try.failure()):
        assert isinstance(container, pt.OptionConvertible)
        assert isinstance(container, pt.TryConvertible)
    assert isinstance(Cell(1), pt.OptionConvertible)
    assert not isinstance(Cell(1), pt.TryConvertible)
    assert isinstance(Job(1), pt.TryConvertible)
    assert not isinstance(1, pt.OptionConvertible)


def test_custom_option_convertible() -> None:
    """Test user types take part in Option combinators."""
    assert pt.Option.zip([Cell(1), pt.Option.some(2), pt.Try.success(3)], sum).get_or_throw() == 6
    assert pt.Option.zip([Cell(1), Cell(None)], sum).is_nothing()
    assert pt.Option.nothing().some_or_else(Cell(4)).get_or_throw() == 4
    assert pt.Option.some(1).zip_with(Cell(2), lambda a, b: a * b).get_or_throw() == 2
    assert pt.Option.some(1).flat_map(Cell).get_or_throw() == 1


def test_custom_try_convertible() -> None:
    """Test user types take part in Try combinators."""
    assert pt.Try.zip_args(sum, Job(1), pt.Try.success(1)).get_or_throw() == 2
    failed = pt.Try.zip_args(sum, pt.Try.success(1), Job(None))
    assert isinstance(failed, pt.Failure)
    assert str(failed.error) == "job produced nothing"
    assert pt.Try.failure().success_or_else(Job(7)).get_or_throw() == 7
    assert pt.Try.success(2).flat_map(Job).get_or_throw() == 2


def test_into() -> None:
    """Test piping a container into a function."""

    def describe(opt: pt.Option[int], unit: str) -> str:
        return opt.map(lambda v: f"{v} {unit}").get_or_else("unknown")

    assert pt.Option.some(3).into(describe, "kg") == "3 kg"
    assert pt.Try.failure().into(lambda t: t.is_failure())
