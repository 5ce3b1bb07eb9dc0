"""Tests for structural pattern matching over container variants."""

from __future__ import annotations

import pytest

from pyotry import NOTHING, Failure, NothingOption, Option, Some, Success, Try


def test_option_pattern_matching() -> None:
    """Test Option pattern matching."""

    def _describe(opt: Option[int]) -> str:
        match opt:
            case Some(value):
                return f"some {value}"
            case NothingOption():
                return "nothing"
            case _:
                pytest.fail("Should not reach here")

    assert _describe(Option.some(1)) == "some 1"
    assert _describe(NOTHING) == "nothing"


def test_try_pattern_matching() -> None:
    """Test Try pattern matching."""
    match Try.success(1):
        case Success(value):
            assert value == 1
        case Failure():
            pytest.fail("Should not reach here")

    match Try.failure("Error"):
        case Success():
            pytest.fail("Should not reach here")
        case Failure(error):
            assert str(error) == "Error"

    match Try.failure(RuntimeError("Throwable!")):
        case Failure(RuntimeError() as error):
            assert str(error) == "Throwable!"
        case _:
            pytest.fail("Should not reach here")


def test_nested_pattern_matching() -> None:
    """Test nested Try and Option patterns."""
    results: list[Try[Option[int]]] = [
        Try.success(Option.some(10)),
        Try.success(NOTHING),
        Try.failure("error occurred"),
    ]
    seen: list[str] = []
    for result in results:
        match result:
            case Success(Some(value)):
                seen.append(f"Success(Some({value}))")
            case Success(NothingOption()):
                seen.append("Success(NOTHING)")
            case Failure(error):
                seen.append(f"Failure({error})")
    assert seen == ["Success(Some(10))", "Success(NOTHING)", "Failure(error occurred)"]
