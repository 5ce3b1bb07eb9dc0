"""Tests for slot usage in pyotry classes."""

import pyotry as pt


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(pt.Some(42))
    assert _check_slots(pt.NothingOption())
    assert _check_slots(pt.Success(42))
    assert _check_slots(pt.Failure(ValueError("x")))
    assert _check_slots(pt.get_config())
