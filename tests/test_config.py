"""Tests for the display configuration."""

from collections.abc import Iterator

import pytest

import pyotry as pt


@pytest.fixture
def config() -> Iterator[pt.Config]:
    cfg = pt.get_config()
    saved = (cfg.max_repr_length, cfg.repr_depth)
    yield cfg
    cfg.max_repr_length, cfg.repr_depth = saved


def test_shared_instance() -> None:
    """Test get_config always returns the same object."""
    assert pt.get_config() is pt.get_config()


def test_truncation(config: pt.Config) -> None:
    """Test long payloads are truncated in reprs."""
    config.max_repr_length = 4
    assert repr(pt.Some(123456)) == "Some(value=12...56)"
    assert repr(pt.Success("abc")) == "Success(value='a...c')"
    assert repr(pt.Some(12)) == "Some(value=12)"


def test_depth(config: pt.Config) -> None:
    """Test nested payloads are elided beyond repr_depth."""
    config.repr_depth = 1
    assert repr(pt.Some([[1]])) == "Some(value=[[...]])"


def test_long_payload_on_one_line(config: pt.Config) -> None:
    """Test multi-line pretty output is joined into one line."""
    config.max_repr_length = 1000
    text = repr(pt.Some(list(range(40))))
    assert "\n" not in text
    assert text.startswith("Some(value=[0, 1, 2")


def test_config_does_not_change_semantics(config: pt.Config) -> None:
    """Test containers behave identically whatever the display settings."""
    config.max_repr_length = 1
    assert pt.Some(123).get_or_throw() == 123


def test_truncation_keeps_both_ends(config: pt.Config) -> None:
    """Test truncated payloads keep their closing quote or bracket."""
    config.max_repr_length = 10
    assert repr(pt.Some("a long string")) == "Some(value='a lo...ring')"
    text = repr(pt.Some(list(range(40))))
    assert text.startswith("Some(value=[0, ")
    assert text.endswith("39])")
    assert "..." in text
