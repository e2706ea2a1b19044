"""Tests for Option values returned by terminal operations."""

import pytest

import pyofluent as pf


def _describe(option: pf.Option[int]) -> str:
    match option:
        case pf.Some(value):
            return f"some {value}"
        case _:
            return "none"


def test_pattern_matching() -> None:
    """Test that Option variants can be matched structurally."""
    assert _describe(pf.LazyPipeline.from_([3, 4]).first()) == "some 3"
    assert _describe(pf.EagerPipeline.from_([]).last()) == "none"


def test_none_is_a_singleton_value() -> None:
    """Test NONE equality and representation."""
    assert pf.NONE == pf.NoneOption()
    assert repr(pf.NONE) == "NONE"
    assert pf.NONE.is_none()
    assert not pf.NONE.is_some()


def test_unwrap_none_raises() -> None:
    """Test that unwrapping an absent value raises OptionUnwrapError."""
    with pytest.raises(pf.OptionUnwrapError):
        pf.NONE.unwrap()
    with pytest.raises(pf.OptionUnwrapError, match="no even number"):
        pf.NONE.expect("no even number")


def test_defaults() -> None:
    """Test unwrap_or and unwrap_or_else."""
    assert pf.Some(1).unwrap_or(5) == 1
    assert pf.NONE.unwrap_or(5) == 5
    assert pf.NONE.unwrap_or_else(lambda: 6) == 6
    assert pf.Some(2).expect("present") == 2


def test_combinators() -> None:
    """Test map, and_then and or_else."""
    assert pf.Some(2).map(lambda x: x * 2) == pf.Some(4)
    assert pf.Some(2).and_then(lambda _: pf.NONE) == pf.NONE
    assert pf.NONE.or_else(lambda: pf.Some(9)) == pf.Some(9)
    assert pf.Some(1).or_else(lambda: pf.Some(9)) == pf.Some(1)


def test_inspect_only_calls_on_present_values() -> None:
    """Test that inspect behaves like an if-present callback."""
    seen: list[int] = []
    assert pf.Some(3).inspect(seen.append) == pf.Some(3)
    assert pf.NONE.inspect(seen.append) == pf.NONE
    assert seen == [3]


def test_from_list() -> None:
    """Test building an Option from zero or one element."""
    assert pf.Option.from_list([8]) == pf.Some(8)
    assert pf.Option.from_list([]) == pf.NONE
