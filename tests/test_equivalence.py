"""Tests for the behaviour shared by EagerPipeline and LazyPipeline."""

from collections.abc import Callable, Iterable

import pytest

import pyofluent as pf

type Factory = Callable[[Iterable[int]], pf.Pipeline[int]]
type Chain = Callable[[pf.Pipeline[int]], pf.Pipeline[object]]

FACTORIES: dict[str, Factory] = {
    "eager": pf.EagerPipeline.from_,
    "lazy": pf.LazyPipeline.from_,
}

SOURCES: dict[str, list[int]] = {
    "empty": [],
    "single": [7],
    "sample": [1, -61, 14, -22, 18, -87, 6, 64, -82, 26, -98, 97, 45, 23, 2, -68, 45],
    "range": list(range(-10, 30)),
}

CHAINS: dict[str, Chain] = {
    "identity": lambda p: p,
    "filter": lambda p: p.filter(lambda x: x % 3 == 0),
    "map": lambda p: p.map(lambda x: x * x),
    "map_changes_type": lambda p: p.map(str).filter(lambda s: s.startswith("-")),
    "take": lambda p: p.take(4),
    "tail": lambda p: p.tail(4),
    "take_zero": lambda p: p.filter(lambda x: x > 0).take(0),
    "tail_zero": lambda p: p.map(abs).tail(0),
    "filter_take_tail_map": lambda p: p.filter(lambda x: x > 0).take(4).tail(2).map(lambda x: x + 1),
    "tail_then_filter": lambda p: p.tail(10).filter(lambda x: x % 2 == 0),
    "map_take_filter": lambda p: p.map(lambda x: x - 1).take(6).filter(lambda x: x < 0),
    "nested_limits": lambda p: p.take(12).tail(8).take(5).tail(3),
    "oversized": lambda p: p.take(1_000).tail(1_000),
    "map_then_filter_on_new_type": lambda p: p.map(lambda x: (x, x % 2)).filter(lambda t: t[1] == 0).map(lambda t: t[0]),
}


@pytest.fixture(params=list(FACTORIES.values()), ids=list(FACTORIES))
def factory(request: pytest.FixtureRequest) -> Factory:
    """Each pipeline strategy."""
    return request.param


@pytest.mark.parametrize("source", list(SOURCES.values()), ids=list(SOURCES))
@pytest.mark.parametrize("chain", list(CHAINS.values()), ids=list(CHAINS))
def test_eager_and_lazy_are_equivalent(source: list[int], chain: Chain) -> None:
    """Test that both strategies return the same list for the same chain."""
    eager = chain(pf.EagerPipeline.from_(source))
    lazy = chain(pf.LazyPipeline.from_(source))
    assert eager.to_list() == lazy.to_list()
    assert eager.first() == lazy.first()
    assert eager.last() == lazy.last()


@pytest.mark.parametrize("source", list(SOURCES.values()), ids=list(SOURCES))
def test_filter_preserves_order(factory: Factory, source: list[int]) -> None:
    """Test that filter returns the ordered subsequence of matching elements."""

    def _predicate(x: int) -> bool:
        return x % 2 == 0

    assert factory(source).filter(_predicate).to_list() == [x for x in source if _predicate(x)]


@pytest.mark.parametrize("source", list(SOURCES.values()), ids=list(SOURCES))
def test_map_preserves_length_and_positions(factory: Factory, source: list[int]) -> None:
    """Test that map applies the function element wise."""
    result = factory(source).map(lambda x: x * 3 - 1).to_list()
    assert len(result) == len(source)
    assert all(result[i] == source[i] * 3 - 1 for i in range(len(source)))


@pytest.mark.parametrize("n", [0, 1, 3, 17, 50])
def test_slices(factory: Factory, sample: list[int], n: int) -> None:
    """Test that take/tail return the first/last min(n, len) elements in order."""
    assert factory(sample).take(n).to_list() == sample[:n]
    assert factory(sample).tail(n).to_list() == sample[len(sample) - min(n, len(sample)) :]


@pytest.mark.parametrize("method", ["take", "tail"])
def test_negative_count(factory: Factory, method: str) -> None:
    """Test that negative counts are rejected by both strategies."""
    with pytest.raises(pf.InvalidArgumentError):
        getattr(factory([1, 2]), method)(-1)


def test_first_three_negatives(factory: Factory, sample: list[int]) -> None:
    """Test scenario: filter(x < 0).take(3)."""
    assert factory(sample).filter(lambda x: x < 0).take(3).to_list() == [-61, -22, -87]


def test_last_two_positives(factory: Factory, sample: list[int]) -> None:
    """Test scenario: filter(x > 0).tail(2)."""
    assert factory(sample).filter(lambda x: x > 0).tail(2).to_list() == [23, 45]


def test_first_even(factory: Factory, sample: list[int]) -> None:
    """Test scenario: filter(x % 2 == 0).first()."""
    assert factory(sample).filter(lambda x: x % 2 == 0).first() == pf.Some(14)


def test_last_two_of_first_four_positives_as_strings(factory: Factory, sample: list[int]) -> None:
    """Test scenario: filter(x > 0).take(4).tail(2).map(to_string)."""
    result = (
        factory(sample)
        .filter(lambda x: x > 0)
        .take(4)
        .tail(2)
        .map(lambda x: f"String[{x}]")
        .to_list()
    )
    assert result == ["String[18]", "String[6]"]


def test_last_of_first_two_negatives(factory: Factory, sample: list[int]) -> None:
    """Test scenario: filter(x < 0).take(2).last()."""
    assert factory(sample).filter(lambda x: x < 0).take(2).last() == pf.Some(-22)


def test_source_is_never_mutated(factory: Factory, sample: list[int]) -> None:
    """Test that running a full chain leaves the source untouched."""
    before = list(sample)
    factory(sample).filter(lambda x: x > 0).map(lambda x: -x).tail(3).to_list()
    assert sample == before


def test_polymorphic_use(factory: Factory) -> None:
    """Test that callers can depend on the shared contract only."""

    def _describe(pipeline: pf.Pipeline[int]) -> str:
        return pipeline.map(str).into(lambda p: "-".join(p))

    pipeline = factory([1, 2, 3])
    assert isinstance(pipeline, pf.Pipeline)
    assert _describe(pipeline) == "1-2-3"
