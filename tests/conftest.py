"""Shared fixtures for pyofluent tests."""

from collections.abc import Iterator

import pytest

import pyofluent as pf


@pytest.fixture
def sample() -> list[int]:
    """The integer list used across the demonstration scenarios."""
    return [1, -61, 14, -22, 18, -87, 6, 64, -82, 26, -98, 97, 45, 23, 2, -68, 45]


@pytest.fixture(autouse=True)
def _restore_config() -> Iterator[None]:
    previous = pf.get_config()
    yield
    pf.set_config(max_repr_items=previous.max_repr_items)
