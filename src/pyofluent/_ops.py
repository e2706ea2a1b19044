"""Operations queued by `LazyPipeline`, applied only when a terminal method runs."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class Filter[T]:
    """Keep only the elements for which **predicate** returns `True`."""

    predicate: Callable[[T], bool]


@dataclass(slots=True, frozen=True)
class Transform[T, U]:
    """Replace each element by the result of **func**."""

    func: Callable[[T], U]


@dataclass(slots=True, frozen=True)
class Take:
    """Keep at most the first **n** elements reaching this operation."""

    n: int


@dataclass(slots=True, frozen=True)
class TakeLast:
    """Keep at most the last **n** elements reaching this operation.

    The whole upstream input has to be read before anything is produced.
    """

    n: int


type Operation = Filter[Any] | Transform[Any, Any] | Take | TakeLast


@dataclass(slots=True, frozen=True)
class Queued:
    """A node of the persistent operations list, newest operation first.

    Appending shares every older node, so queuing an operation never copies the list.
    """

    op: Operation
    previous: Queued | None = None

    def push(self, op: Operation) -> Queued:
        return Queued(op, self)

    def __len__(self) -> int:
        return sum(1 for _ in self._newest_first())

    def _newest_first(self) -> Iterator[Operation]:
        node: Queued | None = self
        while node is not None:
            yield node.op
            node = node.previous

    def in_order(self) -> list[Operation]:
        """Return the queued operations, oldest first."""
        ops = list(self._newest_first())
        ops.reverse()
        return ops
