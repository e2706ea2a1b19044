from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable, MutableSequence
from typing import Any

from ._core import check_count
from ._ops import Filter, Operation, Queued, Take, TakeLast, Transform
from ._pipeline import Pipeline

logger = logging.getLogger(__name__)


class LazyPipeline[T](Pipeline[T]):
    """A `Pipeline` that defers all work until a terminal method is called.

    Chain calls only record an operation, in constant time, without reading the source.

    A terminal call (`to_list`, `first`, `last`, ...) then reads the source once, passing each element through all the recorded operations before pulling the next one.

    `take` stops the reading as soon as enough elements made it through, so it also works on infinite sources.

    `tail` is the exception: the last elements can only be known once the input is exhausted, so it requires a finite source, and buffers at most **n** elements.

    The source is kept by reference and never modified.

    If it's a one-shot `Iterator`, the first terminal call consumes it.

    Args:
        source (Iterable[Any]): The elements to read from.
        queued (Queued | None): The operations recorded so far, if any.

    Example:
    ```python
    >>> import pyofluent as pf
    >>> data = [1, -61, 14, -22, 18, -87, 6, 64, -82, 26, -98, 97, 45, 23, 2, -68, 45]
    >>> (
    ...     pf.LazyPipeline.from_(data)
    ...     .filter(lambda x: x > 0)
    ...     .take(4)
    ...     .tail(2)
    ...     .map(lambda x: f"String[{x}]")
    ...     .to_list()
    ... )
    ['String[18]', 'String[6]']
    >>> pf.LazyPipeline.from_(data).filter(lambda x: x < 0).take(2).last()
    Some(value=-22)

    ```
    """

    __slots__ = ("_queued", "_source")

    def __init__(self, source: Iterable[Any], queued: Queued | None = None) -> None:
        self._source = source
        self._queued = queued

    @staticmethod
    def from_[U](source: Iterable[U]) -> LazyPipeline[U]:
        """Create a `LazyPipeline` reading from **source**.

        Nothing is read until a terminal method is called.

        Args:
            source (Iterable[U]): The elements to read from.

        Returns:
            LazyPipeline[U]: A new pipeline without any operation.

        Example:
        ```python
        >>> import itertools
        >>> import pyofluent as pf
        >>> pf.LazyPipeline.from_(itertools.count()).filter(lambda x: x % 2 == 0).take(3).to_list()
        [0, 2, 4]

        ```
        """
        return LazyPipeline(source)

    def __repr__(self) -> str:
        queued = 0 if self._queued is None else len(self._queued)
        return f"{self.__class__.__name__}({type(self._source).__name__}, ops={queued})"

    def _push[U](self, op: Operation) -> LazyPipeline[U]:
        match self._queued:
            case None:
                return LazyPipeline(self._source, Queued(op))
            case queued:
                return LazyPipeline(self._source, queued.push(op))

    def filter(self, predicate: Callable[[T], bool]) -> LazyPipeline[T]:
        return self._push(Filter(predicate))

    def map[U](self, func: Callable[[T], U]) -> LazyPipeline[U]:
        return self._push(Transform(func))

    def take(self, n: int) -> LazyPipeline[T]:
        """Keep the first **n** elements, or fewer if the pipeline is shorter.

        **n** is checked right away, before anything is evaluated.

        Args:
            n (int): Number of elements to keep.

        Returns:
            LazyPipeline[T]: A new pipeline with the limit recorded.

        Raises:
            InvalidArgumentError: If **n** is negative.
        """
        return self._push(Take(check_count(n)))

    def tail(self, n: int) -> LazyPipeline[T]:
        """Keep the last **n** elements, or fewer if the pipeline is shorter.

        **n** is checked right away, before anything is evaluated.

        Args:
            n (int): Number of elements to keep.

        Returns:
            LazyPipeline[T]: A new pipeline with the limit recorded.

        Raises:
            InvalidArgumentError: If **n** is negative.
        """
        return self._push(TakeLast(check_count(n)))

    def to_list(self) -> list[T]:
        """Run the recorded operations over the source and return the result as a new `list`.

        This is a terminal operation that ends the chain.

        Returns:
            list[T]: The resulting elements, in order.
        """
        ops = [] if self._queued is None else self._queued.in_order()
        return _evaluate(self._source, ops)


def _evaluate(source: Iterable[Any], ops: list[Operation]) -> list[Any]:
    """Split **ops** at each `TakeLast` and run every segment as one fused pass.

    The bounded buffer filled by a segment is the input of the next one.
    """
    barriers = sum(1 for op in ops if isinstance(op, TakeLast))
    logger.debug(
        "Evaluating %d queued operation(s) in %d segment(s)", len(ops), barriers + 1
    )
    stream: Iterable[Any] = source
    segment: list[Operation] = []
    for op in ops:
        match op:
            case TakeLast(n):
                buffer: deque[Any] = deque(maxlen=n)
                _fused_pass(stream, segment, buffer)
                stream = buffer
                segment = []
            case _:
                segment.append(op)
    result: list[Any] = []
    _fused_pass(stream, segment, result)
    return result


def _fused_pass(
    stream: Iterable[Any], stages: list[Operation], sink: MutableSequence[Any]
) -> None:
    """Pull elements one at a time through **stages**, appending survivors to **sink**.

    Stops pulling as soon as a `Take` stage can't let any more element through.
    """
    remaining = {idx: op.n for idx, op in enumerate(stages) if isinstance(op, Take)}
    if 0 in remaining.values():
        return
    for item in stream:
        saturated = False
        for idx, stage in enumerate(stages):
            match stage:
                case Filter(predicate):
                    if not predicate(item):
                        break
                case Transform(func):
                    item = func(item)
                case Take():
                    remaining[idx] -= 1
                    saturated = saturated or remaining[idx] == 0
        else:
            sink.append(item)
        if saturated:
            return
