from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, overload

import cytoolz as cz
import more_itertools as mit

from ._core import check_count, get_config
from ._pipeline import Pipeline
from ._results import NONE, Option, Some


def _convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class EagerPipeline[T](Pipeline[T], Sequence[T]):
    """A `Pipeline` that computes every step as soon as it is chained.

    Each chain call builds a new tuple from the current one, so the intermediate results are held in memory and every step is a full pass over the data.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be indexed and passed to any function expecting a standard immutable sequence.

    If you already have a tuple, simply pass it to the constructor, without runtime checks.

    Otherwise, use the `from_` static method, which copies any `Iterable`, or unpacked values.

    Args:
        data (tuple[T, ...]): The elements of the pipeline.

    Example:
    ```python
    >>> import pyofluent as pf
    >>> data = [1, -61, 14, -22, 18, -87, 6, 64, -82, 26, -98, 97, 45, 23, 2, -68, 45]
    >>> pf.EagerPipeline.from_(data).filter(lambda x: x < 0).take(3).to_list()
    [-61, -22, -87]
    >>> pf.EagerPipeline.from_(data).filter(lambda x: x > 0).tail(2).to_list()
    [23, 45]

    ```
    """

    _inner: tuple[T, ...]

    __slots__ = ("_inner",)

    def __init__(self, data: tuple[T, ...]) -> None:
        self._inner = data

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> EagerPipeline[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> EagerPipeline[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> EagerPipeline[U]:
        """Create an `EagerPipeline` from a copy of an `Iterable`, or from unpacked values.

        Later changes to **data** are not seen by the pipeline.

        Args:
            data (Iterable[U] | U): Iterable to copy, or a single value.
            *more_data (U): Additional values to include if **data** is not an Iterable.

        Returns:
            EagerPipeline[U]: A new pipeline over the copied elements.

        Example:
        ```python
        >>> import pyofluent as pf
        >>> source = [1, 2]
        >>> pipeline = pf.EagerPipeline.from_(source)
        >>> source.append(3)
        >>> pipeline
        EagerPipeline(1, 2)
        >>> pf.EagerPipeline.from_(1, 2, 3)
        EagerPipeline(1, 2, 3)

        ```
        """
        return EagerPipeline(tuple(_convert_data(data, *more_data)))

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice[Any, Any, Any]) -> T | Sequence[T]:
        return self._inner.__getitem__(index)

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def filter(self, predicate: Callable[[T], bool]) -> EagerPipeline[T]:
        return EagerPipeline(tuple(filter(predicate, self._inner)))

    def map[U](self, func: Callable[[T], U]) -> EagerPipeline[U]:
        """Apply **func** to each element, in order.

        Args:
            func (Callable[[T], U]): Function to apply to each element.

        Returns:
            EagerPipeline[U]: A new pipeline of the transformed elements.

        Example:
        ```python
        >>> import pyofluent as pf
        >>> pf.EagerPipeline.from_([-61, -22]).map(lambda x: f"String[{x}]").to_list()
        ['String[-61]', 'String[-22]']

        ```
        """
        return EagerPipeline(tuple(map(func, self._inner)))

    def take(self, n: int) -> EagerPipeline[T]:
        """Keep the first **n** elements, or fewer if the pipeline is shorter.

        Args:
            n (int): Number of elements to keep.

        Returns:
            EagerPipeline[T]: A new pipeline of at most **n** elements.

        Raises:
            InvalidArgumentError: If **n** is negative.

        Example:
        ```python
        >>> import pyofluent as pf
        >>> pf.EagerPipeline.from_([1, 2, 3]).take(2)
        EagerPipeline(1, 2)
        >>> pf.EagerPipeline.from_([1, 2, 3]).take(5)
        EagerPipeline(1, 2, 3)

        ```
        """
        return EagerPipeline(tuple(cz.itertoolz.take(check_count(n), self._inner)))

    def tail(self, n: int) -> EagerPipeline[T]:
        """Keep the last **n** elements, or fewer if the pipeline is shorter.

        Args:
            n (int): Number of elements to keep.

        Returns:
            EagerPipeline[T]: A new pipeline of at most **n** elements.

        Raises:
            InvalidArgumentError: If **n** is negative.

        Example:
        ```python
        >>> import pyofluent as pf
        >>> pf.EagerPipeline.from_([1, 2, 3]).tail(2)
        EagerPipeline(2, 3)
        >>> pf.EagerPipeline.from_([1, 2, 3]).tail(0)
        EagerPipeline()

        ```
        """
        return EagerPipeline(tuple(mit.tail(check_count(n), self._inner)))

    def to_list(self) -> list[T]:
        return list(self._inner)

    def first(self) -> Option[T]:
        match self._inner:
            case (head, *_):
                return Some(head)
            case _:
                return NONE

    def last(self) -> Option[T]:
        match self._inner:
            case (*_, end):
                return Some(end)
            case _:
                return NONE
