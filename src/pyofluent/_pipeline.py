from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Self

from ._core import Pipeable
from ._results import Option


class Pipeline[T](ABC, Pipeable, Iterable[T]):
    """Chainable operations over a finite sequence of values.

    Both `EagerPipeline` and `LazyPipeline` implement this contract, and must produce the same results for the same source and chain of calls.

    They only differ in when the work is done:

    - `EagerPipeline` computes and stores a new sequence at every chain call.
    - `LazyPipeline` records the chain calls and runs them in a single pass when a terminal method is called.

    Chain methods (`filter`, `map`, `take`, `tail`) always return a new pipeline, and never modify the instance they are called on.

    Terminal methods (`to_list`, `first`, `last`, ...) return concrete values.

    Example:
    ```python
    >>> import pyofluent as pf
    >>> def negatives(pipeline: pf.Pipeline[int]) -> list[int]:
    ...     return pipeline.filter(lambda x: x < 0).to_list()
    >>> negatives(pf.EagerPipeline.from_([1, -2, 3, -4]))
    [-2, -4]
    >>> negatives(pf.LazyPipeline.from_([1, -2, 3, -4]))
    [-2, -4]

    ```
    """

    __slots__ = ()

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Self:
        """Keep only the elements for which **predicate** returns `True`, in their original order."""
        ...

    @abstractmethod
    def map[U](self, func: Callable[[T], U]) -> Pipeline[U]:
        """Apply **func** to each element, in order."""
        ...

    @abstractmethod
    def take(self, n: int) -> Self:
        """Keep the first **n** elements, or fewer if the pipeline is shorter.

        Raises:
            InvalidArgumentError: If **n** is negative.
        """
        ...

    @abstractmethod
    def tail(self, n: int) -> Self:
        """Keep the last **n** elements, or fewer if the pipeline is shorter.

        Raises:
            InvalidArgumentError: If **n** is negative.
        """
        ...

    @abstractmethod
    def to_list(self) -> list[T]:
        """Return the elements as a new `list`.

        This is a terminal operation that ends the chain.
        """
        ...

    def first(self) -> Option[T]:
        """Return the first element, if any.

        This is a terminal operation that ends the chain.

        Returns:
            Option[T]: `Some` of the first element, or `NONE` if the pipeline is empty.
        """
        return Option.from_list(self.take(1).to_list())

    def last(self) -> Option[T]:
        """Return the last element, if any.

        This is a terminal operation that ends the chain.

        Returns:
            Option[T]: `Some` of the last element, or `NONE` if the pipeline is empty.
        """
        return Option.from_list(self.tail(1).to_list())

    def length(self) -> int:
        """Return the number of elements.

        This is a terminal operation that ends the chain.

        Example:
        ```python
        >>> import pyofluent as pf
        >>> pf.LazyPipeline.from_(range(10)).filter(lambda x: x % 3 == 0).length()
        4

        ```
        """
        return len(self.to_list())

    def for_each(self, func: Callable[[T], object]) -> None:
        """Call **func** on each element, in order.

        This is a terminal operation that ends the chain.

        Example:
        ```python
        >>> import pyofluent as pf
        >>> pf.LazyPipeline.from_([1, 2, 3]).map(lambda x: x * 10).for_each(print)
        10
        20
        30

        ```
        """
        for item in self.to_list():
            func(item)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())
