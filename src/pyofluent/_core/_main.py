from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Return `func(self, *args, **kwargs)`.

        Lets a pipeline end in any callable without leaving the chain.

        Args:
            func (Callable[Concatenate[Self, P], R]): Called with the pipeline first.
            *args (P.args): Extra positional arguments for **func**.
            **kwargs (P.kwargs): Extra keyword arguments for **func**.

        Returns:
            R: Whatever **func** returns.

        Example:
        ```python
        >>> import pyofluent as pf
        >>> pf.EagerPipeline.from_([3, 1, 2]).into(sorted)
        [1, 2, 3]

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Call **func** with the pipeline, ignore its result and return the pipeline.

        Args:
            func (Callable[Concatenate[Self, P], object]): Called with the pipeline first.
            *args (P.args): Extra positional arguments for **func**.
            **kwargs (P.kwargs): Extra keyword arguments for **func**.

        Returns:
            Self: This same pipeline.

        Example:
        ```python
        >>> import pyofluent as pf
        >>> pf.EagerPipeline.from_([1, 2, 3, 4]).inspect(print).last()
        EagerPipeline(1, 2, 3, 4)
        Some(value=4)

        ```
        """
        func(self, *args, **kwargs)
        return self
