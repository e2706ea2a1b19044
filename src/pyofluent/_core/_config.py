from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, fields, replace
from typing import Any

import cytoolz as cz

from ._errors import check_count


@dataclass(slots=True, frozen=True)
class PyoConfig:
    """Process-wide settings of pyofluent.

    Args:
        max_repr_items (int): Number of elements shown by `repr` before the output is truncated with `...`.
    """

    max_repr_items: int = 20

    def iter_repr(self, data: Collection[Any]) -> str:
        """Format the elements of **data** as a comma separated string, truncated to `max_repr_items`.

        Args:
            data (Collection[Any]): The elements to format.

        Returns:
            str: The formatted elements.

        Example:
        ```python
        >>> from pyofluent._core import PyoConfig
        >>> PyoConfig(max_repr_items=3).iter_repr(range(10))
        '0, 1, 2, ...'
        >>> PyoConfig().iter_repr(())
        ''

        ```
        """
        shown = cz.itertoolz.take(self.max_repr_items, data)
        suffix = ", ..." if len(data) > self.max_repr_items else ""
        return ", ".join(map(repr, shown)) + suffix


_CONFIG = PyoConfig()


def get_config() -> PyoConfig:
    """Get the current configuration.

    Returns:
        PyoConfig: The active configuration.
    """
    return _CONFIG


def set_config(**changes: Any) -> PyoConfig:  # noqa: ANN401
    """Replace fields of the current configuration.

    Args:
        **changes (Any): Field names and their new values.

    Returns:
        PyoConfig: The new active configuration.

    Raises:
        TypeError: If a name is not a field of `PyoConfig`.
        InvalidArgumentError: If `max_repr_items` is negative.

    Example:
    ```python
    >>> import pyofluent as pf
    >>> previous = pf.get_config()
    >>> pf.set_config(max_repr_items=2)
    PyoConfig(max_repr_items=2)
    >>> pf.EagerPipeline.from_([1, 2, 3])
    EagerPipeline(1, 2, ...)
    >>> pf.set_config(max_repr_items=previous.max_repr_items)
    PyoConfig(max_repr_items=20)

    ```
    """
    global _CONFIG  # noqa: PLW0603

    known = {f.name for f in fields(PyoConfig)}
    unknown = changes.keys() - known
    if unknown:
        msg = f"unknown configuration field(s): {', '.join(sorted(unknown))}"
        raise TypeError(msg)
    if "max_repr_items" in changes:
        check_count(changes["max_repr_items"])
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
