from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """A value that may be absent: either `Some(value)` or `NONE`.

    Terminal operations such as `Pipeline.first()` return an `Option` instead of raising on empty results.
    """

    __slots__ = ()

    @staticmethod
    def from_list[U](items: Sequence[U]) -> Option[U]:
        """Wrap the sole element of a zero-or-one element sequence.

        Args:
            items (Sequence[U]): A sequence holding at most one element.

        Returns:
            Option[U]: `Some` of the element, or `NONE` if **items** is empty.

        Example:
        ```python
        >>> from pyofluent import Option
        >>> Option.from_list([7])
        Some(value=7)
        >>> Option.from_list([])
        NONE

        ```
        """
        match items:
            case [value]:
                return Some(value)
            case _:
                return NONE

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> from pyofluent import Some, NONE
        >>> Some(2).is_some()
        True
        >>> NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is a `NONE` value."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> from pyofluent import Some, NONE
        >>> Some("car").unwrap()
        'car'
        >>> NONE.unwrap()
        Traceback (most recent call last):
            ...
        pyofluent._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with a provided message.

        Args:
            msg (str): The message to include in the exception if the option is `NONE`.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Example:
        ```python
        >>> from pyofluent import Some, NONE
        >>> Some("car").unwrap_or("bike")
        'car'
        >>> NONE.unwrap_or("bike")
        'bike'

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from a function."""
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value.

        Example:
        ```python
        >>> from pyofluent import Some, NONE
        >>> Some("Hello, World!").map(len)
        Some(value=13)
        >>> NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Calls a function returning an `Option` if the option is `Some`, otherwise returns `NONE`."""
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option if it contains a value, otherwise calls a function and returns the result."""
        return self if self.is_some() else f()

    def inspect(self, f: Callable[[T], object]) -> Option[T]:
        """Calls a function with the contained value if present, and returns the option unchanged.

        Args:
            f (Callable[[T], object]): Function called for its side effects.

        Returns:
            Option[T]: The option itself.

        Example:
        ```python
        >>> from pyofluent import Some, NONE
        >>> Some(4).inspect(print)
        4
        Some(value=4)
        >>> NONE.inspect(print)
        NONE

        ```
        """
        if self.is_some():
            f(self.unwrap())
        return self


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
