class InvalidArgumentError(ValueError):
    """Raised when a pipeline operation receives an argument outside of its domain."""


def check_count(n: int) -> int:
    """Return **n** unchanged, or raise if it can't be used as an element count.

    Args:
        n (int): The requested number of elements.

    Returns:
        int: The validated count.

    Raises:
        InvalidArgumentError: If **n** is negative.

    Example:
    ```python
    >>> from pyofluent._core import check_count
    >>> check_count(3)
    3
    >>> check_count(-1)
    Traceback (most recent call last):
        ...
    pyofluent._core._errors.InvalidArgumentError: expected a non-negative count, got -1

    ```
    """
    if n < 0:
        msg = f"expected a non-negative count, got {n}"
        raise InvalidArgumentError(msg)
    return n
