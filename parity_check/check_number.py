"""Describe whether an integer is even or odd."""

from numbers import Integral

EVEN_MESSAGE = "The number is even."
ODD_MESSAGE = "The number is odd."


def check_number(num: int) -> str:
    """Return a sentence stating whether ``num`` is even or odd.

    Raises TypeError if ``num`` is not an integer.
    """
    if not isinstance(num, Integral):
        raise TypeError(f"expected an integer, got {type(num).__name__}")
    return EVEN_MESSAGE if num % 2 == 0 else ODD_MESSAGE