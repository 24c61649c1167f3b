"""Summation over ordered integer sequences"""

from collections.abc import Iterable


def sum_of_elements(numbers: Iterable[int]) -> int:
    """
    Sum every element of an ordered sequence

    Elements are visited exactly once, front to back.

    Args:
        numbers: Ordered sequence of integers (may be empty)

    Returns:
        Arithmetic sum, 0 for an empty sequence
    """
    total = 0
    for number in numbers:
        total += number
    return total
