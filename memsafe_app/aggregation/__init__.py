"""
Aggregation module.

Summation over resizable sequences and over a fixed-size buffer held
under scoped acquisition/release.
"""

from .buffer import (
    FIXED_BUFFER_SIZE,
    Allocation,
    BufferAllocator,
    FixedBuffer,
    sum_fixed_buffer,
)
from .sums import sum_of_elements

__all__ = [
    "FIXED_BUFFER_SIZE",
    "Allocation",
    "BufferAllocator",
    "FixedBuffer",
    "sum_fixed_buffer",
    "sum_of_elements",
]
