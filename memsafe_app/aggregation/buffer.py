"""
Fixed-size integer buffer with scoped acquisition and release.

Storage is handed out by a BufferAllocator that keeps a ledger of live
allocations, so leaks and double releases are detectable. FixedBuffer is a
context manager: the buffer is acquired on entry and released exactly once
on exit, whichever path leaves the block.
"""

from array import array
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

from ..errors import (
    BufferAccessError,
    BufferBoundsError,
    BufferLeakError,
    BufferSizeError,
    DoubleReleaseError,
)
from ..logging.config import get_lifecycle_logger, log_buffer_transition
from .sums import sum_of_elements

FIXED_BUFFER_SIZE = 5

# Signed 64-bit storage
STORAGE_TYPECODE = "q"
STORAGE_MIN = -(2 ** 63)
STORAGE_MAX = 2 ** 63 - 1

logger = get_lifecycle_logger(__name__)


@dataclass
class Allocation:
    """Ledger entry for one buffer handed out by an allocator."""
    handle: int
    storage: array
    released: bool = False


class BufferAllocator:
    """Issues contiguous integer buffers and counts acquisitions and releases."""

    def __init__(self) -> None:
        self._live: dict[int, Allocation] = {}
        self._next_handle = 1
        self.acquired = 0
        self.released = 0

    @property
    def outstanding(self) -> list[int]:
        """Handles that have been allocated but not yet released."""
        return sorted(self._live)

    def allocate(self, size: int) -> Allocation:
        if size <= 0:
            raise BufferSizeError(
                f"Buffer size must be positive, got {size}",
                actual=size
            )

        allocation = Allocation(
            handle=self._next_handle,
            storage=array(STORAGE_TYPECODE, [0] * size),
        )
        self._next_handle += 1
        self._live[allocation.handle] = allocation
        self.acquired += 1

        log_buffer_transition(logger, allocation.handle, "free", "held", "allocate",
                              context={"size": size})
        return allocation

    def release(self, allocation: Allocation) -> None:
        if allocation.released or self._live.get(allocation.handle) is not allocation:
            raise DoubleReleaseError(
                f"Allocation {allocation.handle} is not live",
                handle=allocation.handle,
                context={"released": allocation.released}
            )

        del self._live[allocation.handle]
        allocation.released = True
        self.released += 1

        log_buffer_transition(logger, allocation.handle, "held", "released", "release")

    def assert_no_leaks(self) -> None:
        """Raise BufferLeakError if any allocation is still live."""
        if self._live:
            raise BufferLeakError(
                f"{len(self._live)} buffer(s) never released",
                handles=self.outstanding
            )


class FixedBuffer:
    """
    Owns exactly FIXED_BUFFER_SIZE integers for the duration of a with-block.

    Contents are only readable while the buffer is held; touching them
    before entry or after release raises BufferAccessError.
    """

    def __init__(self, values: Sequence[int], allocator: Optional[BufferAllocator] = None):
        values = list(values)
        if len(values) != FIXED_BUFFER_SIZE:
            raise BufferSizeError(
                f"Fixed buffer holds exactly {FIXED_BUFFER_SIZE} integers, got {len(values)}",
                expected=FIXED_BUFFER_SIZE,
                actual=len(values)
            )

        self._values = values
        self._allocator = allocator or BufferAllocator()
        self._allocation: Optional[Allocation] = None

    @property
    def allocator(self) -> BufferAllocator:
        return self._allocator

    @property
    def state(self) -> str:
        if self._allocation is None:
            return "unacquired"
        return "released" if self._allocation.released else "held"

    @property
    def held(self) -> bool:
        return self.state == "held"

    def __enter__(self) -> "FixedBuffer":
        if self._allocation is not None:
            raise BufferAccessError(
                "Fixed buffer cannot be acquired twice",
                handle=self._allocation.handle,
                state=self.state
            )

        # Conversion errors surface before anything is allocated
        contents = array(STORAGE_TYPECODE, self._values)

        allocation = self._allocator.allocate(FIXED_BUFFER_SIZE)
        self._allocation = allocation
        allocation.storage[:] = contents
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        if self.held:
            self.release()
        return False

    def release(self) -> None:
        """Return the storage to the allocator; a second call raises DoubleReleaseError."""
        if self._allocation is None:
            raise BufferAccessError(
                "Fixed buffer was never acquired",
                state=self.state
            )
        self._allocator.release(self._allocation)

    def _storage(self) -> array:
        if not self.held:
            raise BufferAccessError(
                f"Fixed buffer is {self.state}",
                handle=self._allocation.handle if self._allocation else None,
                state=self.state
            )
        return self._allocation.storage

    def __len__(self) -> int:
        return len(self._storage())

    def __getitem__(self, index: int) -> int:
        storage = self._storage()
        if not -len(storage) <= index < len(storage):
            raise BufferBoundsError(
                f"Index {index} out of range for buffer of {len(storage)}",
                index=index,
                size=len(storage),
                context={"handle": self._allocation.handle}
            )
        return storage[index]

    def __iter__(self) -> Iterator[int]:
        storage = self._storage()
        for index in range(len(storage)):
            yield self._storage()[index]

    def to_list(self) -> list[int]:
        return self._storage().tolist()


def sum_fixed_buffer(values: Iterable[int], allocator: Optional[BufferAllocator] = None) -> int:
    """
    Sum exactly FIXED_BUFFER_SIZE integers held in a scoped buffer

    Args:
        values: The buffer contents
        allocator: Allocator to draw the buffer from (a private one if omitted)

    Returns:
        Arithmetic sum of the buffer contents
    """
    with FixedBuffer(list(values), allocator) as buffer:
        return sum_of_elements(buffer)
