"""Tests for the scoped fixed-size buffer and its allocator"""

import pytest

from memsafe_app.aggregation import (
    FIXED_BUFFER_SIZE,
    BufferAllocator,
    FixedBuffer,
    sum_fixed_buffer,
)
from memsafe_app.errors import (
    BufferAccessError,
    BufferBoundsError,
    BufferLeakError,
    BufferSizeError,
    DoubleReleaseError,
)


class TestBufferAllocator:
    """Test allocation ledger"""

    def test_allocate_and_release_counts(self, allocator):
        allocation = allocator.allocate(FIXED_BUFFER_SIZE)

        assert allocator.acquired == 1
        assert allocator.released == 0
        assert allocator.outstanding == [allocation.handle]
        assert len(allocation.storage) == FIXED_BUFFER_SIZE

        allocator.release(allocation)

        assert allocator.released == 1
        assert allocator.outstanding == []
        assert allocation.released is True

    def test_handles_are_unique(self, allocator):
        first = allocator.allocate(2)
        second = allocator.allocate(2)
        assert first.handle != second.handle

    def test_double_release_raises(self, allocator):
        allocation = allocator.allocate(3)
        allocator.release(allocation)

        with pytest.raises(DoubleReleaseError) as exc_info:
            allocator.release(allocation)

        assert exc_info.value.handle == allocation.handle
        assert allocator.released == 1

    def test_release_foreign_allocation_raises(self, allocator):
        other = BufferAllocator()
        allocation = other.allocate(3)

        with pytest.raises(DoubleReleaseError):
            allocator.release(allocation)

    def test_assert_no_leaks(self, allocator):
        allocator.assert_no_leaks()

        allocation = allocator.allocate(1)
        with pytest.raises(BufferLeakError) as exc_info:
            allocator.assert_no_leaks()
        assert exc_info.value.handles == [allocation.handle]

        allocator.release(allocation)
        allocator.assert_no_leaks()

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_rejected(self, allocator, size):
        with pytest.raises(BufferSizeError):
            allocator.allocate(size)
        assert allocator.acquired == 0


class TestFixedBuffer:
    """Test scoped acquisition and release"""

    def test_with_block_acquires_and_releases_once(self, allocator, sample_values):
        buffer = FixedBuffer(sample_values, allocator)
        assert buffer.state == "unacquired"

        with buffer as held:
            assert held is buffer
            assert buffer.held
            assert allocator.acquired == 1
            assert held.to_list() == sample_values
            assert len(held) == FIXED_BUFFER_SIZE
            assert held[0] == 1
            assert held[-1] == 5

        assert buffer.state == "released"
        assert allocator.acquired == 1
        assert allocator.released == 1
        allocator.assert_no_leaks()

    def test_release_on_exception(self, allocator, sample_values):
        with pytest.raises(RuntimeError):
            with FixedBuffer(sample_values, allocator):
                raise RuntimeError("boom")

        assert allocator.acquired == 1
        assert allocator.released == 1

    def test_release_on_early_return(self, allocator, sample_values):
        def first_even():
            with FixedBuffer(sample_values, allocator) as buffer:
                for value in buffer:
                    if value % 2 == 0:
                        return value
            return None

        assert first_even() == 2
        assert allocator.released == 1
        allocator.assert_no_leaks()

    def test_explicit_release_inside_block(self, allocator, sample_values):
        with FixedBuffer(sample_values, allocator) as buffer:
            buffer.release()

        assert allocator.released == 1

    def test_second_explicit_release_raises(self, allocator, sample_values):
        with FixedBuffer(sample_values, allocator) as buffer:
            pass

        with pytest.raises(DoubleReleaseError):
            buffer.release()
        assert allocator.released == 1

    def test_access_before_acquire(self, sample_values):
        buffer = FixedBuffer(sample_values)

        with pytest.raises(BufferAccessError) as exc_info:
            buffer.to_list()
        assert exc_info.value.state == "unacquired"

        with pytest.raises(BufferAccessError):
            buffer.release()

    def test_access_after_release(self, sample_values):
        with FixedBuffer(sample_values) as buffer:
            pass

        with pytest.raises(BufferAccessError) as exc_info:
            list(buffer)
        assert exc_info.value.state == "released"

        with pytest.raises(BufferAccessError):
            len(buffer)

    def test_cannot_enter_twice(self, allocator, sample_values):
        buffer = FixedBuffer(sample_values, allocator)
        with buffer:
            with pytest.raises(BufferAccessError):
                buffer.__enter__()

        assert allocator.acquired == 1
        assert allocator.released == 1

    @pytest.mark.parametrize("values", [[], [1, 2, 3, 4], [1, 2, 3, 4, 5, 6]])
    def test_wrong_length_rejected(self, allocator, values):
        with pytest.raises(BufferSizeError) as exc_info:
            FixedBuffer(values, allocator)

        assert exc_info.value.expected == FIXED_BUFFER_SIZE
        assert exc_info.value.actual == len(values)
        assert allocator.acquired == 0

    def test_non_integer_content_does_not_leak(self, allocator):
        with pytest.raises(TypeError):
            with FixedBuffer([1, 2, "three", 4, 5], allocator):
                pass

        assert allocator.acquired == 0
        allocator.assert_no_leaks()

    @pytest.mark.parametrize("index", [FIXED_BUFFER_SIZE, -FIXED_BUFFER_SIZE - 1, 100])
    def test_out_of_range_index(self, allocator, sample_values, index):
        with FixedBuffer(sample_values, allocator) as buffer:
            with pytest.raises(BufferBoundsError) as exc_info:
                buffer[index]

        assert exc_info.value.index == index
        assert exc_info.value.size == FIXED_BUFFER_SIZE
        assert isinstance(exc_info.value, IndexError)
        assert allocator.released == 1

    def test_negative_index_within_range(self, sample_values):
        with FixedBuffer(sample_values) as buffer:
            assert buffer[-FIXED_BUFFER_SIZE] == 1

    def test_buffer_is_independent_of_source(self, allocator):
        values = [1, 2, 3, 4, 5]
        with FixedBuffer(values, allocator) as buffer:
            values[0] = 100
            assert buffer[0] == 1


class TestSumFixedBuffer:
    """Test fixed buffer summation"""

    def test_sum_demo_values(self, sample_values):
        assert sum_fixed_buffer(sample_values) == 15

    def test_one_acquire_one_release_per_call(self, allocator, sample_values):
        for call in range(1, 4):
            assert sum_fixed_buffer(sample_values, allocator) == 15
            assert allocator.acquired == call
            assert allocator.released == call

        allocator.assert_no_leaks()

    def test_negative_values(self, allocator):
        assert sum_fixed_buffer([-1, -2, -3, -4, -5], allocator) == -15

    def test_wrong_length_rejected(self, allocator):
        with pytest.raises(BufferSizeError):
            sum_fixed_buffer([1, 2, 3], allocator)
        assert allocator.acquired == 0

    def test_accepts_any_iterable(self, allocator):
        assert sum_fixed_buffer(range(1, 6), allocator) == 15
        assert allocator.released == 1
