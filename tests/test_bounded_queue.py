"""BoundedQueue 원형 버퍼 테스트"""

import pytest

from core.bounded_queue import BoundedQueue
from core.errors import QueueCapacityError


class TestBoundedQueueBasics:
    """FIFO 동작과 빈 큐 처리"""

    def test_new_queue_is_empty(self) -> None:
        queue = BoundedQueue(4)
        assert queue.is_empty()
        assert len(queue) == 0
        assert queue.front() is None

    def test_fifo_order(self) -> None:
        queue = BoundedQueue(4)
        for item in "abc":
            queue.push(item)
        assert queue.front() == "a"
        assert queue.pop_front() == "a"
        assert list(queue) == ["b", "c"]

    def test_pop_front_on_empty_is_noop(self) -> None:
        queue = BoundedQueue(2)
        assert queue.pop_front() is None
        assert len(queue) == 0

    def test_wraparound_keeps_order(self) -> None:
        queue = BoundedQueue(3)
        queue.push(1)
        queue.push(2)
        queue.pop_front()
        queue.push(3)
        queue.pop_front()
        queue.push(4)
        assert list(queue) == [3, 4]

    def test_clear(self) -> None:
        queue = BoundedQueue(3)
        queue.push(1)
        queue.clear()
        assert queue.is_empty()


class TestBoundedQueueCapacity:
    """capacity - 1 개까지만 저장"""

    def test_push_when_full_is_rejected(self) -> None:
        queue = BoundedQueue(3)
        assert queue.push(1)
        assert queue.push(2)
        assert queue.is_full()
        assert not queue.push(3)
        assert list(queue) == [1, 2]

    def test_enqueue_when_full_raises(self) -> None:
        queue = BoundedQueue(2)
        queue.enqueue(1)
        with pytest.raises(QueueCapacityError):
            queue.enqueue(2)

    def test_zero_capacity_rejected(self) -> None:
        with pytest.raises(ValueError):
            BoundedQueue(0)


class TestSwapWithFront:
    """선택 정책이 사용하는 front 교환"""

    def test_swap_moves_item_to_front(self) -> None:
        queue = BoundedQueue(5)
        for item in "abcd":
            queue.push(item)
        queue.swap_with_front(2)
        assert list(queue) == ["c", "b", "a", "d"]

    def test_swap_after_wraparound(self) -> None:
        queue = BoundedQueue(4)
        for item in "abc":
            queue.push(item)
        queue.pop_front()
        queue.push("d")
        queue.swap_with_front(2)
        assert list(queue) == ["d", "c", "b"]

    def test_swap_out_of_range_raises(self) -> None:
        queue = BoundedQueue(3)
        queue.push("a")
        with pytest.raises(IndexError):
            queue.swap_with_front(1)
