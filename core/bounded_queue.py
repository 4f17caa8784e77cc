"""
고정 크기 원형 큐 (job / ready / waiting 큐 공용)
"""

from typing import Generic, Iterator, List, Optional, TypeVar

from .errors import QueueCapacityError

T = TypeVar('T')


class BoundedQueue(Generic[T]):
    """
    고정 크기 원형 버퍼 기반 FIFO 큐

    슬롯 수는 capacity이고 최대 capacity - 1개까지 저장한다.
    front/rear 인덱스는 capacity로 나눈 나머지로 순환한다.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"큐 크기는 1 이상이어야 합니다: {capacity}")
        self.capacity = capacity
        self._slots: List[Optional[T]] = [None] * capacity
        self._front = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """front부터 rear까지 순회"""
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]

    def __repr__(self):
        return f"BoundedQueue({list(self)!r})"

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size >= self.capacity - 1

    def push(self, item: T) -> bool:
        """
        rear에 삽입. 가득 찬 경우 아무것도 하지 않음

        Returns:
            삽입 여부
        """
        if self.is_full():
            return False
        rear = (self._front + self._size) % self.capacity
        self._slots[rear] = item
        self._size += 1
        return True

    def enqueue(self, item: T):
        """rear에 삽입하고, 넣지 못하면 QueueCapacityError 발생"""
        if not self.push(item):
            raise QueueCapacityError(self.capacity - 1)

    def pop_front(self) -> Optional[T]:
        """front 요소 제거 후 반환 (비어 있으면 None)"""
        if self._size == 0:
            return None
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return item

    def front(self) -> Optional[T]:
        """front 요소 반환 (비어 있으면 None)"""
        return self._slots[self._front] if self._size else None

    def swap_with_front(self, offset: int):
        """front에서 offset만큼 떨어진 요소와 front 요소를 교환"""
        if not 0 <= offset < self._size:
            raise IndexError(f"큐 범위를 벗어난 위치: {offset}")
        if offset == 0:
            return
        idx = (self._front + offset) % self.capacity
        self._slots[self._front], self._slots[idx] = self._slots[idx], self._slots[self._front]

    def clear(self):
        self._slots = [None] * self.capacity
        self._front = 0
        self._size = 0
