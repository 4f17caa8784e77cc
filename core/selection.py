"""
Ready 큐 선택 정책
- FCFS: 재정렬 없음
- SHORTEST_REMAINING: 남은 CPU 시간이 가장 짧은 프로세스를 front로
- HIGHEST_PRIORITY: 우선순위 값이 가장 작은 프로세스를 front로
"""

from enum import Enum
from typing import Callable

from .bounded_queue import BoundedQueue
from .process import Process


def _move_best_to_front(ready_queue: BoundedQueue[Process], key: Callable[[Process], int]):
    # front부터 훑으며 엄격한 < 비교: 값이 같으면 먼저 들어온 프로세스가 유지됨
    best_offset = 0
    best_key = None
    for offset, process in enumerate(ready_queue):
        value = key(process)
        if best_key is None or value < best_key:
            best_offset = offset
            best_key = value
    ready_queue.swap_with_front(best_offset)


def select_fcfs(ready_queue: BoundedQueue[Process]):
    """FCFS: front가 그대로 다음 실행 대상"""


def select_shortest(ready_queue: BoundedQueue[Process]):
    """남은 CPU 시간이 가장 짧은 프로세스를 front와 교환"""
    _move_best_to_front(ready_queue, lambda p: p.cpu_remaining)


def select_highest(ready_queue: BoundedQueue[Process]):
    """우선순위가 가장 높은 (값이 가장 작은) 프로세스를 front와 교환"""
    _move_best_to_front(ready_queue, lambda p: p.priority)


class SelectionPolicy(Enum):
    """CPU 할당 직전에 ready 큐에 적용하는 선택 정책"""
    FCFS = "FCFS"
    SHORTEST_REMAINING = "Shortest Remaining"
    HIGHEST_PRIORITY = "Highest Priority"

    def select(self, ready_queue: BoundedQueue[Process]):
        """선택된 프로세스를 ready 큐의 front에 위치시킴"""
        if ready_queue.is_empty():
            raise ValueError("빈 ready 큐에서는 프로세스를 선택할 수 없습니다")
        _SELECTORS[self](ready_queue)


_SELECTORS = {
    SelectionPolicy.FCFS: select_fcfs,
    SelectionPolicy.SHORTEST_REMAINING: select_shortest,
    SelectionPolicy.HIGHEST_PRIORITY: select_highest,
}
