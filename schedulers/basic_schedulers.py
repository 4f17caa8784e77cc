"""
틱 단위 공용 스케줄링 루프 및 이를 사용하는 알고리즘
- FCFS (First-Come, First-Served)
- SJF (Shortest Job First - Non-preemptive / Preemptive)
- Priority (Non-preemptive / Preemptive)
"""

from typing import List
from core.process import Process
from core.scheduler_base import BaseScheduler, Algorithm, MAX_TRACE_LENGTH
from core.selection import SelectionPolicy


class TickScheduler(BaseScheduler):
    """
    선택 정책과 선점 여부로 동작이 정해지는 공용 스케줄러

    매 루프마다 도착/I/O를 처리하고, 선점형이면 실행 중인 프로세스를
    ready 큐로 되돌린 뒤 선택 정책으로 다음 프로세스를 고른다.
    """

    def __init__(self, processes: List[Process], algorithm: Algorithm,
                 policy: SelectionPolicy, preemptive: bool,
                 max_trace_length: int = MAX_TRACE_LENGTH):
        super().__init__(processes, algorithm, max_trace_length)
        self.policy = policy
        self.preemptive = preemptive

    def simulate(self):
        while self.has_work():
            # 1. 프로세스 도착 처리
            self.handle_process_arrival()

            # 2. I/O 완료 처리
            self.handle_io_completion()

            # 3. 선점형이면 매 틱 실행 중인 프로세스를 다시 경쟁시킴
            if self.preemptive and self.running_process:
                self.requeue_running()

            # 4. CPU 할당
            if self.running_process is None:
                if self.ready_queue.is_empty():
                    self.record_idle()
                    continue
                self.policy.select(self.ready_queue)
                self.dispatch()

            # 5. 1틱 실행
            self.execute_tick()


class FCFSScheduler(TickScheduler):
    """
    FCFS (First-Come, First-Served) 스케줄러
    비선점형: 먼저 ready 큐에 들어온 프로세스를 먼저 처리
    """

    def __init__(self, processes: List[Process], max_trace_length: int = MAX_TRACE_LENGTH):
        super().__init__(processes, Algorithm.FCFS, SelectionPolicy.FCFS, False,
                         max_trace_length)


class SJFScheduler(TickScheduler):
    """
    SJF (Shortest Job First) 스케줄러
    남은 CPU 시간이 가장 짧은 프로세스 우선. preemptive=True면 SRTF
    """

    def __init__(self, processes: List[Process], preemptive: bool = False,
                 max_trace_length: int = MAX_TRACE_LENGTH):
        algorithm = Algorithm.P_SJF if preemptive else Algorithm.NP_SJF
        super().__init__(processes, algorithm, SelectionPolicy.SHORTEST_REMAINING,
                         preemptive, max_trace_length)


class PriorityScheduler(TickScheduler):
    """
    우선순위 스케줄러 (정적 우선순위)
    낮은 우선순위 값이 높은 우선순위
    """

    def __init__(self, processes: List[Process], preemptive: bool = False,
                 max_trace_length: int = MAX_TRACE_LENGTH):
        algorithm = Algorithm.P_PRIORITY if preemptive else Algorithm.NP_PRIORITY
        super().__init__(processes, algorithm, SelectionPolicy.HIGHEST_PRIORITY,
                         preemptive, max_trace_length)
