"""
Round Robin 스케줄러
"""

from typing import List
from core.process import Process
from core.scheduler_base import (BaseScheduler, Algorithm, TickOutcome,
                                 DEFAULT_TIME_QUANTUM, MAX_TRACE_LENGTH)


class RoundRobinScheduler(BaseScheduler):
    """
    Round Robin 스케줄러
    ready 큐의 front를 최대 time_quantum 틱 연속 실행한 뒤 큐 뒤로 보냄
    """

    def __init__(self, processes: List[Process], time_quantum: int = DEFAULT_TIME_QUANTUM,
                 max_trace_length: int = MAX_TRACE_LENGTH):
        if time_quantum < 1:
            raise ValueError(f"타임 퀀텀은 1 이상이어야 합니다: {time_quantum}")
        super().__init__(processes, Algorithm.RR, max_trace_length)
        self.time_quantum = time_quantum

    def simulate(self):
        while self.has_work():
            # 1. 프로세스 도착 처리
            self.handle_process_arrival()

            # 2. I/O 완료 처리
            self.handle_io_completion()

            # 3. CPU가 비어 있으면 ready 큐 front 할당, 없으면 유휴
            if self.running_process is None:
                if self.ready_queue.is_empty():
                    self.record_idle()
                    continue
                self.dispatch()

            # 4. 최대 time_quantum 틱 실행
            for tick in range(self.time_quantum):
                if self.running_process is None:
                    break
                outcome = self.execute_tick()
                if outcome is TickOutcome.RAN and tick == self.time_quantum - 1:
                    process = self.running_process
                    self.requeue_running()
                    self.log_event(f"P{process.pid} time quantum expired → Ready Queue")
