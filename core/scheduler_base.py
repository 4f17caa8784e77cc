"""
스케줄러 기본 프레임워크: I/O 처리, 실행 기록, 통계
"""

from typing import List, Dict, Optional, Iterable, Iterator
from dataclasses import dataclass, asdict
from enum import Enum
from .bounded_queue import BoundedQueue
from .errors import TraceCapacityError
from .process import Process, ProcessState, create_process_copy, check_unique_pids

# 실행 기록 최대 길이 (시간 단위)
MAX_TRACE_LENGTH = 400
# Round Robin 기본 타임 퀀텀
DEFAULT_TIME_QUANTUM = 5
# 실행 기록에서 CPU 유휴를 나타내는 특수 PID
IDLE = -1


class Algorithm(Enum):
    """스케줄링 정책 식별자"""
    FCFS = "FCFS"
    NP_SJF = "NP-SJF"
    P_SJF = "P-SJF"
    NP_PRIORITY = "NP-Priority"
    P_PRIORITY = "P-Priority"
    RR = "RR"

    @property
    def preemptive(self) -> bool:
        return self in (Algorithm.P_SJF, Algorithm.P_PRIORITY, Algorithm.RR)


class TickOutcome(Enum):
    """CPU 1틱 실행 결과"""
    RAN = "Ran"
    IO_REQUEST = "I/O Request"
    COMPLETED = "Completed"


@dataclass
class GanttEntry:
    """Gantt Chart 엔트리 (같은 라벨이 이어진 구간)"""
    pid: int
    start_time: int
    end_time: int

    @property
    def is_idle(self) -> bool:
        return self.pid == IDLE


class ExecutionTrace:
    """틱마다 CPU를 차지한 PID(또는 IDLE)를 기록"""

    def __init__(self, max_length: int = MAX_TRACE_LENGTH):
        self.max_length = max_length
        self._ticks: List[int] = []

    def __len__(self) -> int:
        return len(self._ticks)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ticks)

    def __getitem__(self, index):
        return self._ticks[index]

    def _append(self, label: int):
        if len(self._ticks) >= self.max_length:
            raise TraceCapacityError(self.max_length)
        self._ticks.append(label)

    def record(self, pid: int):
        self._append(pid)

    def record_idle(self):
        self._append(IDLE)

    @property
    def ticks(self) -> List[int]:
        return list(self._ticks)

    @property
    def idle_ticks(self) -> int:
        return sum(1 for label in self._ticks if label == IDLE)

    @property
    def busy_ticks(self) -> int:
        return len(self._ticks) - self.idle_ticks

    def segments(self) -> List[GanttEntry]:
        """연속된 동일 라벨을 하나의 구간으로 묶음"""
        entries: List[GanttEntry] = []
        for time, label in enumerate(self._ticks):
            if entries and entries[-1].pid == label:
                entries[-1].end_time = time + 1
            else:
                entries.append(GanttEntry(label, time, time + 1))
        return entries

    def cpu_utilization(self) -> float:
        """CPU 사용률 (%)"""
        if not self._ticks:
            return 0.0
        return self.busy_ticks / len(self._ticks) * 100

    def context_switches(self) -> int:
        """유휴 구간을 제외하고 실행 프로세스가 바뀐 횟수"""
        switches = 0
        previous = None
        for label in self._ticks:
            if label == IDLE:
                continue
            if previous is not None and label != previous:
                switches += 1
            previous = label
        return switches


@dataclass
class SchedulerStats:
    """스케줄링 통계"""
    avg_waiting_time: float
    avg_turnaround_time: float
    process_count: int
    cpu_utilization: float = 0.0
    context_switches: int = 0

    @classmethod
    def from_processes(cls, processes: List[Process],
                       trace: Optional[ExecutionTrace] = None) -> Optional['SchedulerStats']:
        """
        완료된 프로세스 목록으로 평균 계산

        Returns:
            통계 (완료된 프로세스가 없으면 None)
        """
        if not processes:
            return None

        count = len(processes)
        return cls(
            avg_waiting_time=sum(p.waiting_time for p in processes) / count,
            avg_turnaround_time=sum(p.turnaround_time for p in processes) / count,
            process_count=count,
            cpu_utilization=trace.cpu_utilization() if trace is not None else 0.0,
            context_switches=trace.context_switches() if trace is not None else 0,
        )

    def to_dict(self) -> Dict:
        return asdict(self)


class MetricsTable:
    """
    정책별 평균 대기/반환 시간 표
    실행한 적 없는 정책은 None
    """

    def __init__(self):
        self._entries: Dict[Algorithm, Optional[SchedulerStats]] = {
            algorithm: None for algorithm in Algorithm
        }

    def record(self, algorithm: Algorithm, stats: Optional[SchedulerStats]):
        self._entries[algorithm] = stats

    def get(self, algorithm: Algorithm) -> Optional[SchedulerStats]:
        return self._entries[algorithm]

    def has_data(self, algorithm: Algorithm) -> bool:
        return self._entries[algorithm] is not None

    def items(self):
        """정책 정의 순서대로 (정책, 통계) 반환"""
        return [(algorithm, self._entries[algorithm]) for algorithm in Algorithm]

    def completed(self) -> List[Algorithm]:
        return [algorithm for algorithm, stats in self.items() if stats is not None]


def run_io_stage(waiting_queue: BoundedQueue[Process],
                 ready_queue: BoundedQueue[Process]) -> List[Process]:
    """
    waiting 큐의 모든 프로세스를 I/O 1틱 진행

    호출 시점의 큐 크기만큼만 꺼내므로 다시 넣은 프로세스가
    같은 호출에서 두 번 처리되지 않는다.

    Returns:
        I/O가 끝나 ready 큐로 이동한 프로세스 목록
    """
    completed = []
    for _ in range(len(waiting_queue)):
        process = waiting_queue.pop_front()
        if process.advance_io():
            process.state = ProcessState.READY
            ready_queue.enqueue(process)
            completed.append(process)
        else:
            waiting_queue.enqueue(process)
    return completed


class BaseScheduler:
    """
    기본 스케줄러 클래스
    job / ready / waiting 큐와 실행 기록 등 모든 정책의 공통 기능 제공
    """

    def __init__(self, processes: Iterable[Process], algorithm: Algorithm,
                 max_trace_length: int = MAX_TRACE_LENGTH):
        self.processes = [create_process_copy(p) for p in processes]
        check_unique_pids(self.processes)
        self.algorithm = algorithm
        self.name = algorithm.value
        self.current_time = 0

        # 큐 크기 = 프로세스 수 + 1 (가득 참과 비어 있음을 구분)
        capacity = len(self.processes) + 1
        self.job_queue: BoundedQueue[Process] = BoundedQueue(capacity)
        self.ready_queue: BoundedQueue[Process] = BoundedQueue(capacity)
        self.waiting_queue: BoundedQueue[Process] = BoundedQueue(capacity)
        self.running_process: Optional[Process] = None
        self.previous_process: Optional[Process] = None
        self.terminated_processes: List[Process] = []

        self.trace = ExecutionTrace(max_trace_length)
        self.stats: Optional[SchedulerStats] = None

        # 이벤트 로그
        self.event_log: List[str] = []

    def log_event(self, message: str):
        """이벤트 로그 기록"""
        log_entry = f"[T={self.current_time:3d}] {message}"
        self.event_log.append(log_entry)

    def load_job_queue(self):
        """프로세스를 도착 시간 순으로 job 큐에 적재하고 I/O 인덱스 초기화"""
        self.job_queue.clear()
        for process in sorted(self.processes, key=lambda p: p.arrival_time):
            process.current_io = 0
            self.job_queue.enqueue(process)

    def has_work(self) -> bool:
        """job, ready, waiting 큐나 실행 중인 프로세스가 남아 있는지"""
        return bool(len(self.job_queue) or len(self.ready_queue) or
                    len(self.waiting_queue) or self.running_process)

    def population(self) -> int:
        """현재 시스템 전체에 있는 프로세스 수"""
        return (len(self.job_queue) + len(self.ready_queue) + len(self.waiting_queue)
                + (1 if self.running_process else 0) + len(self.terminated_processes))

    def handle_process_arrival(self):
        """도착한 프로세스를 job 큐에서 ready 큐로 이동"""
        while (not self.job_queue.is_empty() and
               self.job_queue.front().arrival_time <= self.current_time):
            process = self.job_queue.pop_front()
            process.state = ProcessState.READY
            self.ready_queue.enqueue(process)
            self.log_event(f"P{process.pid} arrived → Ready Queue")

    def handle_io_completion(self):
        """I/O 단계 1회 실행"""
        for process in run_io_stage(self.waiting_queue, self.ready_queue):
            self.log_event(f"P{process.pid} I/O completed → Ready Queue")

    def record_idle(self):
        """CPU 유휴 1틱"""
        self.trace.record_idle()
        self.current_time += 1

    def dispatch(self):
        """ready 큐의 front를 CPU에 할당"""
        process = self.ready_queue.pop_front()

        if self.previous_process is None:
            self.log_event(f"P{process.pid} → Running")
        elif self.previous_process.pid != process.pid:
            self.log_event(f"Context Switch: P{self.previous_process.pid} → P{process.pid}")
        self.previous_process = process

        process.state = ProcessState.RUNNING
        if process.start_time is None:
            process.start_time = self.current_time
            process.response_time = self.current_time - process.arrival_time
        self.running_process = process

    def requeue_running(self):
        """실행 중인 프로세스를 ready 큐 뒤로 되돌림"""
        process = self.running_process
        process.state = ProcessState.READY
        self.ready_queue.enqueue(process)
        self.running_process = None

    def execute_tick(self) -> TickOutcome:
        """
        실행 중인 프로세스를 1틱 실행

        Returns:
            실행 결과 (계속 실행 / I/O 요청 / 완료)
        """
        process = self.running_process
        self.trace.record(process.pid)

        if process.is_io_request_point():
            # I/O 요청 직전 1틱도 CPU 사용으로 계산
            process.execute()
            self.current_time += 1
            process.start_io()
            self.waiting_queue.enqueue(process)
            self.running_process = None
            self.log_event(f"P{process.pid} → I/O (duration={process.io_burst}) → Waiting")
            return TickOutcome.IO_REQUEST

        process.execute()
        self.current_time += 1

        # 같은 틱에 끝난 I/O와 새로 도착한 프로세스를 다음 선택에 반영
        self.handle_io_completion()
        self.handle_process_arrival()

        if process.is_completed():
            self.terminate_process(process)
            self.running_process = None
            return TickOutcome.COMPLETED
        return TickOutcome.RAN

    def terminate_process(self, process: Process):
        """프로세스 종료 처리"""
        process.finish(self.current_time)
        self.terminated_processes.append(process)
        self.log_event(f"P{process.pid} → Terminated "
                       f"(WT={process.waiting_time}, TT={process.turnaround_time})")

    def update_statistics(self, metrics_table: Optional[MetricsTable] = None):
        """최종 통계 계산 후 지표 표에 저장"""
        self.stats = SchedulerStats.from_processes(self.terminated_processes, self.trace)
        if metrics_table is not None:
            metrics_table.record(self.algorithm, self.stats)

    def simulate(self):
        """스케줄링 루프 (하위 클래스에서 구현)"""
        raise NotImplementedError("Subclasses must implement simulate()")

    def run(self, verbose: bool = False,
            metrics_table: Optional[MetricsTable] = None) -> Dict:
        """
        스케줄링 시뮬레이션 실행

        Args:
            verbose: 상세 로그 출력 여부
            metrics_table: 결과 평균을 저장할 지표 표

        Returns:
            시뮬레이션 결과 딕셔너리
        """
        self.log_event(f"===== {self.name} Scheduling Started =====")
        self.load_job_queue()
        self.simulate()
        self.log_event(f"===== {self.name} Scheduling Completed =====")

        self.update_statistics(metrics_table)

        if verbose:
            for log in self.event_log:
                print(log)

        return self.get_results()

    def get_results(self) -> Dict:
        """
        시뮬레이션 결과 반환

        Returns:
            결과 딕셔너리 (통계, 실행 기록, Gantt Chart, 로그 등)
        """
        return {
            'algorithm': self.name,
            'statistics': self.stats.to_dict() if self.stats else None,
            'trace': self.trace.ticks,
            'gantt_chart': self.trace.segments(),
            'total_time': self.current_time,
            'event_log': self.event_log,
            'processes': self.terminated_processes
        }
