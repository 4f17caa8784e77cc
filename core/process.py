"""
프로세스 및 PCB (Process Control Block) 관리 모듈
"""

from enum import Enum
from typing import Iterable, Optional
from copy import deepcopy


class ProcessState(Enum):
    """프로세스 상태"""
    NEW = "New"
    READY = "Ready"
    RUNNING = "Running"
    WAITING = "Waiting"
    TERMINATED = "Terminated"


class Process:
    """
    프로세스 제어 블록 (PCB)
    정적 스케줄링 파라미터와 실행 중 변하는 상태를 함께 관리
    """

    def __init__(self, pid: int, arrival_time: int, priority: int, cpu_burst: int,
                 io_burst: int = 0, io_request_times: Iterable[int] = ()):
        """
        프로세스 초기화

        Args:
            pid: 프로세스 ID (양수)
            arrival_time: 도착 시간
            priority: 우선순위 (낮을수록 높은 우선순위)
            cpu_burst: 전체 CPU 버스트 시간
            io_burst: I/O 한 번에 걸리는 시간
            io_request_times: 남은 CPU 시간이 이 값과 같아지면 I/O 요청
        """
        io_request_times = sorted(io_request_times)

        if pid <= 0:
            raise ValueError(f"PID는 양수여야 합니다: {pid}")
        if arrival_time < 0:
            raise ValueError(f"도착 시간은 0 이상이어야 합니다: {arrival_time}")
        if cpu_burst < 1:
            raise ValueError(f"CPU 버스트는 1 이상이어야 합니다: {cpu_burst}")
        if io_burst < 0:
            raise ValueError(f"I/O 버스트는 0 이상이어야 합니다: {io_burst}")
        if io_request_times and io_burst < 1:
            raise ValueError("I/O 요청이 있으면 I/O 버스트는 1 이상이어야 합니다")
        if any(t < 2 for t in io_request_times):
            # 남은 CPU가 1일 때 I/O를 요청하면 CPU 0인 채로 복귀해 끝나지 않음
            raise ValueError(f"I/O 요청 시점은 2 이상이어야 합니다: {io_request_times}")

        self.pid = pid
        self.arrival_time = arrival_time
        self.priority = priority
        self.cpu_burst = cpu_burst
        self.io_burst = io_burst
        self.io_request_times = tuple(io_request_times)

        # 실행 상태 추적
        self.state = ProcessState.NEW
        self.cpu_remaining = cpu_burst
        self.current_io = 0  # 다음 I/O 요청 인덱스
        self.io_remaining = 0

        # 통계 정보
        self.start_time: Optional[int] = None  # 첫 실행 시간
        self.finish_time: Optional[int] = None  # 완료 시간
        self.waiting_time = 0  # 대기 시간
        self.turnaround_time = 0  # 반환 시간
        self.response_time: Optional[int] = None  # 응답 시간

    @property
    def io_count(self) -> int:
        """설정된 I/O 요청 수"""
        return len(self.io_request_times)

    def is_io_request_point(self) -> bool:
        """이번 틱이 끝나면 I/O로 전환해야 하는지 확인"""
        return (self.current_io < self.io_count and
                self.cpu_remaining == self.io_request_times[self.current_io])

    def execute(self):
        """CPU 1틱 실행"""
        self.cpu_remaining -= 1

    def start_io(self):
        """I/O 에피소드 시작"""
        self.io_remaining = self.io_burst
        self.current_io += 1
        self.state = ProcessState.WAITING

    def advance_io(self) -> bool:
        """
        I/O 1틱 진행

        Returns:
            I/O가 끝났는지 여부
        """
        self.io_remaining -= 1
        return self.io_remaining <= 0

    def is_completed(self) -> bool:
        """프로세스가 완료되었는지 확인"""
        return self.cpu_remaining == 0

    def finish(self, current_time: int):
        """
        완료 처리: 반환 시간과 대기 시간 계산

        대기 시간 = 반환 시간 - CPU 버스트 - (설정된 I/O 요청 수 × I/O 버스트)
        도달하지 않은 요청도 빼므로 음수가 나올 수 있으며 보정하지 않음
        """
        self.state = ProcessState.TERMINATED
        self.finish_time = current_time
        self.turnaround_time = current_time - self.arrival_time
        self.waiting_time = (self.turnaround_time - self.cpu_burst
                             - self.io_count * self.io_burst)

    def __repr__(self):
        return f"P{self.pid}[{self.state.value}]"

    def __str__(self):
        return f"Process {self.pid}: State={self.state.value}, Priority={self.priority}, " \
               f"Remaining={self.cpu_remaining}"


def create_process_copy(process: Process) -> Process:
    """
    프로세스의 깊은 복사본 생성
    각 스케줄링 알고리즘 시뮬레이션을 독립적으로 수행하기 위함
    """
    return deepcopy(process)


def check_unique_pids(processes: Iterable[Process]):
    """한 번의 실행 안에서 PID 중복 검사"""
    seen = set()
    for process in processes:
        if process.pid in seen:
            raise ValueError(f"중복된 PID: {process.pid}")
        seen.add(process.pid)
