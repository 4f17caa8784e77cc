"""
시뮬레이션 오류 정의
"""


class SimulationError(RuntimeError):
    """시뮬레이션 실행을 중단시키는 오류의 기본 클래스"""


class QueueCapacityError(SimulationError):
    """큐가 가득 차서 프로세스를 넣을 수 없음"""

    def __init__(self, capacity: int):
        super().__init__(f"Queue capacity exceeded (max {capacity} processes)")
        self.capacity = capacity


class TraceCapacityError(SimulationError):
    """실행 기록(Gantt) 길이가 최대치를 넘음"""

    def __init__(self, max_length: int):
        super().__init__(f"Execution trace exceeded {max_length} ticks")
        self.max_length = max_length
