"""
CPU 스케줄링 시뮬레이터 - FastAPI 백엔드
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Optional, Dict

from core.errors import SimulationError
from core.process import Process, check_unique_pids
from core.scheduler_base import (Algorithm, MetricsTable, DEFAULT_TIME_QUANTUM,
                                 MAX_TRACE_LENGTH)
from schedulers import SCHEDULERS, create_scheduler

app = FastAPI(
    title="CPU Scheduling Simulator",
    description="CPU 스케줄링 정책 시뮬레이터 (FCFS, SJF, Priority, Round Robin)",
    version="1.0.0"
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Pydantic 모델
class ProcessInput(BaseModel):
    pid: int
    arrival_time: int
    priority: int
    cpu_burst: int
    io_burst: int = 0
    io_request_times: List[int] = []


class SimulationRequest(BaseModel):
    processes: List[ProcessInput]
    algorithms: List[str]
    time_quantum: int = DEFAULT_TIME_QUANTUM
    max_trace_length: int = MAX_TRACE_LENGTH


class GanttEntry(BaseModel):
    pid: int
    start_time: int
    end_time: int


class ProcessResult(BaseModel):
    pid: int
    arrival_time: int
    priority: int
    cpu_burst: int
    waiting_time: int
    turnaround_time: int
    response_time: Optional[int]


class Statistics(BaseModel):
    avg_waiting_time: float
    avg_turnaround_time: float
    process_count: int
    cpu_utilization: float
    context_switches: int


class SimulationResult(BaseModel):
    algorithm: str
    trace: List[int]
    gantt_chart: List[GanttEntry]
    processes: List[ProcessResult]
    statistics: Optional[Statistics]
    total_time: int
    event_log: List[str]


class ComparisonRow(BaseModel):
    algorithm: str
    avg_waiting_time: Optional[float]
    avg_turnaround_time: Optional[float]


class SimulationResponse(BaseModel):
    success: bool
    results: List[SimulationResult]
    comparison: List[ComparisonRow]


def create_process_objects(process_inputs: List[ProcessInput]) -> List[Process]:
    """ProcessInput을 Process 객체로 변환 (PID 중복 시 ValueError)"""
    processes = [
        Process(
            pid=p.pid,
            arrival_time=p.arrival_time,
            priority=p.priority,
            cpu_burst=p.cpu_burst,
            io_burst=p.io_burst,
            io_request_times=p.io_request_times
        )
        for p in process_inputs
    ]
    check_unique_pids(processes)
    return processes


def parse_algorithm(algorithm_id: str) -> Algorithm:
    try:
        return Algorithm(algorithm_id)
    except ValueError:
        raise ValueError(f"Unknown algorithm: {algorithm_id}") from None


def run_scheduler(processes: List[Process], algorithm: Algorithm, metrics_table: MetricsTable,
                  time_quantum: int = DEFAULT_TIME_QUANTUM,
                  max_trace_length: int = MAX_TRACE_LENGTH) -> Dict:
    """스케줄러 실행 및 결과 반환"""
    scheduler = create_scheduler(algorithm, processes, time_quantum=time_quantum,
                                 max_trace_length=max_trace_length)
    result = scheduler.run(metrics_table=metrics_table)

    return {
        'algorithm': result['algorithm'],
        'trace': result['trace'],
        'gantt_chart': [
            {'pid': entry.pid, 'start_time': entry.start_time, 'end_time': entry.end_time}
            for entry in result['gantt_chart']
        ],
        'processes': [
            {
                'pid': p.pid,
                'arrival_time': p.arrival_time,
                'priority': p.priority,
                'cpu_burst': p.cpu_burst,
                'waiting_time': p.waiting_time,
                'turnaround_time': p.turnaround_time,
                'response_time': p.response_time
            }
            for p in result['processes']
        ],
        'statistics': result['statistics'],
        'total_time': result['total_time'],
        'event_log': result['event_log']
    }


@app.get("/")
async def root():
    return {"message": "CPU Scheduling Simulator API", "version": "1.0.0"}


@app.get("/algorithms")
async def get_algorithms():
    """사용 가능한 알고리즘 목록 반환"""
    return {
        "algorithms": [
            {"id": algorithm.value, "name": info['name'], "preemptive": algorithm.preemptive}
            for algorithm, info in SCHEDULERS.items()
        ]
    }


@app.post("/simulate", response_model=SimulationResponse)
async def simulate(request: SimulationRequest):
    """스케줄링 시뮬레이션 실행 (요청마다 새 지표 표 사용)"""
    try:
        processes = create_process_objects(request.processes)
        metrics_table = MetricsTable()
        results = []

        for algorithm_id in request.algorithms:
            result = run_scheduler(
                processes,
                parse_algorithm(algorithm_id),
                metrics_table,
                request.time_quantum,
                request.max_trace_length
            )
            results.append(result)

    except (ValueError, SimulationError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    comparison = [
        {
            'algorithm': algorithm.value,
            'avg_waiting_time': stats.avg_waiting_time if stats else None,
            'avg_turnaround_time': stats.avg_turnaround_time if stats else None
        }
        for algorithm, stats in metrics_table.items()
    ]

    return {"success": True, "results": results, "comparison": comparison}


@app.get("/sample-processes")
async def get_sample_processes():
    """샘플 프로세스 데이터 반환"""
    return {
        "samples": [
            {
                "name": "기본 테스트 (I/O 없음)",
                "processes": [
                    {"pid": 1, "arrival_time": 0, "priority": 3, "cpu_burst": 8,
                     "io_burst": 0, "io_request_times": []},
                    {"pid": 2, "arrival_time": 1, "priority": 1, "cpu_burst": 4,
                     "io_burst": 0, "io_request_times": []},
                    {"pid": 3, "arrival_time": 2, "priority": 2, "cpu_burst": 2,
                     "io_burst": 0, "io_request_times": []}
                ]
            },
            {
                "name": "I/O 포함 (3개 프로세스)",
                "processes": [
                    {"pid": 1, "arrival_time": 0, "priority": 2, "cpu_burst": 10,
                     "io_burst": 3, "io_request_times": [6]},
                    {"pid": 2, "arrival_time": 2, "priority": 1, "cpu_burst": 6,
                     "io_burst": 2, "io_request_times": [3]},
                    {"pid": 3, "arrival_time": 4, "priority": 3, "cpu_burst": 5,
                     "io_burst": 0, "io_request_times": []}
                ]
            }
        ]
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
