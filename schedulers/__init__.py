"""
CPU Scheduling Algorithms
"""

from typing import List, Optional

from core.process import Process
from core.scheduler_base import Algorithm, BaseScheduler, MAX_TRACE_LENGTH
from .basic_schedulers import TickScheduler, FCFSScheduler, SJFScheduler, PriorityScheduler
from .round_robin import RoundRobinScheduler

# 정책별 스케줄러 클래스와 기본 파라미터
SCHEDULERS = {
    Algorithm.FCFS: {
        'name': 'FCFS (First-Come, First-Served)',
        'class': FCFSScheduler,
        'params': {}
    },
    Algorithm.NP_SJF: {
        'name': 'SJF (Shortest Job First - Non-preemptive)',
        'class': SJFScheduler,
        'params': {'preemptive': False}
    },
    Algorithm.P_SJF: {
        'name': 'SJF (Shortest Job First - Preemptive/SRTF)',
        'class': SJFScheduler,
        'params': {'preemptive': True}
    },
    Algorithm.NP_PRIORITY: {
        'name': 'Priority Scheduling (Non-preemptive)',
        'class': PriorityScheduler,
        'params': {'preemptive': False}
    },
    Algorithm.P_PRIORITY: {
        'name': 'Priority Scheduling (Preemptive)',
        'class': PriorityScheduler,
        'params': {'preemptive': True}
    },
    Algorithm.RR: {
        'name': 'Round Robin',
        'class': RoundRobinScheduler,
        'params': {}
    },
}


def create_scheduler(algorithm: Algorithm, processes: List[Process],
                     time_quantum: Optional[int] = None,
                     max_trace_length: int = MAX_TRACE_LENGTH) -> BaseScheduler:
    """정책 식별자로 스케줄러 생성 (프로세스는 복사되어 사용됨)"""
    info = SCHEDULERS[algorithm]
    params = dict(info['params'])
    params['max_trace_length'] = max_trace_length
    if algorithm is Algorithm.RR and time_quantum is not None:
        params['time_quantum'] = time_quantum
    return info['class'](processes, **params)


__all__ = [
    'SCHEDULERS',
    'create_scheduler',
    'TickScheduler',
    'FCFSScheduler',
    'SJFScheduler',
    'PriorityScheduler',
    'RoundRobinScheduler'
]
