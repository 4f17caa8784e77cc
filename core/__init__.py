"""
Core modules for CPU Scheduling Simulator
"""

from .process import Process, ProcessState, create_process_copy, check_unique_pids
from .bounded_queue import BoundedQueue
from .errors import SimulationError, QueueCapacityError, TraceCapacityError
from .selection import SelectionPolicy
from .scheduler_base import (BaseScheduler, SchedulerStats, MetricsTable, ExecutionTrace,
                             GanttEntry, Algorithm, TickOutcome, run_io_stage, IDLE,
                             MAX_TRACE_LENGTH, DEFAULT_TIME_QUANTUM)

__all__ = [
    'Process',
    'ProcessState',
    'create_process_copy',
    'check_unique_pids',
    'BoundedQueue',
    'SimulationError',
    'QueueCapacityError',
    'TraceCapacityError',
    'SelectionPolicy',
    'BaseScheduler',
    'SchedulerStats',
    'MetricsTable',
    'ExecutionTrace',
    'GanttEntry',
    'Algorithm',
    'TickOutcome',
    'run_io_stage',
    'IDLE',
    'MAX_TRACE_LENGTH',
    'DEFAULT_TIME_QUANTUM'
]
