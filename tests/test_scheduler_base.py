"""I/O 단계, 실행 기록, 통계 테스트"""

import pytest

from core.bounded_queue import BoundedQueue
from core.errors import TraceCapacityError
from core.process import Process, ProcessState
from core.scheduler_base import (Algorithm, ExecutionTrace, GanttEntry, MetricsTable,
                                 SchedulerStats, run_io_stage, IDLE)


def waiting_process(pid, io_remaining):
    process = Process(pid=pid, arrival_time=0, priority=1, cpu_burst=5,
                      io_burst=io_remaining, io_request_times=[3])
    process.start_io()
    return process


class TestIOStage:
    """waiting 큐 1틱 진행"""

    def test_finished_io_moves_to_ready(self) -> None:
        waiting = BoundedQueue(4)
        ready = BoundedQueue(4)
        waiting.enqueue(waiting_process(1, 1))
        waiting.enqueue(waiting_process(2, 3))

        completed = run_io_stage(waiting, ready)

        assert [p.pid for p in completed] == [1]
        assert [p.pid for p in ready] == [1]
        assert ready.front().state is ProcessState.READY
        assert [p.pid for p in waiting] == [2]
        assert waiting.front().io_remaining == 2

    def test_each_process_advanced_once_per_call(self) -> None:
        waiting = BoundedQueue(4)
        ready = BoundedQueue(4)
        for pid in (1, 2, 3):
            waiting.enqueue(waiting_process(pid, 5))

        run_io_stage(waiting, ready)

        assert [p.io_remaining for p in waiting] == [4, 4, 4]
        assert [p.pid for p in waiting] == [1, 2, 3]

    def test_empty_waiting_queue(self) -> None:
        assert run_io_stage(BoundedQueue(2), BoundedQueue(2)) == []


class TestExecutionTrace:
    """틱 기록과 파생 값"""

    def make_trace(self, labels):
        trace = ExecutionTrace()
        for label in labels:
            if label == IDLE:
                trace.record_idle()
            else:
                trace.record(label)
        return trace

    def test_segments_group_runs(self) -> None:
        trace = self.make_trace([1, 1, IDLE, 2, 2, 1])
        assert trace.segments() == [
            GanttEntry(1, 0, 2),
            GanttEntry(IDLE, 2, 3),
            GanttEntry(2, 3, 5),
            GanttEntry(1, 5, 6),
        ]

    def test_counts_and_utilization(self) -> None:
        trace = self.make_trace([1, IDLE, 2, IDLE])
        assert len(trace) == 4
        assert trace.idle_ticks == 2
        assert trace.busy_ticks == 2
        assert trace.cpu_utilization() == pytest.approx(50.0)

    def test_context_switches_ignore_idle(self) -> None:
        trace = self.make_trace([1, 1, IDLE, 1, 2, 2, 1])
        assert trace.context_switches() == 2

    def test_record_beyond_capacity_raises(self) -> None:
        trace = ExecutionTrace(max_length=2)
        trace.record(1)
        trace.record_idle()
        with pytest.raises(TraceCapacityError):
            trace.record(1)
        assert len(trace) == 2

    def test_empty_trace(self) -> None:
        trace = ExecutionTrace()
        assert trace.segments() == []
        assert trace.cpu_utilization() == 0.0


class TestStatistics:
    """평균 계산과 정책별 지표 표"""

    def finished(self, pid, arrival, finish, cpu_burst):
        process = Process(pid=pid, arrival_time=arrival, priority=1, cpu_burst=cpu_burst)
        process.finish(finish)
        return process

    def test_averages(self) -> None:
        stats = SchedulerStats.from_processes([
            self.finished(1, 0, 5, 5),
            self.finished(2, 2, 8, 3),
        ])
        assert stats.avg_waiting_time == pytest.approx(1.5)
        assert stats.avg_turnaround_time == pytest.approx(5.5)
        assert stats.process_count == 2

    def test_no_processes_means_no_stats(self) -> None:
        assert SchedulerStats.from_processes([]) is None

    def test_metrics_table_starts_unset(self) -> None:
        table = MetricsTable()
        assert [algorithm for algorithm, _ in table.items()] == list(Algorithm)
        assert table.completed() == []
        assert not table.has_data(Algorithm.RR)

    def test_metrics_table_overwrites_entry(self) -> None:
        table = MetricsTable()
        table.record(Algorithm.FCFS, SchedulerStats(1.0, 2.0, 1))
        table.record(Algorithm.FCFS, SchedulerStats(3.0, 4.0, 1))
        assert table.get(Algorithm.FCFS).avg_waiting_time == 3.0
        assert table.completed() == [Algorithm.FCFS]
