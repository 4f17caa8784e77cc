"""Round Robin 타임 퀀텀 테스트"""

import pytest

from core.process import Process
from core.scheduler_base import Algorithm, MetricsTable, DEFAULT_TIME_QUANTUM
from schedulers import RoundRobinScheduler, create_scheduler


def quantum_expiries(result):
    return sum(1 for line in result['event_log'] if "time quantum expired" in line)


class TestQuantumBoundary:
    """퀀텀 만료 시 ready 큐 뒤로 이동"""

    @pytest.mark.parametrize("quantum", [1, 2, 3, 5])
    def test_single_process_requeued_once_per_quantum(self, quantum) -> None:
        processes = [Process(pid=1, arrival_time=0, priority=1, cpu_burst=quantum + 2)]
        result = RoundRobinScheduler(processes, time_quantum=quantum).run()
        assert result['trace'] == [1] * (quantum + 2)
        # 남은 CPU가 퀀텀 이하가 되면 마지막 할당에서 완료
        assert quantum_expiries(result) == (quantum + 2 - 1) // quantum
        assert result['processes'][0].turnaround_time == quantum + 2

    def test_exact_quantum_completes_without_expiry(self) -> None:
        processes = [Process(pid=1, arrival_time=0, priority=1, cpu_burst=3)]
        result = RoundRobinScheduler(processes, time_quantum=3).run()
        assert quantum_expiries(result) == 0

    def test_two_processes_alternate(self) -> None:
        processes = [
            Process(pid=1, arrival_time=0, priority=1, cpu_burst=5),
            Process(pid=2, arrival_time=0, priority=1, cpu_burst=3),
        ]
        result = RoundRobinScheduler(processes, time_quantum=2).run()
        assert result['trace'] == [1, 1, 2, 2, 1, 1, 2, 1]
        done = {p.pid: p for p in result['processes']}
        assert (done[1].waiting_time, done[1].turnaround_time) == (3, 8)
        assert (done[2].waiting_time, done[2].turnaround_time) == (4, 7)

    def test_arrival_during_quantum_goes_first(self) -> None:
        processes = [
            Process(pid=1, arrival_time=0, priority=1, cpu_burst=4),
            Process(pid=2, arrival_time=1, priority=1, cpu_burst=2),
        ]
        result = RoundRobinScheduler(processes, time_quantum=2).run()
        assert result['trace'] == [1, 1, 2, 2, 1, 1]

    def test_io_request_ends_dispatch_early(self) -> None:
        processes = [
            Process(pid=1, arrival_time=0, priority=1, cpu_burst=6,
                    io_burst=3, io_request_times=[5]),
            Process(pid=2, arrival_time=0, priority=1, cpu_burst=2),
        ]
        result = RoundRobinScheduler(processes, time_quantum=4).run()
        assert result['trace'][:3] == [1, 1, 2]
        assert quantum_expiries(result) == 0


class TestRoundRobinConfiguration:
    """파라미터와 지표 저장"""

    def test_default_quantum(self) -> None:
        assert RoundRobinScheduler([]).time_quantum == DEFAULT_TIME_QUANTUM

    def test_invalid_quantum(self) -> None:
        with pytest.raises(ValueError):
            RoundRobinScheduler([], time_quantum=0)

    def test_registry_passes_quantum(self) -> None:
        scheduler = create_scheduler(Algorithm.RR, [], time_quantum=2)
        assert scheduler.time_quantum == 2

    def test_metrics_stored_under_rr(self) -> None:
        table = MetricsTable()
        processes = [Process(pid=1, arrival_time=0, priority=1, cpu_burst=4)]
        RoundRobinScheduler(processes).run(metrics_table=table)
        assert table.completed() == [Algorithm.RR]
        assert table.get(Algorithm.RR).avg_turnaround_time == pytest.approx(4.0)
