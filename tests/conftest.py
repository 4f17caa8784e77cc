import matplotlib

# 테스트에서는 화면 없이 파일로만 그림
matplotlib.use("Agg")

import pytest

from core.process import Process


@pytest.fixture
def fcfs_example():
    """P1(도착 0, CPU 5), P2(도착 2, CPU 3), I/O 없음"""
    return [
        Process(pid=1, arrival_time=0, priority=1, cpu_burst=5),
        Process(pid=2, arrival_time=2, priority=1, cpu_burst=3),
    ]


@pytest.fixture
def srtf_example():
    """P1(도착 0, CPU 8), P2(도착 1, CPU 4), I/O 없음"""
    return [
        Process(pid=1, arrival_time=0, priority=1, cpu_burst=8),
        Process(pid=2, arrival_time=1, priority=1, cpu_burst=4),
    ]
