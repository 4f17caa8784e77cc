"""텍스트 표와 matplotlib 차트 테스트"""

from core.process import Process
from core.scheduler_base import Algorithm, GanttEntry, MetricsTable, SchedulerStats, IDLE
from schedulers import FCFSScheduler
from utils.visualization import Visualizer


class TestTextOutput:
    """Gantt 막대와 비교 표"""

    def test_format_gantt(self) -> None:
        text = Visualizer.format_gantt([
            GanttEntry(1, 0, 3),
            GanttEntry(IDLE, 3, 5),
            GanttEntry(2, 5, 9),
        ])
        bar, timeline = text.splitlines()
        assert bar == "|  P1  | Idle |  P2  |"
        assert timeline.split() == ["0", "3", "5", "9"]

    def test_statistics_table_shows_null_for_unrun(self) -> None:
        table = MetricsTable()
        table.record(Algorithm.FCFS, SchedulerStats(1.5, 5.5, 2))
        lines = Visualizer.format_statistics_table(table).splitlines()

        fcfs_row = next(line for line in lines if line.startswith("FCFS"))
        assert "1.50" in fcfs_row and "5.50" in fcfs_row
        rr_row = next(line for line in lines if line.startswith("RR"))
        assert rr_row.count("Null") == 2
        assert table.has_data(Algorithm.FCFS) and not table.has_data(Algorithm.RR)

    def test_process_details(self, fcfs_example, capsys) -> None:
        result = FCFSScheduler(fcfs_example).run()
        Visualizer().print_process_details(result)
        out = capsys.readouterr().out
        assert "프로세스 상세 - FCFS" in out
        assert "P2" in out


class TestCharts:
    """PNG 파일 저장"""

    def test_gantt_chart_saved(self, fcfs_example, tmp_path) -> None:
        result = FCFSScheduler(fcfs_example).run()
        path = tmp_path / "gantt.png"
        Visualizer().draw_gantt_chart(result['gantt_chart'], result['algorithm'],
                                      save_path=str(path), show=False)
        assert path.exists()

    def test_empty_gantt_chart_skipped(self, tmp_path, capsys) -> None:
        path = tmp_path / "gantt.png"
        Visualizer().draw_gantt_chart([], "FCFS", save_path=str(path), show=False)
        assert not path.exists()

    def test_comparison_chart_saved(self, tmp_path) -> None:
        table = MetricsTable()
        table.record(Algorithm.FCFS, SchedulerStats(1.5, 5.5, 2))
        table.record(Algorithm.RR, SchedulerStats(2.0, 6.0, 2))
        path = tmp_path / "comparison.png"
        Visualizer().compare_algorithms(table, save_path=str(path), show=False)
        assert path.exists()

    def test_comparison_without_data(self, tmp_path, capsys) -> None:
        path = tmp_path / "comparison.png"
        Visualizer().compare_algorithms(MetricsTable(), save_path=str(path), show=False)
        assert not path.exists()
        assert "비교할 결과가 없습니다" in capsys.readouterr().out
