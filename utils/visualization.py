"""
시각화 모듈: Gantt Chart 및 통계 표/그래프 생성
"""

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from typing import List, Dict
from core.scheduler_base import GanttEntry, MetricsTable


class Visualizer:
    """스케줄링 결과 시각화"""

    def __init__(self):
        # 프로세스별 색상 설정
        self.colors = plt.cm.Set3.colors
        self.idle_color = '#CCCCCC'

    @staticmethod
    def format_gantt(gantt_data: List[GanttEntry]) -> str:
        """
        텍스트 Gantt 막대와 시간 축 생성

        예:
            |  P1  | Idle |  P2  |
            0      3      5      9
        """
        bar = "|"
        timeline = "0"
        for entry in gantt_data:
            bar += " Idle |" if entry.is_idle else f"  P{entry.pid:<2} |"
            timeline += f"{entry.end_time:7d}"
        return f"{bar}\n{timeline}"

    def print_gantt(self, gantt_data: List[GanttEntry]):
        """텍스트 Gantt 차트 출력"""
        print("\n===== Gantt Chart =====\n")
        print(self.format_gantt(gantt_data))
        print()

    @staticmethod
    def format_statistics_table(metrics_table: MetricsTable) -> str:
        """정책별 평균 대기/반환 시간 비교 표 (실행하지 않은 정책은 Null)"""
        lines = [
            "===== Scheduler Comparison =====",
            f"{'Algorithm':<12} | {'Avg Waiting':<12} | {'Avg Turnaround':<12}",
            "-------------+--------------+--------------",
        ]
        for algorithm, stats in metrics_table.items():
            if metrics_table.has_data(algorithm):
                lines.append(f"{algorithm.value:<12} | {stats.avg_waiting_time:12.2f} | "
                             f"{stats.avg_turnaround_time:12.2f}")
            else:
                lines.append(f"{algorithm.value:<12} | {'Null':>12} | {'Null':>12}")
        return "\n".join(lines)

    def print_statistics_table(self, metrics_table: MetricsTable):
        """비교 표 출력"""
        print()
        print(self.format_statistics_table(metrics_table))
        print()

    def print_process_details(self, results: Dict):
        """
        개별 프로세스의 상세 정보 출력

        Args:
            results: 알고리즘 실행 결과
        """
        print(f"\n{'='*80}")
        print(f"프로세스 상세 - {results['algorithm']}")
        print(f"{'='*80}")
        print(f"{'PID':<6} {'도착':>6} {'우선순위':>8} {'CPU':>6} {'시작':>6} {'종료':>6} "
              f"{'대기':>6} {'반환':>6} {'응답':>6}")
        print(f"{'-'*80}")

        for process in sorted(results['processes'], key=lambda p: p.pid):
            print(f"P{process.pid:<5} "
                  f"{process.arrival_time:>6} "
                  f"{process.priority:>8} "
                  f"{process.cpu_burst:>6} "
                  f"{process.start_time:>6} "
                  f"{process.finish_time:>6} "
                  f"{process.waiting_time:>6} "
                  f"{process.turnaround_time:>6} "
                  f"{process.response_time:>6}")

        print(f"{'='*80}\n")

    def draw_gantt_chart(self, gantt_data: List[GanttEntry], algorithm_name: str,
                         save_path: str = None, show: bool = True):
        """
        Gantt Chart 그리기 (단일 CPU 타임라인)

        Args:
            gantt_data: Gantt Chart 데이터
            algorithm_name: 알고리즘 이름
            save_path: 저장 경로 (None이면 저장 안 함)
            show: 화면에 표시할지 여부
        """
        if not gantt_data:
            print(f"{algorithm_name}에 대한 Gantt 차트 데이터가 없습니다")
            return

        fig, ax = plt.subplots(figsize=(16, 3))

        for entry in gantt_data:
            duration = entry.end_time - entry.start_time
            if entry.is_idle:
                color = self.idle_color
                label = 'Idle'
            else:
                color = self.colors[entry.pid % len(self.colors)]
                label = f'P{entry.pid}'

            ax.barh(0, duration, left=entry.start_time, height=0.6,
                    color=color, edgecolor='black', linewidth=0.5)
            ax.text(entry.start_time + duration/2, 0, label,
                    ha='center', va='center', fontsize=8, fontweight='bold')

        ax.set_yticks([0])
        ax.set_yticklabels(['CPU'])
        ax.set_xlabel('Time', fontsize=12)
        ax.set_title(f'Gantt Chart - {algorithm_name}', fontsize=14, fontweight='bold')
        ax.set_xticks([0] + [entry.end_time for entry in gantt_data])
        ax.grid(axis='x', alpha=0.3)

        pids = sorted({entry.pid for entry in gantt_data if not entry.is_idle})
        legend_elements = [mpatches.Patch(color=self.colors[pid % len(self.colors)],
                                          label=f'P{pid}') for pid in pids]
        legend_elements.append(mpatches.Patch(color=self.idle_color, label='Idle'))
        ax.legend(handles=legend_elements, loc='upper right')

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"Gantt 차트가 {save_path}에 저장되었습니다")

        if show:
            plt.show()
        else:
            plt.close(fig)

    def compare_algorithms(self, metrics_table: MetricsTable, save_path: str = None,
                           show: bool = True):
        """
        실행한 정책들의 평균 대기/반환 시간 비교 그래프

        Args:
            metrics_table: 정책별 지표 표
            save_path: 저장 경로
            show: 화면에 표시할지 여부
        """
        entries = [(algorithm, stats) for algorithm, stats in metrics_table.items()
                   if metrics_table.has_data(algorithm)]
        if not entries:
            print("비교할 결과가 없습니다")
            return

        algorithms = [algorithm.value for algorithm, _ in entries]
        avg_waiting_times = [stats.avg_waiting_time for _, stats in entries]
        avg_turnaround_times = [stats.avg_turnaround_time for _, stats in entries]

        fig, axes = plt.subplots(1, 2, figsize=(14, 6))
        fig.suptitle('Scheduling Algorithms Performance Comparison',
                     fontsize=16, fontweight='bold')

        panels = [
            (axes[0], avg_waiting_times, 'skyblue', 'Average Waiting Time'),
            (axes[1], avg_turnaround_times, 'lightcoral', 'Average Turnaround Time'),
        ]
        for ax, values, color, title in panels:
            bars = ax.bar(range(len(algorithms)), values, color=color, edgecolor='black')
            ax.set_xticks(range(len(algorithms)))
            ax.set_xticklabels(algorithms, rotation=45, ha='right', fontsize=9)
            ax.set_ylabel(title, fontsize=11)
            ax.set_title(f'{title} Comparison', fontsize=12, fontweight='bold')
            ax.grid(axis='y', alpha=0.3)

            # 값 표시
            for bar, value in zip(bars, values):
                ax.text(bar.get_x() + bar.get_width()/2., bar.get_height(),
                        f'{value:.2f}', ha='center', va='bottom', fontsize=9)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"비교 차트가 {save_path}에 저장되었습니다")

        if show:
            plt.show()
        else:
            plt.close(fig)
