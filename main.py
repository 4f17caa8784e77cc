#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CPU 스케줄링 시뮬레이터 - 메인 실행 파일
알고리즘 선택 기능 포함
"""

import sys
import os
from typing import Dict, List, Optional

# 모듈 임포트
from core.errors import SimulationError
from core.process import Process
from core.scheduler_base import Algorithm, MetricsTable
from schedulers import SCHEDULERS, create_scheduler
from utils.input_parser import InputParser
from utils.visualization import Visualizer


# 메뉴 번호 → 정책
MENU_CHOICES = {str(i): algorithm for i, algorithm in enumerate(Algorithm, 1)}
RUN_ALL_CHOICE = '7'
SAVE_CHOICE = '8'
QUIT_CHOICE = '0'


def print_banner():
    """배너 출력"""
    print("\n" + "="*80)
    print(" "*25 + "CPU 스케줄링 시뮬레이터")
    print("="*80 + "\n")


def print_algorithm_menu():
    """알고리즘 선택 메뉴 출력"""
    print("\nSelect Algorithm:")
    for key, algorithm in MENU_CHOICES.items():
        print(f" {key}) {SCHEDULERS[algorithm]['name']}")
    print(f" {RUN_ALL_CHOICE}) All Algorithms")
    print(f" {SAVE_CHOICE}) Save Charts")
    print(f" {QUIT_CHOICE}) Quit")


def parse_choice(choice: str) -> Optional[str]:
    """메뉴 입력 검증 (잘못된 입력이면 None)"""
    choice = choice.strip()
    if choice in MENU_CHOICES or choice in (RUN_ALL_CHOICE, SAVE_CHOICE, QUIT_CHOICE):
        return choice
    return None


def run_single_algorithm(algorithm: Algorithm, processes: List[Process],
                         metrics_table: MetricsTable, verbose: bool = False) -> Optional[Dict]:
    """단일 알고리즘 실행 후 Gantt 차트, 프로세스 상세, 비교 표 출력"""
    visualizer = Visualizer()

    try:
        scheduler = create_scheduler(algorithm, processes)
        result = scheduler.run(verbose=verbose, metrics_table=metrics_table)
    except SimulationError as e:
        print(f"[오류] {algorithm.value} 실행 실패: {e}")
        return None

    visualizer.print_gantt(result['gantt_chart'])
    visualizer.print_process_details(result)
    visualizer.print_statistics_table(metrics_table)
    return result


def run_all_algorithms(processes: List[Process], metrics_table: MetricsTable,
                       verbose: bool = False) -> List[Dict]:
    """모든 알고리즘 실행"""
    results = []
    total = len(MENU_CHOICES)

    for key, algorithm in MENU_CHOICES.items():
        print(f"[{key}/{total}] {SCHEDULERS[algorithm]['name']} 실행 중...")
        result = run_single_algorithm(algorithm, processes, metrics_table, verbose)
        if result:
            results.append(result)

    return results


def save_results(results: Dict[str, Dict], metrics_table: MetricsTable,
                 output_dir: str = "simulation_results"):
    """이번 세션의 Gantt 차트와 비교 차트를 PNG로 저장"""
    if not results:
        print("[정보] 저장할 결과가 없습니다. 먼저 알고리즘을 실행하세요.")
        return

    os.makedirs(output_dir, exist_ok=True)
    visualizer = Visualizer()

    print("Gantt 차트 생성 중...")
    for name, result in results.items():
        save_path = os.path.join(output_dir, f"gantt_{name}.png")
        visualizer.draw_gantt_chart(result['gantt_chart'], name,
                                    save_path=save_path, show=False)

    if len(metrics_table.completed()) > 1:
        comparison_path = os.path.join(output_dir, "comparison.png")
        visualizer.compare_algorithms(metrics_table, save_path=comparison_path, show=False)

    print(f"[완료] 차트가 '{output_dir}/' 디렉토리에 저장되었습니다\n")


def ask_verbose() -> bool:
    """이벤트 로그 출력 여부 선택"""
    choice = input("\n이벤트 로그를 출력하시겠습니까? (y/n, 기본값=n): ").strip().lower()
    return choice == 'y'


def load_processes() -> List[Process]:
    """입력 옵션 선택 후 프로세스 로드"""
    print("[입력 옵션]")
    print("  1. 랜덤 데이터 (자동 생성)")
    print("  2. 파일에서 읽기")

    while True:
        choice = input("\n입력 옵션 선택 (1-2): ").strip()

        if choice == '1':
            seed_str = input("랜덤 시드 (엔터 = 무작위): ").strip()
            seed = int(seed_str) if seed_str.isdigit() else None
            return InputParser.generate_random_processes(seed=seed)

        if choice == '2':
            filename = input("파일 경로: ").strip()
            processes = InputParser.parse_file(filename)
            if processes:
                return processes
            print("[오류] 프로세스 로드 실패 또는 파일이 비어있습니다.")
            continue

        print("[오류] 1 또는 2를 입력하세요.")


def main():
    """메인 함수"""
    print_banner()

    processes = load_processes()
    InputParser.print_process_summary(processes)
    verbose = ask_verbose()

    # 정책별 지표는 프로그램이 끝날 때까지만 유지
    metrics_table = MetricsTable()
    session_results: Dict[str, Dict] = {}

    while True:
        print_algorithm_menu()
        choice = parse_choice(input("Choice> "))

        if choice is None:
            print("Invalid choice")
            continue

        if choice == QUIT_CHOICE:
            break

        if choice == SAVE_CHOICE:
            save_results(session_results, metrics_table)
        elif choice == RUN_ALL_CHOICE:
            for result in run_all_algorithms(processes, metrics_table, verbose):
                session_results[result['algorithm']] = result
        else:
            result = run_single_algorithm(MENU_CHOICES[choice], processes, metrics_table,
                                          verbose)
            if result:
                session_results[result['algorithm']] = result

    print("\nCPU 스케줄링 시뮬레이터를 사용해 주셔서 감사합니다!")
    print("="*80 + "\n")


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, EOFError):
        print("\n\n사용자에 의해 시뮬레이션이 중단되었습니다.")
        print("="*80 + "\n")
        sys.exit(0)
