"""
입력 데이터 파서 및 프로세스 생성 모듈
"""

import random
from typing import List, Optional
from core.process import Process

# 랜덤 생성 범위
MAX_PROCESS_NUM = 3
MAX_ARRIVAL = 20
MAX_CPU_BURST = 20
MAX_IO_BURST = 5
MAX_PRIORITY = 7
MAX_IO_EVENTS = 3


class InputParser:
    """입력 파일 파서 및 랜덤 프로세스 생성기"""

    @staticmethod
    def parse_file(filename: str) -> List[Process]:
        """
        CSV 파일에서 프로세스 정보 읽기

        파일 형식: PID,도착시간,우선순위,CPU버스트,I/O버스트,I/O요청시점
        예: 1,0,3,10,2,"4,7"

        Args:
            filename: 입력 파일 경로

        Returns:
            프로세스 리스트
        """
        processes = []
        seen_pids = set()

        try:
            with open(filename, 'r', encoding='utf-8') as f:
                for line in f:
                    line = line.strip()

                    # 주석 및 빈 줄 제거
                    if not line or line.startswith('#'):
                        continue

                    try:
                        parts = InputParser._parse_line(line)
                        process = InputParser._create_process_from_parts(parts)
                        if process.pid in seen_pids:
                            raise ValueError(f"중복된 PID: {process.pid}")
                        seen_pids.add(process.pid)
                        processes.append(process)
                    except ValueError as e:
                        print(f"경고: 라인 파싱 실패: {line}")
                        print(f"오류: {e}")
                        continue

            print(f"{filename}에서 {len(processes)}개의 프로세스를 성공적으로 로드했습니다")
            return processes

        except FileNotFoundError:
            print(f"오류: 파일 '{filename}'을 찾을 수 없습니다")
            return []

    @staticmethod
    def _parse_line(line: str) -> List[str]:
        """CSV 라인 파싱 (따옴표 처리 포함)"""
        parts = []
        current = ""
        in_quotes = False

        for char in line:
            if char == '"':
                in_quotes = not in_quotes
            elif char == ',' and not in_quotes:
                parts.append(current.strip())
                current = ""
            else:
                current += char

        parts.append(current.strip())
        return parts

    @staticmethod
    def _create_process_from_parts(parts: List[str]) -> Process:
        """파싱된 부분에서 프로세스 객체 생성"""
        if len(parts) < 5:
            raise ValueError(f"잘못된 형식: 5개 이상의 필드가 필요하지만 {len(parts)}개만 있습니다")

        try:
            pid, arrival_time, priority, cpu_burst, io_burst = (int(x) for x in parts[:5])
        except ValueError as e:
            raise ValueError(f"숫자 필드 변환 오류: {e}")

        io_times_str = parts[5].strip('"\'') if len(parts) > 5 else ""
        try:
            io_request_times = [int(x.strip()) for x in io_times_str.split(',') if x.strip()]
        except ValueError as e:
            raise ValueError(f"I/O 요청 시점 파싱 오류: {e}")

        return Process(pid, arrival_time, priority, cpu_burst, io_burst, io_request_times)

    @staticmethod
    def generate_random_processes(num_processes: Optional[int] = None,
                                  seed: Optional[int] = None) -> List[Process]:
        """
        랜덤 프로세스 생성

        Args:
            num_processes: 생성할 프로세스 수 (None이면 1~MAX_PROCESS_NUM 중 랜덤)
            seed: 랜덤 시드

        Returns:
            프로세스 리스트
        """
        if seed is not None:
            random.seed(seed)

        if num_processes is None:
            num_processes = random.randint(1, MAX_PROCESS_NUM)

        processes = []

        for pid in range(1, num_processes + 1):
            cpu_burst = random.randint(1, MAX_CPU_BURST)
            arrival_time = random.randint(0, MAX_ARRIVAL - 1)
            priority = random.randint(1, MAX_PRIORITY)

            # I/O 요청 시점: 남은 CPU가 2 ~ cpu_burst-1 일 때 (중복 없음)
            candidates = range(2, cpu_burst)
            io_count = min(random.randint(1, MAX_IO_EVENTS), len(candidates))
            io_request_times = random.sample(candidates, io_count)
            io_burst = random.randint(1, MAX_IO_BURST)

            processes.append(Process(pid, arrival_time, priority, cpu_burst,
                                     io_burst, io_request_times))

        print(f"{num_processes}개의 랜덤 프로세스를 생성했습니다")
        return processes

    @staticmethod
    def save_processes_to_file(processes: List[Process], filename: str):
        """
        프로세스 리스트를 파일로 저장

        Args:
            processes: 저장할 프로세스 리스트
            filename: 출력 파일 경로
        """
        with open(filename, 'w', encoding='utf-8') as f:
            f.write("# CPU Scheduling Simulator Input Data\n")
            f.write("# Format: PID,ArrivalTime,Priority,CPUBurst,IOBurst,IORequestTimes\n\n")

            for process in processes:
                io_times_str = ','.join(str(x) for x in process.io_request_times)
                f.write(f"{process.pid},{process.arrival_time},{process.priority},"
                        f'{process.cpu_burst},{process.io_burst},"{io_times_str}"\n')

        print(f"{len(processes)}개의 프로세스를 {filename}에 성공적으로 저장했습니다")

    @staticmethod
    def print_process_summary(processes: List[Process]):
        """프로세스 요약 정보 출력"""
        print("\n" + "="*80)
        print("프로세스 요약")
        print("="*80)
        print(f"{'PID':<6} {'도착시간':>8} {'우선순위':>8} {'CPU':>6} "
              f"{'I/O 횟수':>8} {'I/O 시간':>8}  I/O 요청 시점")
        print("-"*80)

        for p in sorted(processes, key=lambda x: x.pid):
            times = ' '.join(str(t) for t in p.io_request_times) or '-'
            print(f"P{p.pid:<5} {p.arrival_time:>8} {p.priority:>8} {p.cpu_burst:>6} "
                  f"{p.io_count:>8} {p.io_burst:>8}  {times}")

        print("="*80)
        print(f"전체 프로세스: {len(processes)}개\n")
