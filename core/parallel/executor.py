"""
core/parallel/executor.py - 병렬 작업 실행기

항목별로 독립적인 작업을 ThreadPoolExecutor로 동시에 실행하고
모든 작업이 끝날 때까지 기다린 뒤(fan-out / fan-in) 결과를 모읍니다.

워커는 결과(TaskResult)를 반환만 하며, 결과 병합은 호출 스레드가
as_completed 루프에서 단독으로 수행합니다. 공유 가변 상태가 없으므로
별도의 락이 필요 없습니다.

주요 구성 요소:
- ParallelConfig: 병렬 실행 설정 (워커 수)
- parallel_map: 항목별 병렬 실행 함수

Example:
    from core.parallel import parallel_map

    result = parallel_map(fetch_one, ["CPUUtilization", "FreeableMemory"])
    values = result.get_data_map()
    print(f"성공: {result.success_count}, 실패: {result.error_count}")
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import TypeVar

from .errors import to_task_error
from .types import ParallelExecutionResult, TaskResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _clear_exception_chain(e: BaseException) -> None:
    """traceback + chained exception 메모리 누수 방지"""
    e.__traceback__ = None
    if e.__context__ is not None:
        e.__context__.__traceback__ = None
    if e.__cause__ is not None:
        e.__cause__.__traceback__ = None


@dataclass
class ParallelConfig:
    """병렬 실행 설정

    Attributes:
        max_workers: 최대 동시 스레드 수 (1~100). 작업 수보다 크면 작업 수로 줄어듭니다.
    """

    max_workers: int = 20

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.max_workers > 100:
            self.max_workers = 100


def _execute_single(func: Callable[[str], T], identifier: str) -> TaskResult[T]:
    """작업 하나 실행 (워커 스레드)

    예외는 전파하지 않고 실패한 TaskResult로 변환합니다.
    """
    start = time.monotonic()
    try:
        data = func(identifier)
    except Exception as e:
        duration_ms = (time.monotonic() - start) * 1000
        _clear_exception_chain(e)
        return TaskResult(
            identifier=identifier,
            success=False,
            error=to_task_error(identifier, e),
            duration_ms=duration_ms,
        )

    return TaskResult(
        identifier=identifier,
        success=True,
        data=data,
        duration_ms=(time.monotonic() - start) * 1000,
    )


def parallel_map(
    func: Callable[[str], T],
    identifiers: Iterable[str],
    config: ParallelConfig | None = None,
) -> ParallelExecutionResult[T]:
    """식별자마다 func를 병렬 실행

    모든 작업을 먼저 제출한 뒤 전부 완료될 때까지 기다립니다 (조기 반환 없음).
    작업 간에는 서로를 기다리지 않습니다.

    Args:
        func: (identifier) -> T 함수
        identifiers: 작업 식별자 목록 (중복은 한 번만 실행)
        config: 병렬 실행 설정 (None이면 기본값)

    Returns:
        ParallelExecutionResult[T]: 전체 실행 결과
    """
    config = config or ParallelConfig()
    tasks = list(dict.fromkeys(identifiers))

    if not tasks:
        logger.debug("실행할 작업이 없습니다")
        return ParallelExecutionResult()

    max_workers = min(config.max_workers, len(tasks))
    logger.debug(f"병렬 실행 시작: {len(tasks)}개 작업, max_workers={max_workers}")

    results: list[TaskResult[T]] = []
    start_time = time.monotonic()

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="fetch") as executor:
        futures = {executor.submit(_execute_single, func, identifier): identifier for identifier in tasks}

        for future in as_completed(futures):
            identifier = futures[future]
            try:
                results.append(future.result())
            except Exception as e:
                # 예상치 못한 executor 에러
                logger.error(f"작업 실행 중 예외 [{identifier}]: {e}")
                _clear_exception_chain(e)
                results.append(
                    TaskResult(
                        identifier=identifier,
                        success=False,
                        error=to_task_error(identifier, e),
                    )
                )

    total_time = (time.monotonic() - start_time) * 1000
    exec_result = ParallelExecutionResult(results=tuple(results))

    logger.debug(
        f"병렬 실행 완료: 성공 {exec_result.success_count}, 실패 {exec_result.error_count}, 총 {total_time:.0f}ms"
    )

    return exec_result
