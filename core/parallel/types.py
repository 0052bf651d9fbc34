"""
core/parallel/types.py - 병렬 실행 결과 타입

작업 하나의 결과(TaskResult)와 전체 실행 결과(ParallelExecutionResult)를
불변 구조로 수집합니다. 워커는 결과를 반환만 하고, 합치는 것은
호출 스레드(coordinator)가 담당합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorCategory(Enum):
    """작업 실패 분류"""

    NETWORK = "network"  # 연결 실패
    TIMEOUT = "timeout"  # 요청 타임아웃
    ACCESS_DENIED = "access_denied"  # 인증/서명 실패
    HTTP_ERROR = "http_error"  # 2xx 이외 응답
    DECODE = "decode"  # 응답 본문 파싱 실패
    NO_DATA = "no_data"  # 데이터포인트 없음
    INVALID_SAMPLE = "invalid_sample"  # 계산 불가능한 샘플
    UNKNOWN = "unknown"


@dataclass
class TaskError:
    """작업 실패 정보

    Attributes:
        identifier: 작업 식별자 (메트릭 이름)
        category: 에러 분류
        error_code: 에러 코드 (예: "NoDataError", "AuthFailure")
        message: 에러 메시지
        timestamp: 발생 시각
        original_exception: 원본 예외
    """

    identifier: str
    category: ErrorCategory
    error_code: str
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    original_exception: BaseException | None = field(default=None, repr=False)

    def __str__(self) -> str:
        return f"[{self.identifier}] {self.error_code}: {self.message}"


@dataclass
class TaskResult(Generic[T]):
    """작업 하나의 실행 결과"""

    identifier: str
    success: bool
    data: T | None = None
    error: TaskError | None = None
    duration_ms: float = 0.0

    def __str__(self) -> str:
        status = "OK" if self.success else "FAIL"
        return f"[{self.identifier}] {status} ({self.duration_ms:.0f}ms)"


@dataclass(frozen=True)
class ParallelExecutionResult(Generic[T]):
    """전체 병렬 실행 결과

    Attributes:
        results: 완료 순서대로 수집된 TaskResult
    """

    results: tuple[TaskResult[T], ...] = ()

    @property
    def successful(self) -> list[TaskResult[T]]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[TaskResult[T]]:
        return [r for r in self.results if not r.success]

    @property
    def total_count(self) -> int:
        return len(self.results)

    @property
    def success_count(self) -> int:
        return len(self.successful)

    @property
    def error_count(self) -> int:
        return len(self.failed)

    def has_failures_only(self) -> bool:
        return self.total_count > 0 and self.success_count == 0

    def get_data_map(self) -> dict[str, T]:
        """성공한 작업의 {identifier: data} 딕셔너리 (None 데이터 제외)"""
        return {r.identifier: r.data for r in self.results if r.success and r.data is not None}

    def get_errors(self) -> list[TaskError]:
        return [r.error for r in self.results if r.error is not None]
