"""
core/parallel - 병렬 처리 모듈

메트릭별 API 호출을 병렬로 실행하고 결과를 안전하게 모읍니다.

주요 구성 요소:
- parallel_map: 항목별 fan-out / fan-in 실행 함수
- ParallelExecutionResult: 성공/실패가 섞인 전체 결과
- categorize_error: 예외를 ErrorCategory로 분류

Example:
    from core.parallel import parallel_map

    def fetch_one(metric_name):
        return client.get_latest(metric_name)

    result = parallel_map(fetch_one, ["CPUUtilization", "SwapUsage"])

    values = result.get_data_map()
    for error in result.get_errors():
        print(f"{error.identifier}: [{error.category.value}] {error.message}")
"""

from .errors import categorize_error, get_error_code, to_task_error
from .executor import ParallelConfig, parallel_map
from .types import ErrorCategory, ParallelExecutionResult, TaskError, TaskResult

__all__: list[str] = [
    # Executor
    "ParallelConfig",
    "parallel_map",
    # Types
    "ErrorCategory",
    "ParallelExecutionResult",
    "TaskError",
    "TaskResult",
    # Errors
    "categorize_error",
    "get_error_code",
    "to_task_error",
]
