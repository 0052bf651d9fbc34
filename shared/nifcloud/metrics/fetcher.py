"""
shared/nifcloud/metrics/fetcher.py - 메트릭 병렬 조회

수집 사이클 한 번에 대해 메트릭마다 독립적으로
조회 구간 계산 → API 호출 → 디코딩 → 최신값 계산을 병렬로 수행합니다.

한 메트릭의 실패는 "<메트릭>: [<분류>] <원인>" 형태로 로깅한 뒤 결과에서 제외하며,
다른 메트릭의 조회를 중단시키지 않습니다.

Example:
    from shared.nifcloud.client import RdbClient
    from shared.nifcloud.metrics import MetricFetcher, metric_names

    client = RdbClient.for_region("east-1", credential)
    values = MetricFetcher(client).fetch("mydb", metric_names())
    # {"CPUUtilization": 11.0, "FreeableMemory": 1.2e9, ...}
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from core.config import settings
from core.parallel import ErrorCategory, ParallelConfig, parallel_map

from .reducer import reduce_latest
from .types import FetchWindow

if TYPE_CHECKING:
    from shared.nifcloud.client import RdbClient

logger = logging.getLogger(__name__)

DIMENSION_NAME = "DBInstanceIdentifier"


def build_metric_params(identifier: str, metric_name: str, window: FetchWindow) -> dict[str, str]:
    """NiftyGetMetricStatistics 요청 파라미터 생성"""
    params = {
        "Dimensions.member.1.Name": DIMENSION_NAME,
        "Dimensions.member.1.Value": identifier,
        "MetricName": metric_name,
    }
    params.update(window.to_params())
    return params


class MetricFetcher:
    """메트릭별 최신값 병렬 조회기

    Attributes:
        client: NiftyGetMetricStatistics를 호출할 RdbClient
        config: 병렬 실행 설정
    """

    def __init__(
        self,
        client: RdbClient,
        clock: Callable[[], datetime] | None = None,
        max_workers: int = settings.MAX_WORKERS,
    ):
        """초기화

        Args:
            client: RdbClient (리전/자격 증명 검증이 끝난 상태)
            clock: 현재 UTC 시각 함수 (테스트용, 기본: datetime.now(timezone.utc))
            max_workers: 동시 조회 스레드 상한
        """
        self.client = client
        self.config = ParallelConfig(max_workers=max_workers)
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def get_last_point(self, identifier: str, metric_name: str) -> float:
        """메트릭 하나의 최신값 조회

        Raises:
            TransportError, DecodeError, NoDataError, InvalidSample
        """
        window = FetchWindow.ending_at(self._clock())
        params = build_metric_params(identifier, metric_name, window)
        series = self.client.nifty_get_metric_statistics(params)
        return reduce_latest(series)

    def fetch(self, identifier: str, metric_names: Iterable[str]) -> dict[str, float]:
        """모든 메트릭을 병렬 조회하여 {메트릭 이름: 값} 반환

        모든 조회가 끝난 뒤에 반환합니다. 실패한 메트릭은 결과에 포함되지 않습니다.

        Args:
            identifier: DB 인스턴스 식별자
            metric_names: 조회할 메트릭 이름들

        Returns:
            ResultMap (성공한 메트릭만)
        """
        result = parallel_map(
            lambda metric_name: self.get_last_point(identifier, metric_name),
            metric_names,
            self.config,
        )

        errors = result.get_errors()
        for error in errors:
            logger.warning(f"{error.identifier}: [{error.category.value}] {error.message}")

        if any(error.category == ErrorCategory.ACCESS_DENIED for error in errors):
            logger.error(f"[{identifier}] 인증 실패: Access Key ID / Secret Access Key를 확인하세요")

        if result.has_failures_only():
            logger.error(f"[{identifier}] 모든 메트릭 조회 실패 ({result.error_count}건)")

        stats: dict[str, float] = result.get_data_map()
        logger.info(f"[{identifier}] 메트릭 수집 완료: 성공 {result.success_count}, 실패 {result.error_count}")
        return stats
