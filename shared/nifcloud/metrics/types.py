"""
shared/nifcloud/metrics/types.py - 메트릭 데이터 타입

- MetricSample: 집계 버킷 하나 (Timestamp, Sum, SampleCount)
- MetricSeries: 한 메트릭의 조회 구간 내 샘플 목록
- FetchWindow: 조회 구간 [now - 180s, now]
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from core.config import settings


@dataclass(frozen=True)
class MetricSample:
    """NiftyGetMetricStatistics 응답의 데이터포인트 하나

    Attributes:
        timestamp: 버킷 시각 (UTC aware)
        sum: 버킷 합계
        sample_count: 버킷 샘플 수
    """

    timestamp: datetime
    sum: float
    sample_count: int


@dataclass(frozen=True)
class MetricSeries:
    """한 메트릭의 샘플 목록 (응답 순서 유지, 캐시하지 않음)

    Attributes:
        samples: MetricSample 튜플
        label: 응답의 Label (보통 메트릭 이름)
    """

    samples: tuple[MetricSample, ...] = ()
    label: str = ""

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples)

    @property
    def is_empty(self) -> bool:
        return not self.samples


@dataclass(frozen=True)
class FetchWindow:
    """메트릭 조회 구간

    end는 호출 시각(UTC), start는 end에서 FETCH_WINDOW_SECONDS만큼 이전입니다.
    드물게 보고되는 메트릭도 최소 1개의 버킷이 포함되도록 3분 폭을 사용합니다.

    Attributes:
        start: 구간 시작 (UTC aware)
        end: 구간 끝 (UTC aware)
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if not self.start < self.end:
            raise ValueError(f"FetchWindow start must be before end: {self.start} >= {self.end}")

    @classmethod
    def ending_at(cls, now: datetime, seconds: int = settings.FETCH_WINDOW_SECONDS) -> FetchWindow:
        """now를 끝으로 하는 구간 생성 (naive datetime은 UTC로 간주)"""
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        end = now.astimezone(timezone.utc)
        return cls(start=end - timedelta(seconds=seconds), end=end)

    @classmethod
    def now(cls) -> FetchWindow:
        return cls.ending_at(datetime.now(timezone.utc))

    @property
    def width(self) -> timedelta:
        return self.end - self.start

    def to_params(self, time_format: str = settings.WINDOW_TIME_FORMAT) -> dict[str, str]:
        """StartTime / EndTime API 파라미터"""
        return {
            "StartTime": self.start.strftime(time_format),
            "EndTime": self.end.strftime(time_format),
        }
