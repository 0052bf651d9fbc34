"""
shared/nifcloud/metrics/reducer.py - 최신 데이터포인트 선택

조회 구간의 샘플 중 Timestamp가 가장 늦은 것을 골라 Sum / SampleCount를 계산합니다.
"""

from __future__ import annotations

import math

from core.exceptions import InvalidSample, NoDataError

from .types import MetricSample, MetricSeries


def latest_sample(series: MetricSeries) -> MetricSample:
    """Timestamp가 가장 늦은 샘플 (같은 시각이면 먼저 나온 샘플)

    Raises:
        NoDataError: 샘플이 없는 경우
    """
    latest: MetricSample | None = None
    for sample in series:
        if latest is None or sample.timestamp > latest.timestamp:
            latest = sample

    if latest is None:
        raise NoDataError()
    return latest


def sample_value(sample: MetricSample) -> float:
    """샘플 평균값 (Sum / SampleCount)

    Raises:
        InvalidSample: SampleCount가 0 이하이거나 결과가 유한하지 않은 경우
    """
    if sample.sample_count <= 0:
        raise InvalidSample(f"SampleCount is {sample.sample_count} at {sample.timestamp.isoformat()}")

    value = sample.sum / sample.sample_count
    if not math.isfinite(value):
        raise InvalidSample(f"non-finite value {value} at {sample.timestamp.isoformat()}")
    return value


def reduce_latest(series: MetricSeries) -> float:
    """MetricSeries → 최신 샘플의 값

    Args:
        series: 조회 구간의 샘플 목록

    Returns:
        최신 샘플의 Sum / SampleCount

    Raises:
        NoDataError: 샘플이 없는 경우
        InvalidSample: 값을 계산할 수 없는 경우
    """
    return sample_value(latest_sample(series))
