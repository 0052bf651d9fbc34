"""
tests/shared/nifcloud/metrics/test_metric_reducer.py - 최신 데이터포인트 계산 테스트
"""

from datetime import datetime, timedelta, timezone

import pytest

from core.exceptions import InvalidSample, NoDataError
from shared.nifcloud.metrics.reducer import latest_sample, reduce_latest, sample_value
from shared.nifcloud.metrics.types import MetricSample, MetricSeries

T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def _sample(minutes: int, total: float, count: int) -> MetricSample:
    return MetricSample(timestamp=T0 + timedelta(minutes=minutes), sum=total, sample_count=count)


class TestReduceLatest:
    """reduce_latest 테스트"""

    def test_latest_of_three(self):
        """t1 < t2 < t3 → t3의 값 (30 / 6 = 5.0)"""
        series = MetricSeries(samples=(_sample(0, 10, 5), _sample(1, 20, 4), _sample(2, 30, 6)))
        assert reduce_latest(series) == 5.0

    def test_order_independent(self):
        """응답 순서와 무관하게 최신 샘플 선택"""
        series = MetricSeries(samples=(_sample(2, 30, 6), _sample(0, 10, 5), _sample(1, 20, 4)))
        assert reduce_latest(series) == 5.0

    def test_single_sample(self):
        assert reduce_latest(MetricSeries(samples=(_sample(0, 7, 2),))) == 3.5

    def test_empty_series(self):
        """빈 series는 NoDataError"""
        with pytest.raises(NoDataError):
            reduce_latest(MetricSeries())

    def test_tie_first_wins(self):
        """같은 시각이면 먼저 나온 샘플"""
        series = MetricSeries(samples=(_sample(1, 10, 1), _sample(1, 99, 1), _sample(0, 50, 1)))
        assert latest_sample(series).sum == 10

    def test_zero_sample_count(self):
        """SampleCount 0은 InvalidSample"""
        series = MetricSeries(samples=(_sample(0, 10, 5), _sample(1, 20, 0)))
        with pytest.raises(InvalidSample):
            reduce_latest(series)

    def test_zero_count_on_older_sample_ignored(self):
        """오래된 샘플의 SampleCount 0은 영향 없음"""
        series = MetricSeries(samples=(_sample(0, 10, 0), _sample(1, 20, 4)))
        assert reduce_latest(series) == 5.0

    def test_infinite_sum(self):
        """비유한 값은 InvalidSample"""
        with pytest.raises(InvalidSample):
            sample_value(_sample(0, float("inf"), 1))

    def test_zero_value_allowed(self):
        """0.0은 정상 값"""
        assert sample_value(_sample(0, 0, 3)) == 0.0
