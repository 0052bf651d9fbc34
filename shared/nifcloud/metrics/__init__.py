"""NIFCLOUD RDB 메트릭 조회.

하위 모듈:
- types: MetricSample, MetricSeries, FetchWindow
- decoder: NiftyGetMetricStatistics XML 응답 디코딩
- reducer: 최신 데이터포인트 값 계산
- fetcher: 메트릭별 병렬 조회 (MetricFetcher)
- catalog: 수집 대상 메트릭과 그래프 정의
"""

from .catalog import GRAPHS, GraphDef, MetricDef, graph_definition, metric_names
from .decoder import decode_metric_statistics
from .fetcher import MetricFetcher, build_metric_params
from .reducer import reduce_latest
from .types import FetchWindow, MetricSample, MetricSeries

__all__ = [
    "GRAPHS",
    "GraphDef",
    "MetricDef",
    "graph_definition",
    "metric_names",
    "decode_metric_statistics",
    "MetricFetcher",
    "build_metric_params",
    "reduce_latest",
    "FetchWindow",
    "MetricSample",
    "MetricSeries",
]
