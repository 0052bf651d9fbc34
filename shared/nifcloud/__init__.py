"""NIFCLOUD 관련 공유 유틸리티.

하위 모듈:
- client: RDB API 클라이언트 (서명된 요청 전송)
- metrics: NiftyGetMetricStatistics 응답 디코딩 / 최신값 계산 / 병렬 조회
"""

from . import metrics

__all__ = ["metrics"]
