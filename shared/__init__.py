"""공유 모듈 - 클라우드 API 클라이언트와 메트릭 처리.

- nifcloud: NIFCLOUD RDB API 클라이언트, 메트릭 디코딩 / 집계 / 병렬 조회

의존성 구조:
    core (인프라: 인증, 리전, 병렬 실행, 설정)
       ↑
    shared (API 클라이언트, 메트릭)
       ↑
    cli (mackerel-agent 플러그인)
"""

from . import nifcloud

__all__ = ["nifcloud"]
