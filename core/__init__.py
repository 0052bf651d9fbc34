# core/__init__.py
"""
core - NIFCLOUD RDB 메트릭 수집기 인프라

아키텍처:
    core/
    ├── auth/           # Credential, 쿼리 문자열 서명 (Signature Version 2)
    ├── parallel/       # 메트릭별 병렬 실행 (fan-out / fan-in)
    ├── region/         # 리전 코드 → 엔드포인트 정적 매핑
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.config import settings
    from core.exceptions import ConfigError
    from core.region.data import resolve_endpoint

    try:
        endpoint = resolve_endpoint("east-1")
    except ConfigError as e:
        print(e)
"""
