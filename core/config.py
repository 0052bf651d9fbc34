"""
core/config.py - 중앙 설정 관리

불변 Settings 데이터클래스, 로깅 설정, 환경 변수 기반 자격 증명 로딩을 제공합니다.

Usage:
    from core.config import settings, load_credential

    # 인자가 None이면 NIFCLOUD_ACCESS_KEY_ID / NIFCLOUD_SECRET_ACCESS_KEY 사용
    credential = load_credential(None, None)
    timeout = settings.API_TIMEOUT
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# 환경 변수 이름
ENV_ACCESS_KEY_ID = "NIFCLOUD_ACCESS_KEY_ID"
ENV_SECRET_ACCESS_KEY = "NIFCLOUD_SECRET_ACCESS_KEY"
ENV_REGION = "NIFCLOUD_REGION"
ENV_LOG_LEVEL = "NIFCLOUD_RDB_LOG_LEVEL"
ENV_PLUGIN_META = "MACKEREL_AGENT_PLUGIN_META"


@dataclass(frozen=True)
class Settings:
    """애플리케이션 전역 설정 (불변)

    Attributes:
        API_VERSION: NiftyGetMetricStatistics API 버전 문자열
        API_TIMEOUT: HTTP 요청 타임아웃 (초)
        FETCH_WINDOW_SECONDS: 조회 구간 폭 (초). 드물게 보고되는 메트릭도
            최소 1개의 데이터포인트가 포함되도록 3분
        MAX_WORKERS: 동시 조회 스레드 상한
        DEFAULT_METRIC_KEY_PREFIX: 메트릭 키 기본 접두사
        REQUEST_TIME_FORMAT: 서명 대상 Timestamp 파라미터 포맷 (RFC 3339)
        WINDOW_TIME_FORMAT: StartTime / EndTime 파라미터 포맷
    """

    API_VERSION: str = "2013-05-15N2013-12-16"
    API_TIMEOUT: int = 30
    FETCH_WINDOW_SECONDS: int = 180
    MAX_WORKERS: int = 20
    DEFAULT_METRIC_KEY_PREFIX: str = "rdb"
    REQUEST_TIME_FORMAT: str = "%Y-%m-%dT%H:%M:%SZ"
    WINDOW_TIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"


settings = Settings()


@dataclass(frozen=True)
class LogConfig:
    """로깅 설정

    Attributes:
        level: 로그 레벨 이름 (기본: WARNING - 메트릭 출력과 섞이지 않도록)
        format: 로그 포맷
        datefmt: 시각 포맷
    """

    level: str = field(default_factory=lambda: os.environ.get(ENV_LOG_LEVEL, "WARNING").upper())
    format: str = "%(message)s"
    datefmt: str = "[%X]"

    @property
    def level_no(self) -> int:
        """로그 레벨 숫자값 (알 수 없는 이름이면 WARNING)"""
        value = logging.getLevelName(self.level)
        return value if isinstance(value, int) else logging.WARNING


# =============================================================================
# 환경 변수 헬퍼
# =============================================================================


def is_plugin_meta_mode() -> bool:
    """mackerel-agent가 그래프 정의를 요청 중인지 확인"""
    return os.environ.get(ENV_PLUGIN_META, "") != ""


# =============================================================================
# 프로젝트 경로 / 버전
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 경로"""
    return Path(__file__).resolve().parent.parent


def get_version() -> str:
    """version.txt에서 버전 문자열 읽기 (없으면 "0.0.0")"""
    version_file = get_project_root() / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip() or "0.0.0"
    except OSError:
        return "0.0.0"


# =============================================================================
# 자격 증명
# =============================================================================


def load_credential(access_key_id: str | None, secret_access_key: str | None):
    """CLI 옵션 / 환경 변수 값으로 Credential 생성

    Args:
        access_key_id: Access Key ID (None이면 환경 변수 사용)
        secret_access_key: Secret Access Key (None이면 환경 변수 사용)

    Returns:
        Credential

    Raises:
        ConfigError: 둘 중 하나라도 비어 있는 경우
    """
    from core.auth.types import Credential

    access_key_id = access_key_id or os.environ.get(ENV_ACCESS_KEY_ID, "")
    secret_access_key = secret_access_key or os.environ.get(ENV_SECRET_ACCESS_KEY, "")

    if not access_key_id:
        raise ConfigError("access-key-id", "Access Key ID가 지정되지 않았습니다", code="MissingCredential")
    if not secret_access_key:
        raise ConfigError("secret-access-key", "Secret Access Key가 지정되지 않았습니다", code="MissingCredential")

    return Credential(access_key_id=access_key_id, secret_access_key=secret_access_key)
