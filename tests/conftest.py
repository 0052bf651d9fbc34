"""
tests/conftest.py - pytest 공통 픽스처

NIFCLOUD RDB API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(mock_http_session, metric_xml, response_factory):
        mock_http_session.get.return_value = response_factory(200, metric_xml([...]))
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import MagicMock

import pytest
import requests

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


NAMESPACE = "https://rdb.jp-east-1.api.cloud.nifty.com/doc/2013-05-15N2013-12-16/"

FIXED_NOW = datetime(2024, 1, 1, 12, 3, 0, tzinfo=timezone.utc)


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정 (호스트 환경 변수 영향 제거)"""
    for name in (
        "NIFCLOUD_ACCESS_KEY_ID",
        "NIFCLOUD_SECRET_ACCESS_KEY",
        "NIFCLOUD_REGION",
        "NIFCLOUD_RDB_LOG_LEVEL",
        "MACKEREL_AGENT_PLUGIN_META",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


# =============================================================================
# 자격 증명 / 시계
# =============================================================================


@pytest.fixture
def credential():
    """테스트용 Credential"""
    from core.auth.types import Credential

    return Credential(access_key_id="TESTACCESSKEY", secret_access_key="testsecretkey")


@pytest.fixture
def fixed_clock():
    """항상 FIXED_NOW를 반환하는 시계"""
    return lambda: FIXED_NOW


# =============================================================================
# HTTP 모킹 픽스처
# =============================================================================


def make_response(status_code: int = 200, body: bytes = b"", reason: str = "OK") -> MagicMock:
    """requests.Response 모킹 헬퍼"""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.content = body
    response.reason = reason
    return response


@pytest.fixture
def mock_http_session():
    """requests.Session 모킹 (기본: 빈 데이터포인트 응답)"""
    session = MagicMock(spec=requests.Session)
    session.get.return_value = make_response(200, build_metric_xml([]))
    return session


# =============================================================================
# XML 응답 헬퍼
# =============================================================================


def build_metric_xml(
    members: List[Tuple[str, Any, Any]],
    label: str = "CPUUtilization",
    groups: Optional[List[List[Tuple[str, Any, Any]]]] = None,
) -> bytes:
    """NiftyGetMetricStatistics 응답 XML 생성

    Args:
        members: (Timestamp, Sum, SampleCount) 목록 (Datapoints 그룹 1개)
        label: Label 요소 값
        groups: 여러 Datapoints 그룹 (지정 시 members 무시)
    """
    groups = groups if groups is not None else [members]

    datapoints = []
    for group in groups:
        rendered = "".join(
            "<member>"
            "<NiftyTargetName>testdb</NiftyTargetName>"
            f"<Timestamp>{ts}</Timestamp>"
            f"<Sum>{total}</Sum>"
            f"<SampleCount>{count}</SampleCount>"
            "</member>"
            for ts, total, count in group
        )
        datapoints.append(f"<Datapoints>{rendered}</Datapoints>")

    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<NiftyGetMetricStatisticsResponse xmlns="{NAMESPACE}">'
        "<NiftyGetMetricStatisticsResult>"
        f"{''.join(datapoints)}"
        f"<Label>{label}</Label>"
        "</NiftyGetMetricStatisticsResult>"
        "<ResponseMetadata><RequestId>req-0001</RequestId></ResponseMetadata>"
        "</NiftyGetMetricStatisticsResponse>"
    ).encode("utf-8")


def build_error_xml(code: str, message: str) -> bytes:
    """에러 응답 XML 생성"""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        "<Response><Errors><Error>"
        f"<Code>{code}</Code><Message>{message}</Message>"
        "</Error></Errors><RequestID>req-0002</RequestID></Response>"
    ).encode("utf-8")


@pytest.fixture
def metric_xml():
    """build_metric_xml 픽스처"""
    return build_metric_xml


@pytest.fixture
def error_xml():
    """build_error_xml 픽스처"""
    return build_error_xml


@pytest.fixture
def response_factory():
    """make_response 픽스처"""
    return make_response

