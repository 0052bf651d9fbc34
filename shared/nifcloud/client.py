"""
shared/nifcloud/client.py - NIFCLOUD RDB API 클라이언트

서명된 GET 요청을 리전별 엔드포인트로 보내고 응답 본문을 반환합니다.
재시도는 하지 않으며, 네트워크 오류와 2xx 이외 응답은 TransportError로 전달합니다.

Example:
    from core.auth import Credential
    from shared.nifcloud.client import RdbClient

    client = RdbClient.for_region("east-1", Credential("AK", "SK"))
    series = client.nifty_get_metric_statistics({"MetricName": "CPUUtilization", ...})
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from urllib.parse import urlparse

import requests
from requests.adapters import HTTPAdapter

from core.auth.signer import sign_v2
from core.auth.types import Credential
from core.config import settings
from core.exceptions import ConfigError, TransportError
from core.region.data import resolve_endpoint

from .metrics.decoder import decode_metric_statistics
from .metrics.types import MetricSeries

logger = logging.getLogger(__name__)

ACTION_GET_METRIC_STATISTICS = "NiftyGetMetricStatistics"
REQUEST_METHOD = "GET"
REQUEST_PATH = "/"

# 에러 메시지에 포함할 응답 본문 최대 길이
_ERROR_BODY_PREVIEW = 200


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_error_body(body: bytes) -> tuple[str | None, str | None]:
    """에러 응답 XML에서 (Code, Message) 추출 (해석할 수 없으면 (None, None))"""
    try:
        root = ET.fromstring(body)
    except ET.ParseError:
        return None, None

    code = message = None
    for element in root.iter():
        name = element.tag.rsplit("}", 1)[-1]
        if name == "Code" and code is None:
            code = (element.text or "").strip() or None
        elif name == "Message" and message is None:
            message = (element.text or "").strip() or None
    return code, message


class RdbClient:
    """NIFCLOUD RDB API 클라이언트 (Transport)

    Attributes:
        endpoint: API 엔드포인트 URL (예: "https://rdb.jp-east-1.api.cloud.nifty.com/")
        host: 서명에 사용하는 엔드포인트 호스트
        timeout: 요청 타임아웃 (초)
    """

    def __init__(
        self,
        endpoint: str,
        credential: Credential,
        timeout: float = settings.API_TIMEOUT,
        session: requests.Session | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """초기화

        Args:
            endpoint: API 엔드포인트 URL
            credential: 자격 증명
            timeout: 요청 타임아웃 (초)
            session: requests Session (None이면 연결 풀이 설정된 Session 생성)
            clock: 현재 UTC 시각 함수 (테스트용)

        Raises:
            ConfigError: 엔드포인트 URL이 잘못되었거나 자격 증명이 비어 있는 경우
        """
        parsed = urlparse(endpoint)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigError("endpoint", f"잘못된 엔드포인트 URL: {endpoint!r}", code="InvalidEndpoint")
        if not credential.is_complete:
            raise ConfigError("credential", "Access Key ID / Secret Access Key가 필요합니다", code="MissingCredential")

        self.endpoint = endpoint
        self.host = parsed.netloc
        self.timeout = timeout
        self._credential = credential
        self._session = session or self._build_session()
        self._clock = clock or _utcnow

    @classmethod
    def for_region(cls, region: str, credential: Credential, **kwargs) -> RdbClient:
        """리전 코드로 클라이언트 생성

        Raises:
            ConfigError: 알 수 없는 리전 코드 (code="InvalidRegion")
        """
        return cls(resolve_endpoint(region), credential, **kwargs)

    @staticmethod
    def _build_session() -> requests.Session:
        session = requests.Session()
        adapter = HTTPAdapter(pool_connections=1, pool_maxsize=settings.MAX_WORKERS)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> RdbClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def build_params(self, action: str, params: Mapping[str, str]) -> dict[str, str]:
        """Action / Version / Timestamp를 추가하고 서명한 파라미터 반환

        호출자의 params는 변경하지 않습니다.
        """
        signed = dict(params)
        signed["Action"] = action
        signed["Version"] = settings.API_VERSION
        signed["Timestamp"] = self._clock().astimezone(timezone.utc).strftime(settings.REQUEST_TIME_FORMAT)

        sign_v2(self._credential, REQUEST_METHOD, REQUEST_PATH, signed, self.host)
        return signed

    def request(self, action: str, params: Mapping[str, str]) -> bytes:
        """서명된 GET 요청 실행

        Args:
            action: API 액션 이름
            params: 요청 파라미터

        Returns:
            응답 본문

        Raises:
            TransportError: 네트워크 오류 또는 2xx 이외의 응답
        """
        signed = self.build_params(action, params)

        try:
            response = self._session.get(self.endpoint, params=signed, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(action=action, message=f"{e.__class__.__name__} ({self.host})", cause=e) from e

        if not 200 <= response.status_code < 300:
            body = response.content or b""
            api_code, api_message = _parse_error_body(body)
            message = api_message or body[:_ERROR_BODY_PREVIEW].decode("utf-8", errors="replace") or response.reason
            raise TransportError(
                action=action,
                message=message or "",
                status_code=response.status_code,
                api_error_code=api_code,
            )

        return response.content

    def nifty_get_metric_statistics(self, params: Mapping[str, str]) -> MetricSeries:
        """NiftyGetMetricStatistics 호출 후 응답을 MetricSeries로 디코딩

        Raises:
            TransportError: API 호출 실패
            DecodeError: 응답 본문을 해석할 수 없는 경우
        """
        body = self.request(ACTION_GET_METRIC_STATISTICS, params)
        return decode_metric_statistics(body)
