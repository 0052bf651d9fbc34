"""
core/auth/signer.py - 쿼리 문자열 서명 (Signature Version 2, HmacSHA256)

NIFCLOUD RDB API는 AWS 쿼리 API와 같은 방식의 Signature Version 2를 사용합니다.

서명 절차:
    1. AccessKeyId, SignatureVersion=2, SignatureMethod=HmacSHA256 추가
    2. 모든 키/값을 RFC 3986 규칙으로 percent-encode
    3. 인코딩된 "key=value" 문자열을 사전순 정렬 후 "&"로 연결
    4. payload = method + "\\n" + host + "\\n" + path + "\\n" + 연결된 파라미터
    5. HMAC-SHA256(payload, secret) → base64 → Signature

같은 (method, host, path, params, secret)이면 항상 같은 서명이 나와야
API 서버가 요청을 검증할 수 있습니다.

Example:
    from core.auth.signer import sign_v2

    params = {"Action": "NiftyGetMetricStatistics", "Timestamp": "2024-01-01T00:00:00Z"}
    sign_v2(credential, "GET", "/", params, "rdb.jp-east-1.api.cloud.nifty.com")
    params["Signature"]
"""

from __future__ import annotations

import base64
import hashlib
import hmac
from collections.abc import MutableMapping
from typing import TYPE_CHECKING

from botocore.utils import percent_encode as _botocore_percent_encode

if TYPE_CHECKING:
    from .types import Credential

SIGNATURE_VERSION = "2"
SIGNATURE_METHOD = "HmacSHA256"

# RFC 3986 unreserved (영문/숫자는 quote가 항상 통과시킴)
UNRESERVED_CHARS = "-_.~"


def percent_encode(value: str) -> str:
    """RFC 3986 percent-encoding

    영문, 숫자, "-_.~"는 그대로 두고 나머지 바이트(UTF-8, 비ASCII 포함)는
    대문자 16진수 "%XX"로 인코딩합니다.

    Args:
        value: 인코딩할 문자열

    Returns:
        인코딩된 문자열 (예: "a b" → "a%20b")
    """
    return _botocore_percent_encode(value, safe=UNRESERVED_CHARS)


def canonical_query_string(params: MutableMapping[str, str]) -> str:
    """서명 대상 정규화 쿼리 문자열

    키 순서가 아니라 인코딩된 "key=value" 문자열 자체로 정렬합니다.
    """
    pairs = [f"{percent_encode(k)}={percent_encode(v)}" for k, v in params.items()]
    pairs.sort()
    return "&".join(pairs)


def string_to_sign(method: str, host: str, path: str, params: MutableMapping[str, str]) -> str:
    """서명할 payload 생성"""
    return "\n".join([method, host, path, canonical_query_string(params)])


def sign_v2(
    credential: Credential,
    method: str,
    path: str,
    params: MutableMapping[str, str],
    host: str,
) -> str:
    """파라미터에 인증 필드와 Signature를 추가

    Args:
        credential: 자격 증명
        method: HTTP 메서드 (예: "GET")
        path: 요청 경로 (예: "/")
        params: 요청 파라미터 (제자리에서 수정됨)
        host: 대상 호스트 (예: "rdb.jp-east-1.api.cloud.nifty.com")

    Returns:
        base64 인코딩된 서명 문자열
    """
    params["AccessKeyId"] = credential.access_key_id
    params["SignatureVersion"] = SIGNATURE_VERSION
    params["SignatureMethod"] = SIGNATURE_METHOD
    # 재서명 시 이전 서명이 payload에 섞이지 않도록
    params.pop("Signature", None)

    payload = string_to_sign(method, host, path, params)
    digest = hmac.new(
        credential.secret_access_key.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    signature = base64.b64encode(digest).decode("ascii")

    params["Signature"] = signature
    return signature
