# core/auth/__init__.py
"""
NIFCLOUD 인증 모듈 (core/auth)

구성:
- types: Credential (Access Key ID + Secret Access Key, 불변)
- signer: 쿼리 문자열 서명 (Signature Version 2, HmacSHA256)

사용 예시:
    from core.auth import Credential, sign_v2

    credential = Credential("ACCESS_KEY", "SECRET_KEY")
    sign_v2(credential, "GET", "/", params, "rdb.jp-east-1.api.cloud.nifty.com")
"""

from .signer import percent_encode, sign_v2
from .types.types import Credential

__all__: list[str] = [
    "Credential",
    "percent_encode",
    "sign_v2",
]
