# core/auth/types/types.py
"""
core/auth/types/types.py - 인증 모듈의 핵심 타입 정의

포함 항목:
    - Credential: NIFCLOUD API 자격 증명 (Access Key ID + Secret Access Key)
"""

from __future__ import annotations

from dataclasses import dataclass, field


# =============================================================================
# Credential
# =============================================================================


@dataclass(frozen=True)
class Credential:
    """NIFCLOUD API 자격 증명

    생성 후 변경할 수 없으며, repr에서 Secret Access Key는 노출되지 않습니다.
    Signer만 secret_access_key를 사용합니다.

    Attributes:
        access_key_id: Access Key ID
        secret_access_key: Secret Access Key
    """

    access_key_id: str
    secret_access_key: str = field(repr=False)

    def __repr__(self) -> str:
        return f"Credential(access_key_id={self.masked_access_key_id!r}, secret_access_key='***')"

    @property
    def masked_access_key_id(self) -> str:
        """로그 표시용 마스킹된 Access Key ID (앞 4자리만 노출)"""
        if len(self.access_key_id) <= 4:
            return "****"
        return f"{self.access_key_id[:4]}{'*' * (len(self.access_key_id) - 4)}"

    @property
    def is_complete(self) -> bool:
        """두 값이 모두 채워져 있는지"""
        return bool(self.access_key_id) and bool(self.secret_access_key)
