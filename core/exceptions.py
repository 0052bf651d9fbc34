"""
core/exceptions.py - 통합 예외 계층 구조

메트릭 수집 전체에서 사용되는 예외 클래스들을 정의합니다.
치명적인 설정 오류와 메트릭 단위로 복구되는 오류를 구분합니다.

예외 계층 구조:
    RDBMetricsError (베이스)
    ├── ConfigError (설정 관련 - 수집 사이클 전체 중단)
    └── MetricFetchError (메트릭 단위 - 로깅 후 결과에서 제외)
        ├── TransportError (네트워크 / HTTP 실패)
        ├── DecodeError (응답 본문 파싱 실패)
        ├── NoDataError (데이터포인트 없음)
        └── InvalidSample (비정상 수치)

Usage:
    from core.exceptions import ConfigError, TransportError

    try:
        body = client.request("NiftyGetMetricStatistics", params)
    except requests.RequestException as e:
        raise TransportError(action="NiftyGetMetricStatistics", message="요청 실패", cause=e)
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class RDBMetricsError(Exception):
    """RDB 메트릭 수집기 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(RDBMetricsError):
    """설정 관련 예외

    잘못된 리전, 누락된 자격 증명 등. 네트워크 호출 전에 발생하며
    수집 사이클 전체를 중단시킵니다.
    """

    def __init__(
        self,
        key: str,
        message: str,
        code: str = "InvalidConfiguration",
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.code = code
        self.details["config_key"] = key
        self.details["code"] = code


# =============================================================================
# 메트릭 단위 예외
# =============================================================================


class MetricFetchError(RDBMetricsError):
    """메트릭 하나의 조회 실패

    MetricFetcher 경계에서 로깅 후 삼켜지며, 해당 메트릭만 결과에서 제외됩니다.
    """

    error_code = "MetricFetchError"


class TransportError(MetricFetchError):
    """API 호출 실패 (네트워크 오류 또는 2xx 이외의 응답)

    Attributes:
        action: API 액션 이름
        status_code: HTTP 상태 코드 (네트워크 오류면 None)
        api_error_code: 응답 본문의 에러 코드 (예: "AuthFailure")
    """

    error_code = "TransportError"

    def __init__(
        self,
        action: str,
        message: str,
        status_code: Optional[int] = None,
        api_error_code: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        full_message = f"{action}"
        if status_code is not None:
            full_message = f"{full_message} 실패 (HTTP {status_code})"
        if api_error_code:
            full_message = f"{full_message} [{api_error_code}]"
        full_message = f"{full_message}: {message}"

        super().__init__(full_message, cause)
        self.action = action
        self.status_code = status_code
        self.api_error_code = api_error_code
        self.details.update(
            {
                "action": action,
                "status_code": status_code,
                "api_error_code": api_error_code,
            }
        )

    def __str__(self) -> str:
        # requests 예외 문자열에는 서명된 쿼리(AccessKeyId, Signature)가 포함됨
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["cause"] = self.cause.__class__.__name__ if self.cause else None
        return result


class DecodeError(MetricFetchError):
    """응답 본문(XML) 파싱 실패"""

    error_code = "DecodeError"


class NoDataError(MetricFetchError):
    """조회 구간에 데이터포인트가 없음"""

    error_code = "NoDataError"

    def __init__(self, message: str = "fetched no datapoints"):
        super().__init__(message)


class InvalidSample(MetricFetchError):
    """값을 계산할 수 없는 샘플 (SampleCount 0, 비유한 값 등)"""

    error_code = "InvalidSample"


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def is_auth_failure(error: Exception) -> bool:
    """인증 실패 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        인증 실패 오류이면 True
    """
    if isinstance(error, TransportError):
        if error.status_code in (401, 403):
            return True
        return error.api_error_code in (
            "AuthFailure",
            "SignatureDoesNotMatch",
            "InvalidClientTokenId",
            "AccessDenied",
        )
    return False


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if is_auth_failure(error):
        return f"인증에 실패했습니다. Access Key / Secret Key를 확인하세요. ({error})"

    # 커스텀 예외는 이미 포맷팅됨
    return str(error)
