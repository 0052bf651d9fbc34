"""
tests/core/test_exceptions.py - core/exceptions.py 테스트
"""

import pytest

from core.exceptions import (
    ConfigError,
    DecodeError,
    InvalidSample,
    MetricFetchError,
    NoDataError,
    RDBMetricsError,
    TransportError,
    format_error_for_user,
    is_auth_failure,
)


class TestHierarchy:
    """예외 계층 구조 테스트"""

    @pytest.mark.parametrize("cls", [TransportError, DecodeError, NoDataError, InvalidSample])
    def test_per_metric_errors(self, cls):
        """메트릭 단위 예외는 MetricFetchError 하위"""
        assert issubclass(cls, MetricFetchError)
        assert issubclass(cls, RDBMetricsError)

    def test_config_error_is_not_per_metric(self):
        """ConfigError는 메트릭 단위 예외가 아님"""
        assert issubclass(ConfigError, RDBMetricsError)
        assert not issubclass(ConfigError, MetricFetchError)


class TestRDBMetricsError:
    """베이스 예외 테스트"""

    def test_str_with_cause(self):
        """원인 예외가 메시지에 포함"""
        error = DecodeError("malformed XML response", cause=ValueError("bad token"))
        assert str(error) == "malformed XML response: bad token"

    def test_to_dict(self):
        error = ConfigError("region", "invalid", code="InvalidRegion")
        d = error.to_dict()

        assert d["error_type"] == "ConfigError"
        assert d["details"]["config_key"] == "region"
        assert d["details"]["code"] == "InvalidRegion"
        assert d["cause"] is None

    def test_no_data_default_message(self):
        assert str(NoDataError()) == "fetched no datapoints"


class TestTransportError:
    """TransportError 테스트"""

    def test_message_with_status_and_code(self):
        error = TransportError(
            action="NiftyGetMetricStatistics",
            message="Signature mismatch",
            status_code=403,
            api_error_code="SignatureDoesNotMatch",
        )
        assert str(error) == "NiftyGetMetricStatistics 실패 (HTTP 403) [SignatureDoesNotMatch]: Signature mismatch"
        assert error.details["status_code"] == 403

    def test_message_network_error(self):
        error = TransportError(action="NiftyGetMetricStatistics", message="ConnectionError")
        assert str(error) == "NiftyGetMetricStatistics: ConnectionError"
        assert error.status_code is None

    def test_cause_text_not_in_message(self):
        """원인 예외 문자열(요청 URL 포함)은 메시지와 to_dict에 포함되지 않음"""
        cause = ValueError("Max retries exceeded with url: /?AccessKeyId=TESTACCESSKEY&Signature=abc")
        error = TransportError(action="NiftyGetMetricStatistics", message="ConnectionError", cause=cause)

        assert "TESTACCESSKEY" not in str(error)
        assert error.cause is cause
        assert error.to_dict()["cause"] == "ValueError"


class TestHelpers:
    """유틸리티 함수 테스트"""

    def test_is_auth_failure_by_status(self):
        assert is_auth_failure(TransportError("A", "m", status_code=401)) is True

    def test_is_auth_failure_by_code(self):
        assert is_auth_failure(TransportError("A", "m", status_code=400, api_error_code="AuthFailure")) is True

    def test_is_not_auth_failure(self):
        assert is_auth_failure(TransportError("A", "m", status_code=500)) is False
        assert is_auth_failure(NoDataError()) is False

    def test_format_error_for_user(self):
        error = ConfigError("region", "bad")
        assert format_error_for_user(error) == str(error)

        auth = TransportError("A", "m", status_code=403)
        assert "인증에 실패했습니다" in format_error_for_user(auth)
