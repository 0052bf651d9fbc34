"""
core/parallel/errors.py - 작업 에러 분류

병렬 실행 중 발생한 예외를 ErrorCategory와 에러 코드로 변환합니다.

주요 구성 요소:
- categorize_error: 예외를 ErrorCategory로 분류
- get_error_code: 예외에서 에러 코드 추출
- to_task_error: 예외를 TaskError로 변환
"""

from __future__ import annotations

import requests

from core.exceptions import (
    DecodeError,
    InvalidSample,
    MetricFetchError,
    NoDataError,
    TransportError,
    is_auth_failure,
)

from .types import ErrorCategory, TaskError


def categorize_error(error: BaseException) -> ErrorCategory:
    """예외 객체를 분석하여 ErrorCategory로 분류

    TransportError는 원인 예외(requests)와 HTTP 상태로 세분화합니다.

    Args:
        error: 분류할 예외

    Returns:
        에러 카테고리
    """
    if isinstance(error, TransportError):
        if is_auth_failure(error):
            return ErrorCategory.ACCESS_DENIED
        if isinstance(error.cause, requests.Timeout):
            return ErrorCategory.TIMEOUT
        if error.status_code is not None:
            return ErrorCategory.HTTP_ERROR
        return ErrorCategory.NETWORK
    if isinstance(error, DecodeError):
        return ErrorCategory.DECODE
    if isinstance(error, NoDataError):
        return ErrorCategory.NO_DATA
    if isinstance(error, InvalidSample):
        return ErrorCategory.INVALID_SAMPLE

    if isinstance(error, requests.Timeout):
        return ErrorCategory.TIMEOUT
    if isinstance(error, (requests.ConnectionError, ConnectionError, TimeoutError)):
        return ErrorCategory.NETWORK

    return ErrorCategory.UNKNOWN


def get_error_code(error: BaseException) -> str:
    """예외 객체에서 에러 코드 문자열 추출

    API 응답의 에러 코드가 있으면 그것을, 아니면 예외 클래스명을 반환합니다.
    """
    if isinstance(error, TransportError) and error.api_error_code:
        return error.api_error_code
    if isinstance(error, MetricFetchError):
        return error.error_code
    return error.__class__.__name__


def to_task_error(identifier: str, error: BaseException) -> TaskError:
    """예외를 TaskError로 변환"""
    return TaskError(
        identifier=identifier,
        category=categorize_error(error),
        error_code=get_error_code(error),
        message=str(error),
        original_exception=error,
    )
