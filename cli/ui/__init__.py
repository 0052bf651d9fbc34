# cli/ui - 콘솔 출력 (rich)
"""
콘솔 UI 모듈

로그와 사용자 메시지를 stderr로 출력합니다.
"""

from .console import (
    SYMBOL_ERROR,
    console,
    get_console,
    print_error,
    setup_logging,
)

__all__ = [
    "SYMBOL_ERROR",
    "console",
    "get_console",
    "print_error",
    "setup_logging",
]
