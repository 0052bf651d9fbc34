"""
cli/ui/console.py - Rich 콘솔 유틸리티

표준 출력은 mackerel-agent가 읽는 메트릭 전용이므로,
로그와 사용자 메시지는 모두 stderr 콘솔로 보냅니다.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from core.config import LogConfig

# urllib3 요청 로그에는 서명된 쿼리 문자열이 포함됨
logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)


def get_console() -> Console:
    """stderr용 Rich Console 인스턴스를 생성하고 반환합니다."""
    return Console(
        stderr=True,
        color_system="auto",
        highlight=False,
        soft_wrap=True,
        markup=True,
    )


# 전역 콘솔 인스턴스
console = get_console()

# 상태 심볼
SYMBOL_ERROR = "✗"


def setup_logging(config: LogConfig | None = None, debug: bool = False) -> logging.Logger:
    """루트 logger에 Rich 핸들러 설정

    여러 번 호출해도 핸들러는 하나만 유지됩니다.

    Args:
        config: 로깅 설정 (None이면 환경 변수 기반 기본값)
        debug: True이면 DEBUG 레벨 강제

    Returns:
        루트 logger
    """
    config = config or LogConfig()
    root = logging.getLogger()

    for handler in list(root.handlers):
        if getattr(handler, "_nifcloud_rdb", False):
            root.removeHandler(handler)

    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.datefmt))
    handler._nifcloud_rdb = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else config.level_no)

    return root


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X)

    Args:
        message: 출력할 메시지
    """
    console.print(f"[red]{SYMBOL_ERROR} {escape(message)}[/red]", markup=True, highlight=False)
