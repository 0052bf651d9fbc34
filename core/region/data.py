"""
core/region/data.py - NIFCLOUD RDB 리전 데이터

리전 코드 → API 엔드포인트의 정적 매핑입니다.
프로세스 시작 시 한 번 구성되며 변경되지 않습니다 (MappingProxyType).

Usage:
    from core.region.data import resolve_endpoint

    endpoint = resolve_endpoint("east-1")
    # "https://rdb.jp-east-1.api.cloud.nifty.com/"
"""

from __future__ import annotations

from types import MappingProxyType

from core.exceptions import ConfigError

ENDPOINT_TEMPLATE = "https://rdb.jp-{region}.api.cloud.nifty.com/"

ALL_REGIONS: list[str] = ["east-1", "east-2", "east-3", "east-4", "west-1"]

REGION_ENDPOINTS = MappingProxyType({region: ENDPOINT_TEMPLATE.format(region=region) for region in ALL_REGIONS})


def resolve_endpoint(region: str) -> str:
    """리전 코드를 API 엔드포인트 URL로 변환

    Args:
        region: 리전 코드 (east-1, east-2, east-3, east-4, west-1)

    Returns:
        엔드포인트 URL

    Raises:
        ConfigError: 알 수 없는 리전 코드 (code="InvalidRegion")
    """
    endpoint = REGION_ENDPOINTS.get(region)
    if endpoint is None:
        raise ConfigError(
            "region",
            f"An invalid region was specified: {region!r} (사용 가능: {', '.join(ALL_REGIONS)})",
            code="InvalidRegion",
        )
    return endpoint
