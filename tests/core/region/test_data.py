"""
tests/core/region/test_data.py - 리전 데이터 테스트

리전 코드 → 엔드포인트 매핑의 일관성을 검증합니다.
"""

import pytest

from core.exceptions import ConfigError
from core.region.data import ALL_REGIONS, REGION_ENDPOINTS, resolve_endpoint


class TestAllRegions:
    """ALL_REGIONS 테스트"""

    def test_exactly_five_regions(self):
        """알려진 리전은 5개"""
        assert ALL_REGIONS == ["east-1", "east-2", "east-3", "east-4", "west-1"]

    def test_all_regions_unique(self):
        """중복된 리전 코드가 없어야 함"""
        assert len(ALL_REGIONS) == len(set(ALL_REGIONS))


class TestRegionEndpoints:
    """REGION_ENDPOINTS 테스트"""

    def test_endpoints_cover_all_regions(self):
        """모든 리전에 엔드포인트가 있어야 함"""
        assert set(REGION_ENDPOINTS) == set(ALL_REGIONS)

    def test_endpoints_immutable(self):
        """엔드포인트 테이블은 변경할 수 없어야 함"""
        with pytest.raises(TypeError):
            REGION_ENDPOINTS["east-9"] = "https://example.com/"  # type: ignore[index]

    @pytest.mark.parametrize(
        "region,expected",
        [
            ("east-1", "https://rdb.jp-east-1.api.cloud.nifty.com/"),
            ("east-2", "https://rdb.jp-east-2.api.cloud.nifty.com/"),
            ("east-3", "https://rdb.jp-east-3.api.cloud.nifty.com/"),
            ("east-4", "https://rdb.jp-east-4.api.cloud.nifty.com/"),
            ("west-1", "https://rdb.jp-west-1.api.cloud.nifty.com/"),
        ],
    )
    def test_resolve_endpoint(self, region, expected):
        """리전 코드별 엔드포인트"""
        assert resolve_endpoint(region) == expected

    def test_resolve_is_deterministic(self):
        """같은 리전은 항상 같은 엔드포인트"""
        for region in ALL_REGIONS:
            assert resolve_endpoint(region) == resolve_endpoint(region)


class TestInvalidRegion:
    """알 수 없는 리전 테스트"""

    @pytest.mark.parametrize("region", ["", "east-5", "jp-east-1", "EAST-1", "west-2", " east-1"])
    def test_unknown_region_raises_config_error(self, region):
        """알 수 없는 리전은 ConfigError"""
        with pytest.raises(ConfigError) as exc_info:
            resolve_endpoint(region)

        assert exc_info.value.code == "InvalidRegion"
        assert exc_info.value.config_key == "region"
