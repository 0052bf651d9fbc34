"""
cli/output.py - mackerel-agent 플러그인 출력 포맷

메트릭 출력:
    {prefix}.{graph}.{metric}\\t{value}\\t{epoch}

그래프 정의 출력 (MACKEREL_AGENT_PLUGIN_META=1):
    # mackerel-agent-plugin
    {"graphs": {...}}
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Mapping

from shared.nifcloud.metrics.catalog import graph_definition, graph_key_of, metric_names

logger = logging.getLogger(__name__)

PLUGIN_META_HEADER = "# mackerel-agent-plugin"


def metric_key(metric_key_prefix: str, metric_name: str) -> str:
    """출력용 메트릭 키 (예: "rdb.IOPS.ReadIOPS")"""
    return f"{metric_key_prefix}.{graph_key_of(metric_name)}.{metric_name}"


def format_values(
    values: Mapping[str, float],
    metric_key_prefix: str,
    timestamp: int | None = None,
) -> list[str]:
    """수집 결과를 출력 라인으로 변환

    카탈로그 순서를 따르며, 카탈로그에 없는 이름은 건너뜁니다.
    """
    now = int(time.time()) if timestamp is None else timestamp
    lines: list[str] = []
    for name in metric_names():
        if name not in values:
            continue
        lines.append(f"{metric_key(metric_key_prefix, name)}\t{values[name]:f}\t{now}")

    unknown = set(values) - set(metric_names())
    if unknown:
        logger.debug(f"카탈로그에 없는 메트릭 무시: {', '.join(sorted(unknown))}")
    return lines


def format_graph_definition(metric_key_prefix: str, label_prefix: str) -> str:
    """그래프 정의 출력 문자열 (헤더 + JSON)"""
    payload = {"graphs": graph_definition(metric_key_prefix, label_prefix)}
    return f"{PLUGIN_META_HEADER}\n{json.dumps(payload, ensure_ascii=False)}"
