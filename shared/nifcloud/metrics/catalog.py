"""
shared/nifcloud/metrics/catalog.py - RDB 메트릭 카탈로그

수집 대상 메트릭과 mackerel-agent 그래프 정의입니다.
인스턴스와 무관하게 고정되어 있습니다.

    그래프               단위         메트릭
    BinLogDiskUsage      bytes        BinLogDiskUsage
    CPUUtilization       percentage   CPUUtilization
    DatabaseConnections  float        DatabaseConnections
    DiskQueueDepth       bytes        DiskQueueDepth
    FreeableMemory       bytes        FreeableMemory
    FreeStorageSpace     bytes        FreeStorageSpace
    SwapUsage            bytes        SwapUsage
    IOPS                 iops         ReadIOPS, WriteIOPS
    Throughput           bytes/sec    ReadThroughput, WriteThroughput
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MetricDef:
    """그래프 안의 메트릭 하나"""

    name: str
    label: str
    stacked: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "label": self.label, "stacked": self.stacked}


@dataclass(frozen=True)
class GraphDef:
    """그래프 정의

    Attributes:
        key: 그래프 키 (메트릭 키 접두사 뒤에 붙음)
        title: 라벨 접두사 뒤에 붙는 그래프 제목
        unit: mackerel 단위 (bytes, percentage, float, iops, bytes/sec)
        metrics: 그래프에 속한 메트릭
    """

    key: str
    title: str
    unit: str
    metrics: tuple[MetricDef, ...]

    def to_dict(self, label_prefix: str) -> dict[str, Any]:
        return {
            "label": f"{label_prefix} {self.title}".strip(),
            "unit": self.unit,
            "metrics": [m.to_dict() for m in self.metrics],
        }


GRAPHS: tuple[GraphDef, ...] = (
    GraphDef("BinLogDiskUsage", "BinLogDiskUsage", "bytes", (MetricDef("BinLogDiskUsage", "Usage"),)),
    GraphDef("CPUUtilization", "CPU Utilization", "percentage", (MetricDef("CPUUtilization", "CPUUtilization"),)),
    GraphDef(
        "DatabaseConnections",
        "Database Connections",
        "float",
        (MetricDef("DatabaseConnections", "DatabaseConnections"),),
    ),
    GraphDef("DiskQueueDepth", "DiskQueueDepth", "bytes", (MetricDef("DiskQueueDepth", "Depth"),)),
    GraphDef("FreeableMemory", "Freeable Memory", "bytes", (MetricDef("FreeableMemory", "FreeableMemory"),)),
    GraphDef("FreeStorageSpace", "Free Storage Space", "bytes", (MetricDef("FreeStorageSpace", "FreeStorageSpace"),)),
    GraphDef("SwapUsage", "Swap Usage", "bytes", (MetricDef("SwapUsage", "SwapUsage"),)),
    GraphDef("IOPS", "IOPS", "iops", (MetricDef("ReadIOPS", "Read"), MetricDef("WriteIOPS", "Write"))),
    GraphDef(
        "Throughput",
        "Throughput",
        "bytes/sec",
        (MetricDef("ReadThroughput", "Read"), MetricDef("WriteThroughput", "Write")),
    ),
)


def metric_names() -> list[str]:
    """카탈로그의 모든 메트릭 이름 (그래프 순서)"""
    return [metric.name for graph in GRAPHS for metric in graph.metrics]


def graph_key_of(metric_name: str) -> str:
    """메트릭이 속한 그래프 키

    Raises:
        KeyError: 카탈로그에 없는 메트릭
    """
    for graph in GRAPHS:
        if any(metric.name == metric_name for metric in graph.metrics):
            return graph.key
    raise KeyError(metric_name)


def _is_word_separator(char: str) -> bool:
    # ASCII는 영문/숫자/"_" 이외가 구분자, 그 외 문자는 공백만 구분자
    if char.isascii():
        return not (char.isalnum() or char == "_")
    return char.isspace()


def title_case(value: str) -> str:
    """단어 첫 글자만 대문자로 변환 (나머지 글자는 그대로)

    str.title()과 달리 "_" 뒤는 새 단어로 보지 않고 소문자화도 하지 않습니다.
    (예: "my_db" → "My_db", "myDB" → "MyDB", "my-db" → "My-Db")
    """
    chars = []
    previous = " "
    for char in value:
        chars.append(char.upper() if _is_word_separator(previous) else char)
        previous = char
    return "".join(chars)


def default_label_prefix(metric_key_prefix: str) -> str:
    """메트릭 키 접두사로부터 기본 라벨 접두사 결정

    "rdb" → "RDB", 그 외에는 title_case (예: "mydb" → "Mydb")
    """
    if metric_key_prefix == "rdb":
        return "RDB"
    return title_case(metric_key_prefix)


def graph_definition(metric_key_prefix: str, label_prefix: str) -> dict[str, dict[str, Any]]:
    """mackerel-agent 그래프 정의

    Returns:
        {"<prefix>.<graph>": {"label": ..., "unit": ..., "metrics": [...]}}
    """
    return {f"{metric_key_prefix}.{graph.key}": graph.to_dict(label_prefix) for graph in GRAPHS}
