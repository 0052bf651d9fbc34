"""
tests/shared/nifcloud/metrics/test_metric_catalog.py - 메트릭 카탈로그 테스트
"""

import pytest

from shared.nifcloud.metrics.catalog import (
    GRAPHS,
    default_label_prefix,
    graph_definition,
    graph_key_of,
    metric_names,
)


class TestCatalog:
    """카탈로그 내용 테스트"""

    def test_metric_names(self):
        assert metric_names() == [
            "BinLogDiskUsage",
            "CPUUtilization",
            "DatabaseConnections",
            "DiskQueueDepth",
            "FreeableMemory",
            "FreeStorageSpace",
            "SwapUsage",
            "ReadIOPS",
            "WriteIOPS",
            "ReadThroughput",
            "WriteThroughput",
        ]

    def test_names_unique(self):
        names = metric_names()
        assert len(names) == len(set(names))

    @pytest.mark.parametrize(
        "metric,graph",
        [("CPUUtilization", "CPUUtilization"), ("WriteIOPS", "IOPS"), ("ReadThroughput", "Throughput")],
    )
    def test_graph_key_of(self, metric, graph):
        assert graph_key_of(metric) == graph

    def test_graph_key_of_unknown(self):
        with pytest.raises(KeyError):
            graph_key_of("NetworkIn")


class TestGraphDefinition:
    """graph_definition 테스트"""

    def test_keys_prefixed(self):
        definition = graph_definition("rdb", "RDB")

        assert set(definition) == {f"rdb.{graph.key}" for graph in GRAPHS}

    def test_iops_graph(self):
        iops = graph_definition("rdb", "RDB")["rdb.IOPS"]

        assert iops == {
            "label": "RDB IOPS",
            "unit": "iops",
            "metrics": [
                {"name": "ReadIOPS", "label": "Read", "stacked": False},
                {"name": "WriteIOPS", "label": "Write", "stacked": False},
            ],
        }

    def test_empty_label_prefix(self):
        assert graph_definition("db", "")["db.SwapUsage"]["label"] == "Swap Usage"

    @pytest.mark.parametrize(
        "prefix,expected",
        [
            ("rdb", "RDB"),
            ("mydb", "Mydb"),
            ("my-db", "My-Db"),
            ("my_db", "My_db"),
            ("myDB", "MyDB"),
            ("db2 prod", "Db2 Prod"),
            ("2db", "2db"),
            ("", ""),
        ],
    )
    def test_default_label_prefix(self, prefix, expected):
        assert default_label_prefix(prefix) == expected
