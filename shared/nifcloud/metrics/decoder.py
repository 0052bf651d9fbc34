"""
shared/nifcloud/metrics/decoder.py - NiftyGetMetricStatistics 응답 디코더

XML 응답을 MetricSeries로 변환합니다.

응답 구조 (네임스페이스는 무시):
    <NiftyGetMetricStatisticsResponse>
      <NiftyGetMetricStatisticsResult>
        <Datapoints>
          <member>
            <NiftyTargetName>mydb</NiftyTargetName>
            <Timestamp>2024-01-01T12:00:00Z</Timestamp>
            <Sum>100</Sum>
            <SampleCount>10</SampleCount>
          </member>
        </Datapoints>
        <Label>CPUUtilization</Label>
      </NiftyGetMetricStatisticsResult>
      <ResponseMetadata><RequestId>...</RequestId></ResponseMetadata>
    </NiftyGetMetricStatisticsResponse>

데이터포인트가 0개인 응답은 빈 MetricSeries를 반환합니다 (에러 아님).
"""

from __future__ import annotations

import logging
import math
import xml.etree.ElementTree as ET
from datetime import datetime, timezone

from core.exceptions import DecodeError

from .types import MetricSample, MetricSeries

logger = logging.getLogger(__name__)

RESULT_TAG = "NiftyGetMetricStatisticsResult"


def _local_name(tag: str) -> str:
    """네임스페이스를 제거한 태그 이름"""
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _child_text(element: ET.Element, name: str) -> str:
    for child in element:
        if _local_name(child.tag) == name:
            return (child.text or "").strip()
    raise DecodeError(f"datapoint member has no <{name}> element")


def parse_timestamp(value: str) -> datetime:
    """Timestamp 문자열을 UTC aware datetime으로 변환

    "2006-01-02T15:04:05Z" 형식이 기본이며, 소수점 초, 숫자 오프셋,
    공백 구분자도 허용합니다. 오프셋이 없으면 UTC로 간주합니다.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise DecodeError(f"invalid Timestamp: {value!r}", cause=e) from e

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_sum(value: str) -> float:
    try:
        result = float(value)
    except ValueError as e:
        raise DecodeError(f"invalid Sum: {value!r}", cause=e) from e
    if math.isnan(result):
        raise DecodeError(f"invalid Sum: {value!r}")
    return result


def parse_sample_count(value: str) -> int:
    """SampleCount 파싱 ("10", "10.0" 허용, 소수부가 있으면 에러)"""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        as_float = float(value)
    except ValueError as e:
        raise DecodeError(f"invalid SampleCount: {value!r}", cause=e) from e
    if not as_float.is_integer():
        raise DecodeError(f"invalid SampleCount: {value!r}")
    return int(as_float)


def _decode_member(member: ET.Element) -> MetricSample:
    return MetricSample(
        timestamp=parse_timestamp(_child_text(member, "Timestamp")),
        sum=parse_sum(_child_text(member, "Sum")),
        sample_count=parse_sample_count(_child_text(member, "SampleCount")),
    )


def decode_metric_statistics(body: bytes | str) -> MetricSeries:
    """NiftyGetMetricStatistics 응답 본문 디코딩

    Args:
        body: XML 응답 본문

    Returns:
        MetricSeries (모든 Datapoints 그룹의 member를 문서 순서대로)

    Raises:
        DecodeError: XML이 깨졌거나, 결과 요소가 없거나, 필드를 해석할 수 없는 경우
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise DecodeError("malformed XML response", cause=e) from e

    if _local_name(root.tag) == RESULT_TAG:
        result = root
    else:
        found = _children(root, RESULT_TAG)
        if not found:
            raise DecodeError(f"<{RESULT_TAG}> not found in <{_local_name(root.tag)}> response")
        result = found[0]

    samples = [
        _decode_member(member)
        for group in _children(result, "Datapoints")
        for member in _children(group, "member")
    ]

    labels = _children(result, "Label")
    label = (labels[0].text or "").strip() if labels else ""

    logger.debug(f"{label or RESULT_TAG}: {len(samples)}개 데이터포인트 디코딩")
    return MetricSeries(samples=tuple(samples), label=label)
