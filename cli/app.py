"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 mackerel-agent 플러그인 진입점입니다.
수집 주기마다 외부 스케줄러(mackerel-agent)가 한 번 실행하며,
모든 카탈로그 메트릭의 최신값을 표준 출력으로 내보냅니다.

명령어 구조:
    nifcloud-rdb-metrics --region east-1 --identifier mydb \\
        --access-key-id AK --secret-access-key SK

    # 그래프 정의 출력 (mackerel-agent가 호출)
    MACKEREL_AGENT_PLUGIN_META=1 nifcloud-rdb-metrics

종료 코드:
    0: 수집 완료 (일부 메트릭 실패 포함)
    1: 설정 오류 (리전, 자격 증명, 식별자)

Usage:
    $ python -m cli.app --region east-1 --identifier mydb
"""

from __future__ import annotations

import logging

import click
from click import Context

from core.config import (
    ENV_ACCESS_KEY_ID,
    ENV_REGION,
    ENV_SECRET_ACCESS_KEY,
    get_version,
    is_plugin_meta_mode,
    load_credential,
    settings,
)
from core.exceptions import ConfigError, format_error_for_user
from core.region.data import ALL_REGIONS, resolve_endpoint

logger = logging.getLogger(__name__)

VERSION = get_version()


@click.command(name="nifcloud-rdb-metrics")
@click.version_option(VERSION, prog_name="nifcloud-rdb-metrics")
@click.option("--region", envvar=ENV_REGION, default="", help=f"리전 ({', '.join(ALL_REGIONS)})")
@click.option("--endpoint", default=None, help="엔드포인트 URL (지정 시 --region 무시)")
@click.option("--access-key-id", envvar=ENV_ACCESS_KEY_ID, default=None, help="Access Key ID")
@click.option("--secret-access-key", envvar=ENV_SECRET_ACCESS_KEY, default=None, help="Secret Access Key")
@click.option("--identifier", default="", help="DB Instance Identifier")
@click.option(
    "--metric-key-prefix",
    default=settings.DEFAULT_METRIC_KEY_PREFIX,
    show_default=True,
    help="Metric key prefix",
)
@click.option("--metric-label-prefix", default="", help="Metric label prefix (기본: prefix에서 자동 결정)")
@click.option("--timeout", type=float, default=settings.API_TIMEOUT, show_default=True, help="요청 타임아웃 (초)")
@click.option("--debug", is_flag=True, help="DEBUG 로그 출력 (stderr)")
@click.pass_context
def cli(
    ctx: Context,
    region: str,
    endpoint: str | None,
    access_key_id: str | None,
    secret_access_key: str | None,
    identifier: str,
    metric_key_prefix: str,
    metric_label_prefix: str,
    timeout: float,
    debug: bool,
) -> None:
    """NIFCLOUD RDB 메트릭 수집 (mackerel-agent plugin)"""
    from cli.output import format_graph_definition, format_values
    from cli.ui.console import print_error, setup_logging
    from shared.nifcloud.metrics.catalog import default_label_prefix, metric_names

    setup_logging(debug=debug)

    if is_plugin_meta_mode():
        label_prefix = metric_label_prefix or default_label_prefix(metric_key_prefix)
        click.echo(format_graph_definition(metric_key_prefix, label_prefix))
        return

    try:
        fetcher = _build_fetcher(region, endpoint, access_key_id, secret_access_key, identifier, timeout)
    except ConfigError as e:
        print_error(format_error_for_user(e))
        ctx.exit(1)

    with fetcher.client:
        values = fetcher.fetch(identifier, metric_names())

    for line in format_values(values, metric_key_prefix):
        click.echo(line)


def _build_fetcher(
    region: str,
    endpoint: str | None,
    access_key_id: str | None,
    secret_access_key: str | None,
    identifier: str,
    timeout: float,
):
    """설정 검증 후 MetricFetcher 생성 (네트워크 호출 없음)

    Raises:
        ConfigError: 식별자, 리전/엔드포인트, 자격 증명 오류
    """
    from shared.nifcloud.client import RdbClient
    from shared.nifcloud.metrics.fetcher import MetricFetcher

    if not identifier:
        raise ConfigError("identifier", "DB Instance Identifier가 지정되지 않았습니다", code="MissingIdentifier")

    credential = load_credential(access_key_id, secret_access_key)
    url = endpoint or resolve_endpoint(region)
    logger.debug(f"endpoint={url}, access_key_id={credential.masked_access_key_id}")

    return MetricFetcher(RdbClient(url, credential, timeout=timeout))


if __name__ == "__main__":
    cli()
