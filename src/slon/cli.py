"""コマンドラインインターフェース"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

from slon import __version__
from slon.builder import build_message
from slon.config import Config, load_config
from slon.slack import DeliveryResult, SlackClient, SlonError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="slon", description="Slack opinionated notifier")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-e", "--endpoint", help="Slack API endpoint or webhook URL")
    parser.add_argument("-c", "--channel", help="Target channel")
    parser.add_argument("-t", "--header", help="Message title")
    parser.add_argument("-b", "--footer", help="Message footer")
    parser.add_argument("-m", "--message", help="Message body")
    parser.add_argument("-f", "--field", nargs="*", action="extend", help="Message fields")
    parser.add_argument("-r", "--color", help="Message color")
    parser.add_argument("-u", "--username", help="Sender user name")
    parser.add_argument("-i", "--icon-emoji", help="Sender icon emoji")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--config", type=Path, help="YAML file with default values")
    return parser


def _pick(value: str | None, default: str | None) -> str | None:
    """CLI引数が指定されていればそれを、なければ設定ファイルの値を使う"""
    return value if value is not None else default


def notify(args: argparse.Namespace, config: Config) -> DeliveryResult:
    """引数と設定からメッセージを組み立てて1件送信する

    Raises:
        SlonError: 組み立てまたは送信に失敗した場合
    """
    request = build_message(
        header=args.header,
        message=args.message,
        fields=args.field or [],
        footer=args.footer,
        color=_pick(args.color, config.color),
        channel=_pick(args.channel, config.channel),
        username=_pick(args.username, config.username),
        icon_emoji=_pick(args.icon_emoji, config.icon_emoji),
    )
    client = SlackClient(_pick(args.endpoint, config.endpoint), token=config.slack_token)

    if args.verbose:
        print(request.to_json(indent=2))

    result = asyncio.run(client.post_message(request))

    if args.verbose:
        print(f"OK\n\n{result.body}")

    return result


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    """エントリーポイント

    Args:
        argv: コマンドライン引数（Noneならsys.argv）
        environ: 環境変数のマッピング（Noneなら.envとos.environ）

    Returns:
        int: 終了コード（送信成功で0、失敗で1）
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config, environ)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    logger.debug("Config loaded: endpoint=%s, channel=%s", config.endpoint, config.channel)

    try:
        notify(args, config)
    except SlonError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0
