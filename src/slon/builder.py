"""CLI入力からメッセージドキュメントを組み立てるモジュール"""

from __future__ import annotations

from collections.abc import Sequence

from slon.slack.blocks import (
    ChatPostMessageRequest,
    SlackAttachment,
    SlackBlock,
    SlackContextBlock,
    SlackFieldsSectionBlock,
    SlackHeaderBlock,
    SlackMarkdownText,
    SlackPlainText,
    SlackTextSectionBlock,
)
from slon.slack.colors import resolve_color
from slon.slack.exceptions import ConfigurationError


def build_blocks(
    header: str | None = None,
    message: str | None = None,
    fields: Sequence[str] | None = None,
    footer: str | None = None,
) -> list[SlackBlock]:
    """指定された入力からブロックを組み立てる。

    ブロックは header → message → fields → footer の順に並び、
    指定のないものは含めない。空文字列は「指定あり」として扱う。

    Args:
        header: タイトル
        message: 本文（mrkdwn）
        fields: フィールドの一覧（mrkdwn、入力順を保持）
        footer: フッター（mrkdwn）

    Returns:
        list[SlackBlock]: ブロックのリスト

    Raises:
        ConfigurationError: ブロックが1つも作られなかった場合
    """
    blocks: list[SlackBlock] = []

    # header ブロックは plain_text しか受け付けない
    if header is not None:
        blocks.append(SlackHeaderBlock(text=SlackPlainText(text=header, emoji=True)))

    if message is not None:
        blocks.append(SlackTextSectionBlock(text=SlackMarkdownText(text=message)))

    if fields:
        blocks.append(SlackFieldsSectionBlock(fields=[SlackMarkdownText(text=field) for field in fields]))

    if footer is not None:
        blocks.append(SlackContextBlock(elements=[SlackMarkdownText(text=footer)]))

    if not blocks:
        msg = "At least one of header, footer, message and fields is required"
        raise ConfigurationError(msg)

    return blocks


def build_attachment(
    header: str | None = None,
    message: str | None = None,
    fields: Sequence[str] | None = None,
    footer: str | None = None,
    color: str | None = None,
) -> SlackAttachment:
    """ブロックと解決済みの色を1つのアタッチメントにまとめる"""
    blocks = build_blocks(header=header, message=message, fields=fields, footer=footer)
    return SlackAttachment(blocks=blocks, color=resolve_color(color))


def build_message(
    header: str | None = None,
    message: str | None = None,
    fields: Sequence[str] | None = None,
    footer: str | None = None,
    color: str | None = None,
    channel: str | None = None,
    username: str | None = None,
    icon_emoji: str | None = None,
) -> ChatPostMessageRequest:
    """送信するリクエストボディ全体を組み立てる

    Raises:
        ConfigurationError: ブロックが1つも作られなかった場合
    """
    attachment = build_attachment(header=header, message=message, fields=fields, footer=footer, color=color)
    return ChatPostMessageRequest(
        channel=channel,
        username=username,
        icon_emoji=icon_emoji,
        attachments=[attachment],
    )
