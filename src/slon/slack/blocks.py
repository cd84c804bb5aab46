"""Slack Block Kit / chat.postMessage 型定義"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class SlackPlainText(BaseModel, frozen=True, extra="forbid"):
    type: Literal["plain_text"] = "plain_text"
    text: str
    emoji: bool | None = None


class SlackMarkdownText(BaseModel, frozen=True, extra="forbid"):
    type: Literal["mrkdwn"] = "mrkdwn"
    text: str
    verbatim: bool | None = None


SlackTextObject = Annotated[SlackPlainText | SlackMarkdownText, Field(discriminator="type")]


class SlackHeaderBlock(BaseModel, frozen=True, extra="forbid"):
    type: Literal["header"] = "header"
    text: SlackTextObject


class SlackTextSectionBlock(BaseModel, frozen=True, extra="forbid"):
    type: Literal["section"] = "section"
    text: SlackTextObject


class SlackFieldsSectionBlock(BaseModel, frozen=True, extra="forbid"):
    type: Literal["section"] = "section"
    fields: list[SlackTextObject]


class SlackContextBlock(BaseModel, frozen=True, extra="forbid"):
    type: Literal["context"] = "context"
    elements: list[SlackTextObject]


# text / fields のどちらを持つかで section の2種類を見分ける
SlackBlock = SlackHeaderBlock | SlackTextSectionBlock | SlackFieldsSectionBlock | SlackContextBlock


class SlackAttachment(BaseModel, frozen=True, extra="forbid"):
    blocks: list[SlackBlock]
    color: str | None = None


class ChatPostMessageRequest(BaseModel, frozen=True, extra="forbid"):
    """chat.postMessage / Incoming Webhook に送るリクエストボディ"""

    channel: str | None = None
    username: str | None = None
    icon_emoji: str | None = None
    attachments: list[SlackAttachment]

    def to_json(self, indent: int | None = None) -> str:
        """値のないフィールドを省いたJSON文字列にする

        Args:
            indent: インデント幅（Noneなら1行）
        """
        return self.model_dump_json(exclude_none=True, indent=indent)


class SlackResponse(BaseModel, frozen=True):
    """Slack APIのレスポンス（ok / error 以外のキーは無視する）"""

    ok: bool
    error: str | None = None
