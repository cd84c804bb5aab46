"""Slack関連モジュール"""

from slon.slack.blocks import (
    ChatPostMessageRequest,
    SlackAttachment,
    SlackBlock,
    SlackContextBlock,
    SlackFieldsSectionBlock,
    SlackHeaderBlock,
    SlackMarkdownText,
    SlackPlainText,
    SlackResponse,
    SlackTextObject,
    SlackTextSectionBlock,
)
from slon.slack.client import DEFAULT_ENDPOINT, DeliveryResult, SlackClient
from slon.slack.colors import COLORS, resolve_color
from slon.slack.exceptions import (
    ApplicationError,
    ConfigurationError,
    DeliveryError,
    NetworkError,
    ProtocolError,
    SlonError,
)

__all__ = [
    "COLORS",
    "DEFAULT_ENDPOINT",
    "ApplicationError",
    "ChatPostMessageRequest",
    "ConfigurationError",
    "DeliveryError",
    "DeliveryResult",
    "NetworkError",
    "ProtocolError",
    "SlackAttachment",
    "SlackBlock",
    "SlackClient",
    "SlackContextBlock",
    "SlackFieldsSectionBlock",
    "SlackHeaderBlock",
    "SlackMarkdownText",
    "SlackPlainText",
    "SlackResponse",
    "SlackTextObject",
    "SlackTextSectionBlock",
    "SlonError",
    "resolve_color",
]
