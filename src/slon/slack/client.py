"""Slack APIへの送信を担当するクライアントクラス"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import aiohttp
from pydantic import ValidationError

from slon import __version__
from slon.slack.blocks import ChatPostMessageRequest, SlackResponse
from slon.slack.exceptions import (
    ApplicationError,
    ConfigurationError,
    DeliveryError,
    NetworkError,
    ProtocolError,
)

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://slack.com/api/chat.postMessage"
USER_AGENT = f"slon/{__version__}"


@dataclass
class DeliveryResult:
    """送信に成功した場合の結果"""

    status: int  # HTTPステータスコード
    body: str  # レスポンスボディ（verbose出力用の生文字列）
    response: SlackResponse


class SlackClient:
    """1件のメッセージをエンドポイントにPOSTするクライアントクラス

    エンドポイントは chat.postMessage でも Incoming Webhook のURLでもよい。
    トークンがあれば Bearer 認証ヘッダーを付ける。
    """

    def __init__(self, endpoint: str | None, token: str | None = None) -> None:
        if not endpoint:
            msg = "Endpoint is required"
            raise ConfigurationError(msg)
        self._endpoint = endpoint
        self._token = token

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def build_headers(self) -> dict[str, str]:
        """リクエストヘッダーを組み立てる"""
        headers = {
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def post_message(self, request: ChatPostMessageRequest) -> DeliveryResult:
        """メッセージを送信し、結果を分類する。

        リトライはしない。タイムアウトはaiohttpのデフォルトに従う。

        Args:
            request: 送信するリクエストボディ

        Returns:
            DeliveryResult: 送信結果（ok: true の場合のみ）

        Raises:
            NetworkError: 通信レイヤーで失敗した場合
            DeliveryError: HTTPステータスが2xx以外の場合
            ProtocolError: 2xxだがレスポンスを解釈できない場合
            ApplicationError: レスポンスが ok: false の場合
        """
        payload = request.to_json()
        logger.debug("POST %s (%d bytes)", self._endpoint, len(payload))

        headers = self.build_headers()
        try:
            async with aiohttp.ClientSession() as session, session.post(self._endpoint, data=payload, headers=headers) as response:
                status = response.status
                reason = response.reason
                # 不正なバイト列は置換文字にする
                body = await response.text(errors="replace")
        except (TimeoutError, OSError, aiohttp.ClientError) as e:
            msg = f"Failed to send request to {self._endpoint}: {e!r}"
            raise NetworkError(msg) from e

        logger.debug("Received status %d from %s", status, self._endpoint)

        if not 200 <= status < 300:
            status_line = f"{status} {reason}" if reason else str(status)
            raise DeliveryError(f"{status_line}\n{body}", status, body)

        try:
            result = SlackResponse.model_validate_json(body)
        except ValidationError as e:
            msg = f"Malformed response body: {body!r}"
            raise ProtocolError(msg, body) from e

        if not result.ok:
            error_code = result.error if result.error is not None else "(null)"
            raise ApplicationError(f"{error_code}\n\n{body}", error_code, body)

        return DeliveryResult(status=status, body=body, response=result)
