"""環境変数設定"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field


class EnvConfig(BaseModel):
    """環境変数設定"""

    slack_token: str | None = Field(default=None, description="Bearer認証に使うSlackトークン（Webhookなら不要）")

    model_config = {"extra": "forbid"}


def load_env_config(environ: Mapping[str, str] | None = None) -> EnvConfig:
    """環境変数からEnvConfigを読み込む

    SLACK_TOKEN が未設定または空文字列の場合はトークンなしとして扱う。

    Args:
        environ: 環境変数のマッピング（Noneならos.environ）

    Returns:
        EnvConfig: 環境変数設定
    """
    if environ is None:
        environ = os.environ
    return EnvConfig(slack_token=environ.get("SLACK_TOKEN") or None)
