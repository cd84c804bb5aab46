"""アプリケーション設定"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from slon.slack.client import DEFAULT_ENDPOINT


class AppConfig(BaseModel):
    """アプリケーション設定（CLI引数のデフォルト値）"""

    endpoint: str = Field(default=DEFAULT_ENDPOINT, description="Slack APIエンドポイントまたはWebhook URL")
    channel: str | None = Field(default=None, description="投稿先チャンネル")
    username: str | None = Field(default=None, description="送信者のユーザー名")
    icon_emoji: str | None = Field(default=None, description="送信者のアイコン絵文字")
    color: str | None = Field(default=None, description="アタッチメントの色")

    model_config = {"extra": "forbid"}


def load_app_config(config_path: Path) -> AppConfig:
    """YAMLファイルからAppConfigを読み込む

    Args:
        config_path: 設定ファイルのパス

    Returns:
        AppConfig: アプリケーション設定

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: 設定ファイルが不正な場合
    """
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
            if data is None:
                data = {}
            if not isinstance(data, dict):
                msg = f"Invalid configuration: expected a mapping, got {type(data).__name__}"
                raise ValueError(msg)
            return AppConfig(**data)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML file: {e}"
        raise ValueError(msg) from e
    except ValidationError as e:
        msg = f"Invalid configuration: {e}"
        raise ValueError(msg) from e
