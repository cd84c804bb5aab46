"""統合Config クラス"""

from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from slon.config.app import AppConfig, load_app_config
from slon.config.env import load_env_config
from slon.slack.client import DEFAULT_ENDPOINT


class Config(BaseModel):
    """統合設定クラス（環境変数 + アプリケーション設定）"""

    # 環境変数由来
    slack_token: str | None = Field(default=None, description="Bearer認証に使うSlackトークン")

    # config.yaml由来
    endpoint: str = Field(default=DEFAULT_ENDPOINT, description="Slack APIエンドポイントまたはWebhook URL")
    channel: str | None = Field(default=None, description="投稿先チャンネル")
    username: str | None = Field(default=None, description="送信者のユーザー名")
    icon_emoji: str | None = Field(default=None, description="送信者のアイコン絵文字")
    color: str | None = Field(default=None, description="アタッチメントの色")

    model_config = {"extra": "forbid"}


def load_config(config_path: Path | None = None, environ: Mapping[str, str] | None = None) -> Config:
    """環境変数とYAMLファイルから統合設定を読み込む

    Args:
        config_path: YAMLファイルのパス（Noneならデフォルト値を使う）
        environ: 環境変数のマッピング（Noneなら.envを読み込んだうえでos.environ）

    Returns:
        Config: 統合設定

    Raises:
        FileNotFoundError: YAMLファイルが存在しない場合
        ValueError: YAMLファイルが不正な場合
    """
    if environ is None:
        # .envファイルを読み込み（既存の環境変数が優先）
        load_dotenv()

    env_config = load_env_config(environ)
    app_config = load_app_config(config_path) if config_path is not None else AppConfig()

    return Config(
        slack_token=env_config.slack_token,
        **app_config.model_dump(),
    )
