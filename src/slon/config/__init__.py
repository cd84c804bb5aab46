"""設定管理モジュール"""

from slon.config.app import AppConfig, load_app_config
from slon.config.config import Config, load_config
from slon.config.env import EnvConfig, load_env_config

__all__ = [
    "AppConfig",
    "Config",
    "EnvConfig",
    "load_app_config",
    "load_config",
    "load_env_config",
]
