# backend/notihub/notifications/config.py

"""
通知システムの設定値をまとめるモジュール。
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from notihub.utils.config import get_env

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_APP_TITLE = "Notihub"


@dataclass(frozen=True)
class NotificationSettings:
    """通知システム用の設定値コンテナ。"""

    log_level: int
    app_title: str


def _parse_log_level(raw: str) -> int:
    """
    "DEBUG" / "info" などのレベル名を logging の数値レベルに変換する。

    - 解釈できない場合は INFO を返す。
    """
    level = logging.getLevelName(raw.strip().upper())
    if isinstance(level, int):
        return level

    logger.warning("Unknown NOTIHUB_LOG_LEVEL %r, falling back to %s", raw, DEFAULT_LOG_LEVEL)
    return logging.INFO


@lru_cache()
def get_notification_settings() -> NotificationSettings:
    """
    環境変数から通知設定を読み込む。

    任意:
      - NOTIHUB_LOG_LEVEL (デフォルト: INFO)
      - NOTIHUB_APP_TITLE (デフォルト: Notihub)
    """
    log_level = get_env(
        "NOTIHUB_LOG_LEVEL",
        default=DEFAULT_LOG_LEVEL,
    )
    app_title = get_env(
        "NOTIHUB_APP_TITLE",
        default=DEFAULT_APP_TITLE,
    )

    return NotificationSettings(
        log_level=_parse_log_level(log_level),
        app_title=app_title,
    )
