# backend/tests/test_notifications_config.py

import logging

from notihub.notifications.config import get_notification_settings
from notihub.utils.config import get_env


def test_defaults_when_env_is_unset() -> None:
    settings = get_notification_settings()
    assert settings.log_level == logging.INFO
    assert settings.app_title == "Notihub"


def test_log_level_is_case_insensitive(monkeypatch) -> None:
    monkeypatch.setenv("NOTIHUB_LOG_LEVEL", "debug")
    assert get_notification_settings().log_level == logging.DEBUG


def test_unknown_log_level_falls_back_to_info(monkeypatch) -> None:
    monkeypatch.setenv("NOTIHUB_LOG_LEVEL", "chatty")
    assert get_notification_settings().log_level == logging.INFO


def test_get_env_unset_uses_default(monkeypatch) -> None:
    monkeypatch.delenv("NOTIHUB_DOES_NOT_EXIST", raising=False)
    assert get_env("NOTIHUB_DOES_NOT_EXIST", "fallback") == "fallback"


def test_get_env_blank_uses_default(monkeypatch) -> None:
    """
    空文字・空白のみの値は未設定として扱うことを確認。
    """
    monkeypatch.setenv("NOTIHUB_EMPTY", "")
    monkeypatch.setenv("NOTIHUB_BLANK", "   ")
    assert get_env("NOTIHUB_EMPTY", "x") == "x"
    assert get_env("NOTIHUB_BLANK", "x") == "x"


def test_get_env_strips_value(monkeypatch) -> None:
    monkeypatch.setenv("NOTIHUB_APP_TITLE", "  Orders  ")
    assert get_env("NOTIHUB_APP_TITLE", "x") == "Orders"


def test_blank_app_title_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("NOTIHUB_APP_TITLE", " ")
    assert get_notification_settings().app_title == "Notihub"
