# backend/tests/conftest.py
"""
Pytest configuration for Notihub backend tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import notihub.*` works correctly without an editable install.
- Clears cached settings so every test reads the environment it sets up.
"""

import sys
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)


_ensure_project_root_in_sys_path()


@pytest.fixture(autouse=True)
def _reset_settings_cache(monkeypatch):
    """
    NOTIHUB_* をテストごとに未設定状態から始め、lru_cache もクリアする。
    """
    from notihub.notifications.config import get_notification_settings

    monkeypatch.delenv("NOTIHUB_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NOTIHUB_APP_TITLE", raising=False)
    get_notification_settings.cache_clear()
    yield
    get_notification_settings.cache_clear()
