# backend/notihub/main.py

"""
HTTP アプリケーションのエントリーポイント。

- /notifications/subscriptions, /notifications/send を公開する
- /health を公開する

NotificationManager はアプリごとに 1 つ生成して app.state に保持する。

起動例:
    uvicorn notihub.main:app
    uvicorn --factory notihub.main:create_app
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from notihub.notifications.config import get_notification_settings
from notihub.notifications.router import router as notifications_router
from notihub.notifications.service import NotificationManager


def create_app(manager: Optional[NotificationManager] = None) -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    :param manager: 共有したい NotificationManager。None なら新規に生成する。
    """
    settings = get_notification_settings()
    app = FastAPI(title=settings.app_title)
    app.state.notification_manager = manager if manager is not None else NotificationManager()

    app.include_router(notifications_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """簡易ヘルスチェックエンドポイント。"""
        return {"status": "ok"}

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
