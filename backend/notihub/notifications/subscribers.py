# backend/notihub/notifications/subscribers.py

"""
Observer パターンの購読者側。

NotificationManager は Subscriber への参照を保持するだけで、生成・破棄は行わない。
購読者の寿命は生成した側（デモドライバ、HTTP アプリ、テスト）が管理する。
"""

from __future__ import annotations

from typing import Optional, Protocol, TextIO


class Subscriber(Protocol):
    """
    ファンアウト通知を受け取る購読者の最小インターフェース。

    name は購読一覧の表示にのみ使う。
    """

    name: str

    def update(self, message: str) -> None:  # pragma: no cover - Protocol
        ...


class User:
    """名前を持ち、通知を受け取ると 1 行出力するだけの購読者。"""

    def __init__(self, name: str, stream: Optional[TextIO] = None) -> None:
        self.name = name
        # None の場合は print 時点の sys.stdout を使う
        self._stream = stream

    def update(self, message: str) -> None:
        print(f"{self.name} received notification: {message}", file=self._stream)

    def __repr__(self) -> str:
        return f"User(name={self.name!r})"
