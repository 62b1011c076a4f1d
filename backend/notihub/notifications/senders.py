# backend/notihub/notifications/senders.py

"""
チャンネル別の通知送信インターフェースと実装。

実際の SMTP / SMS ゲートウェイ / Push サービスへの送信は行わず、
チャンネル名付きの 1 行を出力する。インスタンスは 1 回の送信ごとに
factory.create_notification() で生成され、使い終わったら捨てられる。
"""

from __future__ import annotations

from typing import ClassVar, Optional, Protocol, TextIO


class Notification(Protocol):
    """
    通知送信の最小インターフェース。

    実装:
    - EmailNotification
    - SMSNotification
    - PushNotification
    """

    def send(self, message: str) -> None:  # pragma: no cover - Protocol
        ...


class _PrintingNotification:
    """Sending <label>: <message> 形式の 1 行を出力する Sender の共通実装。"""

    label: ClassVar[str]

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def send(self, message: str) -> None:
        print(f"Sending {self.label}: {message}", file=self._stream)


class EmailNotification(_PrintingNotification):
    """Email 送信の代わりに "Sending Email: ..." を出力する。"""

    label = "Email"


class SMSNotification(_PrintingNotification):
    """SMS 送信の代わりに "Sending SMS: ..." を出力する。"""

    label = "SMS"


class PushNotification(_PrintingNotification):
    """Push 通知の代わりに "Sending Push Notification: ..." を出力する。"""

    label = "Push Notification"
