# backend/notihub/notifications/factory.py

"""
通知 Sender の簡易ファクトリ。

- チャンネル名（"email" / "sms" / "push"）から毎回新しい Sender を生成する。
- 未知のチャンネル名では None を返す。例外は投げない。
- 状態は持たず、副作用もない。
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, TextIO, Union

from .schemas import NotificationChannel
from .senders import EmailNotification, Notification, PushNotification, SMSNotification

_SENDER_TYPES: Dict[str, Callable[..., Notification]] = {
    NotificationChannel.EMAIL.value: EmailNotification,
    NotificationChannel.SMS.value: SMSNotification,
    NotificationChannel.PUSH.value: PushNotification,
}


def create_notification(
    channel: Union[str, NotificationChannel],
    *,
    stream: Optional[TextIO] = None,
) -> Optional[Notification]:
    """
    チャンネル名に対応する Sender を生成する。

    大文字小文字は区別する（"EMAIL" は未知扱い）。
    """
    if isinstance(channel, NotificationChannel):
        channel = channel.value

    sender_type = _SENDER_TYPES.get(channel)
    if sender_type is None:
        return None
    return sender_type(stream=stream)


__all__ = ["create_notification"]
