# backend/notihub/notifications/service.py

"""
NotificationManager: 購読レジストリの保持と通知送信。

元々はプロセス全体で 1 つのシングルトンだったが、ここでは
呼び出し側（デモドライバ / FastAPI アプリ / テスト）が明示的に生成・所有する
コンテキストオブジェクトとして扱う。モジュールレベルのインスタンスは持たない。

送信の流れ:
1. factory.create_notification() でチャンネル別 Sender を生成
2. Sender.send(message)
3. そのチャンネルの購読者へ登録順に update(message) をファンアウト

未知のチャンネルは "Invalid notification type: <channel>" を出力して終了し、
そのチャンネル名で登録済みの購読者にも通知しない。
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, TextIO, Tuple

from .factory import create_notification
from .subscribers import Subscriber

logger = logging.getLogger(__name__)


class NotificationManager:
    """
    チャンネル名 → 購読者リスト（登録順）を管理する。

    - 購読者への参照は保持するが、生成や破棄は行わない。
    - 同じ購読者を 2 回登録すると 2 回通知される（重複排除しない）。
    - スレッドセーフではない。単一スレッドからの利用が前提。
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._subscribers: Dict[str, List[Subscriber]] = {}
        # Sender と診断メッセージの出力先。None なら出力時点の sys.stdout
        self._stream = stream

    def subscribe(self, channel: str, subscriber: Subscriber) -> None:
        self._subscribers.setdefault(channel, []).append(subscriber)
        logger.debug("Subscribed %r to channel %r", subscriber, channel)

    def notify_subscribers(self, channel: str, message: str) -> None:
        """
        チャンネルの購読者に登録順で update() を呼ぶ。

        購読者がいないチャンネルでは何もしない。
        """
        for subscriber in self._subscribers.get(channel, ()):
            subscriber.update(message)

    def send_notification(self, channel: str, message: str) -> bool:
        """
        Sender で送信したあと、購読者へファンアウトする。

        :return: 送信した場合 True、未知のチャンネルだった場合 False
        """
        notification = create_notification(channel, stream=self._stream)
        if notification is None:
            logger.warning("Invalid notification type requested: %r", channel)
            print(f"Invalid notification type: {channel}", file=self._stream)
            return False

        notification.send(message)
        logger.debug(
            "Sent %s notification, notifying %d subscriber(s)",
            channel,
            len(self._subscribers.get(channel, ())),
        )
        self.notify_subscribers(channel, message)
        return True

    def subscribers(self, channel: str) -> Tuple[Subscriber, ...]:
        """チャンネルの購読者のスナップショット（未登録なら空タプル）。"""
        return tuple(self._subscribers.get(channel, ()))

    def channels(self) -> Dict[str, Tuple[Subscriber, ...]]:
        return {channel: tuple(subs) for channel, subs in self._subscribers.items()}
