# backend/notihub/demo.py

"""
固定シナリオのデモドライバ。

    python -m notihub.demo

Alice / Bob を購読させ、email / sms / push を 1 回ずつ送信する。
"""

from __future__ import annotations

import logging
from typing import List, Optional, TextIO, Tuple

from notihub.notifications.config import get_notification_settings
from notihub.notifications.service import NotificationManager
from notihub.notifications.subscribers import User

DEMO_SENDS: List[Tuple[str, str]] = [
    ("email", "Your order has been placed."),
    ("sms", "Your order is on the way."),
    ("push", "Your order has been delivered."),
]


def run_demo(stream: Optional[TextIO] = None) -> NotificationManager:
    """
    デモ用の NotificationManager と購読者を同じ出力先で生成し、固定シナリオを流す。

    :param stream: 全行の出力先。None なら sys.stdout
    :return: シナリオで使った NotificationManager
    """
    manager = NotificationManager(stream=stream)
    alice = User("Alice", stream=stream)
    bob = User("Bob", stream=stream)

    manager.subscribe("email", alice)
    manager.subscribe("sms", bob)
    manager.subscribe("push", alice)
    manager.subscribe("push", bob)

    for channel, message in DEMO_SENDS:
        manager.send_notification(channel, message)

    return manager


def main() -> int:
    settings = get_notification_settings()
    logging.basicConfig(level=settings.log_level)

    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
