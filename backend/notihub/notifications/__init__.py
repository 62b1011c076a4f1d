# backend/notihub/notifications/__init__.py

"""
通知レイヤ用モジュール群。

Observer / Factory の 2 パターンと、従来シングルトンだった管理オブジェクトを
「呼び出し側が明示的に所有するコンテキスト」に置き換えた NotificationManager を提供する。
実際の Email / SMS / Push 送信は行わず、標準出力への 1 行出力で代用する。

構成イメージ:
- schemas: チャンネル種別と HTTP 用スキーマ
- subscribers: Subscriber インターフェースと User
- senders: Notification インターフェースと Email / SMS / Push 実装
- factory: チャンネル名から Sender を生成する
- service: NotificationManager（購読・ファンアウト・送信）
- config / router: 設定値と FastAPI ルーター
"""

from .factory import create_notification
from .schemas import NotificationChannel
from .senders import EmailNotification, Notification, PushNotification, SMSNotification
from .service import NotificationManager
from .subscribers import Subscriber, User

__all__ = [
    "NotificationChannel",
    "Notification",
    "EmailNotification",
    "SMSNotification",
    "PushNotification",
    "Subscriber",
    "User",
    "create_notification",
    "NotificationManager",
]
