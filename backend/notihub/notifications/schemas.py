# backend/notihub/notifications/schemas.py

"""
通知チャンネル種別と、HTTP 層で使うリクエスト／レスポンススキーマ。

NotificationChannel は Factory が解釈できるチャンネル名の一覧。
購読 (subscribe) 自体は任意の文字列チャンネル名を受け付けるため、
リクエストスキーマ側の channel は Enum ではなく str としている。
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field


class NotificationChannel(str, Enum):
    """
    Factory が Sender を生成できるチャンネル。

    - EMAIL: "Sending Email: ..."
    - SMS: "Sending SMS: ..."
    - PUSH: "Sending Push Notification: ..."
    """

    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


class SubscribeRequest(BaseModel):
    """POST /notifications/subscriptions のリクエストボディ。"""

    channel: str = Field(
        ...,
        min_length=1,
        description="購読するチャンネル名。未知の名前でも登録自体は可能。",
    )
    subscriber_name: str = Field(
        ...,
        min_length=1,
        description="購読者 (User) の名前。通知行の先頭に出力される。",
    )


class SubscriptionResponse(BaseModel):
    channel: str
    subscribers: List[str] = Field(
        default_factory=list,
        description="登録順の購読者名。重複購読はそのまま重複して並ぶ。",
    )


class SubscriptionsResponse(BaseModel):
    channels: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="チャンネル名 → 登録順の購読者名。",
    )


class SendNotificationRequest(BaseModel):
    """POST /notifications/send のリクエストボディ。"""

    channel: str = Field(..., min_length=1, description="送信チャンネル名。")
    message: str = Field(..., description="本文。プレーンテキスト想定。")


class SendNotificationResponse(BaseModel):
    channel: str
    message: str
    notified: List[str] = Field(
        default_factory=list,
        description="通知を受け取った購読者名（通知順）。",
    )
