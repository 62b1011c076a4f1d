# backend/notihub/notifications/router.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status

from .schemas import (
    SendNotificationRequest,
    SendNotificationResponse,
    SubscribeRequest,
    SubscriptionResponse,
    SubscriptionsResponse,
)
from .service import NotificationManager
from .subscribers import User

router = APIRouter(prefix="/notifications", tags=["notifications"])


def get_notification_manager(request: Request) -> NotificationManager:
    """
    アプリが所有する NotificationManager を返す。

    create_app() が app.state に登録したものを使う。グローバルには持たない。
    """
    return request.app.state.notification_manager


@router.post(
    "/subscriptions",
    response_model=SubscriptionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="チャンネルに購読者を登録",
)
def create_subscription(
    body: SubscribeRequest,
    manager: NotificationManager = Depends(get_notification_manager),
) -> SubscriptionResponse:
    """
    User を生成してチャンネルに登録する。

    - 未知のチャンネル名でも登録は成功する（送信時に弾かれる）
    - 同名の購読者を重ねて登録すると、その分だけ重複して通知される
    """
    manager.subscribe(body.channel, User(body.subscriber_name))
    return SubscriptionResponse(
        channel=body.channel,
        subscribers=[s.name for s in manager.subscribers(body.channel)],
    )


@router.get(
    "/subscriptions",
    response_model=SubscriptionsResponse,
    summary="購読一覧を取得",
)
def list_subscriptions(
    manager: NotificationManager = Depends(get_notification_manager),
) -> SubscriptionsResponse:
    return SubscriptionsResponse(
        channels={
            channel: [s.name for s in subscribers]
            for channel, subscribers in manager.channels().items()
        }
    )


@router.post(
    "/send",
    response_model=SendNotificationResponse,
    summary="通知を送信して購読者にファンアウト",
)
def send_notification(
    body: SendNotificationRequest,
    manager: NotificationManager = Depends(get_notification_manager),
) -> SendNotificationResponse:
    """
    - 正常系: 送信後、通知した購読者名を登録順で返す
    - 未知のチャンネル → 400 Bad Request
    """
    notified = [s.name for s in manager.subscribers(body.channel)]
    if not manager.send_notification(body.channel, body.message):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid notification type: {body.channel}",
        )

    return SendNotificationResponse(
        channel=body.channel,
        message=body.message,
        notified=notified,
    )
