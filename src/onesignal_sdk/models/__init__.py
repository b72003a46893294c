"""Request and response schemas for the OneSignal API."""

from .apps import APNSEnvironment, App, AppRequest
from .common import ErrorResponse, SuccessResponse
from .notifications import (
    AndroidBackgroundLayout,
    DelayedOption,
    DeliveryStats,
    HuaweiMsgType,
    IOSBadgeType,
    IOSInterruptionLevel,
    MessageType,
    Notification,
    NotificationButton,
    NotificationCreateResponse,
    NotificationKind,
    NotificationListResponse,
    NotificationRequest,
    Outcome,
    PlatformDeliveryStats,
)
from .players import (
    Player,
    PlayerCreateResponse,
    PlayerCSVExportRequest,
    PlayerCSVExportResponse,
    PlayerListResponse,
    PlayerOnFocusRequest,
    PlayerOnPurchaseRequest,
    PlayerOnSessionRequest,
    PlayerRequest,
    Purchase,
    UpdateTagsRequest,
)

__all__ = [
    "APNSEnvironment",
    "App",
    "AppRequest",
    "ErrorResponse",
    "SuccessResponse",
    "AndroidBackgroundLayout",
    "DelayedOption",
    "DeliveryStats",
    "HuaweiMsgType",
    "IOSBadgeType",
    "IOSInterruptionLevel",
    "MessageType",
    "Notification",
    "NotificationButton",
    "NotificationCreateResponse",
    "NotificationKind",
    "NotificationListResponse",
    "NotificationRequest",
    "Outcome",
    "PlatformDeliveryStats",
    "Player",
    "PlayerCreateResponse",
    "PlayerCSVExportRequest",
    "PlayerCSVExportResponse",
    "PlayerListResponse",
    "PlayerOnFocusRequest",
    "PlayerOnPurchaseRequest",
    "PlayerOnSessionRequest",
    "PlayerRequest",
    "Purchase",
    "UpdateTagsRequest",
]
