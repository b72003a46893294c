"""Pydantic models for OneSignal notifications."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class MessageType(str, Enum):
    PUSH = "push"
    EMAIL = "email"
    SMS = "sms"


class IOSBadgeType(str, Enum):
    # Leaves the count unaffected.
    NONE = "None"
    # Sets the badge count to ios_badgeCount.
    SET_TO = "SetTo"
    # Adds ios_badgeCount to the total; negative values decrease it.
    INCREASE = "Increase"


class IOSInterruptionLevel(str, Enum):
    ACTIVE = "active"
    PASSIVE = "passive"
    TIME_SENSITIVE = "time_sensitive"
    CRITICAL = "critical"


class DelayedOption(str, Enum):
    # Deliver at a time of day in each user's own timezone.
    TIMEZONE = "timezone"
    # Intelligent delivery.
    LAST_ACTIVE = "last-active"


class HuaweiMsgType(str, Enum):
    DATA = "data"
    MESSAGE = "message"


class NotificationKind(IntEnum):
    DASHBOARD = 0
    API = 1
    AUTOMATED = 3


class AndroidBackgroundLayout(BaseModel):
    image: Optional[str] = None
    # ARGB hex, e.g. "FF0000FF".
    headings_color: Optional[str] = None
    contents_color: Optional[str] = None


class NotificationButton(BaseModel):
    id: str
    text: str
    icon: Optional[str] = None
    url: Optional[str] = None


class NotificationRequest(BaseModel):
    """Body of the create notification call.

    Fields left as ``None`` are not sent. ``app_id`` is always overwritten
    with the client's app id on create.
    """

    model_config = ConfigDict(populate_by_name=True)

    app_id: Optional[str] = None
    name: Optional[str] = None

    # Content & language
    contents: Optional[Dict[str, str]] = None
    headings: Optional[Dict[str, str]] = None
    subtitle: Optional[Dict[str, str]] = None
    template_id: Optional[str] = None
    content_available: Optional[bool] = None
    mutable_content: Optional[bool] = None
    target_content_identifier: Optional[str] = None

    # Platforms
    is_ios: Optional[bool] = Field(default=None, alias="isIos")
    is_android: Optional[bool] = Field(default=None, alias="isAndroid")
    is_wp_wns: Optional[bool] = Field(default=None, alias="isWP_WNS")
    is_huawei: Optional[bool] = Field(default=None, alias="isHuawei")
    is_adm: Optional[bool] = Field(default=None, alias="isAdm")
    is_chrome: Optional[bool] = Field(default=None, alias="isChrome")
    is_chrome_web: Optional[bool] = Field(default=None, alias="isChromeWeb")
    is_firefox: Optional[bool] = Field(default=None, alias="isFirefox")
    is_safari: Optional[bool] = Field(default=None, alias="isSafari")
    is_any_web: Optional[bool] = Field(default=None, alias="isAnyWeb")
    channel_for_external_user_ids: Optional[MessageType] = None

    # Targeting
    included_segments: Optional[List[str]] = None
    excluded_segments: Optional[List[str]] = None
    include_external_user_ids: Optional[List[str]] = None
    include_email_tokens: Optional[List[str]] = None
    include_phone_numbers: Optional[List[str]] = None
    include_player_ids: Optional[List[str]] = None
    include_ios_tokens: Optional[List[str]] = None
    include_android_reg_ids: Optional[List[str]] = None
    include_wp_uris: Optional[List[str]] = None
    include_wp_wns_uris: Optional[List[str]] = None
    include_amazon_reg_ids: Optional[List[str]] = None
    include_chrome_reg_ids: Optional[List[str]] = None
    include_chrome_web_reg_ids: Optional[List[str]] = None
    app_ids: Optional[List[str]] = None
    tags: Optional[Any] = None
    filters: Optional[List[Dict[str, Any]]] = None

    # Attachments & actions
    data: Optional[Any] = None
    url: Optional[str] = None
    app_url: Optional[str] = None
    web_url: Optional[str] = None
    ios_attachments: Optional[Dict[str, str]] = None
    big_picture: Optional[str] = None
    huawei_big_picture: Optional[str] = None
    adm_big_picture: Optional[str] = None
    chrome_big_picture: Optional[str] = None
    chrome_web_image: Optional[str] = None
    buttons: Optional[List[NotificationButton]] = None
    web_buttons: Optional[List[NotificationButton]] = None
    ios_category: Optional[str] = None
    icon_type: Optional[str] = None

    # Appearance
    android_channel_id: Optional[str] = None
    existing_android_channel_id: Optional[str] = None
    huawei_channel_id: Optional[str] = None
    huawei_existing_channel_id: Optional[str] = None
    android_background_layout: Optional[AndroidBackgroundLayout] = None
    small_icon: Optional[str] = None
    large_icon: Optional[str] = None
    huawei_small_icon: Optional[str] = None
    huawei_large_icon: Optional[str] = None
    adm_small_icon: Optional[str] = None
    adm_large_icon: Optional[str] = None
    chrome_web_icon: Optional[str] = None
    chrome_web_badge: Optional[str] = None
    firefox_icon: Optional[str] = None
    chrome_icon: Optional[str] = None
    ios_sound: Optional[str] = None
    android_sound: Optional[str] = None
    huawei_sound: Optional[str] = None
    adm_sound: Optional[str] = None
    wp_wns_sound: Optional[str] = None
    android_led_color: Optional[str] = None
    huawei_led_color: Optional[str] = None
    android_accent_color: Optional[str] = None
    huawei_accent_color: Optional[str] = None
    android_visibility: Optional[int] = None
    huawei_visibility: Optional[int] = None
    ios_badge_type: Optional[IOSBadgeType] = Field(default=None, alias="ios_badgeType")
    ios_badge_count: Optional[int] = Field(default=None, alias="ios_badgeCount")
    collapse_id: Optional[str] = None
    web_push_topic: Optional[str] = None
    apns_alert: Optional[Dict[str, Any]] = None
    ios_relevance_score: Optional[float] = None
    ios_interruption_level: Optional[IOSInterruptionLevel] = None

    # Delivery
    send_after: Optional[str] = None
    delayed_option: Optional[DelayedOption] = None
    # e.g. "9:00AM", used with DelayedOption.TIMEZONE
    delivery_time_of_day: Optional[str] = None
    ttl: Optional[int] = None
    priority: Optional[int] = None
    apns_push_type_override: Optional[str] = None
    throttle_rate_per_minute: Optional[int] = None
    enable_frequency_cap: Optional[bool] = None
    android_background_data: Optional[bool] = None
    amazon_background_data: Optional[bool] = None
    huawei_msg_type: Optional[HuaweiMsgType] = None
    external_id: Optional[str] = None

    # Grouping & collapsing
    android_group: Optional[str] = None
    android_group_message: Optional[Any] = None
    adm_group: Optional[str] = None
    adm_group_message: Optional[Any] = None
    thread_id: Optional[str] = None
    summary_arg: Optional[str] = None
    summary_arg_count: Optional[int] = None

    # Email
    email_subject: Optional[str] = None
    email_body: Optional[str] = None
    email_from_name: Optional[str] = None
    email_from_address: Optional[str] = None
    disable_email_click_tracking: Optional[bool] = None

    # SMS
    sms_from: Optional[str] = None
    # Up to 10 media URLs, 5MB in total.
    sms_media_urls: Optional[List[str]] = None


class DeliveryStats(BaseModel):
    # Delivered to the Google/Apple/Windows servers.
    successful: int = 0
    # Undeliverable because the device unsubscribed.
    failed: int = 0
    errored: int = 0
    converted: int = 0
    # Confirmed deliveries.
    received: int = 0


class PlatformDeliveryStats(BaseModel):
    android: Optional[DeliveryStats] = None
    ios: Optional[DeliveryStats] = None
    amazon_fire: Optional[DeliveryStats] = None
    windows_phone_legacy: Optional[DeliveryStats] = None
    chrome_extension: Optional[DeliveryStats] = None
    chrome_web_push: Optional[DeliveryStats] = None
    windows: Optional[DeliveryStats] = None
    safari_web_push: Optional[DeliveryStats] = None
    firefox_web_push: Optional[DeliveryStats] = None
    mac_os: Optional[DeliveryStats] = None
    amazon_alexa: Optional[DeliveryStats] = None
    email: Optional[DeliveryStats] = None
    sms: Optional[DeliveryStats] = None
    edge_web_push: Optional[DeliveryStats] = None


class Outcome(BaseModel):
    id: str
    value: int = 0
    aggregation: str = ""


class Notification(NotificationRequest):
    id: str = ""
    successful: int = 0
    failed: int = 0
    errored: int = 0
    converted: int = 0
    received: int = 0
    # Not sent yet, either still processing or delayed.
    remaining: int = 0
    queued_at: int = 0
    completed_at: Optional[int] = None
    canceled: bool = False
    # Unix timestamp here, unlike the request's date string.
    send_after: Optional[Union[int, str]] = None
    throttle_rate_per_minute: Optional[int] = None
    platform_delivery_stats: Optional[PlatformDeliveryStats] = None
    outcomes: Optional[List[Outcome]] = None


class NotificationCreateResponse(BaseModel):
    id: str = ""
    recipients: int = 0
    external_id: Optional[str] = None
    errors: Optional[Any] = None


class NotificationListResponse(BaseModel):
    total_count: int = 0
    offset: int = 0
    limit: int = 0
    notifications: List[Notification] = Field(default_factory=list)


__all__ = [
    "MessageType",
    "IOSBadgeType",
    "IOSInterruptionLevel",
    "DelayedOption",
    "HuaweiMsgType",
    "NotificationKind",
    "AndroidBackgroundLayout",
    "NotificationButton",
    "NotificationRequest",
    "DeliveryStats",
    "PlatformDeliveryStats",
    "Outcome",
    "Notification",
    "NotificationCreateResponse",
    "NotificationListResponse",
]
