from __future__ import annotations

import json

import httpx
import pytest

from onesignal_sdk import ConfigurationError, InternalServerError
from onesignal_sdk.models import (
    AndroidBackgroundLayout,
    IOSBadgeType,
    NotificationButton,
    NotificationKind,
    NotificationRequest,
)

NOTIFICATION_PAYLOAD = {
    "id": "481a2734-6b7d-11e4-a6ea-4b53294fa671",
    "successful": 15,
    "failed": 1,
    "errored": 0,
    "converted": 3,
    "received": 14,
    "remaining": 0,
    "queued_at": 1415914655,
    "send_after": 1415914655,
    "completed_at": 1415914656,
    "canceled": False,
    "url": "https://yourWebsiteToOpen.com",
    "data": {"foo": "bar", "your": "custom metadata"},
    "headings": {"en": "English and default language heading", "es": "Spanish language heading"},
    "contents": {"en": "English language content", "es": "Hola"},
    "isIos": True,
    "ios_badgeType": "SetTo",
    "ios_badgeCount": 1,
    "platform_delivery_stats": {
        "ios": {"successful": 10, "failed": 1, "errored": 0, "converted": 2, "received": 9},
        "android": {"successful": 5, "failed": 0, "errored": 0, "converted": 1, "received": 5},
    },
    "outcomes": [{"id": "os__click.count", "value": 3, "aggregation": "count"}],
    "throttle_rate_per_minute": None,
}


def test_list_notifications(make_client, assert_request) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert_request(request, "GET", "/notifications")
        assert dict(request.url.params) == {"app_id": "fake-app-id", "limit": "50", "offset": "0", "kind": "1"}
        return httpx.Response(
            200,
            json={"total_count": 1, "offset": 0, "limit": 50, "notifications": [NOTIFICATION_PAYLOAD]},
        )

    result = make_client(handler).notifications.list(limit=50, offset=0, kind=NotificationKind.API)

    assert result.total_count == 1
    notification = result.notifications[0]
    assert notification.id == "481a2734-6b7d-11e4-a6ea-4b53294fa671"
    assert notification.is_ios is True
    assert notification.ios_badge_type is IOSBadgeType.SET_TO
    assert notification.platform_delivery_stats.ios.successful == 10
    assert notification.platform_delivery_stats.sms is None
    assert notification.send_after == 1415914655


def test_list_notifications_with_dashboard_kind(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["kind"] == "0"
        return httpx.Response(200, json={"total_count": 0, "offset": 0, "limit": 50, "notifications": []})

    make_client(handler).notifications.list(kind=NotificationKind.DASHBOARD)


def test_get_notification_with_outcomes(make_client, assert_request) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert_request(request, "GET", "/notifications/481a2734")
        assert dict(request.url.params) == {
            "app_id": "fake-app-id",
            "outcome_names": "os__click.count,os__session_duration.sum",
            "outcome_time_range": "1d",
            "outcome_platforms": "0,1",
            "outcome_attribution": "direct",
        }
        return httpx.Response(200, json=NOTIFICATION_PAYLOAD)

    notification = make_client(handler).notifications.get(
        "481a2734",
        outcome_names=["os__click.count", "os__session_duration.sum"],
        outcome_time_range="1d",
        outcome_platforms="0,1",
        outcome_attribution="direct",
    )

    assert notification.outcomes[0].id == "os__click.count"
    assert notification.outcomes[0].value == 3
    assert notification.data == {"foo": "bar", "your": "custom metadata"}


def test_get_notification_plain(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert dict(request.url.params) == {"app_id": "fake-app-id"}
        return httpx.Response(200, json={"id": "n1"})

    notification = make_client(handler).notifications.get("n1")
    assert notification.id == "n1"
    assert notification.outcomes is None


def test_create_notification(make_client, assert_request) -> None:
    notification = NotificationRequest(
        app_id="ignored",
        contents={"en": "English message"},
        headings={"en": "Heading"},
        included_segments=["Subscribed Users"],
        is_ios=True,
        ios_badge_type=IOSBadgeType.INCREASE,
        ios_badge_count=1,
        buttons=[NotificationButton(id="like", text="Like")],
        android_background_layout=AndroidBackgroundLayout(image="https://example.com/bg.png"),
        data={"nested": {"deep": [1, 2]}},
    )

    def handler(request: httpx.Request) -> httpx.Response:
        assert_request(request, "POST", "/notifications")
        assert json.loads(request.content) == {
            "app_id": "fake-app-id",
            "contents": {"en": "English message"},
            "headings": {"en": "Heading"},
            "included_segments": ["Subscribed Users"],
            "isIos": True,
            "ios_badgeType": "Increase",
            "ios_badgeCount": 1,
            "buttons": [{"id": "like", "text": "Like"}],
            "android_background_layout": {"image": "https://example.com/bg.png"},
            "data": {"nested": {"deep": [1, 2]}},
        }
        return httpx.Response(200, json={"id": "458dcec4-cf53-11e3-add2-000c2940e62c", "recipients": 3})

    result = make_client(handler).notifications.create(notification)

    assert result.id == "458dcec4-cf53-11e3-add2-000c2940e62c"
    assert result.recipients == 3
    assert result.errors is None
    assert notification.app_id == "ignored"


def test_create_notification_reports_invalid_players(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"id": "", "recipients": 0, "errors": {"invalid_player_ids": ["5fdc92b2-3b2a-11e5-ac13-8fdccfe4d986"]}},
        )

    result = make_client(handler).notifications.create(NotificationRequest(include_player_ids=["x"]))
    assert result.errors == {"invalid_player_ids": ["5fdc92b2-3b2a-11e5-ac13-8fdccfe4d986"]}


def test_delete_notification(make_client, assert_request) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert_request(request, "DELETE", "/notifications/n1")
        assert dict(request.url.params) == {"app_id": "fake-app-id"}
        assert request.content == b""
        return httpx.Response(200, json={"success": True})

    assert make_client(handler).notifications.delete("n1").success is True


def test_notification_server_error(make_client) -> None:
    client = make_client(lambda request: httpx.Response(500, text="<html>oops</html>"))
    with pytest.raises(InternalServerError):
        client.notifications.delete("n1")


def test_notifications_need_app_id(make_client) -> None:
    client = make_client(lambda request: httpx.Response(200, json={}), app_id=None)
    with pytest.raises(ConfigurationError):
        client.notifications.create(NotificationRequest(contents={"en": "hi"}))
