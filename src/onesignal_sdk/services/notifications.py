"""Notification endpoints, scoped to the client's app."""

from __future__ import annotations

from typing import Optional, Sequence

from ..models.common import SuccessResponse
from ..models.notifications import (
    Notification,
    NotificationCreateResponse,
    NotificationKind,
    NotificationListResponse,
    NotificationRequest,
)
from .base import BaseService, segment


class NotificationsService(BaseService):
    def list(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        kind: Optional[NotificationKind] = None,
    ) -> NotificationListResponse:
        params = {
            "app_id": self._require_app_id(),
            "limit": limit,
            "offset": offset,
            "kind": int(kind) if kind is not None else None,
        }
        return self._call("GET", "/notifications", NotificationListResponse, params=params)

    def get(
        self,
        notification_id: str,
        *,
        outcome_names: Optional[Sequence[str]] = None,
        outcome_time_range: Optional[str] = None,
        outcome_platforms: Optional[str] = None,
        outcome_attribution: Optional[str] = None,
    ) -> Notification:
        """Fetch one notification, optionally with outcome data.

        ``outcome_names`` entries look like ``"os__click.count"``;
        ``outcome_time_range`` is one of ``1h``, ``1d`` or ``1mo``.
        """
        params = {
            "app_id": self._require_app_id(),
            "outcome_names": ",".join(outcome_names) if outcome_names else None,
            "outcome_time_range": outcome_time_range or None,
            "outcome_platforms": outcome_platforms or None,
            "outcome_attribution": outcome_attribution or None,
        }
        return self._call("GET", f"/notifications/{segment(notification_id)}", Notification, params=params)

    def create(self, notification: NotificationRequest) -> NotificationCreateResponse:
        notification = notification.model_copy(update={"app_id": self._require_app_id()})
        return self._call("POST", "/notifications", NotificationCreateResponse, body=notification)

    def delete(self, notification_id: str) -> SuccessResponse:
        params = {"app_id": self._require_app_id()}
        return self._call("DELETE", f"/notifications/{segment(notification_id)}", SuccessResponse, params=params)


__all__ = ["NotificationsService"]
