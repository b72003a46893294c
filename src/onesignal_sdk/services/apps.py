"""App management endpoints. These use the account's user auth key."""

from __future__ import annotations

from typing import List

from ..auth import AuthKeyType
from ..models.apps import App, AppRequest
from .base import BaseService, segment


class AppsService(BaseService):
    auth = AuthKeyType.USER

    def list(self) -> List[App]:
        return self._call("GET", "/apps", List[App])

    def get(self, app_id: str) -> App:
        return self._call("GET", f"/apps/{segment(app_id)}", App)

    def create(self, app: AppRequest) -> App:
        return self._call("POST", "/apps", App, body=app)

    def update(self, app_id: str, app: AppRequest) -> App:
        return self._call("PUT", f"/apps/{segment(app_id)}", App, body=app)


__all__ = ["AppsService"]
