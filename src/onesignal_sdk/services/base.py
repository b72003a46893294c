"""Shared plumbing for the per-resource services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional
from urllib.parse import quote, urlencode

from ..auth import AuthKeyType
from ..exceptions import ConfigurationError

if TYPE_CHECKING:  # pragma: no cover
    from ..client import Client


def segment(value: str) -> str:
    return quote(str(value), safe="")


def with_query(path: str, params: Dict[str, Any]) -> str:
    query = {key: value for key, value in params.items() if value is not None}
    if not query:
        return path
    return f"{path}?{urlencode(query)}"


class BaseService:
    auth: AuthKeyType = AuthKeyType.APPLICATION

    def __init__(self, client: "Client") -> None:
        self._client = client

    @property
    def client(self) -> "Client":
        return self._client

    def _require_app_id(self) -> str:
        app_id = self._client.app_id
        if not app_id:
            raise ConfigurationError(f"{type(self).__name__} requires an app_id")
        return app_id

    def _call(
        self,
        method: str,
        path: str,
        shape: Any = None,
        *,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        if params:
            path = with_query(path, params)
        return self._client.request(method, path, shape, body=body, auth=self.auth)


__all__ = ["BaseService", "segment", "with_query"]
