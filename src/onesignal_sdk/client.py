"""Python client for the OneSignal REST API."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Dict, Optional, Tuple

import httpx
from pydantic import BaseModel

from .auth import AuthKeyType, authorization_header, select_credential
from .config import ClientConfig
from .decoding import decode_response
from .exceptions import OneSignalError, SerializationError, TransportError
from .services import AppsService, NotificationsService, PlayersService

logger = logging.getLogger("onesignal_sdk.client")


def encode_body(body: Any) -> bytes:
    """Serialize a request body to JSON bytes.

    Pydantic models drop unset optional fields, matching the API's
    "omit when empty" convention.
    """
    try:
        if isinstance(body, BaseModel):
            return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        return json.dumps(body, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"couldn't encode request body JSON: {exc}") from exc


class Client:
    """Manages communication with the OneSignal API.

    The configuration is immutable; use :meth:`configure` to derive a client
    with a different base URL, transport or logger. A single instance can be
    shared between threads.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        logger: Optional[logging.Logger] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = config
        self._logger = logger
        # Only a client that built its own httpx.Client closes it.
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=config.timeout, transport=transport)
        self._client = http_client

        self.apps = AppsService(self)
        self.players = PlayersService(self)
        self.notifications = NotificationsService(self)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Client":
        return cls(ClientConfig.from_env(), **kwargs)

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def app_id(self) -> Optional[str]:
        return self._config.app_id

    def configure(
        self,
        *,
        base_url: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "Client":
        """Return a new client with the given settings replaced.

        Without a new transport the derived client shares this client's
        connection pool; closing the derived client leaves it open.
        """
        config = self._config
        if base_url is not None:
            config = dataclasses.replace(config, base_url=base_url)
        http_client = None if transport is not None else self._client
        return Client(
            config,
            transport=transport,
            logger=logger if logger is not None else self._logger,
            http_client=http_client,
        )

    def _headers(self, auth: AuthKeyType) -> Dict[str, str]:
        headers = {
            "User-Agent": self._config.user_agent,
        }
        headers.update(self._config.headers)
        headers.update(
            {
                "Content-Type": "application/json",
                "Accept": "application/json",
                "Authorization": authorization_header(select_credential(self._config, auth)),
            }
        )
        return headers

    def build_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        auth: AuthKeyType = AuthKeyType.APPLICATION,
    ) -> httpx.Request:
        """Create an API request.

        ``path`` is relative to the base URL, like ``"/apps"``, and may carry
        a query string. ``body`` is JSON encoded when given. ``auth`` picks
        the key placed in the Authorization header.
        """
        url = self._config.base_url + path
        headers = self._headers(auth)
        content = encode_body(body) if body is not None else None

        if self._logger is not None:
            self._logger.debug("[OneSignal] requesting url: %s %s", method, url)
            if content is not None:
                self._logger.debug("[OneSignal] request body: %s", content.decode("utf-8"))

        return self._client.build_request(method, url, content=content, headers=headers)

    def execute(self, request: httpx.Request, shape: Any = None) -> Tuple[Any, httpx.Response]:
        """Send ``request`` and decode the response body into ``shape``.

        Returns the decoded value together with the raw response. Errors
        raised after a response arrived carry it in ``.response``.
        """
        try:
            response = self._client.send(request)
        except httpx.RequestError as exc:
            logger.error("OneSignal request failed method=%s url=%s error=%s", request.method, request.url, exc)
            raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc

        try:
            value = decode_response(response, shape, self._logger)
        except OneSignalError as exc:
            logger.warning(
                "OneSignal request rejected method=%s url=%s status=%s error=%s",
                request.method,
                request.url,
                response.status_code,
                exc,
            )
            raise
        return value, response

    def request(
        self,
        method: str,
        path: str,
        shape: Any = None,
        *,
        body: Any = None,
        auth: AuthKeyType = AuthKeyType.APPLICATION,
    ) -> Any:
        request = self.build_request(method, path, body, auth)
        value, _ = self.execute(request, shape)
        return value

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


__all__ = ["Client", "encode_body"]
