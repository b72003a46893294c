from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from onesignal_sdk import Client, ClientConfig

BASE_URL = "https://api.example.com/api/v1"
APP_ID = "fake-app-id"
API_KEY = "mock-api-key"
USER_KEY = "mock-user-key"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture()
def make_client() -> Callable[..., Client]:
    clients: list[Client] = []

    def factory(handler: Handler, **overrides: Any) -> Client:
        options = {"app_id": APP_ID, "api_key": API_KEY, "user_key": USER_KEY, "base_url": BASE_URL}
        options.update(overrides)
        logger = options.pop("logger", None)
        client = Client(ClientConfig(**options), transport=httpx.MockTransport(handler), logger=logger)
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture()
def assert_request() -> Callable[..., None]:
    def check(request: httpx.Request, method: str, path: str, auth: str = API_KEY) -> None:
        assert request.method == method
        assert request.url.path == "/api/v1" + path
        assert request.headers["Authorization"] == f"Basic {auth}"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Accept"] == "application/json"

    return check
