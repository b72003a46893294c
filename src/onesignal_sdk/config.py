"""Configuration objects for the OneSignal Python SDK."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://onesignal.com/api/v1"


@dataclass(frozen=True)
class ClientConfig:
    app_id: Optional[str] = None
    # REST API key, used for players and notifications.
    api_key: Optional[str] = None
    # User auth key, used for app management.
    user_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    user_agent: str = "onesignal-sdk-python/0.1.0"
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.api_key and not self.user_key:
            raise ConfigurationError("require api_key or user_key")
        if not self.base_url:
            object.__setattr__(self, "base_url", DEFAULT_BASE_URL)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        raw_timeout = os.environ.get("ONESIGNAL_TIMEOUT", "10.0")
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError(f"ONESIGNAL_TIMEOUT must be a number, got {raw_timeout!r}") from exc
        return cls(
            app_id=os.environ.get("ONESIGNAL_APP_ID") or None,
            api_key=os.environ.get("ONESIGNAL_API_KEY") or None,
            user_key=os.environ.get("ONESIGNAL_USER_KEY") or None,
            base_url=os.environ.get("ONESIGNAL_BASE_URL", DEFAULT_BASE_URL),
            timeout=timeout,
        )


__all__ = ["ClientConfig", "DEFAULT_BASE_URL"]
