"""Credential selection for outgoing requests."""

from __future__ import annotations

from enum import Enum

from .config import ClientConfig
from .exceptions import ConfigurationError


class AuthKeyType(Enum):
    """Which OneSignal key authorizes a request.

    APPLICATION is the app's REST API key (players, notifications). USER is
    the account-level user auth key (app management).
    """

    APPLICATION = "application"
    USER = "user"


def select_credential(config: ClientConfig, kind: AuthKeyType) -> str:
    if kind is AuthKeyType.APPLICATION:
        credential = config.api_key
    elif kind is AuthKeyType.USER:
        credential = config.user_key
    else:
        raise ConfigurationError(f"unknown auth key type: {kind!r}")
    if not credential:
        raise ConfigurationError(f"client has no {kind.value} key configured")
    return credential


def authorization_header(credential: str) -> str:
    # OneSignal expects the raw key after the scheme, not base64(user:pass).
    return f"Basic {credential}"


__all__ = ["AuthKeyType", "select_credential", "authorization_header"]
