"""OneSignal Python SDK."""

from .auth import AuthKeyType
from .client import Client
from .config import ClientConfig
from .exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    InternalServerError,
    OneSignalError,
    SerializationError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "AuthKeyType",
    "Client",
    "ClientConfig",
    "APIError",
    "ConfigurationError",
    "DecodeError",
    "InternalServerError",
    "OneSignalError",
    "SerializationError",
    "TransportError",
]
