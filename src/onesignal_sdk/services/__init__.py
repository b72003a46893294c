"""Per-resource wrappers over :class:`onesignal_sdk.client.Client`."""

from .apps import AppsService
from .base import BaseService
from .notifications import NotificationsService
from .players import PlayersService

__all__ = ["AppsService", "BaseService", "NotificationsService", "PlayersService"]
