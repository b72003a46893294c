"""Pydantic models for OneSignal apps."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class APNSEnvironment(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"


class App(BaseModel):
    id: str = ""
    name: str = ""
    players: int = 0
    messagable_players: int = 0
    updated_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    gcm_key: Optional[str] = None
    chrome_key: Optional[str] = None
    chrome_web_origin: Optional[str] = None
    chrome_web_gcm_sender_id: Optional[str] = None
    chrome_web_default_notification_icon: Optional[str] = None
    chrome_web_sub_domain: Optional[str] = None
    apns_env: Optional[APNSEnvironment] = None
    apns_certificates: Optional[str] = None
    safari_apns_certificate: Optional[str] = None
    safari_site_origin: Optional[str] = None
    safari_push_id: Optional[str] = None
    safari_icon_16_16: Optional[str] = None
    safari_icon_32_32: Optional[str] = None
    safari_icon_64_64: Optional[str] = None
    safari_icon_128_128: Optional[str] = None
    safari_icon_256_256: Optional[str] = None
    site_name: Optional[str] = None
    basic_auth_key: Optional[str] = None


class AppRequest(BaseModel):
    """Body of the create/update app calls.

    Only ``name`` is required; platform settings are sent when set.
    """

    name: str = Field(..., min_length=1)
    # iOS
    apns_env: Optional[APNSEnvironment] = None
    # Base64 encoded p12 certificate.
    apns_p12: Optional[str] = None
    apns_p12_password: Optional[str] = None
    # Android
    gcm_key: Optional[str] = None
    android_gcm_sender_id: Optional[str] = None
    # Web push (all browsers except Safari)
    chrome_web_origin: Optional[str] = None
    chrome_web_default_notification_icon: Optional[str] = None
    chrome_web_sub_domain: Optional[str] = None
    # Requires both chrome_web_origin and safari_site_origin.
    site_name: Optional[str] = None
    # Safari
    safari_site_origin: Optional[str] = None
    safari_apns_p12: Optional[str] = None
    safari_apns_p12_password: Optional[str] = None
    safari_icon_16_16: Optional[str] = None
    safari_icon_32_32: Optional[str] = None
    safari_icon_64_64: Optional[str] = None
    safari_icon_128_128: Optional[str] = None
    safari_icon_256_256: Optional[str] = None


__all__ = ["APNSEnvironment", "App", "AppRequest"]
