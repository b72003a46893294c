"""Pydantic models for OneSignal players (devices)."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Player(BaseModel):
    id: str = ""
    playtime: int = 0
    sdk: Optional[str] = None
    identifier: Optional[str] = None
    session_count: int = 0
    language: Optional[str] = None
    timezone: int = 0
    game_version: Optional[str] = None
    device_os: Optional[str] = None
    device_type: int = 0
    device_model: Optional[str] = None
    ad_id: Optional[str] = None
    tags: Optional[Dict[str, str]] = None
    last_active: int = 0
    amount_spent: float = 0.0
    created_at: int = 0
    invalid_identifier: bool = False
    badge_count: int = 0
    test_type: Optional[int] = None
    ip: Optional[str] = None
    external_user_id: Optional[str] = None


class PlayerRequest(BaseModel):
    """Body of the create/edit device calls.

    ``app_id`` defaults to the client's app when left unset.
    """

    app_id: Optional[str] = None
    # 0 = iOS, 1 = Android, 2 = Amazon, 5 = Chrome App, 11 = Email, 14 = SMS ...
    device_type: Optional[int] = None
    # Push token from Google or Apple; strip non alphanumerics from Apple tokens.
    identifier: Optional[str] = None
    identifier_auth_hash: Optional[str] = None
    language: Optional[str] = None
    # Seconds away from UTC, e.g. -28800.
    timezone: Optional[int] = None
    game_version: Optional[str] = None
    device_os: Optional[str] = None
    device_model: Optional[str] = None
    ad_id: Optional[str] = None
    sdk: Optional[str] = None
    session_count: Optional[int] = None
    # String key/value pairs only; nested objects are rejected by the API.
    tags: Optional[Dict[str, str]] = None
    amount_spent: Optional[float] = None
    created_at: Optional[int] = None
    playtime: Optional[int] = None
    last_active: Optional[int] = None
    # 1 = Development, 2 = Ad-Hoc, omit for App Store builds.
    test_type: Optional[int] = None
    # 1 = subscribed, -2 = unsubscribed
    notification_types: Optional[str] = None
    long: Optional[float] = None
    lat: Optional[float] = None
    # ISO 3166-1 Alpha 2
    country: Optional[str] = None
    external_user_id: Optional[str] = None
    external_user_id_auth_hash: Optional[str] = None
    badge_count: Optional[int] = None


class PlayerListResponse(BaseModel):
    total_count: int = 0
    offset: int = 0
    limit: int = 0
    players: List[Player] = Field(default_factory=list)


class PlayerCreateResponse(BaseModel):
    success: bool = False
    id: str = ""


class PlayerCSVExportRequest(BaseModel):
    extra_fields: Optional[List[str]] = None
    last_active_since: Optional[int] = None
    segment_name: Optional[str] = None


class PlayerCSVExportResponse(BaseModel):
    csv_file_url: str = ""


class PlayerOnSessionRequest(BaseModel):
    identifier: Optional[str] = None
    language: Optional[str] = None
    timezone: Optional[int] = None
    game_version: Optional[str] = None
    device_os: Optional[str] = None
    ad_id: Optional[str] = None
    sdk: Optional[str] = None
    tags: Optional[Dict[str, str]] = None


class Purchase(BaseModel):
    sku: str
    amount: float
    iso: str


class PlayerOnPurchaseRequest(BaseModel):
    purchases: List[Purchase] = Field(default_factory=list)
    existing: Optional[bool] = None


class PlayerOnFocusRequest(BaseModel):
    state: str = "ping"
    active_time: int


class UpdateTagsRequest(BaseModel):
    tags: Optional[Dict[str, str]] = None


__all__ = [
    "Player",
    "PlayerRequest",
    "PlayerListResponse",
    "PlayerCreateResponse",
    "PlayerCSVExportRequest",
    "PlayerCSVExportResponse",
    "PlayerOnSessionRequest",
    "Purchase",
    "PlayerOnPurchaseRequest",
    "PlayerOnFocusRequest",
    "UpdateTagsRequest",
]
