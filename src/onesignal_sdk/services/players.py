"""Player (device) endpoints, scoped to the client's app."""

from __future__ import annotations

from typing import Dict, Optional

from ..models.common import SuccessResponse
from ..models.players import (
    Player,
    PlayerCreateResponse,
    PlayerCSVExportRequest,
    PlayerCSVExportResponse,
    PlayerListResponse,
    PlayerOnFocusRequest,
    PlayerOnPurchaseRequest,
    PlayerOnSessionRequest,
    PlayerRequest,
    UpdateTagsRequest,
)
from .base import BaseService, segment


class PlayersService(BaseService):
    def list(self, *, limit: Optional[int] = None, offset: Optional[int] = None) -> PlayerListResponse:
        params = {"app_id": self._require_app_id(), "limit": limit, "offset": offset}
        return self._call("GET", "/players", PlayerListResponse, params=params)

    def get(self, player_id: str, *, email_auth_hash: Optional[str] = None) -> Player:
        params = {"app_id": self._require_app_id(), "email_auth_hash": email_auth_hash}
        player = self._call("GET", f"/players/{segment(player_id)}", Player, params=params)
        # The view device endpoint does not always echo the id back.
        player.id = player_id
        return player

    def create(self, player: PlayerRequest) -> PlayerCreateResponse:
        if player.app_id is None:
            player = player.model_copy(update={"app_id": self._require_app_id()})
        return self._call("POST", "/players", PlayerCreateResponse, body=player)

    def update(self, player_id: str, player: PlayerRequest) -> SuccessResponse:
        return self._call("PUT", f"/players/{segment(player_id)}", SuccessResponse, body=player)

    def csv_export(self, options: Optional[PlayerCSVExportRequest] = None) -> PlayerCSVExportResponse:
        params = {"app_id": self._require_app_id()}
        return self._call("POST", "/players/csv_export", PlayerCSVExportResponse, body=options, params=params)

    def update_tags_with_external_user_id(
        self,
        external_user_id: str,
        tags: Optional[Dict[str, str]] = None,
    ) -> SuccessResponse:
        """Edit tags on every device linked to ``external_user_id``.

        A tag set to an empty string is removed.
        """
        path = f"/apps/{segment(self._require_app_id())}/users/{segment(external_user_id)}"
        return self._call("PUT", path, SuccessResponse, body=UpdateTagsRequest(tags=tags))

    def on_session(self, player_id: str, session: Optional[PlayerOnSessionRequest] = None) -> SuccessResponse:
        session = session or PlayerOnSessionRequest()
        return self._call("POST", f"/players/{segment(player_id)}/on_session", SuccessResponse, body=session)

    def on_purchase(self, player_id: str, purchase: PlayerOnPurchaseRequest) -> SuccessResponse:
        return self._call("POST", f"/players/{segment(player_id)}/on_purchase", SuccessResponse, body=purchase)

    def on_focus(self, player_id: str, focus: PlayerOnFocusRequest) -> SuccessResponse:
        return self._call("POST", f"/players/{segment(player_id)}/on_focus", SuccessResponse, body=focus)


__all__ = ["PlayersService"]
