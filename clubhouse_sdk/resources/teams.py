"""Team operations."""

from __future__ import annotations

from clubhouse_sdk.models.resources import Team
from clubhouse_sdk.resources._base import ResourceGroup


class Teams(ResourceGroup):
    def list(self) -> list[Team]:
        return self._request("GET", "teams", list[Team])

    def get(self, team_id: int) -> Team:
        return self._request("GET", f"teams/{team_id}", Team)
