"""Member operations."""

from __future__ import annotations

from clubhouse_sdk.models.resources import Member
from clubhouse_sdk.resources._base import ResourceGroup


class Members(ResourceGroup):
    """Members of the organization that issued the token. Read-only."""

    def list(self) -> list[Member]:
        return self._request("GET", "members", list[Member])

    def get(self, member_id: str) -> Member:
        """Get a member by UUID."""
        return self._request("GET", f"members/{member_id}", Member)
