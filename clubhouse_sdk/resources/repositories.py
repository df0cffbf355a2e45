"""Repository operations."""

from __future__ import annotations

from clubhouse_sdk.models.resources import Repository
from clubhouse_sdk.resources._base import ResourceGroup


class Repositories(ResourceGroup):
    """GitHub repositories connected to the workspace. Read-only."""

    def list(self) -> list[Repository]:
        return self._request("GET", "repositories", list[Repository])

    def get(self, repository_id: int) -> Repository:
        return self._request("GET", f"repositories/{repository_id}", Repository)
