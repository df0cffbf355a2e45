"""Project operations."""

from __future__ import annotations

from clubhouse_sdk.models.params import CreateProjectParams, UpdateProjectParams
from clubhouse_sdk.models.resources import Project
from clubhouse_sdk.resources._base import ResourceGroup


class Projects(ResourceGroup):
    def list(self) -> list[Project]:
        return self._request("GET", "projects", list[Project])

    def get(self, project_id: int) -> Project:
        return self._request("GET", f"projects/{project_id}", Project)

    def create(self, params: CreateProjectParams) -> Project:
        return self._request("POST", "projects", Project, params)

    def update(self, project_id: int, params: UpdateProjectParams) -> Project:
        """Update a project; ``color=RESET`` clears its color."""
        return self._request("PUT", f"projects/{project_id}", Project, params)

    def delete(self, project_id: int) -> None:
        self._delete(f"projects/{project_id}")
