"""Milestone operations."""

from __future__ import annotations

from clubhouse_sdk.models.params import CreateMilestoneParams, UpdateMilestoneParams
from clubhouse_sdk.models.resources import Milestone
from clubhouse_sdk.resources._base import ResourceGroup


class Milestones(ResourceGroup):
    def list(self) -> list[Milestone]:
        return self._request("GET", "milestones", list[Milestone])

    def get(self, milestone_id: int) -> Milestone:
        return self._request("GET", f"milestones/{milestone_id}", Milestone)

    def create(self, params: CreateMilestoneParams) -> Milestone:
        return self._request("POST", "milestones", Milestone, params)

    def update(self, milestone_id: int, params: UpdateMilestoneParams) -> Milestone:
        return self._request("PUT", f"milestones/{milestone_id}", Milestone, params)

    def delete(self, milestone_id: int) -> None:
        self._delete(f"milestones/{milestone_id}")
