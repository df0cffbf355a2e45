"""Label operations."""

from __future__ import annotations

from clubhouse_sdk.models.params import CreateLabelParams, UpdateLabelParams
from clubhouse_sdk.models.resources import Label
from clubhouse_sdk.resources._base import ResourceGroup


class Labels(ResourceGroup):
    def list(self) -> list[Label]:
        return self._request("GET", "labels", list[Label])

    def get(self, label_id: int) -> Label:
        return self._request("GET", f"labels/{label_id}", Label)

    def create(self, params: CreateLabelParams) -> Label:
        return self._request("POST", "labels", Label, params)

    def update(self, label_id: int, params: UpdateLabelParams) -> Label:
        """Update a label; ``color=RESET`` clears its color."""
        return self._request("PUT", f"labels/{label_id}", Label, params)

    def delete(self, label_id: int) -> None:
        self._delete(f"labels/{label_id}")
