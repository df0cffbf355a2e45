"""Epic and epic comment operations."""

from __future__ import annotations

from clubhouse_sdk.models.params import (
    CreateCommentParams,
    CreateEpicParams,
    UpdateCommentParams,
    UpdateEpicParams,
)
from clubhouse_sdk.models.resources import Epic, ThreadedComment
from clubhouse_sdk.resources._base import ResourceGroup


class Epics(ResourceGroup):
    """Epics and their threaded comment discussions."""

    def list(self) -> list[Epic]:
        return self._request("GET", "epics", list[Epic])

    def get(self, epic_id: int) -> Epic:
        return self._request("GET", f"epics/{epic_id}", Epic)

    def create(self, params: CreateEpicParams) -> Epic:
        return self._request("POST", "epics", Epic, params)

    def update(self, epic_id: int, params: UpdateEpicParams) -> Epic:
        """Update an epic.

        Only the fields set on ``params`` are changed. ``deadline``,
        ``milestone_id``, ``completed_at_override`` and ``started_at_override``
        can be cleared with RESET.
        """
        return self._request("PUT", f"epics/{epic_id}", Epic, params)

    def delete(self, epic_id: int) -> None:
        self._delete(f"epics/{epic_id}")

    # =========================================================================
    # Comments
    # =========================================================================

    def list_comments(self, epic_id: int) -> list[ThreadedComment]:
        """List the comments of an epic, each with its replies."""
        return self._request("GET", f"epics/{epic_id}/comments", list[ThreadedComment])

    def get_comment(self, epic_id: int, comment_id: int) -> ThreadedComment:
        return self._request("GET", f"epics/{epic_id}/comments/{comment_id}", ThreadedComment)

    def create_comment(self, epic_id: int, params: CreateCommentParams) -> ThreadedComment:
        """Start a new comment thread on an epic."""
        return self._request("POST", f"epics/{epic_id}/comments", ThreadedComment, params)

    def reply_to_comment(
        self,
        epic_id: int,
        comment_id: int,
        params: CreateCommentParams,
    ) -> ThreadedComment:
        """Reply to an existing epic comment."""
        return self._request(
            "POST", f"epics/{epic_id}/comments/{comment_id}", ThreadedComment, params
        )

    def update_comment(
        self,
        epic_id: int,
        comment_id: int,
        params: UpdateCommentParams,
    ) -> ThreadedComment:
        """Replace the text of an epic comment."""
        return self._request(
            "PUT", f"epics/{epic_id}/comments/{comment_id}", ThreadedComment, params
        )

    def delete_comment(self, epic_id: int, comment_id: int) -> None:
        self._delete(f"epics/{epic_id}/comments/{comment_id}")
