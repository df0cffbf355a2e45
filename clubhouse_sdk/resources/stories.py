"""Story operations, including bulk operations and search."""

from __future__ import annotations

from collections.abc import Sequence

import httpx

from clubhouse_sdk.models.params import (
    CreateStoryParams,
    SearchParams,
    UpdateStoriesParams,
    UpdateStoryParams,
)
from clubhouse_sdk.models.resources import SearchResults, Story, StorySearch, StorySlim
from clubhouse_sdk.resources._base import ResourceGroup


class Stories(ResourceGroup):
    """Stories: features, bugs and chores."""

    def create(self, params: CreateStoryParams) -> Story:
        return self._request("POST", "stories", Story, params)

    def create_many(self, params: Sequence[CreateStoryParams]) -> list[StorySlim]:
        """Create several stories in one request."""
        return self._request(
            "POST", "stories/bulk", list[StorySlim], {"stories": list(params)}
        )

    def get(self, story_id: int) -> Story:
        return self._request("GET", f"stories/{story_id}", Story)

    def update(self, story_id: int, params: UpdateStoryParams) -> Story:
        """Update a story.

        Only the fields set on ``params`` are changed. ``deadline``,
        ``epic_id``, ``estimate``, ``completed_at_override`` and
        ``started_at_override`` can be cleared with RESET.
        """
        return self._request("PUT", f"stories/{story_id}", Story, params)

    def update_many(self, params: UpdateStoriesParams) -> list[StorySlim]:
        """Apply the same update to every story in ``params.story_ids``."""
        return self._request("PUT", "stories/bulk", list[StorySlim], params)

    def delete(self, story_id: int) -> None:
        self._delete(f"stories/{story_id}")

    def delete_many(self, story_ids: Sequence[int]) -> None:
        self._delete("stories/bulk", {"story_ids": list(story_ids)})

    # =========================================================================
    # Search
    # =========================================================================

    def search(self, params: SearchParams) -> SearchResults:
        """Fetch one page of stories matching ``params.query``."""
        return self._request("GET", "search/stories", SearchResults, params)

    def search_all(self, params: SearchParams) -> list[StorySearch]:
        """Fetch every page of a search, one request per page, in order.

        ``params`` is not modified.
        """
        collected: list[StorySearch] = []
        while True:
            page = self.search(params)
            collected.extend(page.data)
            if not page.next:
                break
            # The API returns the whole URL of the next page; only its
            # "next" query variable is passed back.
            next_token = httpx.URL(page.next).params.get("next")
            if not next_token:
                break
            params = params.model_copy(update={"next": next_token})
        return collected
