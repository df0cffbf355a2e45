"""Story link operations."""

from clubhouse_sdk.models.params import CreateStoryLinkParams
from clubhouse_sdk.models.resources import StoryLink
from clubhouse_sdk.resources._base import ResourceGroup


class StoryLinks(ResourceGroup):
    """Relationships between stories, e.g. "story 5 blocks story 6"."""

    def create(self, params: CreateStoryLinkParams) -> StoryLink:
        return self._request("POST", "story-links", StoryLink, params)

    def get(self, story_link_id: int) -> StoryLink:
        return self._request("GET", f"story-links/{story_link_id}", StoryLink)

    def delete(self, story_link_id: int) -> None:
        self._delete(f"story-links/{story_link_id}")
