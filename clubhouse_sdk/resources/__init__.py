"""Resource groups exposed as properties of ClubhouseClient."""

from clubhouse_sdk.resources.categories import Categories
from clubhouse_sdk.resources.epics import Epics
from clubhouse_sdk.resources.files import Files
from clubhouse_sdk.resources.labels import Labels
from clubhouse_sdk.resources.members import Members
from clubhouse_sdk.resources.milestones import Milestones
from clubhouse_sdk.resources.projects import Projects
from clubhouse_sdk.resources.repositories import Repositories
from clubhouse_sdk.resources.stories import Stories
from clubhouse_sdk.resources.story_links import StoryLinks
from clubhouse_sdk.resources.teams import Teams

__all__ = [
    "Categories",
    "Epics",
    "Files",
    "Labels",
    "Members",
    "Milestones",
    "Projects",
    "Repositories",
    "Stories",
    "StoryLinks",
    "Teams",
]
