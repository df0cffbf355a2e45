"""Pydantic models for resources returned by the Clubhouse API.

See https://clubhouse.io/api/rest/v2/#Resources for the complete reference.
Missing keys take their defaults; unknown keys are ignored.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from clubhouse_sdk.models.params import StoryType, StoryVerb


class Resource(BaseModel):
    """Base for every resource model."""

    model_config = ConfigDict(extra="ignore")

    entity_type: str = ""


# =============================================================================
# Version Control
# =============================================================================


class Identity(Resource):
    """GitHub login used to connect GitHub activity with stories."""

    name: str = ""
    type: str = ""


class PullRequest(Resource):
    """GitHub pull request attached to a story."""

    branch_id: int = 0
    closed: bool = False
    created_at: datetime | None = None
    id: int
    num_added: int = 0
    num_commits: int = 0
    num_removed: int = 0
    number: int = 0
    target_branch_id: int = 0
    title: str = ""
    updated_at: datetime | None = None
    url: str = ""


class Branch(Resource):
    """GitHub feature branch associated with stories."""

    created_at: datetime | None = None
    deleted: bool = False
    id: int
    merged_branch_ids: list[int] = []
    name: str = ""
    persistent: bool = False
    pull_requests: list[PullRequest] = []
    repository_id: int = 0
    updated_at: datetime | None = None
    url: str = ""


class Commit(Resource):
    """GitHub commit and its details."""

    author_email: str = ""
    author_id: str = ""
    author_identity: Identity | None = None
    created_at: datetime | None = None
    hash: str = ""
    id: int
    merged_branch_ids: list[int] = []
    message: str = ""
    repository_id: int = 0
    timestamp: datetime | None = None
    updated_at: datetime | None = None
    url: str = ""


class Repository(Resource):
    """GitHub repository."""

    created_at: datetime | None = None
    external_id: str = ""
    full_name: str = ""
    id: int
    name: str = ""
    type: str = ""
    updated_at: datetime | None = None
    url: str = ""


# =============================================================================
# Organization
# =============================================================================


class Category(Resource):
    """Category used to group Milestones."""

    archived: bool = False
    color: str | None = None
    created_at: datetime | None = None
    external_id: str | None = None
    id: int
    name: str = ""
    type: str = ""
    updated_at: datetime | None = None


class LabelStats(BaseModel):
    """Calculated values for a Label."""

    num_epics: int = 0
    num_points_completed: int = 0
    num_points_in_progress: int = 0
    num_points_total: int = 0
    num_stories_completed: int = 0
    num_stories_in_progress: int = 0
    num_stories_total: int = 0
    num_stories_unestimated: int = 0


class Label(Resource):
    """Label used to associate and filter Stories and Epics."""

    archived: bool = False
    color: str | None = None
    created_at: datetime | None = None
    external_id: str | None = None
    id: int
    name: str = ""
    stats: LabelStats | None = None
    updated_at: datetime | None = None


class Icon(Resource):
    """Image attached to Organizations and Members."""

    created_at: datetime | None = None
    id: str
    updated_at: datetime | None = None
    url: str = ""


class Profile(Resource):
    """Profile of a member of the organization."""

    deactivated: bool = False
    display_icon: Icon | None = None
    email_address: str | None = None
    gravatar_hash: str | None = None
    id: str
    mention_name: str = ""
    name: str | None = None
    two_factor_auth_activated: bool = False


class Member(Resource):
    """Clubhouse user in the organization that issued the token."""

    created_at: datetime | None = None
    disabled: bool = False
    id: str
    profile: Profile | None = None
    role: str = ""
    updated_at: datetime | None = None


class WorkflowState(Resource):
    """One column of a Workflow: unstarted, started or done."""

    color: str = ""
    created_at: datetime | None = None
    description: str = ""
    id: int
    name: str = ""
    num_stories: int = 0
    position: int = 0
    type: str = ""
    updated_at: datetime | None = None
    verb: str | None = None


class Workflow(Resource):
    """Workflow States of a Team. Read-only through the API."""

    created_at: datetime | None = None
    default_state_id: int = 0
    description: str = ""
    id: int
    name: str = ""
    states: list[WorkflowState] = []
    team_id: int = 0
    updated_at: datetime | None = None


class Team(Resource):
    """Group of projects within the same workspace."""

    created_at: datetime | None = None
    description: str = ""
    id: int
    name: str = ""
    position: int = 0
    project_ids: list[int] = []
    updated_at: datetime | None = None
    workflow: Workflow | None = None


class ProjectStats(BaseModel):
    """Calculated values for a Project."""

    num_points: int = 0
    num_stories: int = 0


class Project(Resource):
    """Project, typically mapped to a team or product area."""

    abbreviation: str | None = None
    archived: bool = False
    color: str | None = None
    created_at: datetime | None = None
    days_to_thermometer: int = 0
    description: str | None = None
    external_id: str | None = None
    follower_ids: list[str] = []
    id: int
    iteration_length: int = 0
    name: str = ""
    show_thermometer: bool = False
    start_time: datetime | None = None
    stats: ProjectStats | None = None
    team_id: int | None = None
    updated_at: datetime | None = None


# =============================================================================
# Files
# =============================================================================


class File(Resource):
    """Document uploaded to Clubhouse."""

    content_type: str = ""
    created_at: datetime | None = None
    description: str | None = None
    external_id: str | None = None
    filename: str = ""
    id: int
    mention_ids: list[str] = []
    name: str = ""
    size: int = 0
    story_ids: list[int] = []
    thumbnail_url: str | None = None
    updated_at: datetime | None = None
    uploader_id: str = ""
    url: str = ""


class LinkedFile(Resource):
    """File stored on a third-party service and linked to stories."""

    content_type: str | None = None
    created_at: datetime | None = None
    description: str | None = None
    id: int
    mention_ids: list[str] = []
    name: str = ""
    size: int | None = None
    story_ids: list[int] = []
    thumbnail_url: str | None = None
    type: str = ""
    updated_at: datetime | None = None
    uploader_id: str = ""
    url: str = ""


# =============================================================================
# Epics and Milestones
# =============================================================================


class ThreadedComment(Resource):
    """Comment in an Epic discussion, with its replies."""

    author_id: str = ""
    comments: list["ThreadedComment"] = []
    created_at: datetime | None = None
    deleted: bool = False
    external_id: str | None = None
    id: int
    mention_ids: list[str] = []
    text: str = ""
    updated_at: datetime | None = None


class EpicStats(BaseModel):
    """Calculated values for an Epic."""

    last_story_update: datetime | None = None
    num_points: int = 0
    num_points_done: int = 0
    num_points_started: int = 0
    num_points_unstarted: int = 0
    num_stories_done: int = 0
    num_stories_started: int = 0
    num_stories_unestimated: int = 0
    num_stories_unstarted: int = 0


class Epic(Resource):
    """Collection of stories making up a larger initiative."""

    archived: bool = False
    comments: list[ThreadedComment] = []
    completed: bool = False
    completed_at: datetime | None = None
    completed_at_override: datetime | None = None
    created_at: datetime | None = None
    deadline: datetime | None = None
    description: str = ""
    external_id: str | None = None
    follower_ids: list[str] = []
    id: int
    labels: list[Label] = []
    milestone_id: int | None = None
    name: str = ""
    owner_ids: list[str] = []
    position: int = 0
    project_ids: list[int] = []
    started: bool = False
    started_at: datetime | None = None
    started_at_override: datetime | None = None
    state: str = ""
    stats: EpicStats | None = None
    updated_at: datetime | None = None


class Milestone(Resource):
    """Collection of Epics representing a release or initiative."""

    categories: list[Category] = []
    completed: bool = False
    completed_at: datetime | None = None
    completed_at_override: datetime | None = None
    description: str = ""
    id: int
    name: str = ""
    position: int = 0
    started: bool = False
    started_at: datetime | None = None
    started_at_override: datetime | None = None
    state: str = ""
    updated_at: datetime | None = None


# =============================================================================
# Stories
# =============================================================================


class Comment(Resource):
    """Note added to a Story."""

    author_id: str = ""
    created_at: datetime | None = None
    external_id: str | None = None
    id: int
    mention_ids: list[str] = []
    position: int = 0
    story_id: int = 0
    text: str = ""
    updated_at: datetime | None = None


class Task(Resource):
    """Checklist item on a Story."""

    complete: bool = False
    completed_at: datetime | None = None
    created_at: datetime | None = None
    description: str = ""
    external_id: str | None = None
    id: int
    mention_ids: list[str] = []
    owner_ids: list[str] = []
    position: int = 0
    story_id: int = 0
    updated_at: datetime | None = None


class StoryLink(Resource):
    """Relationship between two stories: subject -> verb -> object."""

    created_at: datetime | None = None
    id: int
    object_id: int = 0
    subject_id: int = 0
    updated_at: datetime | None = None
    verb: StoryVerb | str = ""


class TypedStoryLink(StoryLink):
    """Story link seen from one story; ``type`` is subject or object."""

    type: str = ""


class _StoryBase(Resource):
    app_url: str = ""
    archived: bool = False
    blocked: bool = False
    blocker: bool = False
    completed_at_override: datetime | None = None
    created_at: datetime | None = None
    deadline: datetime | None = None
    epic_id: int | None = None
    estimate: int | None = None
    external_id: str | None = None
    follower_ids: list[str] = []
    id: int
    labels: list[Label] = []
    moved_at: datetime | None = None
    name: str = ""
    owner_ids: list[str] = []
    position: int = 0
    project_id: int = 0
    requested_by_id: str = ""
    started: bool = False
    started_at: datetime | None = None
    started_at_override: datetime | None = None
    story_links: list[TypedStoryLink] = []
    story_type: StoryType | str = ""
    updated_at: datetime | None = None
    workflow_state_id: int = 0


class Story(_StoryBase):
    """Standard unit of work: a feature, bug or chore."""

    branches: list[Branch] = []
    comments: list[Comment] = []
    commits: list[Commit] = []
    completed: bool = False
    completed_at: datetime | None = None
    description: str = ""
    files: list[File] = []
    linked_files: list[LinkedFile] = []
    tasks: list[Task] = []


class StorySearch(_StoryBase):
    """Story as returned by the search endpoint."""

    completed: bool = False
    completed_at: datetime | None = None
    description: str = ""


class StorySlim(_StoryBase):
    """Pared-down Story returned by the bulk endpoints."""

    comment_ids: list[int] = []
    completed: bool = False
    completed_at: datetime | None = None
    file_ids: list[int] = []
    linked_file_ids: list[int] = []
    task_ids: list[int] = []


class SearchResults(BaseModel):
    """One page of story search results.

    ``next`` is the URL of the following page, or None on the last page.
    """

    data: list[StorySearch] = []
    next: str | None = None
    total: int = 0
